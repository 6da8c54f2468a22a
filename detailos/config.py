"""Global configuration: defaults, thresholds, constants."""

# Scene size used when a detail declares no viewport (mm)
DEFAULT_VIEWPORT = {"width": 400.0, "height": 300.0, "depth": 150.0}

# Appearance used for unknown material tags
DEFAULT_COLOR = "#808080"
DEFAULT_ROUGHNESS = 0.5
DEFAULT_METALNESS = 0.0

# Emissive intensity applied when a layer authors an emissive color
EMISSIVE_INTENSITY = 0.15

# Minimum share of resolvable layers for a meaningful comparison (percent)
MIN_COVERAGE_PERCENT = 50.0

# Target products below this confidence are called out in difference reports
LOW_CONFIDENCE_THRESHOLD = 0.9

# Archive entries skipped when importing bundles
ARCHIVE_GARBAGE_PATTERNS = ("__MACOSX", ".DS_Store", "Thumbs.db", "desktop.ini", "._")

# 1 mil = 0.0254 mm
MIL_TO_MM = 0.0254

# Thickness used for catalog materials that declare none (mm)
DEFAULT_MATERIAL_THICKNESS_MM = 1.5

# Default filename for material catalog exports
DEFAULT_CATALOG_FILENAME = "dna-materials.json"
