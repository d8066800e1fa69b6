"""Constants shared by the services and the CLI."""

# Scanning
DEFAULT_EXTENSIONS = ("php",)

# Serialization
JSON_INDENT = 4

# Reporting
CHECK_SAMPLE_SIZE = 10
SYNC_SAMPLE_SIZE = 15
STATS_SAMPLE_SIZE = 5
TRUNCATE_LENGTH = 60
