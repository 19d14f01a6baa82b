"""
Application constants and metadata.
"""

# Application info
APP_NAME = "nginx-blocks"
APP_VERSION = "0.1.0"

# Parser defaults
DEFAULT_MAX_DEPTH = 256
DEFAULT_FILENAME = "<string>"
DEFAULT_INDENT = "\t"
