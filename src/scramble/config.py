"""
Configuration constants for scramblegen.
"""

VERSION = "0.1.0"

APP_NAME = "Hyperspeedcube"   # Shown in the first line of the puzzle log
LOG_LEVEL = "WARNING"         # Default when no settings file says otherwise

WRAP_WIDTH = 70    # Column limit for the twists block, before indentation
INDENT = "  "      # Prefix on each wrapped line of the twists block

# Largest values accepted for the numeric fields of a definition.
MAX_N = 2 ** 8 - 1
MAX_D = 2 ** 8 - 1
MAX_DEPTH = 2 ** 32 - 1
