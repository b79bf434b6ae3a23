"""Constants shared by the converters and their settings"""

# Separator used by persisted list fields (e.g. "notepad.exe;devenv.exe")
DEFAULT_SEPARATOR = ";"

DEFAULT_ESCAPE_CHAR = "\\"
