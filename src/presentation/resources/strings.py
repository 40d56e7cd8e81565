"""
Centralized storage for user-facing strings that are not menu labels.
Menu labels live in the .ftl tables; these are shown before a table is
available (or when loading one failed), so they stay untranslated.
"""

class UIStrings:
    # Error Messages
    ERR_LOAD_TRANSLATIONS = "Could not load translations for '{}': {}"
    ERR_COMMAND_FAILED = "Command '{}' failed: {}"
    ERR_RESOURCES_NOT_FOUND = "Translation resources not found: {}"
    ERR_GENERIC = "An unexpected error occurred: {}"

    # Dialog Titles
    TITLE_ERROR = "Error"
