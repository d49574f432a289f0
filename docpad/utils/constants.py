APP_ORG = "DocPad"
APP_NAME = "DocPad"
UNTITLED = "Untitled"

DEFAULT_FILE_FILTER = "Text (*.txt);;All files (*)"

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_RECENTS = "file/recent"
MAX_RECENTS = 8

SAVE_CHANGES_TITLE = "Save changes?"
SAVE_CHANGES_TEXT = "The current file has been modified since you last saved. Save changes?"
