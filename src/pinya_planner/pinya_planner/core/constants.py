"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

BASE_ROLE_LABEL = "Baix"
GLOBAL_PUBLICATION = "GLOBAL"

DEFAULT_CASTELL_TYPE = "4d7"
DEFAULT_ROTATION_STEP = 45

# New role slots are dropped at this x; y climbs as the canvas fills up.
DEFAULT_ROLE_X = 400.0
DEFAULT_ROLE_Y = 100.0
MIN_ROLE_Y = 50.0
ROLE_Y_STEP = 50.0

NO_ROLE_BUCKET = "No role"
NO_FOLDER_BUCKET = "No Folder"
