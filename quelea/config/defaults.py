"""
Property keys and default values for Quelea.

Defaults are kept in their stored (string) form and go through the same
codec as a value read from the properties file.
"""

LANGUAGE_FILE = "language.file"
LAF = "laf"
PHONE_HOME = "phonehome"
BIBLES_DIR = "bibles.dir"
SCHEDULE_EXTENSION = "quelea.schedule.extension"
SONGPACK_EXTENSION = "quelea.songpack.extension"
CONTROL_SCREEN = "control.screen"
ONE_LINE_MODE = "one.line.mode"
MAX_CHARS = "max.chars"
MIN_LINES = "min.lines"
SINGLE_MONITOR_WARNING = "single.monitor.warning"
CHECK_UPDATE = "check.update"
CAPITAL_FIRST = "capital.first"
DISPLAY_SONG_INFO_TEXT = "display.songinfotext"
DEFAULT_BIBLE = "default.bible"
MAX_VERSES = "max.verses"
ACTIVE_SELECTION_COLOR = "active.selection.color"
OUTLINE_THICKNESS = "outline.thickness"
NOTICE_BOX_HEIGHT = "notice.box.height"
NOTICE_BOX_SPEED = "notice.box.speed"
GOD_WORDS = "god.words"
DOWNLOAD_LOCATION = "download.location"
WEBSITE_LOCATION = "website.location"
DISCUSS_LOCATION = "discuss.location"
UPDATE_URL = "update.url"

# Per display target: "<target>.screen", "<target>.coords", "<target>.mode"
SCREEN_SUFFIX = "screen"
COORDS_SUFFIX = "coords"
MODE_SUFFIX = "mode"

MODE_SCREEN = "screen"
MODE_COORDS = "coords"

SYSTEM_LAF = "System"

# Words the song importer keeps capitalised when un-caps-locking a line
DEFAULT_GOD_WORDS = [
    "god", "God", "jesus", "Jesus", "christ", "Christ", "you", "You",
    "he", "He", "lamb", "Lamb", "lord", "Lord", "him", "Him", "son", "Son",
    "i", "I", "his", "His", "your", "Your", "king", "King",
    "saviour", "Saviour", "savior", "Savior", "majesty", "Majesty",
    "alpha", "Alpha", "omega", "Omega",
]

DEFAULT_PROPERTIES = {
    LANGUAGE_FILE: "gb.lang",
    LAF: "Fusion",
    PHONE_HOME: "true",
    BIBLES_DIR: "bibles",
    SCHEDULE_EXTENSION: "qsch",
    SONGPACK_EXTENSION: "qsp",
    CONTROL_SCREEN: "0",
    ONE_LINE_MODE: "false",

    # Display targets
    "projector.screen": "1",
    "projector.coords": "0,0,0,0",
    "stage.screen": "1",
    "stage.coords": "0,0,0,0",

    # Text layout
    MAX_CHARS: "30",
    MIN_LINES: "10",
    CAPITAL_FIRST: "true",
    DISPLAY_SONG_INFO_TEXT: "true",
    OUTLINE_THICKNESS: "2",

    # Prompts
    SINGLE_MONITOR_WARNING: "true",
    CHECK_UPDATE: "true",

    # Bible
    MAX_VERSES: "100",

    # Appearance
    ACTIVE_SELECTION_COLOR: "23,130,100",
    NOTICE_BOX_HEIGHT: "40",
    NOTICE_BOX_SPEED: "8",

    GOD_WORDS: ",".join(DEFAULT_GOD_WORDS),

    # Web locations
    DOWNLOAD_LOCATION: "http://code.google.com/p/quelea-projection/downloads/list",
    WEBSITE_LOCATION: "http://www.quelea.org/",
    DISCUSS_LOCATION: "https://groups.google.com/group/quelea-discuss",
    UPDATE_URL: "http://code.google.com/p/quelea-projection/",
}
