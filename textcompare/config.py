# textcompare/config.py

# Similarity: positional overlap must be strictly greater than this
SIMILARITY_THRESHOLD = 0.6

# Colours for removed (old side) and added (new side) changes
REMOVED_COLOR = "#fb2c36"
ADDED_COLOR = "#22c55e"

# CSS classes used by the HTML markup
REMOVED_CLASS = "diff-del"
ADDED_CLASS = "diff-add"
BLOCK_CLASS = "ws-block"

# Space blocks are drawn as tall, narrow coloured boxes
BLOCK_STYLE = "display:inline-block;width:0.6em;height:1em;margin:0 1px;background-color:{color};"

# Line-break markers per markup style
HTML_LINE_BREAK = "<br>"
TEXT_LINE_BREAK = "\n"

# Comparison is quadratic in token count; callers refuse bigger inputs
DEFAULT_MAX_CHARS = 200_000

# Languages offered by the compare screen (label only, never used by the engine)
SUPPORTED_LANGUAGES = ("ქართული", "English", "German")
DEFAULT_LANGUAGE = "ქართული"

# Report
REPORT_TITLE = "Text comparison"
REPORT_SUFFIX = ".html"

# Preferences file (per-user)
PREFS_FILENAME = "prefs.json"
