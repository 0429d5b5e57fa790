"""Shared constants for mdlinks dot-directories and defaults."""

MDLINKS_HOME_EXT = ".mdlinks"  # user-level state/config directory suffix

# Documents the adapters act on, matched on the lower-cased suffix
DEFAULT_MARKDOWN_EXTENSIONS = [".md", ".markdown"]

# Hover text attached to every document link
LINK_TOOLTIP = "Open path"

LOG_FILE_NAME = "mdlinks.log"
