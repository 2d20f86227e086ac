"""Proxy document format constants."""

import re

HEADER_FENCE = "---"

KEY_EXTERNAL_PATH = "external_path"
KEY_CATEGORIES = "categories"
KEY_AUDIENCE = "audience"
KEY_TAGS = "tags"
KEY_CREATED_DATE = "created_date"
KEY_FILE_TYPE = "file_type"
KEY_FILE_SIZE = "file_size"

# Header key order is part of the byte-stable output
HEADER_KEYS = (
    KEY_EXTERNAL_PATH,
    KEY_CATEGORIES,
    KEY_AUDIENCE,
    KEY_TAGS,
    KEY_CREATED_DATE,
    KEY_FILE_TYPE,
    KEY_FILE_SIZE,
)

OPEN_LINK_LABEL = "Open External File"

# Trailing affordance line plus the blank lines separating it from the notes
OPEN_LINK_PATTERN = re.compile(r"\n*\[" + re.escape(OPEN_LINK_LABEL) + r"\]\([^\n]*\)[ \t]*\s*\Z")

BLANK_LINE = re.compile(r"\n[ \t]*\n")
