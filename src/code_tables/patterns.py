"""Literal markers and delimiter characters for code-table detection.

Used by classifiers.py, detection.py and pipeline.py.
"""

# ─── Annotation ──────────────────────────────────────────────────────────────

# Marker that introduces a code table, e.g. "@code| a | b |"
CODE_ANNOTATION = "@code"

# Hard ceiling on scanner iterations; one marker is consumed per iteration
MAX_LOOP_STEPS = 2048

# Name reported to mdbook and used in book.toml ([preprocessor.code-tables])
PREPROCESSOR_NAME = "code-tables"


# ─── Table Characters ────────────────────────────────────────────────────────

# Column separator; any line containing one is a table row
PIPE = "|"

# Inline-code delimiter that turns a cell into a <pre> block
CODE_DELIMITER = "`"

# Column-alignment rows look like "---" or ":---:" (hyphens, no spaces)
ALIGNMENT_CHAR = "-"

LINE_TERMINATOR = "\n"
CARRIAGE_RETURN = "\r"
