"""mdbook preprocessor that renders ``@code`` markdown tables as HTML.

Submodules:
  patterns     -- marker literal, delimiter characters, and loop ceiling
  classifiers  -- CellKind enumeration and per-cell classification
  schema       -- TableRow / CodeTable Pydantic models
  detection    -- table boundary detection and row splitting
  formatting   -- HTML rendering of a parsed table
  pipeline     -- annotation scanner and book traversal (CodeTables)
  book         -- Pydantic models for the mdbook JSON protocol
  config       -- environment-driven settings
  cli          -- command-line entry point
"""

__version__ = "0.1.0"
