"""Environment-driven settings for the code-tables preprocessor.

mdbook runs preprocessors from the book root, so a ``.env`` file there is
picked up.
"""

import os

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))

# Logs go to stderr; stdout carries the book JSON
LOG_LEVEL = os.getenv("CODE_TABLES_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Renderers that accept raw HTML in chapter content
SUPPORTED_RENDERERS = tuple(
    renderer.strip() for renderer in os.getenv("CODE_TABLES_RENDERERS", "html").split(",") if renderer.strip()
)
