"""Annotation scanner and book traversal.

Finds every ``@code`` marker in a chapter body, hands the text after it to
detection.parse_table, and splices the rendered HTML in place of the
marker+table span.  Each call works on its own copy of the text; nothing is
cached between chapters or books.
"""

import logging
from typing import Any

from code_tables.book import Book, Chapter, PreprocessorContext, chapter_item, item_chapter
from code_tables.config import SUPPORTED_RENDERERS
from code_tables.detection import parse_table
from code_tables.formatting import render_table
from code_tables.patterns import CODE_ANNOTATION, MAX_LOOP_STEPS, PREPROCESSOR_NAME

logger = logging.getLogger(__name__)


# ─── Annotation Scanner ──────────────────────────────────────────────────────


def parse_content(content: str, max_steps: int = MAX_LOOP_STEPS) -> str:
    """Replace every ``@code`` marker followed by a table with the table's HTML.

    A marker with no table after it is dropped and scanning resumes right
    after it.  Text without markers is returned unchanged.  The loop is capped
    at *max_steps* iterations; on hitting the cap the unscanned remainder is
    appended as-is.
    """
    output: list[str] = []
    cursor = 0
    tables = 0

    for _ in range(max_steps):
        index = content.find(CODE_ANNOTATION, cursor)
        if cursor >= len(content) or index == -1:
            break
        output.append(content[cursor:index])

        # find() and startswith() must agree; skip the span if they ever don't
        if not content.startswith(CODE_ANNOTATION, index):
            cursor = index + len(CODE_ANNOTATION)
            continue

        body_start = index + len(CODE_ANNOTATION)
        parsed = parse_table(content[body_start:])
        if parsed is None:
            # Unmatched marker: drop it, keep what follows
            cursor = body_start
            continue

        output.append(render_table(parsed.table))
        cursor = body_start + parsed.consumed
        tables += 1
    else:
        if content.find(CODE_ANNOTATION, cursor) != -1:
            logger.warning(
                "Stopped after %d scan steps; leaving %d chars unparsed", max_steps, len(content) - cursor
            )

    output.append(content[cursor:])
    if tables:
        logger.debug("Rendered %d code tables", tables)
    return "".join(output)


# ─── Book Traversal ──────────────────────────────────────────────────────────


def parse_item(item: Any) -> Any:
    """Transform a chapter item; separators and part titles come back unchanged."""
    chapter = item_chapter(item)
    if chapter is None:
        return item
    return chapter_item(parse_chapter(chapter))


def parse_chapter(chapter: Chapter) -> Chapter:
    """Return a copy of *chapter* with its content (and its sub-chapters') transformed.

    Name, path, parent names and every other field are carried over as-is.
    """
    logger.debug("Parsing chapter %r", chapter.name)
    return chapter.model_copy(
        update={
            "content": parse_content(chapter.content),
            "sub_items": [parse_item(item) for item in chapter.sub_items],
        }
    )


class CodeTables:
    """mdbook preprocessor that renders ``@code`` tables as HTML."""

    name = PREPROCESSOR_NAME

    def __init__(self, renderers: tuple[str, ...] = SUPPORTED_RENDERERS):
        self.renderers = renderers

    def supports_renderer(self, renderer: str) -> bool:
        return renderer in self.renderers

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Return a new book with every chapter's content transformed, in original order."""
        logger.info("Running %s for renderer %r (%d top-level items)", self.name, ctx.renderer, len(book.sections))
        sections = [parse_item(item) for item in book.sections]
        return book.model_copy(update={"sections": sections})
