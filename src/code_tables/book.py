"""Pydantic models for the JSON that mdbook exchanges with preprocessors.

mdbook writes ``[context, book]`` to the preprocessor's stdin and expects the
(possibly modified) book back on stdout.  Book items are serialised in serde's
externally-tagged form: ``{"Chapter": {...}}``, ``"Separator"`` or
``{"PartTitle": "..."}``.  Only chapters are modelled; the other items are
passed through untouched.  Unknown keys are kept so newer mdbook versions
round-trip cleanly.
"""

import json
from typing import IO, Any

from pydantic import BaseModel, ConfigDict, Field

CHAPTER_KEY = "Chapter"


class Chapter(BaseModel):
    """A single chapter; ``content`` is its markdown body."""

    model_config = ConfigDict(extra="allow")

    name: str
    content: str = ""
    number: list[int] | None = None
    sub_items: list[Any] = Field(default_factory=list)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = Field(default_factory=list)


class Book(BaseModel):
    model_config = ConfigDict(extra="allow")

    sections: list[Any] = Field(default_factory=list)
    non_exhaustive: Any = Field(default=None, alias="__non_exhaustive")


class PreprocessorContext(BaseModel):
    """Build context mdbook sends alongside the book (renderer, book.toml config, ...)."""

    model_config = ConfigDict(extra="allow")

    root: str = ""
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str = ""
    mdbook_version: str = ""


# ─── Book Items ──────────────────────────────────────────────────────────────


def item_chapter(item: Any) -> Chapter | None:
    """Return the Chapter wrapped by a book item, or None for separators and part titles."""
    if isinstance(item, dict) and CHAPTER_KEY in item:
        return Chapter.model_validate(item[CHAPTER_KEY])
    return None


def chapter_item(chapter: Chapter) -> dict[str, Any]:
    return {CHAPTER_KEY: chapter.model_dump(mode="json")}


# ─── Protocol I/O ────────────────────────────────────────────────────────────


def parse_input(stream: IO[str]) -> tuple[PreprocessorContext, Book]:
    """Read the ``[context, book]`` pair mdbook writes to stdin.

    Raises ValueError (json.JSONDecodeError / pydantic.ValidationError are
    both subclasses) when the input is not a well-formed pair.
    """
    data = json.load(stream)
    if not isinstance(data, list) or len(data) != 2:
        raise ValueError("Expected a JSON array of [context, book]")
    ctx = PreprocessorContext.model_validate(data[0])
    book = Book.model_validate(data[1])
    return ctx, book


def write_output(book: Book, stream: IO[str]) -> None:
    """Write the processed book to *stream* as mdbook expects it."""
    json.dump(book.model_dump(mode="json", by_alias=True), stream)
