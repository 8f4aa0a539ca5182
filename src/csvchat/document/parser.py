"""Document parser using markdown-it-py.

Hidden design decisions:
- CommonMark plus the table and strikethrough extensions
- Only top-level tokens are inspected; nested structure stays inside
  MarkdownBlock source and is handled by the markdown renderer
- Standard markdown is kept as original source text, sliced by token line maps
- Chart fences are decoded here, once, so rendering never re-parses JSON
"""

import logging
from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ..charts import CHART_LANGUAGE, decode_chart
from .models import (
    ChartBlock,
    CodeBlock,
    ColumnAlign,
    DocumentBlock,
    MarkdownBlock,
    TableBlock,
)

logger = logging.getLogger(__name__)

_md = MarkdownIt("commonmark").enable(["table", "strikethrough"])


def create_markdown_parser() -> MarkdownIt:
    """The markdown-it instance shared by parser and renderer."""
    return _md


def fence_language(info: str) -> str | None:
    """Language tag of a fence: the first word of its info string."""
    words = info.strip().split(maxsplit=1)
    return words[0] if words else None


def _column_align(token: Token) -> ColumnAlign:
    style = token.attrGet("style") or ""
    if "center" in style:
        return ColumnAlign.CENTER
    if "right" in style:
        return ColumnAlign.RIGHT
    return ColumnAlign.LEFT


def _parse_table(tokens: list[Token]) -> TableBlock:
    """Build a TableBlock from the tokens between table_open and table_close."""
    header: list[str] = []
    alignments: list[ColumnAlign] = []
    rows: list[tuple[str, ...]] = []
    current: list[str] = []
    in_header = False

    for i, token in enumerate(tokens):
        if token.type == "thead_open":
            in_header = True
        elif token.type == "thead_close":
            in_header = False
        elif token.type == "tr_open":
            current = []
        elif token.type == "tr_close":
            if in_header:
                header = current
            else:
                rows.append(tuple(current))
        elif token.type in ("th_open", "td_open"):
            if token.type == "th_open":
                alignments.append(_column_align(token))
            nxt = tokens[i + 1] if i + 1 < len(tokens) else None
            current.append(nxt.content if nxt is not None and nxt.type == "inline" else "")

    width = len(header)
    padded = tuple(tuple(row[:width]) + ("",) * (width - len(row)) for row in rows)
    return TableBlock(header=tuple(header), rows=padded, alignments=tuple(alignments))


def _normalize(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


@lru_cache(maxsize=128)
def parse_document(text: str) -> tuple[DocumentBlock, ...]:
    """Split a document into typed top-level blocks.

    Args:
        text: Markdown document, optionally containing ``chart`` fences

    Returns:
        Blocks in document order
    """
    source = _normalize(text)
    lines = source.split("\n")
    tokens = _md.parse(source)

    blocks: list[DocumentBlock] = []
    span: list[int] | None = None  # [start_line, end_line) of pending markdown

    def flush() -> None:
        nonlocal span
        if span is not None:
            chunk = "\n".join(lines[span[0]:span[1]]).strip("\n")
            if chunk.strip():
                blocks.append(MarkdownBlock(text=chunk))
        span = None

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.level != 0:
            i += 1
            continue

        if token.type == "fence":
            flush()
            language = fence_language(token.info)
            if language == CHART_LANGUAGE:
                result = decode_chart(token.content)
                blocks.append(ChartBlock(source=token.content, result=result))
            else:
                blocks.append(CodeBlock(code=token.content, language=language))
        elif token.type == "code_block":
            flush()
            blocks.append(CodeBlock(code=token.content))
        elif token.type == "table_open":
            flush()
            end = i
            while end < len(tokens) and tokens[end].type != "table_close":
                end += 1
            blocks.append(_parse_table(tokens[i:end + 1]))
            i = end + 1
            continue
        elif token.map:
            start, stop = token.map
            if span is None:
                span = [start, stop]
            else:
                span[1] = max(span[1], stop)
        i += 1

    flush()
    logger.debug("Parsed document into %d block(s)", len(blocks))
    return tuple(blocks)
