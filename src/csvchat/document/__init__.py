"""Assistant document parsing and rendering.

Documents are markdown with ``chart`` fences. ``parse_document`` turns one
into typed blocks; ``DocumentRenderer`` turns the blocks into rich renderables.
"""

from .models import (
    ChartBlock,
    CodeBlock,
    ColumnAlign,
    DocumentBlock,
    MarkdownBlock,
    TableBlock,
)
from .parser import parse_document
from .renderer import DocumentRenderer, render_document, render_inline

__all__ = [
    "ChartBlock",
    "CodeBlock",
    "ColumnAlign",
    "DocumentBlock",
    "DocumentRenderer",
    "MarkdownBlock",
    "TableBlock",
    "parse_document",
    "render_document",
    "render_inline",
]
