"""Block model of a parsed assistant document.

A document is a flat sequence of top-level blocks. Only the blocks that need
special handling get their own variant; everything else stays raw markdown.
"""

from dataclasses import dataclass
from enum import Enum

from ..charts import ChartDescriptor, DecodeFailure


class ColumnAlign(str, Enum):
    """Horizontal alignment of a table column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class MarkdownBlock:
    """A run of standard markdown (headings, paragraphs, lists, quotes, rules)."""

    text: str


@dataclass(frozen=True)
class TableBlock:
    """A pipe table. Cells hold inline markdown source."""

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    alignments: tuple[ColumnAlign, ...]


@dataclass(frozen=True)
class CodeBlock:
    """A fenced or indented code block that is not a chart."""

    code: str
    language: str | None = None


@dataclass(frozen=True)
class ChartBlock:
    """A ``chart`` fence, decoded once at parse time."""

    source: str
    result: ChartDescriptor | DecodeFailure

    @property
    def ok(self) -> bool:
        return isinstance(self.result, ChartDescriptor)


DocumentBlock = MarkdownBlock | TableBlock | CodeBlock | ChartBlock
