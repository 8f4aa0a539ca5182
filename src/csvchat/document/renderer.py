"""Rendering of parsed documents to rich renderables.

Hidden design decisions:
- Standard markdown goes through rich's Markdown element renderer
- Tables are drawn by hand so per-column alignment is honoured exactly
- Chart blocks are handed to the chart renderer; failures become inline notices
"""

from rich import box
from rich.console import RenderableType
from rich.markdown import Markdown
from rich.panel import Panel
from rich.style import Style
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from ..charts import render_chart, render_failure
from .models import ChartBlock, CodeBlock, DocumentBlock, MarkdownBlock, TableBlock
from .parser import create_markdown_parser, parse_document

DEFAULT_CODE_THEME = "monokai"

_INLINE_STYLES = {
    "strong_open": Style(bold=True),
    "em_open": Style(italic=True),
    "s_open": Style(strike=True),
}
_CODE_STYLE = Style(bold=True, color="magenta")


def render_inline(source: str) -> Text:
    """Render a fragment of inline markdown (a table cell) as styled text."""
    text = Text()
    tokens = create_markdown_parser().parseInline(source)
    if not tokens or not tokens[0].children:
        return text

    styles: list[Style] = []
    for token in tokens[0].children:
        if token.type in _INLINE_STYLES:
            styles.append(_INLINE_STYLES[token.type])
        elif token.type == "link_open":
            href = token.attrGet("href")
            styles.append(Style(underline=True, link=href or None))
        elif token.type in ("strong_close", "em_close", "s_close", "link_close"):
            if styles:
                styles.pop()
        elif token.type == "code_inline":
            text.append(token.content, style=Style.chain(*styles, _CODE_STYLE))
        elif token.type in ("softbreak", "hardbreak"):
            text.append(" ")
        else:
            text.append(token.content, style=Style.chain(Style.null(), *styles))
    return text


class DocumentRenderer:
    """Turns assistant documents into displayable blocks.

    Stateless apart from presentation settings; ``render`` may be called any
    number of times on the same document and yields the same output.
    """

    def __init__(self, code_theme: str = DEFAULT_CODE_THEME, hyperlinks: bool = True):
        self._code_theme = code_theme
        self._hyperlinks = hyperlinks

    def render(self, document: str) -> list[RenderableType]:
        """Render a document.

        Args:
            document: Markdown text with optional ``chart`` fences

        Returns:
            One renderable per top-level block, in document order
        """
        return [self.render_block(block) for block in parse_document(document)]

    def render_block(self, block: DocumentBlock) -> RenderableType:
        """Render a single parsed block."""
        if isinstance(block, ChartBlock):
            return self._render_chart(block)
        if isinstance(block, TableBlock):
            return self._render_table(block)
        if isinstance(block, CodeBlock):
            return self._render_code(block)
        if isinstance(block, MarkdownBlock):
            return Markdown(block.text, code_theme=self._code_theme, hyperlinks=self._hyperlinks)
        raise TypeError(f"Unknown block type: {type(block).__name__}")

    def _render_chart(self, block: ChartBlock) -> RenderableType:
        if block.ok:
            return render_chart(block.result)
        return render_failure(block.result)

    def _render_table(self, block: TableBlock) -> Table:
        table = Table(box=box.ROUNDED, header_style="bold", expand=False)
        for cell, align in zip(block.header, block.alignments, strict=False):
            table.add_column(render_inline(cell), justify=align.value)
        for row in block.rows:
            table.add_row(*(render_inline(cell) for cell in row))
        return table

    def _render_code(self, block: CodeBlock) -> Panel:
        syntax = Syntax(
            block.code.rstrip("\n"),
            block.language or "text",
            theme=self._code_theme,
            word_wrap=True,
        )
        return Panel(
            syntax,
            title=Text(block.language) if block.language else None,
            title_align="right",
            border_style="dim",
            box=box.ROUNDED,
        )


def render_document(document: str) -> list[RenderableType]:
    """Render a document with default settings."""
    return DocumentRenderer().render(document)
