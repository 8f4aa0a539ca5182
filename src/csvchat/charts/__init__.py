"""Chart blocks embedded in assistant documents.

A chart block is a fenced code block tagged ``chart`` whose body is JSON:
decode it with ``decode_chart``, draw it with ``render_chart``.
"""

from .codec import CHART_LANGUAGE, chart_fence, decode_chart, encode_chart
from .models import (
    ChartDescriptor,
    ChartKind,
    ChartPoint,
    DecodeFailure,
    DecodeFailureReason,
)
from .render import (
    ChartFigure,
    ChartNotice,
    format_value,
    hsl_to_hex,
    pie_slices,
    render_chart,
    render_failure,
    slice_hue,
)

__all__ = [
    "CHART_LANGUAGE",
    "ChartDescriptor",
    "ChartFigure",
    "ChartKind",
    "ChartNotice",
    "ChartPoint",
    "DecodeFailure",
    "DecodeFailureReason",
    "chart_fence",
    "decode_chart",
    "encode_chart",
    "format_value",
    "hsl_to_hex",
    "pie_slices",
    "render_chart",
    "render_failure",
    "slice_hue",
]
