"""Decoding and encoding of ``chart`` fenced blocks.

Hidden design decisions:
- JSON parsing and structural validation are delegated to pydantic
- Kind validation happens after the structural pass so that an unknown
  ``type`` is reported as unsupported rather than malformed
- Failures are returned as values; nothing raises past ``decode_chart``
"""

import json
import logging

from pydantic import ValidationError

from .models import (
    ChartDescriptor,
    ChartKind,
    ChartSpec,
    DecodeFailure,
    DecodeFailureReason,
)

logger = logging.getLogger(__name__)

CHART_LANGUAGE = "chart"


def decode_chart(raw: str) -> ChartDescriptor | DecodeFailure:
    """Decode the literal contents of a ``chart`` fence.

    Args:
        raw: Text between the fence markers

    Returns:
        ChartDescriptor on success, DecodeFailure otherwise
    """
    try:
        spec = ChartSpec.model_validate_json(raw)
    except (ValidationError, ValueError, TypeError) as e:
        logger.debug("Malformed chart block: %s", e)
        return DecodeFailure(reason=DecodeFailureReason.MALFORMED, detail=str(e))

    try:
        kind = ChartKind(spec.type)
    except ValueError:
        logger.debug("Unsupported chart type: %r", spec.type)
        return DecodeFailure(
            reason=DecodeFailureReason.UNSUPPORTED_TYPE,
            detail=f"expected one of {', '.join(k.value for k in ChartKind)}",
            value=spec.type,
        )

    title = spec.options.title if spec.options else None
    return ChartDescriptor(kind=kind, series=tuple(spec.chart_data), title=title)


def encode_chart(descriptor: ChartDescriptor, indent: int | None = 2) -> str:
    """Encode a descriptor into the JSON carried by a ``chart`` fence."""
    options = {"title": descriptor.title} if descriptor.title is not None else {}
    payload = {
        "type": descriptor.kind.value,
        "chartData": [{"name": p.name, "value": p.value} for p in descriptor.series],
        "options": options,
    }
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def chart_fence(descriptor: ChartDescriptor) -> str:
    """Wrap an encoded descriptor in a ``chart`` fenced code block."""
    return f"```{CHART_LANGUAGE}\n{encode_chart(descriptor)}\n```"
