"""Data models for chart blocks.

Two layers live here:
- Wire models (``ChartSpec`` and friends) mirror the JSON carried inside a
  ``chart`` fence and do the structural validation.
- Domain models (``ChartDescriptor``, ``DecodeFailure``) are what the rest of
  the application sees.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ChartKind(str, Enum):
    """Supported chart shapes."""

    BAR = "bar"
    LINE = "line"
    PIE = "pie"


class DecodeFailureReason(str, Enum):
    """Why a chart block could not be decoded."""

    MALFORMED = "malformed"
    UNSUPPORTED_TYPE = "unsupported-type"


class ChartPoint(BaseModel):
    """One category of a single-series chart."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str = Field(description="Category label")
    value: float = Field(description="Numeric value for the category")


class ChartOptions(BaseModel):
    """Optional presentation settings of a chart block."""

    title: str | None = None


class ChartSpec(BaseModel):
    """Structural shape of the JSON inside a ``chart`` fence."""

    model_config = ConfigDict(populate_by_name=True)

    type: str
    chart_data: list[ChartPoint] = Field(alias="chartData")
    options: ChartOptions | None = None


class ChartDescriptor(BaseModel):
    """A decoded, validated chart."""

    model_config = ConfigDict(frozen=True)

    kind: ChartKind
    series: tuple[ChartPoint, ...] = Field(default_factory=tuple)
    title: str | None = None


class DecodeFailure(BaseModel):
    """A chart block that could not be turned into a ChartDescriptor."""

    model_config = ConfigDict(frozen=True)

    reason: DecodeFailureReason
    detail: str = ""
    value: str | None = Field(
        default=None,
        description="Offending chart type for unsupported-type failures"
    )

    @property
    def message(self) -> str:
        """Text shown to the user in place of the chart."""
        if self.reason == DecodeFailureReason.UNSUPPORTED_TYPE:
            return f"Unsupported chart type: {self.value}"
        return "Unable to render chart: invalid chart specification"
