"""Border configuration supplied by the caller."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BORDER_WIDTH = 10.0
DEFAULT_BORDER_COLOR = "#000000"


class BorderSpec(BaseModel):
    """Outline width (user units) and stroke color. Immutable per call."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(default=DEFAULT_BORDER_WIDTH, gt=0, allow_inf_nan=False)
    color: str = Field(default=DEFAULT_BORDER_COLOR, min_length=1)
