from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dfree.display.columns import DEFAULT_COLUMNS, ColumnType

HEAVY_BOX = "▇"
HEAVY_DOUBLE_DASH = "╍"

# Colors click.style() understands
COLORS = (
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
    "bright_black", "bright_red", "bright_green", "bright_yellow",
    "bright_blue", "bright_magenta", "bright_cyan", "bright_white",
)


class Theme(BaseModel):
    model_config = ConfigDict(extra="forbid")

    char_bar_filled: str = Field(HEAVY_BOX, min_length=1, max_length=1)
    char_bar_empty: str = Field(HEAVY_DOUBLE_DASH, min_length=1, max_length=1)
    char_bar_open: str = ""
    char_bar_close: str = ""
    threshold_usage_medium: float = 50.0
    threshold_usage_high: float = 75.0
    color_heading: Optional[str] = "blue"
    color_usage_low: Optional[str] = "green"
    color_usage_medium: Optional[str] = "yellow"
    color_usage_high: Optional[str] = "red"
    color_usage_void: Optional[str] = "blue"
    columns: List[ColumnType] = Field(default_factory=lambda: list(DEFAULT_COLUMNS))
    bar_width: int = Field(20, ge=1)

    @model_validator(mode="after")
    def check_theme(self) -> "Theme":
        if not 0 <= self.threshold_usage_medium <= self.threshold_usage_high <= 100:
            raise ValueError("thresholds must satisfy 0 <= medium <= high <= 100")
        for name in ("color_heading", "color_usage_low", "color_usage_medium",
                     "color_usage_high", "color_usage_void"):
            color = getattr(self, name)
            if color is not None and color not in COLORS:
                raise ValueError(f"{name}: unknown color '{color}'")
        return self
