import enum
import math
from typing import Optional, Tuple

import click

from dfree.display.theme import Theme


class UsageBucket(enum.IntEnum):
    VOID = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


def usage_bucket(percentage: Optional[float], theme: Theme) -> UsageBucket:
    """Thresholds are inclusive: hitting one selects the higher bucket."""
    if percentage is None:
        return UsageBucket.VOID
    if percentage >= theme.threshold_usage_high:
        return UsageBucket.HIGH
    if percentage >= theme.threshold_usage_medium:
        return UsageBucket.MEDIUM
    return UsageBucket.LOW


def bucket_color(bucket: UsageBucket, theme: Theme) -> Optional[str]:
    return {
        UsageBucket.VOID: theme.color_usage_void,
        UsageBucket.LOW: theme.color_usage_low,
        UsageBucket.MEDIUM: theme.color_usage_medium,
        UsageBucket.HIGH: theme.color_usage_high,
    }[bucket]


def usage_color(percentage: Optional[float], theme: Theme) -> Optional[str]:
    return bucket_color(usage_bucket(percentage, theme), theme)


def bar_segments(width: int, percentage: Optional[float], theme: Theme) -> Tuple[int, int, int, int]:
    """
    Splits a bar of width cells into (low, medium, high, empty) lengths.
    Unknown usage is drawn as an empty bar.
    """
    filled = math.ceil((percentage or 0.0) / 100.0 * width)
    filled = min(max(filled, 0), width)

    low = min(filled, math.ceil(width * theme.threshold_usage_medium / 100.0))
    medium = max(min(filled, math.ceil(width * theme.threshold_usage_high / 100.0)) - low, 0)
    high = max(filled - low - medium, 0)
    return low, medium, high, width - filled


def render_bar(width: int, percentage: Optional[float], theme: Theme) -> str:
    low, medium, high, empty = bar_segments(width, percentage, theme)
    empty_color = theme.color_usage_void if percentage is None else theme.color_usage_low

    parts = [
        theme.char_bar_open,
        click.style(theme.char_bar_filled * low, fg=theme.color_usage_low),
        click.style(theme.char_bar_filled * medium, fg=theme.color_usage_medium),
        click.style(theme.char_bar_filled * high, fg=theme.color_usage_high),
        click.style(theme.char_bar_empty * empty, fg=empty_color),
        theme.char_bar_close,
    ]
    return "".join(parts)
