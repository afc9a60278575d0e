from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Literal

from .errors import InvalidPrecisionError, InvalidTimeError

Precision = Literal[0, 1, 2, 3]

PRECISIONS: tuple[int, ...] = (0, 1, 2, 3)

# wide enough to hold any float exactly
_EXACT = Context(prec=1100)


def decode_time(minutes: str, seconds: str) -> float:
    """
    "01", "02.5" -> 62.5
    Both "." and ":" are accepted as the fraction separator ("02:5" == "02.5").
    """
    try:
        # minutes are unbounded digits; float() saturates to inf instead of overflowing
        mm = float(minutes)
        ss = float(seconds.replace(":", ".", 1))
    except (AttributeError, ValueError) as e:
        raise InvalidTimeError(f"Invalid time: {minutes!r}:{seconds!r}") from e
    if not (mm >= 0 and ss >= 0):  # also NaN
        raise InvalidTimeError(f"Invalid time: {minutes!r}:{seconds!r}")
    return mm * 60 + ss


@dataclass(frozen=True, slots=True)
class SecondsFormatter:
    """Renders the seconds part of a tag: at least 2 integer digits, fixed fraction, no grouping."""

    precision: int
    format_spec: str

    @classmethod
    def build(cls, precision: int) -> "SecondsFormatter":
        width = 2 + (precision + 1 if precision else 0)
        return cls(precision=precision, format_spec=f"0{width}.{precision}f")

    def format(self, value: float | Decimal) -> str:
        return format(value, self.format_spec)


_FORMATTERS: dict[int, SecondsFormatter] = {}
_FORMATTERS_LOCK = threading.Lock()


def _check_precision(precision: int) -> int:
    if not isinstance(precision, int) or isinstance(precision, bool) or precision not in PRECISIONS:
        raise InvalidPrecisionError(f"Precision must be one of {PRECISIONS}, got {precision!r}")
    return precision


def get_formatter(precision: int) -> SecondsFormatter:
    p = _check_precision(precision)
    fmt = _FORMATTERS.get(p)
    if fmt is not None:
        return fmt
    with _FORMATTERS_LOCK:
        # another thread may have filled it while we waited
        fmt = _FORMATTERS.get(p)
        if fmt is None:
            fmt = SecondsFormatter.build(p)
            _FORMATTERS[p] = fmt
        return fmt


def encode_time(seconds: float | None, precision: int, brackets: bool = True) -> str:
    """
    62.5, 2 -> "[01:02.50]"

    Rounds to `precision` (halves away from zero, on the exact binary value)
    before splitting into minutes/seconds, so the seconds part is always
    below 60. None encodes to "" (untimed line).
    """
    if seconds is None:
        return ""
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise InvalidTimeError(f"Invalid time: {seconds!r}")
    if math.isnan(seconds) or math.isinf(seconds) or seconds < 0:
        raise InvalidTimeError(f"Time must be a finite, non-negative number of seconds, got {seconds!r}")

    fmt = get_formatter(precision)
    scale = 10**fmt.precision
    units = Decimal(seconds).scaleb(fmt.precision, _EXACT).to_integral_value(rounding=ROUND_HALF_UP)
    mm, rem = divmod(int(units), 60 * scale)
    tag = f"{mm:02d}:{fmt.format(Decimal(rem).scaleb(-fmt.precision))}"
    return f"[{tag}]" if brackets else tag
