"""SVG-style path commands that draw a smooth temperature forecast curve."""

from __future__ import annotations

import struct
from decimal import Decimal
from typing import Iterable, List

_MIN_MAX_MARGIN = 5.0


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _fmt(value: float) -> str:
    """Format a single-precision value with the shortest round-tripping digits."""
    value = _f32(value)
    if value == 0.0:
        return "-0" if str(value).startswith("-") else "0"
    text = repr(value)
    for precision in range(1, 10):
        candidate = f"{value:.{precision}g}"
        if _f32(float(candidate)) == value:
            text = candidate
            break
    return format(Decimal(text), "f")


def forecast_graph_command(
    temperatures: Iterable[float], days_count: int, width: float, height: float
) -> str:
    """Build path commands for the day temperatures of the first ``days_count`` days.

    The path starts with four moves marking the drawing's bounding box, then
    joins consecutive days with pairs of quadratic curves. Returns an empty
    string when ``days_count``, ``width`` or ``height`` is zero.
    """
    if days_count == 0 or width == 0.0 or height == 0.0:
        return ""

    values = [_f32(t) for t in temperatures]
    temps: List[float] = values[:days_count] if days_count > 0 else values
    width = _f32(width)
    height = _f32(height)

    min_temperature = _f32(min(temps) - _MIN_MAX_MARGIN) if temps else 0.0
    max_temperature = _f32(max(temps) + _MIN_MAX_MARGIN) if temps else 50.0

    max_temperature_value = _f32(max_temperature - min_temperature)
    temperature_ratio = _f32(height / max_temperature_value)

    days = _f32(float(days_count))
    day_width = _f32(width / days)
    max_day_shift = _f32(days * day_width)

    box_height = _fmt(_f32(max_temperature_value * temperature_ratio))
    box_width = _fmt(max_day_shift)
    parts = [f"M 0 0 M {box_width} 0 M {box_width} {box_height} M 0 {box_height} "]

    def day_shift(index: float) -> float:
        return _f32(_f32(index * day_width) + _f32(0.5 * day_width))

    def day_temperature(temperature: float) -> float:
        return _f32(_f32(max_temperature - temperature) * temperature_ratio)

    for index, temperature in enumerate(temps):
        if index == 0:
            parts.append(f"M {_fmt(day_shift(0.0))} {_fmt(day_temperature(temperature))} ")
        if index + 1 < len(temps):
            next_temperature = temps[index + 1]
            day1 = day_shift(float(index))
            day2 = day_shift(_f32(float(index) + 1.0))
            temp1 = day_temperature(temperature)
            temp2 = day_temperature(next_temperature)

            day_mid = _f32(_f32(day1 + day2) / 2.0)
            temp_mid = _f32(_f32(temp1 + temp2) / 2.0)

            cp_day1 = _f32(_f32(day_mid + day1) / 2.0)
            cp_day2 = _f32(_f32(day_mid + day2) / 2.0)

            parts.append(
                f"Q {_fmt(cp_day1)} {_fmt(temp1)} {_fmt(day_mid)} {_fmt(temp_mid)} "
                f"Q {_fmt(cp_day2)} {_fmt(temp2)} {_fmt(day2)} {_fmt(temp2)} "
            )

    return "".join(parts)