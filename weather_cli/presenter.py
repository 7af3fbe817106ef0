from types import MappingProxyType
from typing import List, Tuple

from .services.openweather import WeatherReport
from .utils.text import center

Glyph = Tuple[str, str, str, str]

ART = MappingProxyType({
    "Clear": (
        "  \\ /  ",
        " - O - ",
        "  / \\  ",
        "       ",
    ),
    "Clouds": (
        "   __  ",
        " _(  )_",
        "(_____)",
        "       ",
    ),
    "Rain": (
        "  .--. ",
        " (    )",
        " ' ' ' ",
        "' ' '  ",
    ),
    "Snow": (
        "  .--. ",
        " (    )",
        " * * * ",
        "* * *  ",
    ),
})

FALLBACK: Glyph = ("   ", "   ", "   ", "   ")


def glyph_for(condition_label: str) -> Glyph:
    return ART.get(condition_label, FALLBACK)


def display_width(glyph: Glyph, city: str) -> int:
    return max(len(glyph[3]), len(city))


def render_lines(report: WeatherReport) -> List[str]:
    """
    Four report lines: art (or the city) on the left, a reading on the right.

    The Min/Max labels deliberately show temp_max and temp_min
    respectively; see DESIGN.md before swapping them.
    """
    glyph = glyph_for(report.condition_label)
    width = display_width(glyph, report.city)
    left = [center(glyph[0], width), center(glyph[1], width), center(glyph[2], width), center(report.city, width)]
    right = [
        f"Temperature: {report.current_temp}",
        f"Min: {report.temp_max}",
        f"Max: {report.temp_min}",
        f"Wind Speed: {report.wind_speed}",
    ]
    return [f"{segment} {reading}" for segment, reading in zip(left, right)]


def render(report: WeatherReport) -> str:
    return "\n".join(render_lines(report))
