# =============================================================================
# core/weather.py  —  Canned Weather Lookup
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers "what's the weather in X?" from a small hardcoded table.
#
# WHY MOCK DATA?
#   This is a demo server: the point is to show a tool that takes an argument
#   and returns a lookup, not to talk to a weather service.  The INTERFACE is
#   what matters: get_weather(location) -> WeatherReport.  Swapping in a real
#   API later only touches this module.
#
# MATCHING:
#   Location names are matched EXACTLY ("London", not "london").  Anything
#   else gets a neutral fallback rather than an error, so the tool always
#   has something to say.
# =============================================================================

from core.models import WeatherReport

_WEATHER_DATA: dict[str, tuple[str, str]] = {
    "New York": ("72°F", "Sunny"),
    "London": ("62°F", "Rainy"),
    "Tokyo": ("78°F", "Cloudy"),
    "Sydney": ("82°F", "Clear"),
}

UNKNOWN_CONDITION = "Unknown"
_FALLBACK = ("70°F", UNKNOWN_CONDITION)


def get_weather(location: str) -> WeatherReport:
    """Look up the canned weather for ``location``.

    Unknown locations return 70°F / "Unknown" instead of failing.
    """
    temperature, condition = _WEATHER_DATA.get(location, _FALLBACK)
    return WeatherReport(location=location, temperature=temperature, condition=condition)


def describe_weather(report: WeatherReport) -> str:
    """One-line summary: ``Weather in London: 62°F, Rainy``."""
    return f"Weather in {report.location}: {report.temperature}, {report.condition}"


def list_known_locations() -> list[str]:
    """Cities with real (canned) data, in table order."""
    return list(_WEATHER_DATA.keys())
