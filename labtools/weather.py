"""Show the current weather for a city from the wttr.in JSON service."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

URL_TEMPLATE = "http://wttr.in/{city}?format=j1"
MAX_CITY_LEN = 20
USER_AGENT = "labtools-weather/1.0"
TIMEOUT = 30.0
MISSING = "n/a"


class WeatherError(Exception):
    """Raised when the weather cannot be fetched or understood."""


@dataclass(frozen=True)
class WeatherReport:
    """Current conditions for one city."""

    city: str
    celsius: str | None
    fahrenheit: str | None
    observation_time: str | None
    description: str | None
    wind_direction: str | None
    wind_speed_kmph: str | None

    def format(self) -> str:
        """Return the report as tab-indented lines."""

        def show(value: str | None) -> str:
            return MISSING if value is None else value

        return "\n".join([
            f"\tCity: {self.city}",
            f"\tCelsius: {show(self.celsius)}",
            f"\tFahrenheit: {show(self.fahrenheit)}",
            f"\tObservation Time: {show(self.observation_time)}",
            f"\tWeather Description: {show(self.description)}",
            f"\tWind Direction: {show(self.wind_direction)}",
            f"\tWind Speed: {show(self.wind_speed_kmph)} km/h",
        ])


def build_url(city: str) -> str:
    """Return the request URL for ``city``, rejecting names that are too long."""
    length = len(city.encode("utf-8"))
    if length > MAX_CITY_LEN:
        raise WeatherError(f"error city name too long {length}. max {MAX_CITY_LEN}")
    return URL_TEMPLATE.format(city=quote(city))


def fetch_json(url: str) -> Any:
    """Fetch ``url`` and return its body parsed as JSON."""
    request = Request(url, headers={"User-Agent": USER_AGENT})
    try:
        with urlopen(request, timeout=TIMEOUT) as response:
            raw = response.read()
    except HTTPError as exc:
        # The body of an error response is still parsed, as any other body is.
        raw = exc.read() or b""
    except (URLError, OSError) as exc:
        raise WeatherError(f"error request: {exc}") from exc

    text = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise WeatherError(f"error parsing JSON '{text}'") from exc


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _field(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


def _string(obj: Any, key: str) -> str | None:
    value = _field(obj, key)
    return value if isinstance(value, str) else None


def parse_report(city: str, payload: Any) -> WeatherReport:
    """Build a report from the parsed JSON ``payload``."""
    current = _first(_field(payload, "current_condition"))
    if current is None:
        raise WeatherError("error parsing JSON field")

    description = _string(_first(_field(current, "weatherDesc")), "value")
    return WeatherReport(
        city=city,
        celsius=_string(current, "temp_C"),
        fahrenheit=_string(current, "temp_F"),
        observation_time=_string(current, "observation_time"),
        description=description,
        wind_direction=_string(current, "winddir16Point"),
        wind_speed_kmph=_string(current, "windspeedKmph"),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the current weather for the city given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        program = sys.argv[0] if sys.argv and sys.argv[0] else "weather"
        print(f"Usage: {program} <city>", file=sys.stderr)
        return 1

    city = args[0]
    try:
        url = build_url(city)
    except WeatherError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"URL={url}")

    try:
        report = parse_report(city, fetch_json(url))
    except WeatherError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(report.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())