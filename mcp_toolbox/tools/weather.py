"""Tool: Simulated weather report."""

import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from mcp_toolbox.errors import ToolValidationError
from mcp_toolbox.tools.base import BaseTool
from mcp_toolbox.tools.schema import FieldSpec, FieldType, InputSchema

CONDITIONS = (
    "Sunny",
    "Partly Cloudy",
    "Cloudy",
    "Rainy",
    "Stormy",
    "Snowy",
    "Foggy",
    "Windy",
)

DAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


@dataclass(frozen=True)
class WeatherInput:
    location: str
    units: str = "celsius"


class WeatherTool(BaseTool[WeatherInput]):
    """
    Tool returning current weather and a weekly forecast for a location.

    Data is generated randomly on every call; nothing is cached.
    """

    name = "weather"
    description = (
        "Retrieves current weather information and forecast "
        "for a specified location"
    )
    input_schema = InputSchema(
        fields=(
            FieldSpec(
                "location",
                FieldType.STRING,
                description=(
                    'The location to get weather for '
                    '(e.g., "San Francisco", "New York", "London")'
                ),
                required=True,
            ),
            FieldSpec(
                "units",
                FieldType.ENUM,
                description="Temperature units (default: celsius)",
                default="celsius",
                values=("celsius", "fahrenheit"),
            ),
        )
    )

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def parse_input(self, values: dict[str, Any]) -> WeatherInput:
        params = WeatherInput(**values)
        if not params.location.strip():
            raise ToolValidationError("location cannot be empty", "location")
        return params

    async def run(self, params: WeatherInput) -> dict[str, Any]:
        rng = self._rng
        celsius = params.units == "celsius"
        base_temp = 20 if celsius else 68
        variation = 10 if celsius else 18

        temperature = round(base_temp + rng.uniform(-variation / 2, variation / 2))
        forecast = [
            {
                "day": day,
                "high": round(temperature + rng.random() * 5),
                "low": round(temperature - rng.random() * 5),
                "condition": rng.choice(CONDITIONS),
            }
            for day in DAYS
        ]

        return {
            "location": params.location,
            "temperature": temperature,
            "units": "Celsius" if celsius else "Fahrenheit",
            "condition": rng.choice(CONDITIONS),
            "humidity": round(30 + rng.random() * 50),
            "wind_speed": round(5 + rng.random() * 20),
            "forecast": forecast,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
