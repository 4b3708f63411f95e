"""Mock weather lookup

A static table of cities with a synthetic fallback. The random source is
passed in so callers (and tests) control determinism.
"""
import random
from typing import Optional

from gilded_desk.exceptions import ValidationError

WEATHER_DATA = {
    "london": {"city": "London", "country": "UK", "temp": 12, "weather": "Clouds", "description": "Overcast clouds", "humidity": 78, "wind": 5.2},
    "paris": {"city": "Paris", "country": "France", "temp": 15, "weather": "Clear", "description": "Clear sky", "humidity": 65, "wind": 3.1},
    "new york": {"city": "New York", "country": "USA", "temp": 18, "weather": "Clear", "description": "Sunny", "humidity": 55, "wind": 4.5},
    "tokyo": {"city": "Tokyo", "country": "Japan", "temp": 22, "weather": "Clouds", "description": "Scattered clouds", "humidity": 70, "wind": 2.8},
    "sydney": {"city": "Sydney", "country": "Australia", "temp": 25, "weather": "Clear", "description": "Bright sunshine", "humidity": 60, "wind": 6.2},
    "mumbai": {"city": "Mumbai", "country": "India", "temp": 32, "weather": "Clouds", "description": "Partly cloudy", "humidity": 75, "wind": 4.0},
    "chennai": {"city": "Chennai", "country": "India", "temp": 34, "weather": "Clear", "description": "Hot and sunny", "humidity": 70, "wind": 3.5},
    "bangalore": {"city": "Bangalore", "country": "India", "temp": 28, "weather": "Clouds", "description": "Pleasant weather", "humidity": 65, "wind": 2.5},
    "delhi": {"city": "Delhi", "country": "India", "temp": 30, "weather": "Haze", "description": "Hazy conditions", "humidity": 55, "wind": 3.8},
    "dubai": {"city": "Dubai", "country": "UAE", "temp": 38, "weather": "Clear", "description": "Hot and dry", "humidity": 40, "wind": 5.0},
    "singapore": {"city": "Singapore", "country": "Singapore", "temp": 31, "weather": "Rain", "description": "Light rain", "humidity": 85, "wind": 2.2},
    "berlin": {"city": "Berlin", "country": "Germany", "temp": 10, "weather": "Clouds", "description": "Cloudy", "humidity": 72, "wind": 4.8},
    "moscow": {"city": "Moscow", "country": "Russia", "temp": -5, "weather": "Snow", "description": "Light snow", "humidity": 88, "wind": 3.0},
    "cairo": {"city": "Cairo", "country": "Egypt", "temp": 28, "weather": "Clear", "description": "Sunny and warm", "humidity": 35, "wind": 4.2},
    "rome": {"city": "Rome", "country": "Italy", "temp": 20, "weather": "Clear", "description": "Beautiful day", "humidity": 58, "wind": 2.9},
}

SYNTHETIC_CONDITIONS = ["Clear", "Clouds", "Rain", "Mist"]
SYNTHETIC_DESCRIPTIONS = ["Pleasant weather", "Mild conditions", "Typical weather", "Seasonal conditions"]


def find_city(city: str) -> Optional[dict]:
    """
    Table lookup for a normalised city name.

    Exact key first, then the first entry in declaration order whose key
    contains the name or is contained in it.
    """
    if city in WEATHER_DATA:
        return dict(WEATHER_DATA[city])

    for key, report in WEATHER_DATA.items():
        if city in key or key in city:
            return dict(report)
    return None


def synthesize_weather(city: str, rng: random.Random) -> dict:
    """Plausible random weather for a city missing from the table"""
    return {
        "city": city[:1].upper() + city[1:],
        "country": "Unknown",
        "temp": rng.randrange(5, 40),
        "weather": rng.choice(SYNTHETIC_CONDITIONS),
        "description": rng.choice(SYNTHETIC_DESCRIPTIONS),
        "humidity": rng.randrange(40, 90),
        "wind": round(rng.random() * 8 + 1, 1),
    }


def lookup_weather(city: Optional[str], rng: random.Random) -> dict:
    """
    Weather for a city name (case-insensitive, whitespace-trimmed).

    Raises:
        ValidationError: If the city name is blank
    """
    normalized = (city or "").lower().strip()
    if not normalized:
        raise ValidationError("City name is required")

    return find_city(normalized) or synthesize_weather(normalized, rng)
