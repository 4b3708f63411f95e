"""Weather feature module"""

from gilded_desk.features.weather.service import lookup_weather

__all__ = ["lookup_weather"]
