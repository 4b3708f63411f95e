"""Weather report model"""
from pydantic import BaseModel


class WeatherReport(BaseModel):
    city: str
    country: str
    temp: int
    weather: str
    description: str
    humidity: int
    wind: float
