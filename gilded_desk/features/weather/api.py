"""Weather API endpoints"""
import logging
import random
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from gilded_desk.dependencies import get_rng
from gilded_desk.exceptions import AppError
from gilded_desk.features.weather.domain import WeatherReport
from gilded_desk.features.weather.service import lookup_weather

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/weather", tags=["weather"])


@router.get("", response_model=WeatherReport)
async def get_weather(
    city: Optional[str] = Query(None, description="City name"),
    rng: random.Random = Depends(get_rng)
):
    """Mock weather for a city; unknown cities get synthetic data"""
    try:
        return lookup_weather(city, rng)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch weather data: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch weather data")
