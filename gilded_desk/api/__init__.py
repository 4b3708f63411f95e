# API module exports
from gilded_desk.api.base import api_router

__all__ = ["api_router"]
