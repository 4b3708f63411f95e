from fastapi import APIRouter
from gilded_desk.api import health, pages
from gilded_desk.features.auth.api import router as auth_router
from gilded_desk.features.billing.api import router as billing_router
from gilded_desk.features.chat.api import router as chat_router
from gilded_desk.features.files.api import router as files_router
from gilded_desk.features.notes.api import router as notes_router
from gilded_desk.features.tasks.api import router as tasks_router
from gilded_desk.features.weather.api import router as weather_router

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(notes_router)
api_router.include_router(tasks_router, prefix="/api/tasks")
# Older clients still call /api/todos
api_router.include_router(tasks_router, prefix="/api/todos", include_in_schema=False)
api_router.include_router(files_router)
api_router.include_router(weather_router)
api_router.include_router(chat_router)
api_router.include_router(auth_router)
api_router.include_router(billing_router)
api_router.include_router(pages.router)
