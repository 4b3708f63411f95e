"""Chat API endpoints"""
import logging
import random
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from gilded_desk.dependencies import get_rng
from gilded_desk.features.chat.service import pick_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


class ChatRequest(BaseModel):
    message: Optional[str] = ""


class ChatResponse(BaseModel):
    response: str


@router.post("", response_model=ChatResponse)
async def chat(request: ChatRequest, rng: random.Random = Depends(get_rng)):
    """Reply to a message with a canned response"""
    try:
        return ChatResponse(response=pick_response(rng))
    except Exception as e:
        logger.error(f"Failed to process message: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to process message")
