"""Request schemas for Notes API"""
from typing import Optional
from pydantic import BaseModel


class CreateNoteRequest(BaseModel):
    """Request model for creating a note (blank values rejected by the service)"""
    title: Optional[str] = None
    content: Optional[str] = None
