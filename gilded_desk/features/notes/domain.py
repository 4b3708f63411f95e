"""Note domain model"""
from pydantic import BaseModel, ConfigDict, Field


class NoteBase(BaseModel):
    """Base note fields"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str
    content: str


class Note(NoteBase):
    """Complete note model as stored"""
    id: int
    created_at: str = Field(..., alias="createdAt")
