"""Request and response schemas for Tasks API"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CreateTaskRequest(BaseModel):
    """
    Request model for creating a task.

    id, completed and createdAt may be supplied by an offline-first client
    replaying tasks it created locally; they are trusted as given.
    """
    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = None
    id: Optional[int] = None
    completed: Optional[bool] = None
    created_at: Optional[str] = Field(None, alias="createdAt")


class UpdateTaskRequest(BaseModel):
    """Request model for replacing a task's mutable fields"""
    text: Optional[str] = None
    completed: Optional[bool] = None


class DeleteResponse(BaseModel):
    success: bool
