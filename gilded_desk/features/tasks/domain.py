"""Task domain model"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TaskBase(BaseModel):
    """Base task fields"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    text: str
    completed: bool = False


class TaskUpdate(BaseModel):
    """Task update model - only explicitly set fields are applied"""
    text: Optional[str] = None
    completed: Optional[bool] = None


class Task(TaskBase):
    """Complete task model as stored"""
    id: int
    created_at: str = Field(..., alias="createdAt")
