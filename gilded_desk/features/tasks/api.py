"""Tasks API endpoints"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from gilded_desk.dependencies import get_task_service
from gilded_desk.exceptions import AppError
from gilded_desk.features.tasks.domain import Task
from gilded_desk.features.tasks.schemas import CreateTaskRequest, DeleteResponse, UpdateTaskRequest
from gilded_desk.features.tasks.service import TaskService
from gilded_desk.utils.id_helper import parse_record_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])


@router.get("", response_model=List[Task])
async def list_tasks(service: TaskService = Depends(get_task_service)):
    """List all tasks, newest first"""
    try:
        return service.list_tasks()
    except Exception as e:
        logger.error(f"Failed to fetch tasks: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch tasks")


@router.post("", response_model=Task, status_code=201)
async def create_task(
    request: CreateTaskRequest,
    service: TaskService = Depends(get_task_service)
):
    """Create a task (optionally with a client-assigned id and timestamp)"""
    try:
        return service.create_task(
            text=request.text,
            id=request.id,
            completed=request.completed,
            created_at=request.created_at,
        )
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Failed to create task: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create task")


@router.put("/{task_id}", response_model=Task)
async def update_task(
    task_id: int,
    request: UpdateTaskRequest,
    service: TaskService = Depends(get_task_service)
):
    """Update a task's text and completion flag"""
    try:
        return service.update_task(task_id, request.text, request.completed)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Failed to update task {task_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update task")


@router.delete("/{task_id}", response_model=DeleteResponse)
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """Delete a task. Succeeds whether or not the task existed."""
    try:
        service.remove_task(parse_record_id(task_id))
        return {"success": True}
    except Exception as e:
        logger.error(f"Failed to delete task {task_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete task")

