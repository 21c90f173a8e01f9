import logging
from datetime import datetime
from typing import Callable

from fastapi import Depends, Request

from todo_api.config import Settings
from todo_api.errors import TodoValidationError
from todo_api.schema.todo import Todo
from todo_api.service.todo_service import validate_new_todo
from todo_api.service.todo_store import TodoStore

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_todo_store(request: Request) -> TodoStore:
    return request.app.state.todo_store


def get_clock(request: Request) -> Callable[[], datetime]:
    return request.app.state.clock


def validated_todo(
    todo: Todo,
    settings: Settings = Depends(get_settings),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> Todo:
    """创建前的校验，未开启时原样放行"""
    if not settings.validation_enabled:
        return todo

    errors = validate_new_todo(todo, now=clock())
    if errors:
        logger.info(f"拒绝创建待办 id={todo.id}: {errors}")
        raise TodoValidationError(errors)
    return todo
