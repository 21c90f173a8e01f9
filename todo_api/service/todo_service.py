from datetime import datetime, timezone
from typing import Dict, List, Optional

from todo_api.schema.todo import Todo

DUE_DATE_IN_PAST = "Cannot have due date in the past"
ALREADY_COMPLETED = "Cannot add completed todo"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # 没有时区信息的时间按 UTC 处理
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def validate_new_todo(todo: Todo, now: Optional[datetime] = None) -> Dict[str, List[str]]:
    """检查新建的待办，返回 字段 -> 错误信息 的映射，为空表示通过"""
    now = now or utcnow()
    errors: Dict[str, List[str]] = {}

    if _as_utc(todo.due_date) < _as_utc(now):
        errors["DueDate"] = [DUE_DATE_IN_PAST]

    if todo.is_completed:
        errors["IsCompleted"] = [ALREADY_COMPLETED]

    return errors
