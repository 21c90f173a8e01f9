from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# 请求体和响应体共用同一个结构，字段名按 camelCase 输出
class Todo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    due_date: datetime = Field(..., alias="dueDate")
    is_completed: bool = Field(False, alias="isCompleted")
