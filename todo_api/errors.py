from typing import Dict, List

from fastapi import Request
from fastapi.responses import JSONResponse

VALIDATION_PROBLEM_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
VALIDATION_PROBLEM_TITLE = "One or more validation errors occurred."


class TodoValidationError(Exception):
    """新建待办校验失败，errors 为 字段 -> 错误信息列表"""

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__(VALIDATION_PROBLEM_TITLE)
        self.errors = errors


async def todo_validation_exception_handler(request: Request, exc: TodoValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        media_type="application/problem+json",
        content={
            "type": VALIDATION_PROBLEM_TYPE,
            "title": VALIDATION_PROBLEM_TITLE,
            "status": 400,
            "errors": exc.errors,
        },
    )
