from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from todo_api.service.todo_service import utcnow

ACCESS_LOGGER_NAME = "todo_api.access"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    每个请求前后各记一行日志：

        [GET /todos/2 2024-10-06 11:57:18] Started.
        [GET /todos/2 2024-10-06 11:57:18] Finished.

    logger 和 clock 通过构造参数注入，测试时可以替换。
    """

    def __init__(
        self,
        app,
        *,
        logger: logging.Logger | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        super().__init__(app)
        self.logger = logger or logging.getLogger(ACCESS_LOGGER_NAME)
        self.clock = clock or utcnow

    def _line(self, request: Request, stage: str) -> str:
        timestamp = self.clock().strftime(TIMESTAMP_FORMAT)
        return f"[{request.method} {request.url.path} {timestamp}] {stage}."

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        self.logger.info(self._line(request, "Started"))
        try:
            return await call_next(request)
        except Exception as e:
            self.logger.error(f"请求处理异常: {e}")
            raise
        finally:
            self.logger.info(self._line(request, "Finished"))
