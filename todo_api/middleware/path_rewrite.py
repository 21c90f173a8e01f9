from __future__ import annotations

import logging
import re
from urllib.parse import quote

from starlette.responses import RedirectResponse
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

TASKS_PATTERN = r"^/tasks/(.*)$"
TODOS_REPLACEMENT = r"/todos/\1"


class PathRewriteMiddleware:
    """
    把匹配 pattern 的请求路径改写成 replacement，在路由之前执行。

    默认直接改写 ASGI scope，后面的日志和路由看到的都是新路径；
    redirect=True 时改为返回重定向，不再调用内层应用。
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        pattern: str = TASKS_PATTERN,
        replacement: str = TODOS_REPLACEMENT,
        redirect: bool = False,
        redirect_status: int = 302,
    ):
        self.app = app
        self.pattern = re.compile(pattern)
        self.replacement = replacement
        self.redirect = redirect
        self.redirect_status = redirect_status

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        match = self.pattern.match(scope["path"])
        if match is None:
            await self.app(scope, receive, send)
            return

        new_path = match.expand(self.replacement)

        if self.redirect:
            query_string = scope.get("query_string", b"").decode("latin-1")
            url = f"{new_path}?{query_string}" if query_string else new_path
            logger.debug(f"重定向 {scope['path']} -> {url}")
            response = RedirectResponse(url, status_code=self.redirect_status)
            await response(scope, receive, send)
            return

        logger.debug(f"路径重写 {scope['path']} -> {new_path}")
        scope = dict(scope)
        scope["path"] = new_path
        scope["raw_path"] = quote(new_path).encode("ascii")
        await self.app(scope, receive, send)
