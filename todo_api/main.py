import logging
from datetime import datetime
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI

from todo_api.api.home import router as home_router
from todo_api.api.todo import router as todo_router
from todo_api.config import Settings, load_settings
from todo_api.errors import TodoValidationError, todo_validation_exception_handler
from todo_api.middleware.path_rewrite import PathRewriteMiddleware
from todo_api.middleware.request_logging import RequestLoggingMiddleware
from todo_api.service.todo_service import utcnow
from todo_api.service.todo_store import TodoStore

logger = logging.getLogger(__name__)


def create_app(
        settings: Optional[Settings] = None,
        store: Optional[TodoStore] = None,
        request_logger: Optional[logging.Logger] = None,
        clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    settings = settings or load_settings()
    clock = clock or utcnow

    app = FastAPI(title=settings.title)
    # 每个应用实例持有自己的待办列表
    app.state.settings = settings
    app.state.todo_store = store if store is not None else TodoStore()
    app.state.clock = clock

    app.add_exception_handler(TodoValidationError, todo_validation_exception_handler)

    # 注册路由
    app.include_router(home_router)
    app.include_router(todo_router)

    # 后添加的中间件在最外层：先改写路径，再记录日志
    app.add_middleware(RequestLoggingMiddleware, logger=request_logger, clock=clock)
    app.add_middleware(PathRewriteMiddleware, redirect=settings.rewrite_mode == "redirect")

    logger.info(
        f"应用已创建: 路径改写模式={settings.rewrite_mode} | "
        f"创建校验={'开启' if settings.validation_enabled else '关闭'}"
    )
    return app


# 直接用 uvicorn todo_api.main:app 启动时也要有日志输出
_settings = load_settings()
logging.basicConfig(level=_settings.log_level)
app = create_app(_settings)


def run():
    """命令行入口，用 uvicorn 启动服务"""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
