from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from todo_api.config import Settings
from todo_api.deps import get_settings

router = APIRouter(tags=["home"])


@router.get("/", response_class=PlainTextResponse)
def hello(settings: Settings = Depends(get_settings)):
    return settings.greeting
