import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from todo_api.deps import get_todo_store, validated_todo
from todo_api.schema.todo import Todo
from todo_api.service.todo_store import TodoStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todos", tags=["todos"])

# Location 固定为路由模板，不代入具体 id
CREATED_LOCATION = "/todos/{id}"


@router.get("/", response_model=List[Todo])
@router.get("", response_model=List[Todo], include_in_schema=False)
def list_todos(store: TodoStore = Depends(get_todo_store)):
    return store.list()


@router.get("/{todo_id}", response_model=Todo)
def get_todo(todo_id: int, store: TodoStore = Depends(get_todo_store)):
    todo = store.find(todo_id)
    if todo is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return todo


@router.post("", response_model=Todo, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=Todo, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_todo(
        response: Response,
        todo: Todo = Depends(validated_todo),
        store: TodoStore = Depends(get_todo_store)
):
    store.append(todo)
    response.headers["Location"] = CREATED_LOCATION
    logger.info(f"新增待办 id={todo.id}，当前共 {len(store)} 条")
    return todo


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_todo(todo_id: int, store: TodoStore = Depends(get_todo_store)):
    removed = store.remove_by_id(todo_id)
    logger.info(f"删除待办 id={todo_id}，移除 {removed} 条")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
