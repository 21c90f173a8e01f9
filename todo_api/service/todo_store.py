from typing import Iterable, List, Optional

from todo_api.schema.todo import Todo


class TodoStore:
    """进程内的待办列表，按插入顺序保存，不做加锁"""

    def __init__(self, initial: Optional[Iterable[Todo]] = None) -> None:
        self._todos: List[Todo] = list(initial or [])

    def list(self) -> List[Todo]:
        return list(self._todos)

    def find(self, todo_id: int) -> Optional[Todo]:
        """线性查找，id 重复时返回第一条"""
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        return None

    def append(self, todo: Todo) -> Todo:
        self._todos.append(todo)
        return todo

    def remove_by_id(self, todo_id: int) -> int:
        """删除所有 id 匹配的条目，返回删除数量"""
        before = len(self._todos)
        self._todos[:] = [todo for todo in self._todos if todo.id != todo_id]
        return before - len(self._todos)

    def clear(self) -> None:
        self._todos.clear()

    def __len__(self) -> int:
        return len(self._todos)
