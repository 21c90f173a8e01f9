# test/conftest.py
import pytest
from fastapi.testclient import TestClient

from todo_api.config import Settings
from todo_api.main import create_app
from todo_api.service.todo_store import TodoStore


@pytest.fixture()
def settings():
    return Settings()


@pytest.fixture()
def store():
    """每个测试使用全新的待办列表"""
    return TodoStore()


@pytest.fixture()
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def todo_payload():
    return {
        "id": 1,
        "name": "Buy groceries",
        "dueDate": "2099-01-01T09:30:00",
        "isCompleted": False,
    }
