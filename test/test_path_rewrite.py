from fastapi.testclient import TestClient

from todo_api.config import Settings
from todo_api.main import create_app


def test_tasks_path_behaves_like_todos(client, todo_payload):
    client.post("/todos", json={**todo_payload, "id": 5})

    via_tasks = client.get("/tasks/5")
    via_todos = client.get("/todos/5")

    assert via_tasks.status_code == via_todos.status_code == 200
    assert via_tasks.json() == via_todos.json()


def test_tasks_missing_id_returns_404(client):
    assert client.get("/tasks/5").status_code == 404


def test_tasks_root_lists_todos(client, todo_payload):
    client.post("/todos", json=todo_payload)

    assert client.get("/tasks/").json() == client.get("/todos/").json()


def test_tasks_delete_is_rewritten(client, store, todo_payload):
    client.post("/todos", json=todo_payload)

    assert client.delete("/tasks/1").status_code == 204
    assert len(store) == 0


def test_other_paths_are_untouched(client):
    assert client.get("/").text == "Hello World!"
    assert client.get("/task/5").status_code == 404


def test_redirect_mode(todo_payload):
    client = TestClient(create_app(settings=Settings(rewrite_mode="redirect")))
    client.post("/todos", json=todo_payload)

    resp = client.get("/tasks/1?verbose=1", follow_redirects=False)
    assert resp.status_code == 302
    assert resp.headers["location"] == "/todos/1?verbose=1"

    resp = client.get("/tasks/1")
    assert resp.status_code == 200
    assert resp.json() == todo_payload
