from fastapi.testclient import TestClient

from task_api.main import app, create_app
from task_api.store import TaskStore


def test_health_reports_task_count(client, store):
    store.create_task("one")
    store.create_task("two")

    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "Healthy"
    assert data["taskCount"] == 2
    assert "timestamp" in data


def test_root_route_ok():
    response = TestClient(app).get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Task Manager API"}


def test_apps_do_not_share_stores():
    first = TestClient(create_app(TaskStore()))
    second = TestClient(create_app(TaskStore()))

    first.post("/api/tasks", json={"description": "only in first"})

    assert len(first.get("/api/tasks").json()) == 1
    assert second.get("/api/tasks").json() == []


def test_swagger_served_in_development():
    response = TestClient(create_app()).get("/swagger/v1/swagger.json")
    assert response.status_code == 200
    assert "/api/tasks" in response.json()["paths"]
