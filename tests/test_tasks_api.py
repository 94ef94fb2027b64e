from app.modules.tasks.repository import TaskRepository
from tests.conftest import API, add_project_member, create_project, create_task


def shared_project(client, users):
    project = create_project(client, users["alice"])
    add_project_member(client, users["alice"], project["id"], users["bob"]["id"])
    return project


def test_member_creates_and_updates_but_cannot_delete(client, users):
    alice, bob = users["alice"], users["bob"]
    project = shared_project(client, users)
    task = create_task(client, bob, project["id"])
    assert task["status"] == "todo"
    assert task["priority"] == "medium"

    response = client.put(f"{API}/tasks/{task['id']}", json={"status": "inprogress"}, headers=bob["headers"])
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "inprogress"
    assert response.json()["data"]["title"] == task["title"]

    response = client.delete(f"{API}/tasks/{task['id']}", headers=bob["headers"])
    assert response.status_code == 403

    response = client.delete(f"{API}/tasks/{task['id']}", headers=alice["headers"])
    assert response.status_code == 200
    assert client.get(f"{API}/tasks/{task['id']}", headers=alice["headers"]).status_code == 404


def test_outsider_cannot_create_or_read(client, users):
    project = shared_project(client, users)
    carol = users["carol"]
    response = client.post(f"{API}/tasks", json={"project_id": project["id"], "title": "Sneaky"}, headers=carol["headers"])
    assert response.status_code == 403

    task = create_task(client, users["alice"], project["id"])
    assert client.get(f"{API}/tasks/{task['id']}", headers=carol["headers"]).status_code == 403
    assert client.put(f"{API}/tasks/{task['id']}", json={"title": "x"}, headers=carol["headers"]).status_code == 403


def test_create_in_missing_project_is_404(client, users):
    response = client.post(f"{API}/tasks", json={"project_id": "nope", "title": "Orphan"}, headers=users["alice"]["headers"])
    assert response.status_code == 404


def test_admin_deletes_any_task(client, users):
    project = shared_project(client, users)
    task = create_task(client, users["bob"], project["id"])
    assert client.delete(f"{API}/tasks/{task['id']}", headers=users["admin"]["headers"]).status_code == 200


def test_task_access_follows_project_access(client, db, users):
    project = shared_project(client, users)
    task = create_task(client, users["alice"], project["id"])
    repository = TaskRepository(db)
    for name in ("alice", "bob", "carol"):
        expected = name in ("alice", "bob")
        assert repository.can_user_access(task["id"], users[name]["id"]) is expected
    assert repository.is_project_owner(task["id"], users["alice"]["id"])
    assert not repository.is_project_owner(task["id"], users["bob"]["id"])


def test_list_only_returns_accessible_tasks(client, users):
    project = shared_project(client, users)
    other = create_project(client, users["carol"], "Carol's")
    mine = create_task(client, users["alice"], project["id"], "Mine")
    create_task(client, users["carol"], other["id"], "Hers")

    response = client.get(f"{API}/tasks", headers=users["bob"]["headers"])
    assert [t["id"] for t in response.json()["data"]] == [mine["id"]]

    response = client.get(f"{API}/projects/{project['id']}/tasks", headers=users["bob"]["headers"])
    assert [t["id"] for t in response.json()["data"]] == [mine["id"]]

    response = client.get(f"{API}/tasks", headers=users["admin"]["headers"])
    assert len(response.json()["data"]) == 2


def test_status_filter(client, users):
    project = shared_project(client, users)
    create_task(client, users["alice"], project["id"], "Open")
    create_task(client, users["alice"], project["id"], "Finished", status="done")
    response = client.get(f"{API}/tasks", params={"status": "done"}, headers=users["alice"]["headers"])
    assert [t["title"] for t in response.json()["data"]] == ["Finished"]


def test_assignment_notifies_assignee(client, db, users):
    project = shared_project(client, users)
    task = create_task(client, users["alice"], project["id"], assignee_id=users["bob"]["id"])
    notifications = client.get(f"{API}/notifications", headers=users["bob"]["headers"]).json()["data"]
    assert len(notifications) == 1
    assert notifications[0]["notification_type"] == "task_assigned"
    assert notifications[0]["link"] == f"/tasks/{task['id']}"


def test_completion_notifies_assignee(client, users):
    project = shared_project(client, users)
    task = create_task(client, users["bob"], project["id"], assignee_id=users["bob"]["id"])
    client.put(f"{API}/tasks/{task['id']}", json={"status": "done"}, headers=users["alice"]["headers"])
    types = [n["notification_type"] for n in client.get(f"{API}/notifications", headers=users["bob"]["headers"]).json()["data"]]
    assert types == ["task_completed"]


def test_unknown_assignee_is_404(client, users):
    project = shared_project(client, users)
    response = client.post(
        f"{API}/tasks",
        json={"project_id": project["id"], "title": "Ghost work", "assignee_id": "ghost"},
        headers=users["alice"]["headers"],
    )
    assert response.status_code == 404


def test_invalid_status_is_validation_error(client, users):
    project = shared_project(client, users)
    task = create_task(client, users["alice"], project["id"])
    response = client.put(f"{API}/tasks/{task['id']}", json={"status": "finished"}, headers=users["alice"]["headers"])
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
