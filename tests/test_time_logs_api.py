from tests.conftest import API, add_project_member, create_project, create_task


def setup_task(client, users):
    project = create_project(client, users["alice"])
    add_project_member(client, users["alice"], project["id"], users["bob"]["id"])
    return create_task(client, users["alice"], project["id"])


def log_time(client, actor, task_id, hours=2.5, date="2025-03-10", **fields):
    return client.post(
        f"{API}/time-logs",
        json={"task_id": task_id, "hours": hours, "date": date, **fields},
        headers=actor["headers"],
    )


def test_log_and_list_own_time(client, users):
    task = setup_task(client, users)
    bob = users["bob"]
    response = log_time(client, bob, task["id"], description="Reviewing")
    assert response.status_code == 201
    assert response.json()["data"]["user_id"] == bob["id"]

    logs = client.get(f"{API}/time-logs", headers=bob["headers"]).json()["data"]
    assert len(logs) == 1
    assert logs[0]["hours"] == 2.5


def test_date_range_filter(client, users):
    task = setup_task(client, users)
    bob = users["bob"]
    for day in ("2025-03-01", "2025-03-15", "2025-03-31"):
        log_time(client, bob, task["id"], date=day)
    response = client.get(
        f"{API}/time-logs",
        params={"start_date": "2025-03-10", "end_date": "2025-03-20"},
        headers=bob["headers"],
    )
    assert [log["date"] for log in response.json()["data"]] == ["2025-03-15"]


def test_cannot_log_on_inaccessible_task(client, users):
    task = setup_task(client, users)
    assert log_time(client, users["carol"], task["id"]).status_code == 403


def test_hours_must_be_positive(client, users):
    task = setup_task(client, users)
    assert log_time(client, users["bob"], task["id"], hours=0).status_code == 400


def test_only_author_or_admin_modifies(client, users):
    task = setup_task(client, users)
    log = log_time(client, users["bob"], task["id"]).json()["data"]
    url = f"{API}/time-logs/{log['id']}"

    assert client.put(url, json={"hours": 8}, headers=users["alice"]["headers"]).status_code == 403
    response = client.put(url, json={"hours": 3}, headers=users["bob"]["headers"])
    assert response.status_code == 200
    assert response.json()["data"]["hours"] == 3
    assert response.json()["data"]["description"] is None
    assert client.get(url, headers=users["admin"]["headers"]).status_code == 200
    assert client.delete(url, headers=users["admin"]["headers"]).status_code == 200
    assert client.get(url, headers=users["bob"]["headers"]).status_code == 404


def test_task_time_logs_visible_to_project_members(client, users):
    task = setup_task(client, users)
    log_time(client, users["bob"], task["id"])
    log_time(client, users["alice"], task["id"])
    response = client.get(f"{API}/tasks/{task['id']}/time-logs", headers=users["alice"]["headers"])
    assert len(response.json()["data"]) == 2
    assert client.get(f"{API}/tasks/{task['id']}/time-logs", headers=users["carol"]["headers"]).status_code == 403


def test_user_time_logs_self_or_admin(client, users):
    task = setup_task(client, users)
    log_time(client, users["bob"], task["id"])
    url = f"{API}/users/{users['bob']['id']}/time-logs"
    denied = client.get(url, headers=users["alice"]["headers"])
    assert denied.status_code == 403
    assert denied.json()["message"] == "You can only view your own time logs"
    assert len(client.get(url, headers=users["bob"]["headers"]).json()["data"]) == 1
    assert len(client.get(url, headers=users["admin"]["headers"]).json()["data"]) == 1
