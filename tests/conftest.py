import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.database.supabase_client import get_supabase
from app.main import app
from tests.fake_supabase import FakeSupabase

API = "/api/v1"
PASSWORD = "correct horse battery staple"


@pytest.fixture
def db():
    return FakeSupabase()


@pytest.fixture
def client(db, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path / "uploads"))
    app.dependency_overrides[get_supabase] = lambda: db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email: str, name: str, password: str = PASSWORD) -> dict:
    response = client.post(f"{API}/auth/register", json={"email": email, "password": password, "name": name})
    assert response.status_code == 201, response.text
    return response.json()["data"]


def login(client, email: str, password: str = PASSWORD) -> dict:
    response = client.post(f"{API}/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    return {
        "id": data["user"]["id"],
        "token": data["token"],
        "headers": {"Authorization": f"Bearer {data['token']}"},
    }


def promote(db, user_id: str, role: str = "admin") -> None:
    for row in db.rows("users"):
        if row["id"] == user_id:
            row["role"] = role


@pytest.fixture
def users(client, db):
    """Three members (alice, bob, carol) and one admin, logged in"""
    accounts = {}
    for name in ("alice", "bob", "carol", "admin"):
        register(client, f"{name}@example.com", name.capitalize())
        accounts[name] = login(client, f"{name}@example.com")
    promote(db, accounts["admin"]["id"])
    return accounts


def create_project(client, owner: dict, name: str = "Apollo") -> dict:
    response = client.post(f"{API}/projects", json={"name": name}, headers=owner["headers"])
    assert response.status_code == 201, response.text
    return response.json()["data"]


def add_project_member(client, owner: dict, project_id: str, user_id: str):
    return client.post(
        f"{API}/projects/{project_id}/members",
        json={"user_id": user_id},
        headers=owner["headers"],
    )


def create_task(client, actor: dict, project_id: str, title: str = "Write docs", **fields) -> dict:
    response = client.post(
        f"{API}/tasks",
        json={"project_id": project_id, "title": title, **fields},
        headers=actor["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]
