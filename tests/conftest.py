"""Shared test fixtures."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRES_MIN"] = "60"

import pytest
from fastapi.testclient import TestClient

from foodlink.db.base import Base
from foodlink.db.session import engine, SessionLocal
from foodlink.main import create_app

DONATION = {
	"name": "alice",
	"foodItem": "rice",
	"quantity": 5,
	"location": "NY",
	"phoneNumber": "123",
	"address": "1 Main St",
}


@pytest.fixture
def client():
	Base.metadata.drop_all(bind=engine)
	app = create_app()
	with TestClient(app) as test_client:
		yield test_client


@pytest.fixture
def db():
	session = SessionLocal()
	try:
		yield session
	finally:
		session.close()


def signup(client, username: str, email: str, password: str = "pw123"):
	return client.post("/api/signup", json={"username": username, "email": email, "password": password})


def login_headers(client, username: str, email: str, password: str = "pw123") -> dict[str, str]:
	signup(client, username, email, password)
	response = client.post("/api/login", json={"email": email, "password": password})
	assert response.status_code == 200
	return {"Authorization": f"Bearer {response.json()['token']}"}


def donate(client, headers: dict[str, str], **overrides) -> dict:
	response = client.post("/api/donate", json={**DONATION, **overrides}, headers=headers)
	assert response.status_code == 201, response.text
	return response.json()["donation"]


@pytest.fixture
def alice(client) -> dict[str, str]:
	return login_headers(client, "alice", "a@x.com")


@pytest.fixture
def bob(client) -> dict[str, str]:
	return login_headers(client, "bob", "bob@foodlink.org")
