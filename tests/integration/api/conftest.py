from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from maintrack.adapters.auth.crypto import JWTAuthAdapter
from maintrack.adapters.sqlite.repos import SQLiteUserRepo
from maintrack.api.deps import Settings, get_clock, get_settings, get_suggester
from maintrack.api.main import app
from maintrack.domain.entities import User

TEST_SECRET_KEY = "test-secret-key"


class FakeSuggester:
    """Scripted language model: returns ``answer`` or raises ``error``."""

    def __init__(self) -> None:
        self.answer = "1. Clean the fans\n2. Check the power supply"
        self.error: Exception | None = None
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def suggester() -> FakeSuggester:
    return FakeSuggester()


@pytest.fixture
def client(db_path: str, clock, suggester: FakeSuggester) -> Iterator[TestClient]:
    def _settings() -> Settings:
        s = Settings()
        s.db_path = db_path
        s.rules_path = Path("rules.yaml").resolve()
        s.openai_api_key = None
        s.secret_key = TEST_SECRET_KEY
        return s

    app.dependency_overrides[get_settings] = _settings
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_suggester] = lambda: suggester
    # No "with" block: the database is already migrated by the db_path fixture
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_path: str) -> Callable[..., User]:
    def _make(email: str, roles: list[str], password: str = "secret123", status: str = "active") -> User:
        user = User(
            email=email,
            display_name=email.split("@")[0],
            password_hash=JWTAuthAdapter(TEST_SECRET_KEY).hash_password(password),
            roles=roles,  # type: ignore[arg-type]
            status=status,  # type: ignore[arg-type]
        )
        return SQLiteUserRepo(db_path).save(user)

    return _make


def bearer(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {JWTAuthAdapter(TEST_SECRET_KEY).create_token(user.id, 60)}"}


@pytest.fixture
def admin_headers(make_user) -> dict[str, str]:
    return bearer(make_user("admin@example.com", ["admin"]))


@pytest.fixture
def tech_headers(make_user) -> dict[str, str]:
    return bearer(make_user("tech@example.com", ["technician"]))


@pytest.fixture
def viewer_headers(make_user) -> dict[str, str]:
    return bearer(make_user("viewer@example.com", ["viewer"]))


@pytest.fixture
def computer(client: TestClient, tech_headers: dict[str, str]) -> dict:
    resp = client.post(
        "/api/equipment",
        json={
            "id": "CPU001",
            "name": "Accounting-PC01",
            "os": "Windows 10 Pro",
            "type": "Desktop CPU",
            "common_failure_points": "Power supply, Hard drive",
        },
        headers=tech_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def token_for() -> Callable[[User], dict[str, str]]:
    return bearer
