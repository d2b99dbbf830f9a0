import datetime as dt
import os
import uuid

TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ.setdefault("JWT_SECRET", "test-secret-for-the-users-service-suite")
os.environ.pop("ADMIN_PASSWORD", None)

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from users_service.core import db as db_module
from users_service.core.bootstrap import ensure_roles
from users_service.core.security import hash_password
from users_service.main import app
from users_service.models import ROLE_IDS, Role, RoleType, User

db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL

DEFAULT_PASSWORD = "UserPass!23"


@pytest_asyncio.fixture
async def db():
    """
    Initialize a clean in-memory SQLite database for every test.
    Tables are recreated from scratch and the three roles are seeded.
    """
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()
    await ensure_roles()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def raw_client(db):
    """
    Like ``client`` but server errors come back as responses instead of
    being re-raised into the test.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def create_user(db):
    """
    Factory fixture to create users directly via ORM, with any role.
    """

    async def _create_user(
        role: RoleType = RoleType.User,
        email: str | None = None,
        password: str = DEFAULT_PASSWORD,
    ) -> tuple[User, str]:
        user = await User.create(
            first_name="Test",
            last_name=role.value,
            email=email or f"{role.value.lower()}_{uuid.uuid4().hex[:6]}@example.com",
            password_hash=hash_password(password),
            date_of_birth=dt.date(1990, 5, 17),
            created_at=dt.datetime.now(dt.timezone.utc),
            role=await Role.get(id=ROLE_IDS[role]),
        )
        await user.fetch_related("role")
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        resp = await client.post(
            "/api/auth/login",
            json={"email": email, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["token"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers


@pytest_asyncio.fixture
async def login_as(create_user, auth_header_factory):
    """
    Create a user with the given role and return (user, headers).
    """

    async def _login_as(role: RoleType = RoleType.User) -> tuple[User, dict[str, str]]:
        user, password = await create_user(role=role)
        headers = await auth_header_factory(user.email, password)
        return user, headers

    return _login_as
