"""Test configuration and fixtures for the CMS API tests."""

import asyncio

import pytest
from botocore.exceptions import ClientError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from src.auth.models import User, UserRole
from src.database import init_db
from src.languages.models import Language
from src.storage.client import ImageStorage

PUBLIC_URL = "http://cdn.test"


# ==============================================================================
# Test doubles for the external services
# ==============================================================================

class FakeS3Client:
    """In-memory stand-in for the boto3 S3 client methods ImageStorage calls."""

    def __init__(self, fail: bool = False):
        self.objects = {}
        self.put_calls = []
        self.fail = fail

    def _maybe_fail(self, operation):
        if self.fail:
            raise ClientError({"Error": {"Code": "500", "Message": "boom"}}, operation)

    def put_object(self, **params):
        self._maybe_fail("PutObject")
        self.put_calls.append(params)
        self.objects[(params["Bucket"], params["Key"])] = params["Body"]
        return {}

    def delete_objects(self, Bucket, Delete):
        self._maybe_fail("DeleteObjects")
        for obj in Delete["Objects"]:
            self.objects.pop((Bucket, obj["Key"]), None)
        return {}


class FakeRedis:
    """Just enough of redis.asyncio.Redis for the session store."""

    def __init__(self):
        self.hashes = {}
        self.ttls = {}

    async def hset(self, key, mapping):
        self.hashes.setdefault(key, {}).update(mapping)
        return len(mapping)

    async def expire(self, key, ttl):
        self.ttls[key] = ttl
        return True

    async def hgetall(self, key):
        return dict(self.hashes.get(key, {}))

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.hashes.pop(key, None) is not None:
                removed += 1
        return removed


# ==============================================================================
# Database helpers
# ==============================================================================

def run(coro):
    """Drive an async data-access call from a plain test."""
    return asyncio.run(coro)


@pytest.fixture
def session_factory(tmp_path):
    """Session factory bound to a fresh SQLite database with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    run(init_db(engine))
    yield sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    run(engine.dispose())


@pytest.fixture
def with_session(session_factory):
    """Run `fn(session)` inside a fresh session and return its result."""
    def _run(fn):
        async def _scenario():
            async with session_factory() as session:
                return await fn(session)
        return run(_scenario())
    return _run


@pytest.fixture
def languages(with_session):
    """English (default), Oromo and an inactive French."""
    async def _create(db):
        rows = [
            Language(code="en", name="English", is_default=True, is_active=True),
            Language(code="om", name="Afaan Oromoo", is_default=False, is_active=True),
            Language(code="fr", name="French", is_default=False, is_active=False),
        ]
        db.add_all(rows)
        await db.commit()
        return {row.code: row.id for row in rows}
    return with_session(_create)


@pytest.fixture
def admin_user(with_session):
    async def _create(db):
        user = User(email="admin@example.com", full_name="Admin", hashed_password="x", role=UserRole.ADMIN.value)
        db.add(user)
        await db.commit()
        return user
    return with_session(_create)


# ==============================================================================
# Storage fixtures
# ==============================================================================

@pytest.fixture
def s3_client():
    return FakeS3Client()


@pytest.fixture
def storage(s3_client):
    return ImageStorage(s3_client, "images", PUBLIC_URL)


# ==============================================================================
# HTTP clients
# ==============================================================================

@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def app(session_factory, storage, fake_redis):
    """The FastAPI app with the database, storage and Redis overridden."""
    from src.database import get_db
    from src.main import app
    from src.redis.client import get_redis
    from src.storage.client import get_storage

    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_redis] = lambda: fake_redis

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(app, admin_user):
    """TestClient signed in as the admin (the admin gate is bypassed)."""
    from fastapi.testclient import TestClient

    from src.auth.deps import require_admin

    app.dependency_overrides[require_admin] = lambda: admin_user
    return TestClient(app)


@pytest.fixture
def anonymous_client(app):
    """TestClient going through the real session and role checks."""
    from fastapi.testclient import TestClient

    return TestClient(app)
