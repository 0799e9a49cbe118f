"""Tests for the Redis session store and sign-in/sign-out."""

from src.auth.models import User, UserRole
from src.auth.service import get_password_hash, get_user, sign_in, sign_out
from src.auth.sessions import SessionManager
from tests.conftest import FakeRedis, run


class TestSessionManager:
    """Tests for SessionManager."""

    def test_create_and_get(self):
        redis = FakeRedis()
        sessions = SessionManager(redis, ttl=60)

        token = run(sessions.create_session(7))
        session = run(sessions.get_session(token))

        assert session["user_id"] == 7
        assert redis.ttls[f"session:{token}"] == 60

    def test_unknown_token(self):
        sessions = SessionManager(FakeRedis())

        assert run(sessions.get_session("nope")) is None
        assert run(sessions.get_session("")) is None

    def test_delete(self):
        sessions = SessionManager(FakeRedis())
        token = run(sessions.create_session(1))

        assert run(sessions.delete_session(token)) is True
        assert run(sessions.get_session(token)) is None
        assert run(sessions.delete_session(token)) is False


class TestSignIn:
    """Tests for sign_in / get_user / sign_out."""

    def _create_user(self, with_session):
        async def _create(db):
            user = User(
                email="editor@example.com",
                full_name="Editor",
                hashed_password=get_password_hash("s3cret"),
                role=UserRole.AUTHOR.value,
            )
            db.add(user)
            await db.commit()
            return user.id
        return with_session(_create)

    def test_round_trip(self, with_session):
        user_id = self._create_user(with_session)
        sessions = SessionManager(FakeRedis())

        async def _scenario(db):
            token, user = await sign_in(db, sessions, "editor@example.com", "s3cret")
            current = await get_user(db, sessions, token)
            closed = await sign_out(sessions, token)
            after = await get_user(db, sessions, token)
            return user.id, current.id, closed, after

        signed_in, current, closed, after = with_session(_scenario)

        assert signed_in == user_id
        assert current == user_id
        assert closed is True
        assert after is None

    def test_wrong_password(self, with_session):
        self._create_user(with_session)
        sessions = SessionManager(FakeRedis())

        assert with_session(lambda db: sign_in(db, sessions, "editor@example.com", "wrong")) is None

    def test_unknown_email(self, with_session):
        sessions = SessionManager(FakeRedis())

        assert with_session(lambda db: sign_in(db, sessions, "ghost@example.com", "x")) is None


class TestAdminGate:
    """Tests for the session-backed require_admin dependency."""

    def _user_session(self, with_session, fake_redis, role, password="s3cret"):
        async def _create(db):
            user = User(
                email=f"{role}@example.com",
                full_name=role.title(),
                hashed_password=get_password_hash(password),
                role=role,
            )
            db.add(user)
            await db.commit()
            return user.id
        user_id = with_session(_create)
        return run(SessionManager(fake_redis).create_session(user_id))

    def test_missing_token_rejected(self, anonymous_client):
        response = anonymous_client.get("/admin/categories")

        assert response.status_code == 401

    def test_unknown_token_rejected(self, anonymous_client):
        response = anonymous_client.get("/admin/categories", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401

    def test_user_role_rejected(self, anonymous_client, with_session, fake_redis):
        token = self._user_session(with_session, fake_redis, UserRole.USER.value)

        response = anonymous_client.get("/admin/articles/", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_author_admitted(self, anonymous_client, with_session, fake_redis):
        token = self._user_session(with_session, fake_redis, UserRole.AUTHOR.value)

        response = anonymous_client.get("/admin/categories", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["count"] == 0

    def test_login_me_logout(self, anonymous_client, with_session, fake_redis):
        self._user_session(with_session, fake_redis, UserRole.ADMIN.value, password="letmein")

        login = anonymous_client.post("/auth/login", json={"email": "admin@example.com", "password": "letmein"})
        headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

        assert login.status_code == 200
        assert anonymous_client.get("/auth/me", headers=headers).json()["role"] == "admin"
        assert anonymous_client.post("/auth/logout", headers=headers).status_code == 204
        assert anonymous_client.get("/auth/me", headers=headers).status_code == 401

    def test_login_wrong_password(self, anonymous_client, with_session, fake_redis):
        self._user_session(with_session, fake_redis, UserRole.ADMIN.value, password="letmein")

        response = anonymous_client.post("/auth/login", json={"email": "admin@example.com", "password": "nope"})

        assert response.status_code == 401
