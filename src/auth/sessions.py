"""Redis-based admin session storage."""
import secrets
import time
from typing import Optional

import redis.asyncio as redis


class SessionManager:
    """Stores admin sessions in Redis HASHes keyed by an opaque token."""

    SESSION_PREFIX = "session:"

    def __init__(self, client: redis.Redis, ttl: int = 86400):
        self.redis = client
        self.ttl = ttl

    @staticmethod
    def _generate_token() -> str:
        """Generate an unguessable session token."""
        return secrets.token_urlsafe(32)

    async def create_session(self, user_id: int) -> str:
        """Create a session for the user and return its token."""
        token = self._generate_token()
        session_key = f"{self.SESSION_PREFIX}{token}"

        await self.redis.hset(session_key, mapping={
            "user_id": str(user_id),
            "created_at": str(time.time()),
        })
        await self.redis.expire(session_key, self.ttl)
        return token

    async def get_session(self, token: str) -> Optional[dict]:
        """Return the stored session, or None when it expired or never existed."""
        if not token:
            return None

        data = await self.redis.hgetall(f"{self.SESSION_PREFIX}{token}")
        if not data:
            return None

        return {
            "user_id": int(data["user_id"]),
            "created_at": float(data.get("created_at", 0)),
        }

    async def delete_session(self, token: str) -> bool:
        """Sign out: drop the session. Returns whether one existed."""
        removed = await self.redis.delete(f"{self.SESSION_PREFIX}{token}")
        return bool(removed)
