"""
FitFlow - Saved Plan Store.

Redis-backed key-value persistence for the UI: an insertion-ordered
list of saved plans and a single theme preference. The plan engine
never reads from or writes to this store.
"""

import json
import logging
import time
from typing import Any, Dict, List, Optional, Tuple

from redis import exceptions as redis_exceptions

from app.utils.errors import NotFoundError, StoreUnavailableError, ValidationError

logger = logging.getLogger(__name__)

PLAN_TYPES = ("workout", "meal")
THEMES = ("light", "dark")
DEFAULT_THEME = "dark"
DEFAULT_TITLES = {"workout": "Workout Plan", "meal": "Meal Plan"}
_TOMBSTONE = "__deleted__"


class PlanStore:
    """
    Saved plans and theme preference in Redis.

    Lazy-initializes the client so the app starts without Redis; a
    failing Redis surfaces as StoreUnavailableError.
    """

    def __init__(
        self,
        redis_url: str,
        plans_key: str = "fitflow:saved-plans",
        theme_key: str = "fitflow:theme",
        client: Any = None,
        socket_timeout: int = 5
    ):
        self._redis_url = redis_url
        self._client = client
        self._socket_timeout = socket_timeout
        self.plans_key = plans_key
        self.theme_key = theme_key

    @property
    def client(self):
        """Lazy-load Redis client."""
        if self._client is None:
            import redis.asyncio as redis
            self._client = redis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=self._socket_timeout,
                socket_timeout=self._socket_timeout,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------
    # Saved plans
    # ------------------------------------------------------------------

    async def list_plans(self) -> List[Dict[str, Any]]:
        """All saved plan records, oldest first."""
        try:
            raw = await self.client.lrange(self.plans_key, 0, -1)
        except redis_exceptions.RedisError as e:
            raise self._unavailable("list plans", e)
        return [json.loads(item) for item in raw if item != _TOMBSTONE]

    async def save_plan(
        self,
        plan_type: str,
        data: Any,
        title: Optional[str] = None
    ) -> Tuple[int, Dict[str, Any]]:
        """
        Append a plan record.

        Returns:
            Tuple[int, Dict]: (index, record)
        """
        if plan_type not in PLAN_TYPES:
            raise ValidationError(
                "Plan type must be 'workout' or 'meal'",
                detail=f"type={plan_type}"
            )
        record = {
            "type": plan_type,
            "title": title or DEFAULT_TITLES[plan_type],
            "data": data,
            "created": int(time.time() * 1000),
        }
        try:
            length = await self.client.rpush(self.plans_key, json.dumps(record))
        except redis_exceptions.RedisError as e:
            raise self._unavailable("save plan", e)
        logger.info(f"Saved {plan_type} plan '{record['title']}' at index {length - 1}")
        return length - 1, record

    async def get_plan(self, index: int) -> Dict[str, Any]:
        try:
            raw = await self.client.lindex(self.plans_key, index) if index >= 0 else None
        except redis_exceptions.RedisError as e:
            raise self._unavailable("get plan", e)
        if raw is None or raw == _TOMBSTONE:
            raise NotFoundError("Saved plan not found", detail=f"index={index}")
        return json.loads(raw)

    async def export_plan(self, index: int) -> str:
        """Pretty-printed JSON of a saved plan record."""
        record = await self.get_plan(index)
        return json.dumps(record, indent=2)

    async def delete_plan(self, index: int) -> Dict[str, Any]:
        """Remove the plan at `index`; later plans shift down by one."""
        record = await self.get_plan(index)
        try:
            pipeline = self.client.pipeline()
            pipeline.lset(self.plans_key, index, _TOMBSTONE)
            pipeline.lrem(self.plans_key, 1, _TOMBSTONE)
            await pipeline.execute()
        except redis_exceptions.RedisError as e:
            raise self._unavailable("delete plan", e)
        logger.info(f"Deleted saved plan at index {index}")
        return record

    # ------------------------------------------------------------------
    # Theme
    # ------------------------------------------------------------------

    async def get_theme(self) -> str:
        try:
            theme = await self.client.get(self.theme_key)
        except redis_exceptions.RedisError as e:
            raise self._unavailable("get theme", e)
        return theme if theme in THEMES else DEFAULT_THEME

    async def set_theme(self, theme: str) -> str:
        if theme not in THEMES:
            raise ValidationError("Theme must be 'light' or 'dark'", detail=f"theme={theme}")
        try:
            await self.client.set(self.theme_key, theme)
        except redis_exceptions.RedisError as e:
            raise self._unavailable("set theme", e)
        return theme

    async def toggle_theme(self) -> str:
        current = await self.get_theme()
        return await self.set_theme("dark" if current == "light" else "light")

    async def healthcheck(self) -> bool:
        """Check Redis connection health."""
        try:
            await self.client.ping()
            return True
        except redis_exceptions.RedisError:
            return False

    @staticmethod
    def _unavailable(action: str, error: Exception) -> StoreUnavailableError:
        logger.error(f"Plan store failed to {action}: {error}")
        return StoreUnavailableError(detail=str(error))
