"""
Remote avatar API store.
Delegates every operation to another avatar service speaking the same
REST contract and envelope format.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from app.core.exceptions import (
    AvatarAlreadyExistsException,
    AvatarNotFoundException,
    StoreException,
)
from app.schemas.avatar import AvatarData, AvatarRecord
from app.stores.base import AvatarStore

logger = logging.getLogger(__name__)


class HttpAvatarStore(AvatarStore):
    """
    Avatar store backed by a remote avatar API.

    Configured via AVATAR_API_* environment variables. The remote service
    owns the records, so atomicity and the soft-delete policy are its
    concern.
    """

    name = "http"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the remote store.

        Args:
            base_url: Remote API root, e.g. "http://avatars.internal/api"
            timeout: Request timeout in seconds
            client: Pre-built client (tests pass one with a mock transport)
        """
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
        )

    async def create(self, user_id: str, data: AvatarData) -> AvatarRecord:
        body = {"adUserId": user_id, **self._body(data)}
        response = await self._request("POST", "/avatar", json=body)

        if response.status_code == 400 and "already exists" in self._message(response).lower():
            raise AvatarAlreadyExistsException(user_id)
        self._expect(response, 201)

        logger.info(f"Remote avatar created for user: {user_id}")
        return self._record(response)

    async def get(self, user_id: str) -> AvatarRecord | None:
        response = await self._request("GET", self._path(user_id))

        if response.status_code == 404:
            return None
        self._expect(response, 200)

        logger.info(f"Remote avatar fetched for user: {user_id}")
        return self._record(response)

    async def update(self, user_id: str, data: AvatarData) -> AvatarRecord:
        response = await self._request("PUT", self._path(user_id), json=self._body(data))

        if response.status_code == 404:
            raise AvatarNotFoundException(user_id)
        self._expect(response, 200)

        logger.info(f"Remote avatar updated for user: {user_id}")
        return self._record(response)

    async def delete(self, user_id: str) -> bool:
        response = await self._request("DELETE", self._path(user_id))

        if response.status_code == 404:
            return False
        self._expect(response, 200)

        logger.info(f"Remote avatar deleted for user: {user_id}")
        return True

    async def restore(self, user_id: str, data: AvatarData) -> AvatarRecord:
        # The remote contract has no restore route; a create against a
        # service hiding inactive avatars reactivates the record there.
        return await self.create(user_id, data)

    async def close(self) -> None:
        await self.client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Remote avatar API request failed: {method} {path}: {e}")
            raise StoreException(
                message=f"Avatar API unavailable: {e}",
                details={"url": f"{self.base_url}{path}"},
            ) from e

    def _expect(self, response: httpx.Response, status_code: int) -> None:
        if response.status_code != status_code:
            logger.error(
                f"Unexpected status {response.status_code} from avatar API: "
                f"{response.text[:500]}"
            )
            raise StoreException(
                message=f"Avatar API error: {self._message(response) or response.status_code}",
                details={"status": response.status_code},
            )

    @staticmethod
    def _path(user_id: str) -> str:
        return f"/avatar/{quote(user_id, safe='')}"

    @staticmethod
    def _body(data: AvatarData) -> dict[str, Any]:
        body: dict[str, Any] = {"avatar": data.avatar_type.value}
        if data.avatar_url:
            body["avatarUrl"] = data.avatar_url
        if data.gender:
            body["gender"] = data.gender.value
        return body

    @staticmethod
    def _message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return ""
        if isinstance(payload, dict):
            return str(payload.get("message") or "")
        return ""

    @staticmethod
    def _record(response: httpx.Response) -> AvatarRecord:
        try:
            return AvatarRecord.model_validate(response.json()["data"])
        except (ValueError, KeyError, TypeError) as e:
            raise StoreException(message=f"Malformed avatar API response: {e}") from e
