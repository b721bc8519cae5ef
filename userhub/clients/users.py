"""
Users API Client
Thin async wrapper around the remote users collection endpoint
"""

import httpx
from typing import Optional, Any, Mapping
from userhub.core.config import settings
from userhub.core.exceptions import RequestFailed
import logging

logger = logging.getLogger(__name__)

USERS_PATH = "/api/users"


class UsersClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url
        self.transport = transport

    @property
    def base_url(self) -> str:
        """Explicit base URL, else the current API_BASE_URL setting"""
        return self._base_url or settings.API_BASE_URL

    def _client(self) -> httpx.AsyncClient:
        # No timeout
        return httpx.AsyncClient(
            base_url=self.base_url,
            transport=self.transport,
            timeout=None,
        )

    async def list_users(self, token: str) -> Any:
        """
        Fetch the users collection, authenticated with a bearer token.

        Raises RequestFailed on a non-success status. Transport errors
        from httpx propagate unchanged.
        """
        async with self._client() as client:
            response = await client.get(
                USERS_PATH,
                headers={
                    "Authorization": f"Bearer {token}",
                    "Content-Type": "application/json"
                }
            )

            if not response.is_success:
                logger.error(f"Failed to fetch users: GET {response.url} -> {response.status_code}")
                raise RequestFailed("Failed to fetch users")

            logger.debug(f"Fetched users: GET {response.url} -> {response.status_code}")
            return response.json()

    async def create_user(self, user_data: Mapping[str, Any]) -> Any:
        """
        Create a user from a JSON-serializable mapping.

        The payload is sent verbatim and no credential is attached.
        """
        async with self._client() as client:
            response = await client.post(
                USERS_PATH,
                json=user_data,
                headers={"Content-Type": "application/json"}
            )

            if not response.is_success:
                logger.error(f"Failed to create user: POST {response.url} -> {response.status_code}")
                raise RequestFailed("Failed to create user")

            logger.debug(f"Created user: POST {response.url} -> {response.status_code}")
            return response.json()


users_client = UsersClient()


async def list_users(token: str) -> Any:
    return await users_client.list_users(token)


async def create_user(user_data: Mapping[str, Any]) -> Any:
    return await users_client.create_user(user_data)
