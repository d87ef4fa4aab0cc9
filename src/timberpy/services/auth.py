"""User registration."""

import httpx

from timberpy.models import RegisterUserRequest
from timberpy.services.base import BaseService, dump_json


class AuthService(BaseService):
    """Service for registering users.

    Bound to the registration transport, which authenticates with the
    partner key when the client was given one.
    """

    async def create(self, data: RegisterUserRequest) -> httpx.Response:
        """Register a user and their company.

        Args:
            data: Registration payload

        Returns:
            Raw response holding the created user and their SDK API key
        """
        return await self.transport.request(
            "POST", "/auth/register", json=dump_json(data)
        )
