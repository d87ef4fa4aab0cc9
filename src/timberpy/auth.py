"""Credential handling for the Timber API."""

from abc import ABC, abstractmethod


class BaseAuth(ABC):
    """Base authentication class."""

    @abstractmethod
    def get_headers(self) -> dict[str, str]:
        """Get authentication headers for requests."""
        pass


class ApiKeyAuth(BaseAuth):
    """Authentication using a tenant API key."""

    def __init__(self, api_key: str) -> None:
        """Initialize API key authentication.

        Args:
            api_key: SDK API key issued for a Timber company
        """
        self.api_key = api_key

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers."""
        return {"Authorization": f"ApiKey {self.api_key}"}


class PartnerKeyAuth(BaseAuth):
    """Authentication using a partner key.

    Only the registration endpoint accepts partner keys.
    """

    def __init__(self, partner_api_key: str) -> None:
        """Initialize partner key authentication.

        Args:
            partner_api_key: Partner API key used to register users
        """
        self.partner_api_key = partner_api_key

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers."""
        return {"Authorization": f"Bearer {self.partner_api_key}"}
