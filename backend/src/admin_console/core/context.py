"""Connection context shared by the remote admin API clients."""

from typing import Dict, Optional

import httpx
from pydantic import BaseModel, ConfigDict

from admin_console.core.config import Settings


class ApiContext(BaseModel):
    """Base URL and credentials for one remote admin API.

    Passed explicitly into every client constructor so that separate
    controllers can talk to separate backends (or fakes) side by side.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    token: Optional[str] = None
    timeout: float = 30.0
    verify_ssl: bool = True
    page_index_base: int = 1

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApiContext":
        """Build a context from the application settings."""
        return cls(
            base_url=settings.admin_api_url,
            token=settings.admin_api_token,
            timeout=settings.admin_api_timeout,
            verify_ssl=settings.admin_api_verify_ssl,
            page_index_base=settings.api_page_index_base,
        )

    @property
    def headers(self) -> Dict[str, str]:
        """Request headers for this context."""
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def create_client(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
        """Create an httpx client with the context defaults."""
        return httpx.AsyncClient(
            base_url=self.base_url.rstrip("/"),
            headers=self.headers,
            timeout=self.timeout,
            verify=self.verify_ssl,
            transport=transport,
        )
