"""
SheetsProjects API - Client Google Docs

Récupère un document brut via l'API REST Google Docs (documents.get)
authentifié par le service account Firebase.

- google-auth: service account credentials + OAuth token refresh
- httpx: the HTTP call itself (async)

The rest of the app only depends on DocumentFetcher (fetch_by_id), so the
policy service can be driven by any fetcher in tests.
"""

import asyncio
import logging
from typing import Any, Dict, Optional, Protocol, Sequence
from urllib.parse import quote

import httpx
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from config import GOOGLE_DOCS_API_URL, GOOGLE_DOCS_SCOPES

logger = logging.getLogger("google_docs")


class DocumentFetcher(Protocol):
    async def fetch_by_id(self, document_id: str) -> Dict[str, Any]:
        ...


class GoogleDocsError(Exception):
    """Erreur renvoyée par l'API Google Docs (404, 403, ...)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def build_credentials(service_account_info: dict, scopes: Sequence[str] = GOOGLE_DOCS_SCOPES):
    """
    Service account credentials (read-only scopes).
    Raises ValueError when the FIREBASE_* variables are incomplete.
    """
    return service_account.Credentials.from_service_account_info(
        service_account_info, scopes=list(scopes)
    )


def _google_error_message(response: httpx.Response) -> str:
    """Extract {"error": {"message": ...}} from a Google API error body"""
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        message = data["error"].get("message")
        if message:
            return message

    return f"Google Docs API error ({response.status_code})"


class GoogleDocsClient:
    """DocumentFetcher backed by the Google Docs REST API"""

    def __init__(
        self,
        service_account_info: Optional[dict] = None,
        credentials=None,
        scopes: Sequence[str] = GOOGLE_DOCS_SCOPES,
        base_url: str = GOOGLE_DOCS_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.service_account_info = service_account_info
        self.scopes = scopes
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self._credentials = credentials
        self._refresh_lock = asyncio.Lock()

    def _get_credentials(self):
        # Built on first use so that a missing config fails the request, not the startup
        if self._credentials is None:
            self._credentials = build_credentials(self.service_account_info or {}, self.scopes)
        return self._credentials

    async def get_access_token(self) -> str:
        credentials = self._get_credentials()

        async with self._refresh_lock:
            if not credentials.valid:
                # google-auth transport is blocking
                await asyncio.to_thread(credentials.refresh, Request())
                logger.info("Google access token refreshed")

        return credentials.token

    async def fetch_by_id(self, document_id: str) -> Dict[str, Any]:
        """GET /documents/{documentId} -> raw JSON document"""
        token = await self.get_access_token()
        url = f"{self.base_url}/documents/{quote(document_id, safe='')}"

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as http_client:
            response = await http_client.get(
                url,
                headers={
                    "Authorization": f"Bearer {token}",
                    "Accept": "application/json",
                }
            )

        if response.status_code != 200:
            message = _google_error_message(response)
            logger.error(f"Google Docs API: status={response.status_code}, document={document_id}, message={message}")
            raise GoogleDocsError(message, status_code=response.status_code)

        return response.json()
