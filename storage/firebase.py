"""
Firebase Realtime Database client (REST API over aiohttp).

Records live under one namespace, one child per record id:
    GET    {url}/{namespace}.json         - all records
    PUT    {url}/{namespace}/{id}.json    - create/replace record
    DELETE {url}/{namespace}/{id}.json    - remove record
"""
import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import aiohttp
from firebase_admin import credentials

from core.constants import DEFAULT_NAMESPACE
from core.errors import StoreError

logger = logging.getLogger(__name__)

TOKEN_REFRESH_MARGIN = timedelta(minutes=5)


class FirebaseStore:
    """
    Key-addressed record store.

    Authenticates with an OAuth2 access token minted from a service
    account when one is configured; without credentials requests go out
    unauthenticated (local emulator, tests).
    """

    def __init__(
        self,
        database_url: str,
        namespace: str = DEFAULT_NAMESPACE,
        credential: Optional[credentials.Base] = None,
        timeout: Optional[float] = None
    ):
        self.database_url = database_url.rstrip('/')
        self.namespace = namespace.strip('/')
        self._credential = credential
        self._token: Optional[credentials.AccessTokenInfo] = None
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @classmethod
    def from_settings(cls, settings) -> 'FirebaseStore':
        """Create store from Settings (service account file is optional)."""
        credential = None
        if settings.credentials_file:
            credential = credentials.Certificate(settings.credentials_file)
            logger.info(f"Firebase credentials: {settings.credentials_file}")
        else:
            logger.warning("No Firebase credentials configured, using unauthenticated requests")
        return cls(
            database_url=settings.database_url,
            namespace=settings.namespace,
            credential=credential,
            timeout=settings.store_timeout
        )

    def _url(self, key: Optional[str] = None) -> str:
        path = self.namespace if key is None else f"{self.namespace}/{key}"
        return f"{self.database_url}/{path}.json"

    async def _auth_params(self) -> Dict[str, str]:
        if not self._credential:
            return {}
        # Access tokens live ~1h; refresh a little before expiry
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        if self._token is None or not self._token.expiry or self._token.expiry - TOKEN_REFRESH_MARGIN <= now:
            try:
                # google-auth refreshes over blocking HTTP
                self._token = await asyncio.to_thread(self._credential.get_access_token)
            except Exception as e:
                raise StoreError(f"Failed to obtain Firebase access token: {e}") from e
            logger.debug("Firebase access token refreshed")
        return {'access_token': self._token.access_token}

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def _request(self, method: str, key: Optional[str] = None, payload: Any = None) -> Any:
        url = self._url(key)
        session = await self._get_session()
        try:
            async with session.request(method, url, params=await self._auth_params(), json=payload) as response:
                if not response.ok:
                    body = await response.text()
                    raise StoreError(f"{method} {url}: HTTP {response.status} {body[:200]}")
                return await response.json(content_type=None)
        except aiohttp.ClientError as e:
            raise StoreError(f"{method} {url}: {e}") from e
        except asyncio.TimeoutError as e:
            raise StoreError(f"{method} {url}: timeout") from e

    async def get_all(self) -> Dict[str, Dict[str, Any]]:
        """Read every record in the namespace (empty dict if none)."""
        data = await self._request('GET')
        if not isinstance(data, dict):
            return {}
        return data

    async def set(self, key: str, value: Dict[str, Any]) -> None:
        """Write full record at key."""
        await self._request('PUT', key, value)
        logger.debug(f"Stored {self.namespace}/{key}")

    async def delete(self, key: str) -> None:
        """Remove record at key."""
        await self._request('DELETE', key)
        logger.debug(f"Deleted {self.namespace}/{key}")

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
