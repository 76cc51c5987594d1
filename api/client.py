"""
Data client for the league stats engine

aiohttp-based HTTP client for the static JSON data files and the scoresheet
CSV exports. Provides session reuse, error mapping, and session management.
"""
import aiohttp
import logging
from typing import Optional, Any
from urllib.parse import urljoin
from contextlib import asynccontextmanager

from config import get_config
from exceptions import APIException

logger = logging.getLogger(f'{__name__}.DataClient')


class DataClient:
    """
    Async HTTP client for league data files.

    Features:
    - One pooled session per client
    - Relative paths resolved against the data base URL
    - Absolute URLs (scoresheet exports) fetched as-is
    - HTTP and network failures raised as APIException
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize data client with configuration.

        Args:
            base_url: Override default data URL from config
            timeout: Override default request timeout (seconds)

        Raises:
            ValueError: If no base URL is configured
        """
        config = get_config()
        self.base_url = base_url or config.data_base_url
        self.timeout = timeout or config.default_timeout
        self._session: Optional[aiohttp.ClientSession] = None

        if not self.base_url:
            raise ValueError("DATA_BASE_URL must be configured")

        logger.debug(f"DataClient initialized with base_url: {self.base_url}")

    def _build_url(self, path: str) -> str:
        """
        Build complete URL for a data path.

        Args:
            path: Path relative to the data root, or a full URL

        Returns:
            Complete URL for the request
        """
        if path.startswith(('http://', 'https://')):
            return path
        return urljoin(self.base_url.rstrip('/') + '/', path.lstrip('/'))

    async def _ensure_session(self) -> None:
        """Ensure aiohttp session exists and is not closed."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=20,
                limit_per_host=10,
                ttl_dns_cache=300,
                use_dns_cache=True
            )

            timeout = aiohttp.ClientTimeout(total=self.timeout)

            self._session = aiohttp.ClientSession(
                headers={'User-Agent': 'league-stats-engine/1.0'},
                connector=connector,
                timeout=timeout
            )

            logger.debug("Created new aiohttp session")

    async def _raise_for_status(self, response: aiohttp.ClientResponse, url: str) -> None:
        if response.status >= 400:
            error_text = await response.text()
            logger.error(f"Request error {response.status}: {url} - {error_text[:200]}")
            raise APIException(f"Request failed with status {response.status}: {url}", status=response.status)

    async def get_json(self, path: str) -> Any:
        """
        Fetch and decode a JSON data file.

        Args:
            path: Data path (e.g. 'seasons/2025_summary.json') or full URL

        Returns:
            Decoded JSON

        Raises:
            APIException: For HTTP errors, network issues, or invalid JSON
        """
        url = self._build_url(path)

        await self._ensure_session()

        try:
            logger.debug(f"GET JSON: {url}")

            async with self._session.get(url) as response:
                await self._raise_for_status(response, url)
                # Static hosts do not always label .json files correctly
                data = await response.json(content_type=None)

                data_str = str(data)
                log_data = data_str[:1200] + "..." if len(data_str) > 1200 else data_str
                logger.debug(f"Response: {log_data}")

                return data

        except APIException:
            raise
        except aiohttp.ClientError as e:
            logger.error(f"HTTP client error for {url}: {e}")
            raise APIException(f"Network error: {e}")
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise APIException(f"Invalid JSON from {url}: {e}")

    async def get_text(self, path: str) -> str:
        """
        Fetch a text resource such as a CSV export.

        Args:
            path: Data path or full URL

        Returns:
            Response body as text

        Raises:
            APIException: For HTTP errors or network issues
        """
        url = self._build_url(path)

        await self._ensure_session()

        try:
            logger.debug(f"GET text: {url}")

            async with self._session.get(url) as response:
                await self._raise_for_status(response, url)
                text = await response.text()
                logger.debug(f"Received {len(text)} characters from {url}")
                return text

        except APIException:
            raise
        except aiohttp.ClientError as e:
            logger.error(f"HTTP client error for {url}: {e}")
            raise APIException(f"Network error: {e}")

    async def close(self) -> None:
        """Close the HTTP session and clean up resources."""
        if self._session and not self._session.closed:
            await self._session.close()
            logger.debug("Closed aiohttp session")

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit with cleanup."""
        await self.close()


@asynccontextmanager
async def get_data_client() -> DataClient:
    """
    Get data client as async context manager.

    Usage:
        async with get_data_client() as client:
            data = await client.get_json('teams.json')
    """
    client = DataClient()
    try:
        yield client
    finally:
        await client.close()


# Global data client instance for reuse
_global_client: Optional[DataClient] = None


async def get_global_client() -> DataClient:
    """
    Get global data client instance with automatic session management.

    Returns:
        Shared DataClient instance
    """
    global _global_client
    if _global_client is None:
        _global_client = DataClient()

    await _global_client._ensure_session()
    return _global_client


async def cleanup_global_client() -> None:
    """Clean up global data client. Call during shutdown."""
    global _global_client
    if _global_client:
        await _global_client.close()
        _global_client = None
