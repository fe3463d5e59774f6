"""
Kroger API client for product image lookup.

Kroger API Documentation: https://developer.kroger.com/

Authentication: OAuth2 Client Credentials flow
- Obtain access token using client_id and client_secret
- Token is valid for 30 minutes

Endpoints used:
- POST /connect/oauth2/token - Get access token
- GET /products - Search products by term
"""

import base64
import logging
import time
from typing import Optional

import httpx

from config.settings import Settings, get_settings
from services.grocery_apis.base import GroceryAPIBase, ImageLookupError

logger = logging.getLogger(__name__)


class KrogerAPI(GroceryAPIBase):
    """Kroger API client for product images."""

    BASE_URL = "https://api.kroger.com/v1"
    TOKEN_URL = "https://api.kroger.com/v1/connect/oauth2/token"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._access_token: Optional[str] = None
        self._token_expires_at: float = 0

    @property
    def store_name(self) -> str:
        return "Kroger"

    def is_configured(self) -> bool:
        """Check if Kroger API credentials are configured."""
        return bool(
            self.settings.kroger_client_id and
            self.settings.kroger_client_secret
        )

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.settings.image_search_timeout,
            transport=self._transport,
        )

    async def _get_access_token(self, client: httpx.AsyncClient) -> str:
        """
        Get a valid access token, refreshing if expired.

        Uses OAuth2 Client Credentials flow.
        """
        # Return cached token if still valid (with 60s buffer)
        if self._access_token and time.time() < (self._token_expires_at - 60):
            return self._access_token

        if not self.is_configured():
            raise ImageLookupError("Kroger API credentials not configured")

        # Strip whitespace from credentials
        client_id = self.settings.kroger_client_id.strip()
        client_secret = self.settings.kroger_client_secret.strip()
        credentials = f"{client_id}:{client_secret}"
        encoded_credentials = base64.b64encode(credentials.encode()).decode()

        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Authorization": f"Basic {encoded_credentials}"
        }
        data = {
            "grant_type": "client_credentials",
            "scope": "product.compact"
        }

        try:
            response = await client.post(self.TOKEN_URL, headers=headers, data=data)
            response.raise_for_status()
            token_data = response.json()
            access_token = token_data["access_token"]
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 401:
                message = "Invalid Kroger API credentials"
            else:
                message = f"Kroger auth failed (HTTP {status})"
            logger.error(f"{message} - {e.response.text}")
            raise ImageLookupError(message) from e
        except httpx.HTTPError as e:
            raise ImageLookupError(f"Kroger auth request failed: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise ImageLookupError("Kroger auth returned an unexpected response") from e

        self._access_token = access_token
        # Token expires_in is in seconds (typically 1800 = 30 min)
        expires_in = token_data.get("expires_in", 1800)
        if not isinstance(expires_in, (int, float)):
            expires_in = 1800
        self._token_expires_at = time.time() + expires_in
        logger.info("Kroger access token obtained successfully")
        return self._access_token

    async def search_image(self, term: str) -> Optional[str]:
        """
        Search Kroger products for a term and return the first front image.

        Args:
            term: The item name to search for

        Returns:
            Thumbnail URL of the first product with a front image, or None
        """
        async with self._client() as client:
            token = await self._get_access_token(client)

            headers = {
                "Accept": "application/json",
                "Authorization": f"Bearer {token}"
            }
            params = {
                "filter.term": term,
                "filter.limit": 5
            }
            if self.settings.kroger_location_id:
                params["filter.locationId"] = self.settings.kroger_location_id

            try:
                response = await client.get(
                    f"{self.BASE_URL}/products",
                    headers=headers,
                    params=params
                )
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPStatusError as e:
                if e.response.status_code == 401:
                    # Token revoked early; refetch on the next search
                    self._access_token = None
                raise ImageLookupError(f"Kroger API error: {e.response.status_code}") from e
            except httpx.HTTPError as e:
                raise ImageLookupError(f"Kroger search failed: {e}") from e
            except ValueError as e:
                raise ImageLookupError("Kroger search returned invalid JSON") from e

        products = data.get("data", []) if isinstance(data, dict) else None
        if not isinstance(products, list):
            raise ImageLookupError("Kroger search returned an unexpected response")

        for product in products:
            image_url = self._parse_image_url(product)
            if image_url:
                return image_url

        logger.debug(f"No Kroger image found for '{term}'")
        return None

    @staticmethod
    def _parse_image_url(product: dict) -> Optional[str]:
        """
        Pick the front-perspective image of a product, preferring the thumbnail.

        Malformed entries are skipped rather than failing the whole search.
        """
        if not isinstance(product, dict):
            return None

        for image in _as_list(product.get("images")):
            if not isinstance(image, dict) or image.get("perspective") != "front":
                continue
            sizes = [s for s in _as_list(image.get("sizes")) if isinstance(s, dict)]
            for size_info in sizes:
                if size_info.get("size") == "thumbnail" and _is_url(size_info.get("url")):
                    return size_info["url"]
            # Fall back to whatever size is available
            for size_info in sizes:
                if _is_url(size_info.get("url")):
                    return size_info["url"]
        return None


def _as_list(value) -> list:
    return value if isinstance(value, list) else []


def _is_url(value) -> bool:
    return isinstance(value, str) and bool(value)
