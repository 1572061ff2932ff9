"""
Base client class for all HTTP API integrations.
Provides common functionality for API requests, error handling, and logging.
"""

from typing import Dict, Any, Optional
import requests
import logging

logger = logging.getLogger(__name__)

SENSITIVE_PARAM_HINTS = ("api_key", "auth_token", "key", "token", "secret")


class APIError(Exception):
    """Raised when an API call fails."""

    def __init__(self, message: str, status_code: Optional[int] = None, response_text: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class BaseAPIClient:
    """Base class for all API clients."""

    def __init__(self, api_key: Optional[str] = None, base_url: str = "", timeout: int = 10):
        """
        Initialize the base API client.

        Args:
            api_key: API key for authentication (if required)
            base_url: Base URL for the API
            timeout: Default request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = requests.Session()

    @property
    def api_name(self) -> str:
        return self.__class__.__name__.replace("Client", "")

    def _get_headers(self) -> Dict[str, str]:
        """
        Get headers for API requests.
        Can be overridden by subclasses for custom authentication.

        Returns:
            dict: Headers dictionary
        """
        headers = {
            "Accept": "application/json",
            "User-Agent": "Crypto-Thread-Bot/1.0"
        }
        return headers

    def _redact(self, text: str) -> str:
        """Text as written to logs and errors. Subclasses mask secrets embedded in URLs."""
        return text

    def _display_url(self, url: str) -> str:
        return self._redact(url)

    @staticmethod
    def _mask_params(params: Dict[str, Any]) -> Dict[str, Any]:
        return {
            k: '***' if any(sensitive in k.lower() for sensitive in SENSITIVE_PARAM_HINTS)
            else v
            for k, v in params.items()
        }

    def _make_request(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        method: str = "GET",
        timeout: Optional[int] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Make an API request with error handling.

        Args:
            endpoint: API endpoint (without base URL)
            params: Query parameters (GET) or JSON body (POST)
            method: HTTP method (GET, POST)
            timeout: Request timeout in seconds
            data: Form fields for multipart POST requests
            files: Files for multipart POST requests

        Returns:
            dict: API response data

        Raises:
            APIError: If the request fails
        """
        api_name = self.api_name
        method_upper = method.upper()
        url = f"{self.base_url}{endpoint}"
        display_url = self._display_url(url)
        headers = self._get_headers()
        timeout = timeout or self.timeout

        try:
            logger.info(f"📡 [{api_name}] Calling API: {method_upper} {display_url}")
            if params:
                logger.info(f"   Parameters: {self._mask_params(params)}")

            if method_upper == "GET":
                response = self.session.get(
                    url,
                    params=params,
                    headers=headers,
                    timeout=timeout
                )
            elif method_upper == "POST":
                if files is not None:
                    response = self.session.post(
                        url,
                        data=data,
                        files=files,
                        headers=headers,
                        timeout=timeout
                    )
                else:
                    response = self.session.post(
                        url,
                        json=params,
                        headers=headers,
                        timeout=timeout
                    )
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")

            response.raise_for_status()

            result = response.json()
            logger.info(f"✅ [{api_name}] Success")
            return result

        except requests.exceptions.Timeout:
            logger.error(f"❌ [{api_name}] Request timeout for {display_url}")
            raise APIError(f"Request timeout: {api_name}") from None

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            error_text = self._redact(e.response.text if e.response is not None else str(e))

            logger.error(f"❌ [{api_name}] HTTP error {status_code} for {display_url}")

            # Don't carry full HTML error pages in the exception
            if len(error_text) > 500 or '<!DOCTYPE html>' in error_text:
                error_text = f"{error_text[:200]}... (truncated HTML response)"

            raise APIError(
                f"{api_name} API error ({status_code}): {error_text}",
                status_code=status_code,
                response_text=error_text,
            ) from None

        except requests.exceptions.RequestException as e:
            # requests repeats the full URL in its messages
            error_text = self._redact(str(e))
            logger.error(f"❌ [{api_name}] Request error for {display_url}: {error_text}")
            raise APIError(f"Request failed: {error_text}") from None

        except ValueError as e:
            # Unsupported method or a body that is not JSON
            error_text = self._redact(str(e))
            logger.error(f"❌ [{api_name}] Invalid request or response for {display_url}: {error_text}")
            raise APIError(f"{api_name} invalid request or response: {error_text}") from None

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
