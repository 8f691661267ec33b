"""httpx transport shared by the API clients, with tenacity retries."""

from typing import Dict, Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_fixed
)

from ..utils.config import get_config
from ..utils.logger import get_api_logger

USER_AGENT = "Stockboard/1.0"
RETRYABLE_ERRORS = (httpx.TimeoutException, httpx.NetworkError)


class BaseClient:
    """
    Thin wrapper around ``httpx.Client``.

    Requests that time out or fail at the network level are retried
    according to the ``api`` section of the config. HTTP error statuses
    are returned to the caller untouched.
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.Client] = None
    ):
        """
        Args:
            base_url: Root URL every request path is joined to
            headers: Extra headers sent with every request
            client: Ready-made client, e.g. a FastAPI TestClient in tests
        """
        self.base_url = base_url.rstrip("/")
        self.config = get_config()
        self.logger = get_api_logger()

        request_headers = {"Content-Type": "application/json", "User-Agent": USER_AGENT}
        request_headers.update(headers or {})

        if client is None:
            client = httpx.Client(
                base_url=self.base_url,
                headers=request_headers,
                timeout=self.config.api.timeout,
                follow_redirects=True
            )
        else:
            client.headers.update(request_headers)
        self.client = client

    def _wait_strategy(self):
        api = self.config.api
        if api.exponential_backoff:
            return wait_exponential(multiplier=api.retry_delay)
        return wait_fixed(api.retry_delay)

    def _make_request_with_retry(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Send one request, retrying transport failures; the last one is re-raised."""

        @retry(
            stop=stop_after_attempt(self.config.api.max_retries),
            wait=self._wait_strategy(),
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            reraise=True
        )
        def _send() -> httpx.Response:
            self.logger.debug(f"{method} {self.base_url}{url}")
            response = self.client.request(method, url, **kwargs)
            self.logger.debug(f"{method} {url} -> {response.status_code}")
            return response

        return _send()

    def post(self, endpoint: str, **kwargs) -> httpx.Response:
        return self._make_request_with_retry("POST", endpoint, **kwargs)

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
