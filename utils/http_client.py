"""HTTP client with a per-request timeout. One attempt per call."""
import time
import logging
import requests

logger = logging.getLogger("ratiopulse.http")


class APIError(Exception):
    """API request error with status code and response body."""
    def __init__(self, message, status_code=None, response_body=None, source=None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
        self.source = source


class HTTPClient:
    """Thin requests wrapper. Every failure surfaces as APIError."""

    def __init__(self, base_url, timeout=30, user_agent="RatioPulse/1.0", source=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.source = source
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})

    def get(self, path="", params=None):
        """Make a GET request and return the decoded JSON body."""
        return self._request("GET", path, params)

    def _request(self, method, path, params=None):
        url = f"{self.base_url}/{path.lstrip('/')}" if path else self.base_url

        try:
            start = time.time()
            resp = self.session.request(method, url, params=params, timeout=self.timeout)
            latency = int((time.time() - start) * 1000)
            logger.debug(f"{method} {url} → {resp.status_code} ({latency}ms)")
        except requests.exceptions.RequestException as e:
            logger.debug(f"Request error for {url}: {e}")
            raise APIError(f"Request to {url} failed: {e}", source=self.source) from e

        if resp.status_code != 200:
            raise APIError(
                f"HTTP {resp.status_code} from {url}",
                status_code=resp.status_code,
                response_body=resp.text,
                source=self.source,
            )

        try:
            return resp.json()
        except ValueError:
            raise APIError(
                f"Invalid JSON from {url}",
                status_code=resp.status_code,
                response_body=resp.text,
                source=self.source,
            )

    def close(self):
        self.session.close()
