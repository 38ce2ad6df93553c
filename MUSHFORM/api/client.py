"""HTTP client for the mushroom prediction service.

Each call makes exactly one attempt. Any failure (connection, non-2xx status,
undecodable body) is logged and the original requests exception is re-raised.
"""
from typing import IO, Any, Dict, Optional, Union

import requests

from MUSHFORM.logger import logger
from MUSHFORM.params import API_ROUTES, API_TIMEOUT, API_URL, parse_timeout, resolve_routes


class ApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        routes: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or API_URL).rstrip("/")
        self.routes_variant = routes or API_ROUTES
        self.routes = resolve_routes(self.routes_variant)
        self.timeout = timeout if timeout is not None else parse_timeout(API_TIMEOUT)
        if session is None:
            # a caller's session keeps its own headers
            session = requests.Session()
            session.headers.update({"Content-Type": "application/json"})
        self.session = session

    def url(self, route: str) -> str:
        return f"{self.base_url}{self.routes[route]}"

    def predict(self, features: Dict[str, str]) -> Any:
        """POST the full feature set as JSON and return the decoded body."""
        try:
            r = self.session.post(self.url("predict"), json=features, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as e:
            logger.error("Error predicting mushroom: %s", e)
            raise

    def analyze_image(
        self,
        image: Union[bytes, IO[bytes]],
        filename: str = "upload.jpg",
        content_type: str = "image/jpeg",
    ) -> Any:
        """POST an image as multipart form data under the `image` field."""
        files = {"image": (filename, image, content_type)}
        try:
            # requests has to write its own multipart boundary header
            r = self.session.post(
                self.url("analyze_image"),
                files=files,
                headers={"Content-Type": None},
                timeout=self.timeout,
            )
            r.raise_for_status()
            return r.json()
        except requests.RequestException as e:
            logger.error("Error analyzing image: %s", e)
            raise

    def check_health(self) -> Any:
        try:
            r = self.session.get(self.url("health"), timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as e:
            logger.error("Error checking health: %s", e)
            raise
