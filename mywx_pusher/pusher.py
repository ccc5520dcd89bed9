import json
import logging
from typing import Dict, Optional
from urllib.parse import quote, urljoin

import requests

from mywx_pusher.config import DEFAULT_BASE_URI, DEFAULT_REQUEST_TIMEOUT
from mywx_pusher.errors import PushError
from mywx_pusher.logger import get_logger
from mywx_pusher.types import Observation, Settings


class Pusher:
    """Submits observations to the remote ingestion endpoint, one request per call"""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None) -> None:
        self.settings: Settings = settings
        self.logger: logging.Logger = get_logger(settings)
        self.base_uri: str = settings.get("base_uri") or DEFAULT_BASE_URI
        self.station_slug: str = settings["station_slug"]
        self.secret_key: str = settings["secret_key"]
        self.timeout: float = settings.get("request_timeout") or DEFAULT_REQUEST_TIMEOUT
        self.session: requests.Session = session or requests.Session()

    def push_url(self) -> str:
        base: str = self.base_uri if self.base_uri.endswith("/") else self.base_uri + "/"
        return urljoin(base, f"stations/{quote(self.station_slug, safe='')}/push_data")

    def build_payload(self, observation: Observation) -> Dict[str, str]:
        return {
            "secret_key": self.secret_key,
            "data": json.dumps(observation),
        }

    def push(self, observation: Observation) -> None:
        """
        POST the observation as a form-encoded body.

        Returns on HTTP 200; raises PushError with the status code, status
        text and raw body for anything else. Transport errors from requests
        propagate unchanged.
        """
        url: str = self.push_url()
        self.logger.debug(f"Pushing {len(observation)} fields to {url}")
        response = self.session.post(url, data=self.build_payload(observation), timeout=self.timeout)

        if response.status_code != 200:
            raise PushError(response.status_code, response.reason, response.text)

        self.logger.debug("Push accepted")

    def close(self) -> None:
        self.session.close()
