import json
import logging
import threading
from typing import Dict, List, Optional

import requests

from mywx_pusher.errors import StationError
from mywx_pusher.logger import get_logger
from mywx_pusher.types import ConditionRecord, Settings


class StationClient:
    """Client for the local current conditions API of a station source"""

    def __init__(self, host: str, timeout: float = 10, settings: Optional[Settings] = None) -> None:
        self.host: str = host
        self.timeout: float = timeout
        self.logger: logging.Logger = get_logger(settings)

        # Initialize HTTP session for connection reuse
        self.session: requests.Session = requests.Session()

    @property
    def url(self) -> str:
        return f"http://{self.host}/v1/current_conditions"

    def current_conditions(self) -> List[ConditionRecord]:
        """Query the source once and return its condition records in response order"""
        self.logger.debug(f"Requesting current conditions from {self.url}")
        response = self.session.get(self.url, timeout=self.timeout)
        if not response.ok:
            raise StationError(self.host, f"HTTP {response.status_code} {response.reason}")

        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise StationError(self.host, f"Invalid JSON response: {e}")

        if not isinstance(payload, dict):
            raise StationError(self.host, "Unexpected response shape")
        if payload.get("error"):
            raise StationError(self.host, f"Station reported an error: {payload['error']}")

        data = payload.get("data") or {}
        conditions = data.get("conditions") if isinstance(data, dict) else None
        if not isinstance(conditions, list):
            raise StationError(self.host, "Response has no conditions")

        self.logger.debug(f"Received {len(conditions)} condition records from {self.host}")
        return conditions

    def close(self) -> None:
        self.session.close()


class ClientCache:
    """Creates one StationClient per host on first use and hands out the same one afterwards"""

    def __init__(self, timeout: float = 10, settings: Optional[Settings] = None) -> None:
        self.timeout: float = timeout
        self.settings: Optional[Settings] = settings
        self._clients: Dict[str, StationClient] = {}
        self._lock: threading.Lock = threading.Lock()

    def get(self, host: str) -> StationClient:
        with self._lock:
            client = self._clients.get(host)
            if client is None:
                client = StationClient(host, timeout=self.timeout, settings=self.settings)
                self._clients[host] = client
            return client

    def __len__(self) -> int:
        return len(self._clients)

    def close(self) -> None:
        with self._lock:
            for client in self._clients.values():
                client.close()
            self._clients.clear()
