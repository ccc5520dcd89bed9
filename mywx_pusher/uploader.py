import logging
import signal
import time
import traceback
from typing import Any, List, Optional

import schedule

from mywx_pusher.config import DEFAULT_INTERVAL, DEFAULT_REQUEST_TIMEOUT
from mywx_pusher.errors import CollectionError, PushError
from mywx_pusher.logger import get_logger
from mywx_pusher.normalizer import build_observation, count_variables
from mywx_pusher.pusher import Pusher
from mywx_pusher.station import ClientCache
from mywx_pusher.types import ConditionRecord, Observation, Settings


class WeatherUploader:
    def __init__(self, settings: Settings) -> None:
        self.settings: Settings = settings

        self.logger: logging.Logger = get_logger(self.settings)
        self.logger.info("Weather uploader initializing")

        self.running: bool = False
        self.interval: float = self.settings.get("interval") or DEFAULT_INTERVAL

        # Station clients are created on first use, one per host
        self.clients: ClientCache = ClientCache(
            timeout=self.settings.get("request_timeout") or DEFAULT_REQUEST_TIMEOUT,
            settings=self.settings
        )

        try:
            self.pusher: Pusher = Pusher(self.settings)
            self.logger.info("Weather uploader initialized successfully")
        except Exception as e:
            self.logger.error(f"Error initializing components: {e}")
            self.logger.debug(traceback.format_exc())
            raise

    def _query(self, host: str) -> List[ConditionRecord]:
        return self.clients.get(host).current_conditions()

    def collect(self) -> Observation:
        """Query every configured station source and build the observation of this cycle"""
        self.logger.debug("Starting data collection")
        # Taken before any request so it marks the start of collection
        ts: int = int(time.time())

        outdoor_host: Optional[str] = self.settings.get("outdoor_airlink_host")
        indoor_host: Optional[str] = self.settings.get("indoor_airlink_host")

        try:
            primary_records = self._query(self.settings["station_host"])
            outdoor_records = self._query(outdoor_host) if outdoor_host else None
            indoor_records = self._query(indoor_host) if indoor_host else None
            return build_observation(ts, primary_records, outdoor_records, indoor_records)
        except CollectionError:
            raise
        except Exception as e:
            raise CollectionError("Error collecting data", e) from e

    def run_cycle(self) -> bool:
        """Run one collect and push cycle; never raises"""
        try:
            try:
                observation: Observation = self.collect()
            except CollectionError as e:
                self.logger.warning(f"Failed to collect data: {e}")
                return False

            try:
                self.pusher.push(observation)
            except PushError as e:
                self.logger.warning(
                    f"Failed to push data: HTTP {e.status_code} {e.reason}: {e.body}"
                )
                return False

            self.logger.info(f"Collected and pushed {count_variables(observation)} variables.")
            return True
        except Exception as e:
            self.logger.warning(f"Unexpected error in cycle: {e}")
            self.logger.debug(traceback.format_exc())
            return False

    def run_scheduler(self) -> None:
        """Run the upload cycle on a schedule until a stop signal is received"""
        self.logger.info("Starting weather uploader scheduler")

        self.running = True

        def signal_handler(sig: int, _frame: Any) -> None:
            self.logger.info(f"Received signal {sig}, shutting down gracefully...")
            self.running = False

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

        self.logger.info("Performing initial data upload")
        self.run_cycle()

        # Registered after the initial cycle so the first wait starts when it ends
        schedule.every(self.interval).seconds.do(self.run_cycle)
        self.logger.info(f"Scheduled data upload every {self.interval} seconds")

        while self.running:
            try:
                schedule.run_pending()
                time.sleep(1)
            except Exception as e:
                self.logger.error(f"Error in scheduler loop: {e}")
                self.logger.debug(traceback.format_exc())
                time.sleep(5)  # Wait a bit before retrying

        self.logger.info("Weather uploader stopped")

        self._cleanup()

    def _cleanup(self) -> None:
        """Cleanup resources on shutdown"""
        try:
            schedule.clear()
            self.clients.close()
            self.pusher.close()
            self.logger.debug("HTTP sessions closed")
        except Exception as e:
            self.logger.error(f"Error during cleanup: {e}")
