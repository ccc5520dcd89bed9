import json
import os
import tempfile
from typing import Any, Generator, Dict, List
from unittest.mock import MagicMock, patch

import pytest

Settings = Dict[str, Any]
ConditionRecord = Dict[str, Any]


@pytest.fixture
def sample_settings() -> Settings:
    """Return sample settings for testing"""
    return {
        "station_host": "192.168.1.100",
        "outdoor_airlink_host": None,
        "indoor_airlink_host": None,
        "base_uri": "https://www.mywx.live/",
        "station_slug": "test-station",
        "secret_key": "s3cret",
        "interval": 10,
        "request_timeout": 10,
        "debug": False,
        "log_type": "console",
        "log_level": "DEBUG",
        "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    }


@pytest.fixture
def temp_settings_file(sample_settings: Dict[str, Any]) -> Generator[str, None, None]:
    """Create a temporary settings file for testing"""
    fd, path = tempfile.mkstemp(suffix='.json')
    with os.fdopen(fd, 'w') as f:
        json.dump(sample_settings, f)
    yield path
    os.unlink(path)


@pytest.fixture
def sample_iss_record() -> ConditionRecord:
    """Return a primary sensor suite record"""
    return {
        "lsid": 48308,
        "data_structure_type": 1,
        "txid": 1,
        "temp": 62.7,
        "hum": 1.1,
        "dew_point": -0.3,
        "wet_bulb": None,
        "wind_speed_last": 2.0,
        "wind_dir_last": 184.9,
        "wind_speed_avg_last_1_min": 1.18,
        "wind_dir_scalar_avg_last_1_min": 15,
        "wind_speed_avg_last_10_min": 0.37,
        "wind_dir_scalar_avg_last_10_min": 15,
        "wind_speed_hi_last_10_min": 4.0,
        "rain_rate_last": 0,
        "solar_rad": 747,
        "uv_index": 5.5,
    }


@pytest.fixture
def sample_barometer_record() -> ConditionRecord:
    """Return a barometer record"""
    return {
        "lsid": 48307,
        "data_structure_type": 3,
        "bar_sea_level": 30.008,
        "bar_trend": 0.012,
        "bar_absolute": 29.3456,
    }


@pytest.fixture
def sample_indoor_record() -> ConditionRecord:
    """Return the controller indoor record, which the uploader ignores"""
    return {
        "lsid": 48306,
        "data_structure_type": 4,
        "temp_in": 78.0,
        "hum_in": 41.1,
        "dew_point_in": 7.8,
    }


@pytest.fixture
def sample_station_records(sample_iss_record, sample_barometer_record,
                           sample_indoor_record) -> List[ConditionRecord]:
    """Return the condition records of a station query"""
    return [sample_iss_record, sample_barometer_record, sample_indoor_record]


@pytest.fixture
def sample_airlink_record() -> ConditionRecord:
    """Return an air quality record"""
    return {
        "lsid": 347825,
        "data_structure_type": 6,
        "temp": 71.236,
        "hum": 39.8891,
        "dew_point": 45.1,
        "pm_1_last": 2,
        "pm_2p5_last": 3,
        "pm_10_last": 3,
        "pm_1": 1.94,
        "pm_2p5": 2.4567,
        "pm_2p5_last_1_hour": 2.91,
        "pm_2p5_last_3_hours": 2.83,
        "pm_2p5_last_24_hours": 4.02,
        "pm_2p5_nowcast": 3.01,
        "pm_10": 3.0001,
        "pm_10_last_1_hour": 3.8,
        "pm_10_last_3_hours": 3.5,
        "pm_10_last_24_hours": 5.1294,
        "pm_10_nowcast": 3.79,
    }


def make_response(status_code: int = 200, reason: str = "OK", text: str = "",
                  json_data: Any = None) -> MagicMock:
    """Build a fake requests.Response"""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.text = text
    response.ok = 200 <= status_code < 400
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def response_factory():
    """Return the fake response builder"""
    return make_response


@pytest.fixture
def fast_requests(sample_station_records):
    """Patch requests sessions to answer station queries and pushes without any network"""
    posts: List[Dict[str, Any]] = []

    def mock_get(self, url, **kwargs):
        return make_response(json_data={"data": {"conditions": sample_station_records}, "error": None})

    def mock_post(self, url, **kwargs):
        posts.append({"url": url, **kwargs})
        return make_response(200, "OK", "ok")

    with patch('requests.Session.get', autospec=True, side_effect=mock_get), \
            patch('requests.Session.post', autospec=True, side_effect=mock_post):
        yield posts
