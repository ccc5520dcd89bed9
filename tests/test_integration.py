import json
import logging
from unittest.mock import patch

from mywx_pusher.config import load_settings
from mywx_pusher.uploader import WeatherUploader


def test_collect_and_push_flow(temp_settings_file, fast_requests, caplog):
    """Integration test for one full cycle with only the primary source"""
    settings = load_settings(temp_settings_file)
    uploader = WeatherUploader(settings)

    with caplog.at_level(logging.INFO, logger="mywx_pusher"):
        assert uploader.run_cycle() is True

    assert len(fast_requests) == 1
    post = fast_requests[0]
    assert post["url"] == "https://www.mywx.live/stations/test-station/push_data"
    assert post["data"]["secret_key"] == "s3cret"

    data = json.loads(post["data"]["data"])
    assert len(data) == 14
    assert data["temperature"] == 62.7
    assert data["wind_direction"] == 184
    assert "air_quality" not in data
    assert "Collected and pushed 13 variables." in caplog.text


def test_missing_primary_record_skips_push(temp_settings_file, sample_barometer_record, response_factory, caplog):
    """Integration test for a station response without the primary sensor record"""
    settings = load_settings(temp_settings_file)
    body = {"data": {"conditions": [sample_barometer_record]}, "error": None}

    with patch('requests.Session.get', return_value=response_factory(json_data=body)), \
            patch('requests.Session.post') as mock_post:
        uploader = WeatherUploader(settings)
        with caplog.at_level(logging.WARNING, logger="mywx_pusher"):
            assert uploader.run_cycle() is False

    mock_post.assert_not_called()
    assert "Failed to collect data" in caplog.text


def test_push_rejected(temp_settings_file, sample_station_records, response_factory, caplog):
    """Integration test for an endpoint answering 503"""
    settings = load_settings(temp_settings_file)
    body = {"data": {"conditions": sample_station_records}, "error": None}

    with patch('requests.Session.get', return_value=response_factory(json_data=body)), \
            patch('requests.Session.post',
                  return_value=response_factory(503, "Service Unavailable", "unavailable")) as mock_post:
        uploader = WeatherUploader(settings)
        with caplog.at_level(logging.WARNING, logger="mywx_pusher"):
            assert uploader.run_cycle() is False

    assert mock_post.call_count == 1
    assert "503" in caplog.text
    assert "unavailable" in caplog.text


def test_air_quality_sources(temp_settings_file, sample_station_records, sample_airlink_record, response_factory):
    """Integration test with outdoor and indoor air quality sources configured"""
    settings = load_settings(temp_settings_file, {
        "outdoor_airlink_host": "10.0.0.2",
        "indoor_airlink_host": "10.0.0.3",
    })
    bodies = {
        "http://192.168.1.100/v1/current_conditions": {"data": {"conditions": sample_station_records}, "error": None},
        "http://10.0.0.2/v1/current_conditions": {"data": {"conditions": [sample_airlink_record]}, "error": None},
        "http://10.0.0.3/v1/current_conditions": {"data": {"conditions": [sample_airlink_record]}, "error": None},
    }

    def mock_get(self, url, **kwargs):
        return response_factory(json_data=bodies[url])

    with patch('requests.Session.get', autospec=True, side_effect=mock_get), \
            patch('requests.Session.post', return_value=response_factory(200)) as mock_post:
        uploader = WeatherUploader(settings)
        assert uploader.run_cycle() is True
        assert uploader.run_cycle() is True

    assert len(uploader.clients) == 3
    data = json.loads(mock_post.call_args[1]["data"]["data"])
    assert data["air_quality"]["pm2p5"] == 2.46
    assert data["indoor_air_quality"]["pm10_24h"] == 5.13
    assert data["indoor_humidity"] == 39.89
