import logging
from typing import Any, Dict, List, Optional, Tuple

from mywx_pusher.errors import CollectionError
from mywx_pusher.logger import LOGGER_NAME
from mywx_pusher.records import AIR_QUALITY, BAROMETER, PRIMARY_SENSOR, select_record
from mywx_pusher.types import AirQuality, ConditionRecord, Observation

logger = logging.getLogger(LOGGER_NAME)

# Observation key -> record field, in the order they are transmitted
PRIMARY_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("temperature", "temp"),
    ("dew_point", "dew_point"),
    ("humidity", "hum"),
    ("wind_speed", "wind_speed_last"),
    ("wind_direction", "wind_dir_last"),
    ("wind_speed_avg_1m", "wind_speed_avg_last_1_min"),
    ("wind_speed_avg_10m", "wind_speed_avg_last_10_min"),
    ("rain_rate", "rain_rate_last"),
    ("solar_radiation", "solar_rad"),
    ("uv_index", "uv_index"),
)

BAROMETER_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("pressure", "bar_sea_level"),
    ("absolute_pressure", "bar_absolute"),
    ("pressure_trend", "bar_trend"),
)

AIR_QUALITY_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("pm1", "pm_1"),
    ("pm2p5", "pm_2p5"),
    ("pm2p5_1h", "pm_2p5_last_1_hour"),
    ("pm2p5_24h", "pm_2p5_last_24_hours"),
    ("pm10", "pm_10"),
    ("pm10_1h", "pm_10_last_1_hour"),
    ("pm10_24h", "pm_10_last_24_hours"),
)

# Angular fields are sent as whole degrees
TRUNCATED_FIELDS = {"wind_direction"}


def round2(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return round(float(value), 2)


def truncate(value: Optional[float]) -> Optional[int]:
    if value is None:
        return None
    return int(value)


def _map_fields(record: ConditionRecord, fields: Tuple[Tuple[str, str], ...]) -> Dict[str, Any]:
    """Copy the listed fields out of a record, raising KeyError for any that is absent"""
    mapped: Dict[str, Any] = {}
    for key, source in fields:
        value = record[source]  # type: ignore[literal-required]
        mapped[key] = truncate(value) if key in TRUNCATED_FIELDS else round2(value)
    return mapped


def normalize_weather(primary: Optional[ConditionRecord], barometer: Optional[ConditionRecord]) -> Dict[str, Any]:
    """Map the primary sensor suite and barometer records to the base weather fields"""
    if primary is None:
        raise CollectionError("Primary sensor record not found in station response")
    if barometer is None:
        raise CollectionError("Barometer record not found in station response")

    try:
        weather = _map_fields(primary, PRIMARY_FIELDS)
        weather.update(_map_fields(barometer, BAROMETER_FIELDS))
    except (KeyError, TypeError, ValueError) as e:
        raise CollectionError("Could not read weather fields", e) from e
    return weather


def normalize_air_quality(record: ConditionRecord) -> AirQuality:
    """Map an air-quality record to the particulate matter sub-mapping"""
    try:
        return _map_fields(record, AIR_QUALITY_FIELDS)  # type: ignore[return-value]
    except (KeyError, TypeError, ValueError) as e:
        raise CollectionError("Could not read air quality fields", e) from e


def build_observation(ts: int,
                      primary_records: List[ConditionRecord],
                      outdoor_records: Optional[List[ConditionRecord]] = None,
                      indoor_records: Optional[List[ConditionRecord]] = None) -> Observation:
    """
    Build the Observation of one cycle.

    ``outdoor_records`` and ``indoor_records`` are None when the matching
    air-quality source is not configured. A configured source that returned
    no air-quality record contributes nothing.
    """
    primary = select_record(primary_records, PRIMARY_SENSOR)
    barometer = select_record(primary_records, BAROMETER)
    logger.debug(f"Primary sensor record: {primary}")
    logger.debug(f"Barometer record: {barometer}")

    observation: Observation = {"ts": int(ts)}
    observation.update(normalize_weather(primary, barometer))

    if outdoor_records is not None:
        outdoor = select_record(outdoor_records, AIR_QUALITY)
        logger.debug(f"Outdoor air quality record: {outdoor}")
        if outdoor is None:
            logger.debug("Outdoor air quality source returned no air quality record")
        else:
            observation["air_quality"] = normalize_air_quality(outdoor)

    if indoor_records is not None:
        indoor = select_record(indoor_records, AIR_QUALITY)
        logger.debug(f"Indoor air quality record: {indoor}")
        if indoor is None:
            logger.debug("Indoor air quality source returned no air quality record")
        else:
            observation["indoor_air_quality"] = normalize_air_quality(indoor)
            try:
                observation["indoor_temperature"] = round2(indoor["temp"])
                observation["indoor_humidity"] = round2(indoor["hum"])
            except (KeyError, TypeError, ValueError) as e:
                raise CollectionError("Could not read indoor fields", e) from e

    return observation


def count_variables(observation: Observation) -> int:
    """Number of measurement keys in an observation, the timestamp excluded"""
    return len([key for key in observation if key != "ts"])
