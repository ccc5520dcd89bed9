from typing import TypedDict, Optional, Union, Dict, Any


class ConditionRecord(TypedDict, total=False):
    lsid: int
    data_structure_type: int
    txid: int
    temp: Optional[float]
    hum: Optional[float]
    dew_point: Optional[float]
    wind_speed_last: Optional[float]
    wind_dir_last: Optional[float]
    wind_speed_avg_last_1_min: Optional[float]
    wind_speed_avg_last_10_min: Optional[float]
    rain_rate_last: Optional[float]
    solar_rad: Optional[float]
    uv_index: Optional[float]
    bar_sea_level: Optional[float]
    bar_absolute: Optional[float]
    bar_trend: Optional[float]
    pm_1: Optional[float]
    pm_2p5: Optional[float]
    pm_2p5_last_1_hour: Optional[float]
    pm_2p5_last_24_hours: Optional[float]
    pm_10: Optional[float]
    pm_10_last_1_hour: Optional[float]
    pm_10_last_24_hours: Optional[float]


class AirQuality(TypedDict):
    pm1: Optional[float]
    pm2p5: Optional[float]
    pm2p5_1h: Optional[float]
    pm2p5_24h: Optional[float]
    pm10: Optional[float]
    pm10_1h: Optional[float]
    pm10_24h: Optional[float]


Observation = Dict[str, Any]


class Settings(TypedDict, total=False):
    station_host: str
    outdoor_airlink_host: Optional[str]
    indoor_airlink_host: Optional[str]
    base_uri: str
    station_slug: str
    secret_key: str
    interval: Union[int, float]
    request_timeout: Union[int, float]
    debug: bool
    log_type: str
    log_level: str
    log_file: str
    log_max_size: int
    log_backup_count: int
    log_format: str
