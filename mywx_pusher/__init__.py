from mywx_pusher.config import load_settings, validate_settings
from mywx_pusher.errors import (
    UploaderError,
    ConfigurationError,
    StationError,
    CollectionError,
    PushError,
)
from mywx_pusher.logger import get_logger, LoggerSetup
from mywx_pusher.normalizer import build_observation
from mywx_pusher.pusher import Pusher
from mywx_pusher.records import select_record
from mywx_pusher.station import StationClient, ClientCache
from mywx_pusher.types import ConditionRecord, Observation, Settings
from mywx_pusher.uploader import WeatherUploader

__all__ = [
    'WeatherUploader',
    'StationClient',
    'ClientCache',
    'Pusher',
    'select_record',
    'build_observation',
    'load_settings',
    'validate_settings',
    'get_logger',
    'LoggerSetup',
    'UploaderError',
    'ConfigurationError',
    'StationError',
    'CollectionError',
    'PushError',
    'ConditionRecord',
    'Observation',
    'Settings'
]
