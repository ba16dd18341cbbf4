"""Core module - event model, constants, gazetteer and configuration."""
from .event import EventRecord
from .constants import REGIONS_TO_SKIP, ThreatType
from .errors import ConfigError, GazetteerError, RadarError, StoreError
from .gazetteer import Gazetteer

__all__ = [
    'EventRecord', 'ThreatType', 'REGIONS_TO_SKIP', 'Gazetteer',
    'RadarError', 'ConfigError', 'GazetteerError', 'StoreError',
]
