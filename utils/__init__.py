"""Utils module - text, geo and process helpers."""
from .geo import distance_km, generate_nearby_points
from .text import clean_line, normalize
from .logging import setup_logging
from .metrics import get_metrics

__all__ = ['distance_km', 'generate_nearby_points', 'clean_line', 'normalize', 'setup_logging', 'get_metrics']
