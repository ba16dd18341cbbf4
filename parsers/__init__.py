"""Parsers module - classification and location extraction."""
from .classification import classify_threat, is_threat_message
from .extraction import ExtractedLocation, extract_locations

__all__ = ['classify_threat', 'is_threat_message', 'ExtractedLocation', 'extract_locations']
