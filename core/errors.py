"""Exception hierarchy."""


class RadarError(Exception):
    """Base error for the pipeline."""


class ConfigError(RadarError):
    """Missing or malformed configuration."""


class StoreError(RadarError):
    """Event store request failed (network, auth or HTTP error)."""


class GazetteerError(RadarError):
    """Gazetteer table could not be loaded."""
