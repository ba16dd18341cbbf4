"""
Logging configuration utilities.
"""
import json
import logging
import os


class JsonFormatter(logging.Formatter):
    """JSON format for production log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "ts": self.formatTime(record),
        }
        if record.name:
            log_obj["logger"] = record.name
        if hasattr(record, "chat_id"):
            log_obj["chat_id"] = record.chat_id
        if hasattr(record, "event_id"):
            log_obj["event_id"] = record.event_id
        if record.exc_info:
            log_obj["exc"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, ensure_ascii=False)


def get_log_level(name: str = None) -> int:
    """Map a level name (LOG_LEVEL by default) to a logging level, INFO if unknown."""
    level_str = (name or os.getenv('LOG_LEVEL', 'INFO')).upper()
    level = logging.getLevelName(level_str)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging for the application."""
    log_format = os.environ.get("LOG_FORMAT", "default")
    if log_format == "json":
        for h in logging.root.handlers[:]:
            logging.root.removeHandler(h)
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.root.addHandler(handler)
        logging.root.setLevel(level)
    else:
        logging.basicConfig(
            format="[%(levelname)s/%(asctime)s] %(name)s: %(message)s",
            level=level,
        )
    # Telethon is chatty at INFO
    logging.getLogger("telethon").setLevel(max(level, logging.WARNING))
