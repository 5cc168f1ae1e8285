from .logging import JsonFormatter, configure_logging, get_logger, resolve_level

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
    "resolve_level",
]
