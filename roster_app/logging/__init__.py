"""
Logging configuration and utilities for roster_app.
"""
from .config import configure_from_params, configure_logging, get_collection_logger, get_logger

__all__ = ["configure_from_params", "configure_logging", "get_collection_logger", "get_logger"]
