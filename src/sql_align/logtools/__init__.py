"""Logging setup for the command line."""

from sql_align.logtools.log_config import LOGGING, configure_logging

__all__ = ["LOGGING", "configure_logging"]
