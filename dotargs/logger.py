# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for DotArgs."""
import logging

logger: logging.Logger = logging.getLogger("dotargs")
