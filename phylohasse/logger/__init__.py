"""Logging package for phylohasse."""

from phylohasse.logger.base_logger import AlgorithmLogger
from phylohasse.logger.table_logger import TableLogger
from phylohasse.logger.combined_logger import Logger
from phylohasse.logger.formatting import format_set, format_names

# Unified singleton for algorithm tracing
hd_logger = Logger("HasseDiagram")
hd_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "TableLogger",
    "Logger",
    "hd_logger",
    "format_set",
    "format_names",
]
