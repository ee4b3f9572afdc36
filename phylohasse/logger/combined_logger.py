"""Combined logger with all functionality."""

from phylohasse.logger.base_logger import AlgorithmLogger
from phylohasse.logger.table_logger import TableLogger
import logging


class Logger(TableLogger):
    """
    Logger used by the Hasse diagram algorithms.

    Usage:
        logger = Logger("my_algorithm")
        logger.section("Phase 1")
        logger.info("Starting phase 1...")
        logger.table(data, headers=["col1", "col2"])
    """

    def __init__(self, name: str):
        AlgorithmLogger.__init__(self, name)

    def setup_console_logging(self, level: int = logging.INFO):
        """Enable logging to the console."""
        self.disabled = False
        if not any(isinstance(h, logging.StreamHandler) for h in self.logger.handlers):
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.logger.setLevel(level)
