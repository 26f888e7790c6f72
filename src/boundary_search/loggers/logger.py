import logging
from pathlib import Path
from typing import Dict, Union

class _LazyFileHandler(logging.FileHandler):
    """`FileHandler` that creates the log file's directory only when the first record is written."""

    def __init__(self, filename: Path, mode: str = "a", encoding: str = "utf-8"):
        super().__init__(filename, mode=mode, encoding=encoding, delay=True)

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()

class LoggerManager:
    """
    Hands out one logger per log file under a common base directory.

    Every log file gets exactly one `FileHandler`, no matter how many times its logger is requested,
    so modules can ask for their logger at import time without duplicating records.
    Nothing touches the disk until a record is actually written.
    """

    FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

    def __init__(self, base_dir: Path, default_level: int):
        """
        Initializes the logger manager.

        Args:
            base_dir (Path): Base directory where log files are stored.
            default_level (int): Logging level used when `get_logger` is not given one.
        """
        self._base_dir = Path(base_dir)
        self._default_level = default_level
        self._loggers: Dict[str, logging.Logger] = {}
        self._handlers: Dict[str, logging.FileHandler] = {}

    def get_logger(self, log_name: Union[str, Path], level: int = None) -> logging.Logger:
        """
        Returns a logger that writes to a specific log file.

        Args:
            log_name (Union[str, Path]): The log file name relative to the base directory (e.g., "search.log").
            level (int, optional): Logging level (default: None, falls back to the default level).

        Returns:
            logging.Logger: A logger instance configured for the given file.
        """
        log_file = self._base_dir / Path(log_name)
        key = str(log_file)

        if key in self._loggers:
            return self._loggers[key]

        logger = logging.getLogger(key)
        logger.setLevel(level if level is not None else self._default_level)

        if key not in self._handlers:
            file_handler = _LazyFileHandler(log_file)
            file_handler.setLevel(logger.level)
            file_handler.setFormatter(logging.Formatter(LoggerManager.FORMAT))

            self._handlers[key] = file_handler
            logger.addHandler(file_handler)

        self._loggers[key] = logger
        return logger
