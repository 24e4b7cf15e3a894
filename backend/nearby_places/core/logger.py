import logging
import os
from logging.handlers import RotatingFileHandler
from nearby_places.core.config import settings

class LoggerConfig:
    """
    Logger for the places service. Writes to the console and, when a log
    directory is configured, to a rotating file inside it.
    """
    def __init__(
        self, env=20, logger_name="NearbyPlaces", log_directory="logs", log_file="places.log"
    ):
        self.logger_name = logger_name
        self.env = env
        self.log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        # An empty directory keeps logging on the console only
        if log_directory:
            self.log_directory = os.path.abspath(log_directory)
            self.log_file_path = os.path.join(self.log_directory, log_file)
        else:
            self.log_directory = None
            self.log_file_path = None

        self.logger = logging.getLogger(self.logger_name)
        try:
            self.setup_logger()
        except OSError as e:
            print(f"Failed to setup places log file: {str(e)}")

    def setup_logger(self):
        self.logger.setLevel(self.env)
        # Only this logger's own handlers count; re-initialising must not duplicate them
        if self.logger.handlers:
            return

        formatter = logging.Formatter(self.log_format)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.env)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if self.log_file_path:
            os.makedirs(self.log_directory, exist_ok=True)
            file_handler = RotatingFileHandler(
                self.log_file_path, backupCount=5, maxBytes=1024 * 1024 * 10, encoding="utf-8"
            )
            file_handler.setLevel(self.env)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def log(self, level: int, message: str, extra: dict = None):
        """Simple wrapper to log messages"""
        if extra:
            message = f"{message} | {extra}"
        self.logger.log(level, message)

# Initialize Logger
logs = LoggerConfig(
    env=settings.LOGGER,
    logger_name="PLACES-BE",
    log_directory=settings.LOG_DIRECTORY,
    log_file=settings.LOG_FILE
)
