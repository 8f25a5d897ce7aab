import functools
import logging
import sys

from contact_form.config import config_instance


class AppLogger:
    def __init__(self, name: str, log_level: int | str = logging.INFO):
        # Cloud Functions / Cloud Run collect stdout, so there is no file handler here
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level=log_level)

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)


def _log_level() -> str:
    try:
        return config_instance().LOGGING.LOG_LEVEL.upper()
    except ValueError:
        # settings cannot be loaded yet (missing required email settings)
        return "INFO"


@functools.lru_cache
def init_logger(name: str = "contact-form"):
    """
        creates a stdout logger for the given name, one per name
    :param name:
    :return:
    """
    logger = AppLogger(name=name, log_level=_log_level())
    return logger.logger
