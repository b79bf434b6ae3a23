"""Loguru sink configuration"""
import sys

from loguru import logger

from string_list_converter.settings.app_env_types import AppEnvTypes
from string_list_converter.settings.app_settings import AppSettings


def setup_logging(settings: AppSettings) -> None:
    """
    Replace loguru's default sink with the one from settings.
    Left untouched in the test environment so that pytest can capture logs.

    :param settings: current settings
    :return: None
    """
    if settings.app_env == AppEnvTypes.TEST:
        return
    logger.remove()
    logger.add(
        settings.logger_sink,
        level=settings.loguru_level,
        **({"rotation": "100 MB"} if settings.logger_sink != sys.stderr else {}),
    )
