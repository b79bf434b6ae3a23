"""
App settings base class
"""
import os
from typing import ClassVar, TextIO

import yaml
from pydantic_settings import BaseSettings

from string_list_converter.settings.app_env_types import AppEnvTypes


class AppSettings(BaseSettings):
    """
    App settings main class with parameters definition
    """

    @staticmethod
    def settings_file_path(filename: str) -> str:
        """
        Get the path of a settings file

        :param filename: The name of the settings file
        :return: The path of the settings file
        """
        return os.path.join(
            os.path.abspath(os.path.dirname(__file__)), "..", "..", filename
        )

    @staticmethod
    def dct_from_yml(yml_file: str) -> dict:
        """
        Load settings from yml file, an absent or empty file gives an empty dict
        """
        if not os.path.exists(yml_file):
            return {}
        with open(yml_file, encoding="utf8") as file:
            return yaml.load(file, Loader=yaml.FullLoader) or {}

    app_env: AppEnvTypes = AppEnvTypes.PROD
    loguru_level: str = "INFO"
    logger_sink: ClassVar[str | TextIO] = "logs/app.log"

    converter_config_file: str = settings_file_path(
        filename="converter_config.yaml")
    converter_config: dict = dct_from_yml(yml_file=converter_config_file)
