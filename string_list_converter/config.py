"""
Settings loading module: picks the settings class, and so the
converter_config.yaml file, matching the APP_ENV environment variable
"""
from functools import lru_cache
from typing import Dict
import importlib

from string_list_converter.settings.app_env_types import AppEnvTypes
from string_list_converter.settings.app_settings import AppSettings

environments: Dict[AppEnvTypes, str] = {
    AppEnvTypes.DEV: "string_list_converter.settings.development_settings.DevAppSettings",
    AppEnvTypes.PROD: "string_list_converter.settings.production_settings.ProdAppSettings",
    AppEnvTypes.TEST: "string_list_converter.settings.test_settings.TestAppSettings",
}

@lru_cache()
def get_app_settings() -> AppSettings:
    """
    Main entry point for settings loading

    :return: Settings fitting current environment
    """
    config_path = environments[AppSettings().app_env]
    module_name, class_name = config_path.rsplit('.', 1)
    module = importlib.import_module(module_name)
    config_class = getattr(module, class_name)
    return config_class()
