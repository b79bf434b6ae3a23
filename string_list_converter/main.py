""" Entry point giving the host the converter configured for the current environment """
from functools import lru_cache

from string_list_converter.config import get_app_settings
from string_list_converter.logger_setup import setup_logging
from string_list_converter.services.converter_service import ConverterService
from string_list_converter.services.converters.string_list import StringListConverter


@lru_cache()
def get_converter() -> StringListConverter:
    """
    Load settings, configure logging and build the converter once

    :return: shared converter instance, safe to use from several threads
    """
    settings = get_app_settings()
    setup_logging(settings)
    return ConverterService(settings).build_converter()
