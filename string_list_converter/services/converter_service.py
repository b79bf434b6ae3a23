""" Service building the configured string list converter."""
from __future__ import annotations

from loguru import logger
from pydantic import ValidationError

from string_list_converter.models.converter_options import ConverterOptions
from string_list_converter.services.converters.escaped_string_list import (
    EscapedStringListConverter,
)
from string_list_converter.services.converters.string_list import StringListConverter
from string_list_converter.settings.app_settings import AppSettings


class ConverterService:
    """
    Service turning the converter configuration into a converter instance.
    """

    def __init__(self, settings: AppSettings):
        self.settings = settings

    @classmethod
    def validate_config_or_fail(cls, settings: AppSettings) -> ConverterOptions:
        """
        Validate the converter_config in settings. Raise RuntimeError on any issues.
        A missing 'converter' section gives the default options.
        :param settings: AppSettings instance with converter_config attribute
        :return: validated ConverterOptions
        """
        cfg = settings.converter_config or {}
        if not isinstance(cfg, dict):
            raise RuntimeError("converter_config must be an object")
        section = cfg.get("converter") or {}
        if not isinstance(section, dict):
            raise RuntimeError("converter_config.converter must be an object")
        try:
            return ConverterOptions.model_validate(section)
        except ValidationError as exc:
            raise RuntimeError(f"Invalid converter configuration: {exc}") from exc

    def build_converter(self) -> StringListConverter:
        """
        Build the converter described by the settings.
        The escaped variant is used only when an escape character is configured.
        :raises RuntimeError: if converter_config is invalid
        :return: converter instance
        """
        options = self.validate_config_or_fail(self.settings)
        if options.escape_char is not None:
            logger.debug(
                f"Using escaped string list converter "
                f"(separator {options.separator!r}, escape {options.escape_char!r})")
            return EscapedStringListConverter(
                separator=options.separator,
                escape_char=options.escape_char,
                strict_source_kind=options.strict_source_kind,
            )
        logger.debug(f"Using string list converter (separator {options.separator!r})")
        return StringListConverter(
            separator=options.separator,
            strict_source_kind=options.strict_source_kind,
        )
