"""
Application environment types
"""
from enum import Enum


class AppEnvTypes(Enum):
    """
    Available environment types
    """
    PROD: str = "PROD"
    DEV: str = "DEV"
    TEST: str = "TEST"
