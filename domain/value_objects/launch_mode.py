from enum import Enum


class LaunchMode(str, Enum):
    """Visibility mode of a launch."""

    DEFAULT = "DEFAULT"
    DEBUG = "DEBUG"
