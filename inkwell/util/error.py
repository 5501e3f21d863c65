"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base for errors outside the domain layer."""


class ConfigurationError(UtilError):
    """A setting is missing or unusable."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        super().__init__(f"Invalid {setting}: {reason}")
