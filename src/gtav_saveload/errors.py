"""Exceptions raised by save-load operations"""


class SaveLoadError(Exception):
    """Base class for errors that abort a run"""
    pass


class MissingEnvironmentError(SaveLoadError):
    """Exception raised when a required environment variable is not set"""

    def __init__(self, variable: str):
        super().__init__(f"Environment variable {variable} is not set")
        self.variable = variable


class InvalidSlotNameError(SaveLoadError):
    """Exception raised for slot names that would escape the Slots directory"""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Invalid slot name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class ConfigurationError(SaveLoadError):
    """Exception raised when the configuration file cannot be used"""
    pass
