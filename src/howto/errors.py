"""Exceptions raised by howto."""


class HowtoError(Exception):
    """Base class for every failure reported to the user."""


class ConfigError(HowtoError):
    """An environment variable is malformed or the data dir cannot be located."""


class CredentialsError(HowtoError):
    """The credentials file could not be read."""


class ProviderError(HowtoError):
    """The model provider request failed or returned nothing."""


class NoCommandError(HowtoError):
    """The model reply holds no usable command."""
