"""Exceptions for the eightsleep library."""


class MappingOutOfRangeException(Exception):
    """Temperature maps to a level outside of the device range."""


class RemoteCallException(Exception):
    """Exception to wrap failures of the Eight Sleep cloud API."""


class AuthenticationException(RemoteCallException):
    """Login rejected or session no longer valid."""


class RemoteConnectionException(RemoteCallException):
    """The Eight Sleep cloud API could not be reached."""


class DeviceUnresponsiveException(Exception):
    """The bed is flagged as not responding."""
