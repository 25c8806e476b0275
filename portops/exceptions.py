"""Exception hierarchy for switch port operations."""


class SwitchError(Exception):
    """Base exception for all switch port errors."""


class SwitchConnectionError(SwitchError):
    """The SNMP transport binding could not be established or is closed."""

    def __init__(self, message: str, address: str = "", community: str = ""):
        self.address = address
        self.community = community
        super().__init__(message)


class QueryError(SwitchError):
    """A read operation failed or returned malformed or absent data."""


class ControlError(SwitchError):
    """A write operation was rejected by the transport or the device.

    ``error_status`` carries the SNMP error-status code reported by the
    device (e.g. 17 for notWritable), or ``None`` for transport failures.
    """

    def __init__(self, message: str, error_status: int | None = None):
        self.error_status = error_status
        super().__init__(message)


class PortNotFoundError(ControlError):
    """Named port is absent from the session's port registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Port '{name}' not found; enumerate ports first or check the name")


class InvalidArgumentError(SwitchError, ValueError):
    """Caller supplied an unsupported value (state, address, OID)."""


class SessionBusyError(SwitchError):
    """A session was used by two operations at once."""
