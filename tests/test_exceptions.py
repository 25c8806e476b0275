"""Tests for portops exception hierarchy."""

import pytest

from portops.exceptions import (
    ControlError,
    InvalidArgumentError,
    PortNotFoundError,
    QueryError,
    SessionBusyError,
    SwitchConnectionError,
    SwitchError,
)


class TestExceptionHierarchy:
    """Test exception inheritance and structure."""

    @pytest.mark.parametrize(
        "exc_cls",
        [SwitchConnectionError, QueryError, ControlError, InvalidArgumentError, SessionBusyError],
    )
    def test_inherits_from_switch_error(self, exc_cls):
        assert issubclass(exc_cls, SwitchError)
        exc = exc_cls("failed")
        assert isinstance(exc, Exception)
        assert str(exc) == "failed"

    def test_port_not_found_is_control_error(self):
        """NotFound is reported as a ControlError."""
        assert issubclass(PortNotFoundError, ControlError)

    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgumentError, ValueError)

    def test_connection_error_is_not_builtin(self):
        assert not issubclass(SwitchConnectionError, ConnectionError)


class TestSwitchConnectionError:
    """Test SwitchConnectionError context."""

    def test_carries_address_and_community(self):
        exc = SwitchConnectionError("Fail to connect", address="10.0.0.1", community="private")
        assert exc.address == "10.0.0.1"
        assert exc.community == "private"

    def test_defaults(self):
        exc = SwitchConnectionError("Fail to connect")
        assert exc.address == ""
        assert exc.community == ""


class TestControlError:
    """Test ControlError specific functionality."""

    def test_with_error_status(self):
        exc = ControlError("SNMP error with code 17", error_status=17)
        assert exc.error_status == 17
        assert str(exc) == "SNMP error with code 17"

    def test_without_error_status(self):
        exc = ControlError("timeout")
        assert exc.error_status is None

    def test_port_not_found(self):
        exc = PortNotFoundError("gi1/0/9")
        assert exc.name == "gi1/0/9"
        assert exc.error_status is None
        assert "gi1/0/9" in str(exc)
