"""Shared fixtures for the portops test suite."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pysnmp.proto.rfc1902 import OctetString

from portops.exceptions import ControlError
from portops.session import SwitchSession
from portops.snmp.oids import OID_IF_NAME, OID_SYS_NAME, index_of_control_oid
from portops.snmp.transport import BaseTransport


class FakeSwitchTransport(BaseTransport):
    """In-memory switch answering sysName, ifName walks and ifAdminStatus sets."""

    def __init__(
        self,
        interfaces: dict[int, bytes] | None = None,
        sysname: bytes | None = b"switch01",
        host: str = "10.0.0.1",
        community: str = "private",
    ):
        super().__init__(host, community)
        self.interfaces = dict(interfaces or {})
        self.sysname = sysname
        self.admin_status = {idx: 1 for idx in self.interfaces}
        self.writes: list[tuple[str, int]] = []
        self.error_status: int | None = None
        self.connected = True

    def connect(self) -> None:
        self.connected = True

    def disconnect(self) -> None:
        self.connected = False

    def is_connected(self) -> bool:
        return self.connected

    def get(self, *oids: str):
        if self.sysname is None:
            return []
        return [(OID_SYS_NAME, OctetString(self.sysname)) for _ in oids]

    def walk(self, oid: str):
        return [(f"{OID_IF_NAME}.{idx}", OctetString(name)) for idx, name in sorted(self.interfaces.items())]

    def set_integer(self, oid: str, value: int) -> None:
        self.writes.append((oid, value))
        if self.error_status:
            raise ControlError(f"SNMP error with code {self.error_status}", error_status=self.error_status)
        index = index_of_control_oid(oid)
        if index not in self.admin_status:
            raise ControlError("SNMP error with code 2 (noSuchName)", error_status=2)
        if value not in (1, 2):
            raise ControlError("SNMP error with code 3 (badValue)", error_status=3)
        self.admin_status[index] = value


# ── transport mocks ───────────────────────────────────────────────────


@pytest.fixture()
def mock_transport():
    """MagicMock of a connected BaseTransport with configurable return values."""
    transport = MagicMock(spec=BaseTransport)
    transport.host = "10.0.0.1"
    transport.community = "private"
    transport.is_connected.return_value = True
    transport.get.return_value = []
    transport.walk.return_value = []
    transport.set_integer.return_value = None
    return transport


@pytest.fixture()
def mock_session(mock_transport):
    """SwitchSession wrapping ``mock_transport``."""
    return SwitchSession(mock_transport)


@pytest.fixture()
def fake_switch_factory():
    """Factory fixture returning a FakeSwitchTransport."""

    def _make(**kwargs):
        defaults = {
            "interfaces": {
                1: b"gi1/0/1",
                2: b"gi1/0/2",
                3: b"gi1/0/3",
                4: b"eth0",
            },
        }
        defaults.update(kwargs)
        return FakeSwitchTransport(**defaults)

    return _make


@pytest.fixture()
def fake_switch(fake_switch_factory):
    return fake_switch_factory()
