"""Switch session: identity, port enumeration and admin up/down over SNMP."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from types import TracebackType
from typing import Iterator, Self

from loguru import logger

from portops.config import PortOpsConfig
from portops.exceptions import ControlError, InvalidArgumentError, QueryError, SessionBusyError, SwitchConnectionError
from portops.models import Ack, Port, PortState
from portops.registry import PortRegistry
from portops.snmp.oids import (
    OID_IF_NAME,
    OID_SYS_NAME,
    control_oid_for,
    decode_text,
    extract_index,
    index_of_control_oid,
)
from portops.snmp.transport import BaseTransport, SnmpTransport


class SwitchSession:
    """One switch, one transport binding.

    Not meant to be shared between threads: overlapping calls raise
    SessionBusyError. Open one session per request instead.

    Usage::

        with open_session("192.168.1.1", "private") as session:
            ports = session.enumerate_ports()
            session.set_port_state("eth0", PortState.DOWN)
    """

    def __init__(self, transport: BaseTransport, encoding: str = "utf-8") -> None:
        self.transport = transport
        self.encoding = encoding
        self.registry = PortRegistry()
        self._busy = threading.Lock()

    @property
    def address(self) -> str:
        return self.transport.host

    @property
    def community(self) -> str:
        return self.transport.community

    @contextmanager
    def _exclusive(self, operation: str) -> Iterator[None]:
        if not self._busy.acquire(blocking=False):
            raise SessionBusyError(f"Session to {self.address} is busy; cannot start {operation}")
        try:
            if not self.transport.is_connected():
                raise SwitchConnectionError(
                    f"Session to {self.address} is not connected; cannot {operation}",
                    address=self.address,
                    community=self.community,
                )
            yield
        finally:
            self._busy.release()

    def get_sysname(self) -> str:
        """Return the switch's sysName.0, decoded verbatim."""
        with self._exclusive("get sysname"):
            try:
                var_binds = self.transport.get(OID_SYS_NAME)
                if not var_binds:
                    raise QueryError(f"No data returned for {OID_SYS_NAME} by {self.address}")
                oid, value = var_binds[0]
                return decode_text(value, self.encoding, oid)
            except QueryError as e:
                logger.error(f"Fail to get sysname of {self.address}: {e}")
                raise

    def enumerate_ports(self) -> list[Port]:
        """Walk IF-MIB::ifName and return one Port per row, in walk order.

        Rebuilds the session's registry. A row without a numeric index or
        with an undecodable name fails the whole call and empties the
        registry, so name lookups never use a stale listing.
        """
        with self._exclusive("list ports"):
            try:
                rows = self.transport.walk(OID_IF_NAME)
                ports: list[Port] = []
                for oid, value in rows:
                    index = extract_index(oid)
                    ports.append(
                        Port(
                            name=decode_text(value, self.encoding, oid),
                            control_oid=control_oid_for(index),
                            index=index,
                        )
                    )
            except QueryError as e:
                self.registry.clear()
                logger.error(f"Fail to get ports of {self.address}: {e}")
                raise
            self.registry.rebuild(ports)
            logger.info(f"{self.address}: {len(ports)} ports, {len(self.registry)} distinct names")
            return ports

    def set_port_state(self, port: str | Port, state: PortState | str) -> Ack:
        """Set a port administratively up or down.

        *port* is either a name registered by the latest ``enumerate_ports``
        call or a ``Port`` returned by it.

        Raises:
            InvalidArgumentError: unsupported state.
            PortNotFoundError: name not registered.
            ControlError: transport failure or device error status.
        """
        desired = PortState.parse(state)
        if isinstance(port, Port):
            name, control_oid = port.name, port.control_oid
        else:
            name, control_oid = port, self.registry.resolve(port)
        return self._write(control_oid, desired, name)

    def set_admin_status(self, control_oid: str, state: PortState | str) -> Ack:
        """Set a port up or down by its raw ifAdminStatus OID."""
        desired = PortState.parse(state)
        if index_of_control_oid(control_oid) is None:
            raise InvalidArgumentError(f"OID '{control_oid}' is not an ifAdminStatus instance")
        return self._write(control_oid, desired, None)

    def _write(self, control_oid: str, state: PortState, name: str | None) -> Ack:
        label = f"'{name}' ({control_oid})" if name is not None else control_oid
        with self._exclusive(f"set port {label} {state.label}"):
            logger.info(f"{self.address}: setting port {label} {state.label}")
            try:
                self.transport.set_integer(control_oid, int(state))
            except ControlError as e:
                logger.error(f"Fail to set port {label} {state.label} on {self.address}: {e}")
                raise
        return Ack(control_oid=control_oid, state=state, port=name)

    def close(self) -> None:
        """Release the transport; safe to call more than once."""
        self.transport.disconnect()
        self.registry.clear()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        self.close()


def open_session(
    address: str,
    community: str | None = None,
    config: PortOpsConfig | None = None,
) -> SwitchSession:
    """Connect to *address* and return a ready session.

    Args:
        address: Switch IP address or hostname.
        community: SNMP community; ``config.write_community`` if omitted.
        config: Transport settings; read from the environment if omitted.

    Raises:
        InvalidArgumentError: empty address.
        SwitchConnectionError: the transport could not be established.
    """
    if not address or not address.strip():
        raise InvalidArgumentError("Switch address is required")
    cfg = config or PortOpsConfig.from_env()
    community = community or cfg.write_community
    transport = SnmpTransport(
        address.strip(),
        community,
        port=cfg.port,
        timeout=cfg.timeout,
        retries=cfg.retries,
        max_repetitions=cfg.max_repetitions,
    )
    transport.connect()
    return SwitchSession(transport, encoding=cfg.encoding)
