"""SNMP transport: one pysnmp binding driven synchronously on a private loop."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any, Self

from loguru import logger
from pysnmp.error import PySnmpError
from pysnmp.hlapi.asyncio import (
    CommunityData,
    ContextData,
    ObjectIdentity,
    ObjectType,
    SnmpEngine,
    UdpTransportTarget,
    bulk_walk_cmd,
    get_cmd,
    set_cmd,
)
from pysnmp.proto.rfc1902 import Integer

from portops.exceptions import ControlError, QueryError, SwitchConnectionError
from portops.snmp.oids import normalize_oid

VarBind = tuple[str, Any]


class BaseTransport(ABC):
    """Abstract base class for blocking SNMP transports."""

    def __init__(self, host: str, community: str, port: int = 161):
        self.host = host
        self.community = community
        self.port = port

    @abstractmethod
    def connect(self) -> None:
        """Establish the binding to the switch."""

    @abstractmethod
    def disconnect(self) -> None:
        """Release the binding."""

    @abstractmethod
    def is_connected(self) -> bool:
        """Check if transport is currently connected."""

    @abstractmethod
    def get(self, *oids: str) -> list[VarBind]:
        """GET scalar OIDs, return ``(oid, value)`` bindings."""

    @abstractmethod
    def walk(self, oid: str) -> list[VarBind]:
        """Walk the subtree under *oid*, return ``(oid, value)`` bindings in walk order."""

    @abstractmethod
    def set_integer(self, oid: str, value: int) -> None:
        """SET *oid* to an INTEGER value."""

    def __enter__(self) -> Self:
        self.connect()
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        self.disconnect()


class SnmpTransport(BaseTransport):
    """SNMPv2c transport built on the pysnmp asyncio API.

    Each instance owns its own event loop and ``SnmpEngine`` so that calls
    block the caller and two transports never share dispatcher state.
    """

    def __init__(
        self,
        host: str,
        community: str,
        port: int = 161,
        timeout: float = 1.0,
        retries: int = 5,
        max_repetitions: int = 25,
    ):
        super().__init__(host, community, port)
        self.timeout = timeout
        self.retries = retries
        self.max_repetitions = max_repetitions
        self._auth = CommunityData(community)
        self._loop: asyncio.AbstractEventLoop | None = None
        self._engine: Any = None
        self._target: Any = None

    @property
    def _tag(self) -> str:
        return f"{self.host}:{self.port}"

    def connect(self) -> None:
        if self.is_connected():
            return
        loop = asyncio.new_event_loop()
        try:
            self._engine, self._target = loop.run_until_complete(self._open())
        except (PySnmpError, OSError) as e:
            loop.close()
            msg = f"Fail to connect to {self.host} with community string {self.community}"
            logger.error(f"{msg}: {e}")
            raise SwitchConnectionError(f"{msg}: {e}", address=self.host, community=self.community) from e
        self._loop = loop
        logger.debug(f"SNMP transport to {self._tag} ready (timeout={self.timeout}s, retries={self.retries})")

    async def _open(self) -> tuple[Any, Any]:
        engine = SnmpEngine()
        target = await UdpTransportTarget.create(
            (self.host, self.port),
            timeout=self.timeout,
            retries=self.retries,
        )
        return engine, target

    def disconnect(self) -> None:
        if self._loop is None:
            return
        loop, self._loop = self._loop, None
        try:
            if self._engine is not None:
                loop.run_until_complete(self._close(self._engine))
        finally:
            self._engine = None
            self._target = None
            loop.close()
            logger.debug(f"SNMP transport to {self._tag} closed")

    @staticmethod
    async def _close(engine: Any) -> None:
        engine.close_dispatcher()

    def is_connected(self) -> bool:
        return self._loop is not None

    def _run(self, coro_fn: Any, *args: Any) -> Any:
        if self._loop is None:
            raise SwitchConnectionError(
                f"SNMP transport to {self.host} is not connected",
                address=self.host,
                community=self.community,
            )
        return self._loop.run_until_complete(coro_fn(*args))

    # ── GET ────────────────────────────────────────────────────────────
    def get(self, *oids: str) -> list[VarBind]:
        try:
            return self._run(self._get, oids)
        except PySnmpError as e:
            raise QueryError(f"SNMP GET [{self._tag}] of {', '.join(oids)} failed: {e}") from e

    async def _get(self, oids: tuple[str, ...]) -> list[VarBind]:
        error_indication, error_status, error_index, var_binds = await get_cmd(
            self._engine,
            self._auth,
            self._target,
            ContextData(),
            *[ObjectType(ObjectIdentity(normalize_oid(oid))) for oid in oids],
            lookupMib=False,
        )
        if error_indication:
            raise QueryError(f"SNMP GET [{self._tag}] of {', '.join(oids)} failed: {error_indication}")
        if error_status:
            raise QueryError(
                f"SNMP GET [{self._tag}] of {', '.join(oids)} failed: "
                f"{error_status.prettyPrint()} at index {int(error_index)}"
            )
        return [(str(oid), val) for oid, val in var_binds]

    # ── WALK ───────────────────────────────────────────────────────────
    def walk(self, oid: str) -> list[VarBind]:
        try:
            return self._run(self._walk, oid)
        except PySnmpError as e:
            raise QueryError(f"SNMP walk [{self._tag}] on {oid} failed: {e}") from e

    async def _walk(self, oid: str) -> list[VarBind]:
        results: list[VarBind] = []
        async for error_indication, error_status, error_index, var_binds in bulk_walk_cmd(
            self._engine,
            self._auth,
            self._target,
            ContextData(),
            0,
            self.max_repetitions,  # nonRepeaters, maxRepetitions
            ObjectType(ObjectIdentity(normalize_oid(oid))),
            lexicographicMode=False,
            lookupMib=False,
        ):
            if error_indication:
                raise QueryError(f"SNMP walk [{self._tag}] on {oid} failed: {error_indication}")
            if error_status:
                raise QueryError(
                    f"SNMP walk [{self._tag}] on {oid} failed: "
                    f"{error_status.prettyPrint()} at index {int(error_index)}"
                )
            for var_bind_oid, val in var_binds:
                results.append((str(var_bind_oid), val))
        return results

    # ── SET ────────────────────────────────────────────────────────────
    def set_integer(self, oid: str, value: int) -> None:
        try:
            self._run(self._set_integer, oid, value)
        except PySnmpError as e:
            raise ControlError(f"Fail to set OID {oid} to {value} on {self.host} due to {e}") from e

    async def _set_integer(self, oid: str, value: int) -> None:
        error_indication, error_status, error_index, _ = await set_cmd(
            self._engine,
            self._auth,
            self._target,
            ContextData(),
            ObjectType(ObjectIdentity(normalize_oid(oid)), Integer(value)),
            lookupMib=False,
        )
        if error_indication:
            raise ControlError(f"Fail to set OID {oid} to {value} on {self.host} due to {error_indication}")
        if error_status:
            code = int(error_status)
            raise ControlError(
                f"SNMP error with code {code} ({error_status.prettyPrint()}) setting OID {oid} on {self.host}",
                error_status=code,
            )
