"""Pydantic models for ports, admin states and control acknowledgments."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field

from portops.exceptions import InvalidArgumentError


class PortState(IntEnum):
    """IF-MIB ifAdminStatus values written to the device."""

    UP = 1
    DOWN = 2

    @classmethod
    def parse(cls, value: PortState | str) -> PortState:
        """Accept a PortState or one of ``up``/``down``/``on``/``off``."""
        if isinstance(value, PortState):
            return value
        key = str(value).strip().lower()
        if key not in _STATE_ALIASES:
            raise InvalidArgumentError(f"Not supported operation '{value}' (use up/down or on/off)")
        return _STATE_ALIASES[key]

    @property
    def label(self) -> str:
        return self.name.lower()


_STATE_ALIASES: dict[str, PortState] = {
    "up": PortState.UP,
    "on": PortState.UP,
    "down": PortState.DOWN,
    "off": PortState.DOWN,
}


class Port(BaseModel):
    """One switch interface and the OID controlling its admin status.

    Serialized by alias as ``{"port": ..., "oid": ...}``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(serialization_alias="port")
    control_oid: str = Field(serialization_alias="oid")
    index: int = Field(exclude=True)


class Ack(BaseModel):
    """Acknowledgment of a state change accepted by the device."""

    control_oid: str
    state: PortState
    port: str | None = None

    @property
    def message(self) -> str:
        ops = "on" if self.state is PortState.UP else "off"
        return f"Successfully {ops} port with OID {self.control_oid}"
