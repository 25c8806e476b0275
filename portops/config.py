"""Runtime settings for SNMP sessions and the request facades."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

ENV_PREFIX = "PORTOPS_"


class PortOpsConfig(BaseModel):
    """SNMP transport and facade defaults.

    Timeout and retries match the pysnmp ``UdpTransportTarget`` defaults, so
    a session behaves like a plain transport unless told otherwise.
    """

    port: int = Field(default=161, ge=1, le=65535)
    timeout: float = Field(default=1.0, gt=0)
    retries: int = Field(default=5, ge=0)
    max_repetitions: int = Field(default=25, ge=1)
    read_community: str = "public"
    write_community: str = "private"
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls, **overrides: object) -> PortOpsConfig:
        """Build a config from ``PORTOPS_*`` environment variables.

        E.g. ``PORTOPS_TIMEOUT=2.5`` or ``PORTOPS_WRITE_COMMUNITY=secret``.
        Keyword overrides that are not ``None`` win over the environment.
        """
        values: dict[str, object] = {}
        for name in cls.model_fields:
            env_val = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if env_val is not None:
                values[name] = env_val
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
