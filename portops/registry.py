"""Per-session mapping from port names to their ifAdminStatus OIDs."""

from __future__ import annotations

from typing import Iterable, Iterator

from loguru import logger

from portops.exceptions import PortNotFoundError
from portops.models import Port


class PortRegistry:
    """Name -> control OID lookup built from the latest port enumeration.

    Names are not unique on every device. When two ports share a name the
    one discovered later shadows the earlier one (last write wins); callers
    needing an exact port should address it by OID or by ``Port`` instance.
    """

    def __init__(self) -> None:
        self._oids: dict[str, str] = {}

    def rebuild(self, ports: Iterable[Port]) -> None:
        """Replace the whole mapping with *ports*."""
        oids: dict[str, str] = {}
        for port in ports:
            if port.name in oids:
                logger.debug(f"Port name '{port.name}' repeated: {port.control_oid} shadows {oids[port.name]}")
            oids[port.name] = port.control_oid
        self._oids = oids

    def resolve(self, name: str) -> str:
        """Return the control OID registered for *name*.

        Raises:
            PortNotFoundError: exact name not registered.
        """
        try:
            return self._oids[name]
        except KeyError:
            raise PortNotFoundError(name) from None

    def names(self) -> list[str]:
        return list(self._oids)

    def clear(self) -> None:
        self._oids = {}

    def __contains__(self, name: object) -> bool:
        return name in self._oids

    def __len__(self) -> int:
        return len(self._oids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._oids)
