"""OID constants and pure helpers mapping IF-MIB ifName rows to ifAdminStatus."""

from __future__ import annotations

from typing import Any

from pysnmp.proto.rfc1902 import OctetString
from pysnmp.proto.rfc1905 import EndOfMibView, NoSuchInstance, NoSuchObject

from portops.exceptions import QueryError

# ── OID constants ──────────────────────────────────────────────────────
OID_SYS_NAME = "1.3.6.1.2.1.1.5.0"  # SNMPv2-MIB::sysName.0
OID_IF_NAME = "1.3.6.1.2.1.31.1.1.1.1"  # IF-MIB::ifName
OID_IF_ADMIN_STATUS = ".1.3.6.1.2.1.2.2.1.7"  # IF-MIB::ifAdminStatus


def normalize_oid(oid: str) -> str:
    """Return *oid* without surrounding whitespace or a leading dot."""
    return oid.strip().lstrip(".")


def extract_index(oid: str) -> int:
    """Return the trailing numeric component of a dotted OID.

    ``1.3.6.1.2.1.31.1.1.1.1.4`` -> ``4``. Raises QueryError when the last
    component is missing or not a decimal number.
    """
    tail = str(oid).rsplit(".", 1)[-1]
    if not tail.isdigit() or not tail.isascii():
        raise QueryError(f"OID '{oid}' has no trailing numeric index")
    return int(tail)


def control_oid_for(index: int) -> str:
    """Return the ifAdminStatus OID for an interface index."""
    return f"{OID_IF_ADMIN_STATUS}.{index}"


def index_of_control_oid(oid: str) -> int | None:
    """Return the ifIndex of an ifAdminStatus OID, or None if *oid* is not one.

    Accepts the OID with or without the leading dot.
    """
    prefix = normalize_oid(OID_IF_ADMIN_STATUS) + "."
    bare = normalize_oid(oid)
    if not bare.startswith(prefix):
        return None
    tail = bare[len(prefix) :]
    if not tail.isdigit() or not tail.isascii():
        return None
    return int(tail)


def decode_text(value: Any, encoding: str = "utf-8", oid: str = "") -> str:
    """Decode an SNMP OCTET STRING value to text, verbatim.

    Raises QueryError for exception values (noSuchObject, noSuchInstance,
    endOfMibView), non-string types and bytes that do not decode.
    """
    where = f" at {oid}" if oid else ""
    if isinstance(value, (NoSuchObject, NoSuchInstance, EndOfMibView)):
        raise QueryError(f"No such object{where}")
    if isinstance(value, OctetString):
        raw = value.asOctets()
    elif isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    else:
        raise QueryError(f"Expected an OCTET STRING{where}, got {type(value).__name__}")
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise QueryError(f"Cannot decode value{where} as {encoding}: {e}") from e
