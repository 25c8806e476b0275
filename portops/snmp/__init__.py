"""SNMP building blocks: OID constants, index resolution and the transport."""

from portops.snmp.oids import (
    OID_IF_ADMIN_STATUS,
    OID_IF_NAME,
    OID_SYS_NAME,
    control_oid_for,
    decode_text,
    extract_index,
    index_of_control_oid,
)
from portops.snmp.transport import BaseTransport, SnmpTransport

__all__ = [
    "OID_SYS_NAME",
    "OID_IF_NAME",
    "OID_IF_ADMIN_STATUS",
    "control_oid_for",
    "decode_text",
    "extract_index",
    "index_of_control_oid",
    "BaseTransport",
    "SnmpTransport",
]
