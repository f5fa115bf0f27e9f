"""USTAR header record decoding and checksum verification."""

from typing import Tuple, Union

from ..exceptions import HeaderError
from .models import Header
from .octal import octal_to_int

RECORD_SIZE = 512

# (field, offset, width); bytes 500..511 are reserved padding
HEADER_LAYOUT: Tuple[Tuple[str, int, int], ...] = (
    ("name", 0, 100),
    ("mode", 100, 8),
    ("uid", 108, 8),
    ("gid", 116, 8),
    ("size", 124, 12),
    ("mtime", 136, 12),
    ("chksum", 148, 8),
    ("type", 156, 1),
    ("linkname", 157, 100),
    ("magic", 257, 6),
    ("version", 263, 2),
    ("uname", 265, 32),
    ("gname", 297, 32),
    ("devmajor", 329, 8),
    ("devminor", 337, 8),
    ("prefix", 345, 155),
)

CHKSUM_OFFSET = 148
CHKSUM_WIDTH = 8


def parse_header(record: Union[bytes, bytearray]) -> Header:
    """Slice a header record into its raw fields.

    Args:
        record: Exactly one 512-byte header record

    Returns:
        Header with every field as raw bytes

    Raises:
        HeaderError: If the record is not 512 bytes long
    """
    if len(record) != RECORD_SIZE:
        raise HeaderError(
            f"Truncated header record: {len(record)} of {RECORD_SIZE} bytes"
        )

    record = bytes(record)
    fields = {
        name: record[offset : offset + width] for name, offset, width in HEADER_LAYOUT
    }
    return Header(**fields)


def compute_checksum(record: Union[bytes, bytearray]) -> int:
    """Compute the checksum of a header record.

    The unsigned sum of all bytes, with the eight checksum bytes counted
    as ASCII spaces.
    """
    total = sum(record[:CHKSUM_OFFSET]) + sum(record[CHKSUM_OFFSET + CHKSUM_WIDTH :])
    return total + CHKSUM_WIDTH * 0x20


def verify_checksum(record: Union[bytes, bytearray], chksum: bytes) -> bool:
    """Check a record against its declared octal checksum field."""
    return compute_checksum(record) == octal_to_int(chksum)


def read_verified_header(record: Union[bytes, bytearray]) -> Header:
    """Parse a header record and verify its checksum.

    Raises:
        HeaderError: If the record is truncated or the checksum does not match
    """
    header = parse_header(record)
    if not verify_checksum(record, header.chksum):
        raise HeaderError(
            f"Invalid checksum: expected {header.checksum_value}, "
            f"computed {compute_checksum(record)}"
        )
    return header
