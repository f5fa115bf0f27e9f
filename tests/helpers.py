"""Helpers for building tar records byte by byte."""

from ustar_reader.tar.header import CHKSUM_OFFSET, RECORD_SIZE, compute_checksum

ZERO_RECORD = b"\0" * RECORD_SIZE


def _field(value: bytes, width: int) -> bytes:
    assert len(value) <= width
    return value + b"\0" * (width - len(value))


def _octal(value: int, width: int) -> bytes:
    return _field(("%0*o" % (width - 1, value)).encode(), width)


def make_header(
    name: str,
    size: int = 0,
    type_flag: bytes = b"0",
    prefix: str = "",
    mode: int = 0o644,
    linkname: str = "",
) -> bytes:
    """Build a valid USTAR header record with a correct checksum."""
    record = b"".join(
        [
            _field(name.encode(), 100),
            _octal(mode, 8),
            _octal(1000, 8),
            _octal(1000, 8),
            _octal(size, 12),
            _octal(1700000000, 12),
            b" " * 8,
            type_flag,
            _field(linkname.encode(), 100),
            b"ustar\0",
            b"00",
            _field(b"user", 32),
            _field(b"group", 32),
            _octal(0, 8),
            _octal(0, 8),
            _field(prefix.encode(), 155),
            b"\0" * 12,
        ]
    )
    assert len(record) == RECORD_SIZE

    chksum = b"%06o\0 " % compute_checksum(record)
    return record[:CHKSUM_OFFSET] + chksum + record[CHKSUM_OFFSET + 8 :]


def pad(payload: bytes) -> bytes:
    """Pad a payload to the next record boundary."""
    remainder = len(payload) % RECORD_SIZE
    if remainder:
        payload += b"\0" * (RECORD_SIZE - remainder)
    return payload


def pax_record(key: str, value: str) -> bytes:
    """Encode one self-describing PAX record."""
    body = f" {key}={value}\n".encode()
    # The length prefix counts its own digits
    length = previous = 0
    while True:
        length = len(body) + len(str(previous))
        if length == previous:
            break
        previous = length
    return str(length).encode() + body


def file_entry(name: str, content: bytes, prefix: str = "") -> bytes:
    """Header plus padded payload of a regular file."""
    return make_header(name, len(content), b"0", prefix=prefix) + pad(content)


def end_of_archive() -> bytes:
    return ZERO_RECORD * 2
