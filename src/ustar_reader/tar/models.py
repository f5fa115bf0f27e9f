"""Data models for tar archive handling."""

from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, Dict, Optional

from .octal import octal_to_int


class EntryType(Enum):
    """Entry kinds selected by the header type byte."""

    NORMAL_FILE = "0"
    HARD_LINK = "1"
    SYMBOLIC_LINK = "2"
    CHARACTER_SPECIAL = "3"
    BLOCK_SPECIAL = "4"
    DIRECTORY = "5"
    FIFO = "6"
    CONTINUOUS_FILE = "7"
    PAX_EXTENSION = "x"
    GLOBAL_PAX_EXTENSION = "g"
    UNKNOWN = ""

    @classmethod
    def from_byte(cls, type_field: bytes) -> "EntryType":
        """Map a raw one-byte type field to an entry type.

        A NUL type byte is the pre-POSIX spelling of a regular file.
        """
        if type_field == b"\0":
            return cls.NORMAL_FILE
        if len(type_field) != 1:
            return cls.UNKNOWN
        try:
            return cls(type_field.decode("ascii"))
        except (UnicodeDecodeError, ValueError):
            return cls.UNKNOWN


@dataclass(frozen=True)
class Header:
    """Raw fields of one 512-byte USTAR header record."""

    name: bytes
    mode: bytes
    uid: bytes
    gid: bytes
    size: bytes
    mtime: bytes
    chksum: bytes
    type: bytes
    linkname: bytes
    magic: bytes
    version: bytes
    uname: bytes
    gname: bytes
    devmajor: bytes
    devminor: bytes
    prefix: bytes

    @property
    def entry_type(self) -> EntryType:
        return EntryType.from_byte(self.type)

    @property
    def file_size(self) -> int:
        return octal_to_int(self.size)

    @property
    def mode_bits(self) -> int:
        return octal_to_int(self.mode)

    @property
    def uid_value(self) -> int:
        return octal_to_int(self.uid)

    @property
    def gid_value(self) -> int:
        return octal_to_int(self.gid)

    @property
    def mtime_value(self) -> int:
        return octal_to_int(self.mtime)

    @property
    def checksum_value(self) -> int:
        return octal_to_int(self.chksum)


@dataclass
class Entry:
    """Effective description of one archive member after PAX overrides."""

    path: str
    entry_type: EntryType
    size: int
    header: Header
    pax: Dict[str, str] = field(default_factory=dict)


@dataclass
class Archive:
    """Source of an extraction: a path on disk or an open binary stream."""

    path: Optional[str] = None
    fileobj: Optional[BinaryIO] = None

    def __post_init__(self) -> None:
        if self.path is None and self.fileobj is None:
            raise ValueError("Either path or fileobj must be provided")
        if self.path is not None and self.fileobj is not None:
            raise ValueError("Cannot provide both path and fileobj")
