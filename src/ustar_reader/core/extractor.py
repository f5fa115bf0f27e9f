"""Archive walker that materializes tar entries onto the filesystem."""

import logging
from typing import BinaryIO, Dict, Optional

from ..exceptions import HeaderError
from ..tar.header import read_verified_header
from ..tar.models import Entry, EntryType, Header
from ..tar.pax import parse_pax
from ..tar.stream import RecordReader
from ..utils import fs
from ..utils.paths import resolve
from .types import ExtractConfig

logger = logging.getLogger(__name__)

# Zero-filled end-of-archive records, plus whitespace padding some writers emit
_PADDING = b"\0 \t\n\r\x0b\x0c"

_IGNORED_TYPES = {
    EntryType.HARD_LINK: "hard link",
    EntryType.SYMBOLIC_LINK: "symbolic link",
    EntryType.CHARACTER_SPECIAL: "character special",
    EntryType.BLOCK_SPECIAL: "block special",
    EntryType.FIFO: "fifo",
}


def is_padding_record(record: bytes) -> bool:
    """Check if a record carries no header, only NUL or whitespace padding."""
    return len(record.strip(_PADDING)) == 0


class ArchiveExtractor:
    """Sequential extractor for a single tar stream."""

    def __init__(self, fileobj: BinaryIO, config: Optional[ExtractConfig] = None) -> None:
        """Initialize the extractor.

        Args:
            fileobj: Open binary stream positioned at the first header
            config: Extraction configuration
        """
        self.config = config or ExtractConfig()
        self.reader = RecordReader(fileobj, self.config.buffer_size)
        self.files_extracted = 0

    def run(self) -> int:
        """Walk the archive until end of stream.

        Returns:
            Number of regular files written

        Raises:
            HeaderError: On a checksum mismatch or malformed PAX header
            FileError: On any read or write failure
        """
        while True:
            record = self.reader.read_record()
            if record is None:
                break
            if is_padding_record(record):
                continue

            header = read_verified_header(record)
            self._dispatch(header)

        logger.debug(
            "Finished archive after %d bytes, %d files extracted",
            self.reader.offset,
            self.files_extracted,
        )
        return self.files_extracted

    def _entry(self, header: Header, pax: Optional[Dict[str, str]] = None) -> Entry:
        pax = pax or {}
        return Entry(
            path=resolve(
                self.config.destination, header.prefix, header.name, pax.get("path")
            ),
            entry_type=header.entry_type,
            size=header.file_size,
            header=header,
            pax=pax,
        )

    def _dispatch(self, header: Header) -> None:
        entry_type = header.entry_type
        match entry_type:
            case EntryType.NORMAL_FILE:
                self._extract_file(self._entry(header))
            case EntryType.DIRECTORY:
                self._make_directory(self._entry(header))
            case (
                EntryType.HARD_LINK
                | EntryType.SYMBOLIC_LINK
                | EntryType.CHARACTER_SPECIAL
                | EntryType.BLOCK_SPECIAL
                | EntryType.FIFO
            ):
                logger.warning("Ignore %s in tar file", _IGNORED_TYPES[entry_type])
            case EntryType.CONTINUOUS_FILE:
                logger.warning("Ignore continuous file in tar file")
                self.reader.skip_payload(header.file_size)
            case EntryType.PAX_EXTENSION:
                self._expand_pax(header)
            case EntryType.GLOBAL_PAX_EXTENSION:
                logger.warning("Global PAX header is not supported, skipping it")
                self.reader.skip_payload(header.file_size)
            case EntryType.UNKNOWN:
                logger.warning("Ignore undefined entry type %r in tar file", header.type)

    def _expand_pax(self, pax_header: Header) -> None:
        pax = parse_pax(self.reader.read_payload(pax_header.file_size))

        record = self.reader.read_record()
        if record is None:
            raise HeaderError("Unexpected end of archive after PAX header")
        if is_padding_record(record):
            raise HeaderError("Unexpected empty header after PAX header")

        header = read_verified_header(record)
        entry = self._entry(header, pax)
        match entry.entry_type:
            case EntryType.NORMAL_FILE:
                self._extract_file(entry)
            case (
                EntryType.CONTINUOUS_FILE
                | EntryType.PAX_EXTENSION
                | EntryType.GLOBAL_PAX_EXTENSION
            ):
                logger.warning(
                    "Ignore %s entry after PAX header: %s",
                    entry.entry_type.name.lower(),
                    entry.path,
                )
                self.reader.skip_payload(entry.size)
            case _:
                # TODO: materialize directories and the other member kinds
                # described by a PAX header, not only regular files.
                logger.warning(
                    "Ignore %s entry after PAX header: %s",
                    entry.entry_type.name.lower(),
                    entry.path,
                )

    def _make_directory(self, entry: Entry) -> None:
        if not fs.exists(entry.path):
            fs.mkdir_all(entry.path)
            logger.debug("Created directory %s", entry.path)

    def _extract_file(self, entry: Entry) -> None:
        fs.ensure_parent(entry.path)

        output = fs.open_for_write(entry.path)
        try:
            self.reader.copy_payload(entry.size, output)
        finally:
            fs.close(output)

        self.files_extracted += 1
        logger.debug("Extracted %s (%d bytes)", entry.path, entry.size)
