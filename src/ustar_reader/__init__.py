"""ustar-reader - Streaming extractor for USTAR and PAX tar archives."""

__version__ = "0.1.0"

from .exceptions import ArchiveError, FileError, HeaderError
from .extract import extract, extract_async, open_archive
from .tar.models import Archive, Entry, EntryType, Header

__all__ = [
    "Archive",
    "Entry",
    "EntryType",
    "Header",
    "ArchiveError",
    "FileError",
    "HeaderError",
    "open_archive",
    "extract",
    "extract_async",
]
