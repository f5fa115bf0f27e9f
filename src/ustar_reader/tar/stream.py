"""Record-aligned reading of a tar byte stream."""

from typing import BinaryIO, Optional

from ..exceptions import FileError
from .header import RECORD_SIZE

DEFAULT_BUFFER_SIZE = 2048 * RECORD_SIZE


def nearest_upper_block_multiple(size: int) -> int:
    """Round ``size`` up to the next multiple of the record size."""
    remainder = size % RECORD_SIZE
    if remainder == 0:
        return size
    return size + RECORD_SIZE - remainder


def check_buffer_size(buffer_size: int) -> None:
    """Reject chunk sizes that are not a positive multiple of the record size."""
    if buffer_size <= 0 or buffer_size % RECORD_SIZE:
        raise ValueError(
            f"buffer_size must be a positive multiple of {RECORD_SIZE}: {buffer_size}"
        )


class RecordReader:
    """Forward-only reader over a tar stream.

    Payload reads always consume the padding up to the next record
    boundary, so the following header read stays aligned. Padding is read
    and discarded rather than seeked past, which keeps pipes working.
    """

    def __init__(self, fileobj: BinaryIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        """Initialize record reader.

        Args:
            fileobj: Open binary stream positioned at a record boundary
            buffer_size: Upper bound for a single payload chunk
        """
        check_buffer_size(buffer_size)
        self.fileobj = fileobj
        self.buffer_size = buffer_size
        self.offset = 0

    def _read(self, size: int) -> bytes:
        """Read up to ``size`` bytes, retrying short reads until EOF."""
        chunks = []
        remaining = size
        while remaining > 0:
            try:
                chunk = self.fileobj.read(remaining)
            except OSError as e:
                raise FileError(f"Failed to read archive: {e}") from e
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)

        data = b"".join(chunks)
        self.offset += len(data)
        return data

    def _read_exact(self, size: int) -> bytes:
        data = self._read(size)
        if len(data) != size:
            raise FileError(
                f"Unexpected end of archive at offset {self.offset}: "
                f"needed {size} bytes, got {len(data)}"
            )
        return data

    def read_record(self) -> Optional[bytes]:
        """Read the next header record.

        Returns:
            The record bytes, which may be shorter than a record when the
            stream ends mid-record, or None at end of stream
        """
        data = self._read(RECORD_SIZE)
        return data or None

    def read_payload(self, size: int) -> bytes:
        """Read a whole payload into memory and consume its padding.

        Only meant for small payloads such as PAX extended headers.

        Raises:
            FileError: If the stream ends before the padded payload
        """
        data = self._read_exact(nearest_upper_block_multiple(size))
        return data[:size]

    def copy_payload(self, size: int, output: BinaryIO) -> None:
        """Stream a payload to ``output`` in bounded chunks.

        Args:
            size: Meaningful payload length in bytes
            output: Writable binary file

        Raises:
            FileError: If reading the archive or writing the output fails
        """
        remaining = size
        while remaining > 0:
            wanted = min(remaining, self.buffer_size)
            chunk = self._read_exact(nearest_upper_block_multiple(wanted))
            try:
                output.write(chunk[:wanted])
            except OSError as e:
                name = getattr(output, "name", "output")
                raise FileError(f"Failed to write {name}: {e}") from e
            remaining -= len(chunk)

    def skip_payload(self, size: int) -> None:
        """Consume and discard a payload and its padding."""
        remaining = nearest_upper_block_multiple(size)
        while remaining > 0:
            chunk = self._read_exact(min(remaining, self.buffer_size))
            remaining -= len(chunk)
