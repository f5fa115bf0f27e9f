"""Core configuration types."""

from dataclasses import dataclass

from ..tar.stream import DEFAULT_BUFFER_SIZE, check_buffer_size


@dataclass
class ExtractConfig:
    """Extraction configuration.

    Args:
        destination: Root directory that archive members are written under
        buffer_size: Upper bound of a single payload chunk, a multiple of 512
    """

    destination: str = "."
    buffer_size: int = DEFAULT_BUFFER_SIZE

    def __post_init__(self) -> None:
        check_buffer_size(self.buffer_size)
