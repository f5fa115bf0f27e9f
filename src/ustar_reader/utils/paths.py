"""Output path resolution for archive members."""

import os
from typing import Optional

from ..exceptions import HeaderError

PAD_BYTE = b"\0"


def decode_field(field: bytes) -> str:
    """Strip NUL padding from a fixed-width name field and decode it."""
    return field.strip(PAD_BYTE).decode("utf-8", errors="surrogateescape")


def _relative(member_path: str) -> str:
    return member_path.lstrip("/")


def _contained(output_root: str, output_path: str) -> str:
    root = os.path.abspath(output_root)
    if os.path.commonpath([root, output_path]) != root:
        raise HeaderError(f"Member path escapes the output root: {output_path}")
    return output_path


def resolve(
    output_root: str,
    prefix: bytes,
    name: bytes,
    pax_path: Optional[str] = None,
) -> str:
    """Build the absolute output path of an archive member.

    A non-empty PAX ``path`` attribute wins over the header fields.
    Otherwise the (NUL-trimmed) prefix and name are joined in that order.
    A leading ``/`` is dropped, so absolute member names land under the root.

    Args:
        output_root: Destination root directory
        prefix: Raw ``prefix`` header field
        name: Raw ``name`` header field
        pax_path: Optional ``path`` from a preceding PAX header

    Returns:
        Absolute, normalized output path

    Raises:
        HeaderError: If ``..`` components take the path outside the root
    """
    if pax_path:
        output_path = os.path.join(output_root, _relative(pax_path))
    else:
        output_path = output_root
        prefix_str = decode_field(prefix)
        if prefix_str:
            output_path = os.path.join(output_path, _relative(prefix_str))
        output_path = os.path.join(output_path, _relative(decode_field(name)))
    return _contained(output_root, os.path.abspath(output_path))
