"""PAX extended header payload parsing."""

from typing import Dict, Tuple, Union

from ..exceptions import HeaderError


def parse_pax_record(line: bytes) -> Tuple[str, str]:
    """Parse one ``"<len> <key>=<value>"`` record without its newline.

    Args:
        line: Record bytes, trailing newline already removed

    Returns:
        Tuple of (key, value)

    Raises:
        HeaderError: If the record is malformed
    """
    length_field, separator, keyword = line.partition(b" ")
    if not separator:
        raise HeaderError(f"Malformed PAX record, missing length separator: {line!r}")

    try:
        length = int(length_field, 10)
    except ValueError as e:
        raise HeaderError(f"Malformed PAX record length: {length_field!r}") from e

    # The length counts its own digits and the trailing newline
    if length != len(line) + 1:
        raise HeaderError(
            f"Malformed PAX record, length {length} does not match {len(line) + 1}"
        )

    key, equals, value = keyword.partition(b"=")
    if not equals:
        raise HeaderError(f"Malformed PAX record, missing '=': {line!r}")

    try:
        return key.decode("utf-8"), value.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HeaderError(f"Malformed PAX record, invalid UTF-8: {line!r}") from e


def parse_pax(payload: Union[bytes, bytearray]) -> Dict[str, str]:
    """Parse a PAX extended header payload into attributes.

    Args:
        payload: Entry payload, block padding already stripped

    Returns:
        Mapping of attribute key to value; a repeated key keeps its last value

    Raises:
        HeaderError: If any record is malformed
    """
    attributes: Dict[str, str] = {}
    for line in bytes(payload).split(b"\n"):
        if not line:
            continue
        key, value = parse_pax_record(line)
        attributes[key] = value
    return attributes
