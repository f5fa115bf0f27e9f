"""ASCII-octal numeric field decoding."""

from typing import Union

_DIGIT_ZERO = 0x30
_DIGIT_SEVEN = 0x37


def octal_to_int(field: Union[bytes, bytearray]) -> int:
    """Decode an ASCII-octal header field.

    Every byte in ``'0'..'7'`` is folded into the result. Any other byte
    (space, NUL, terminator) is skipped and scanning carries on, so
    ``b"12 34\\0"`` decodes the same as ``b"1234"``.

    Args:
        field: Raw fixed-width field bytes

    Returns:
        Decoded value, 0 for empty or digit-free input
    """
    value = 0
    for byte in field:
        if _DIGIT_ZERO <= byte <= _DIGIT_SEVEN:
            value = value * 8 + (byte - _DIGIT_ZERO)
    return value
