"""Conversion between text and raw bytes.

Passwords and encoded hashes cross the text/bytes boundary here and
nowhere else. Encoding is always UTF-8. Decoding is lenient: invalid
sequences become U+FFFD instead of raising, so showing a password or a
hash as text can never fail.
"""

_ENCODING = "utf-8"


def to_bytes(text: str) -> bytes:
    """Encode text as UTF-8 bytes.

    Args:
        text: Text to encode.

    Returns:
        bytes: UTF-8 encoding of ``text``.

    Example:
        >>> to_bytes("p\u00e4ss")
        b'p\\xc3\\xa4ss'
    """
    return text.encode(_ENCODING)


def from_bytes(data: bytes) -> str:
    """Decode UTF-8 bytes, replacing invalid sequences.

    Args:
        data: Bytes to decode.

    Returns:
        str: Decoded text (U+FFFD for every invalid sequence).

    Example:
        >>> from_bytes(b"ab\\xff")
        'ab\\ufffd'
    """
    return data.decode(_ENCODING, errors="replace")
