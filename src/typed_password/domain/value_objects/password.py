"""Plaintext password value object.

``Pass`` marks a byte string as a credential. It never shows its content:
repr, str and format all render the same placeholder, there is no value
equality or ordering, and it refuses to be pickled.

The only ways to read a password back are the two functions named
``unsafe_show_password*``. Hashing code reads the bytes through
``Pass.key_material``, which is meant for one-way functions only.

Usage:
    from typed_password import mk_pass

    password = mk_pass(form["password"])
    logger.info("Login attempt", password=password)  # logs **PASSWORD**
"""

from typing import Any, NoReturn

from typed_password.core.encoding import from_bytes, to_bytes

_PLACEHOLDER = "**PASSWORD**"


class Pass:
    """Plaintext password (opaque).

    Construction accepts any bytes, including empty, and never fails.

    Example:
        >>> password = Pass(b"hunter2")
        >>> password
        Pass(**PASSWORD**)
        >>> f"{password}"
        '**PASSWORD**'
    """

    __slots__ = ("_value",)

    _value: bytes

    def __init__(self, value: bytes) -> None:
        object.__setattr__(self, "_value", bytes(value))

    def key_material(self, limit: int | None = None) -> bytes:
        """Return the password bytes for a one-way function.

        Args:
            limit: Keep at most this many leading bytes (None keeps all).

        Returns:
            bytes: Raw password bytes, possibly truncated.
        """
        if limit is None:
            return self._value
        return self._value[:limit]

    def __repr__(self) -> str:
        return f"Pass({_PLACEHOLDER})"

    def __str__(self) -> str:
        return _PLACEHOLDER

    def __format__(self, format_spec: str) -> str:
        return _PLACEHOLDER

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError("Pass is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError("Pass is immutable")

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        raise TypeError("Pass cannot be pickled")

    def __copy__(self) -> "Pass":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Pass":
        return self


def mk_pass(value: str | bytes) -> Pass:
    """Build a Pass from text or raw bytes.

    Text is encoded as UTF-8 without any normalization.

    Args:
        value: Password as typed by the user.

    Returns:
        Pass: Opaque password.
    """
    if isinstance(value, str):
        return Pass(to_bytes(value))
    return Pass(value)


def unsafe_show_password(password: Pass) -> bytes:
    """Return the raw bytes of a password.

    UNSAFE: for debugging and test fixtures only. Never log the result.
    """
    return password.key_material()


def unsafe_show_password_text(password: Pass) -> str:
    """Return a password as text (invalid UTF-8 becomes U+FFFD).

    UNSAFE: for debugging and test fixtures only. Never log the result.
    """
    return from_bytes(password.key_material())
