"""128-bit identifiers with a fixed, human-readable text encoding."""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass

_MASK64 = (1 << 64) - 1
_INVALID_TEXT = "UUID::Invalid"
_PATTERN = re.compile("UUID::" + ":".join(["([0-9A-Fa-f]{4})"] * 8))


@dataclass(frozen=True, order=True)
class UUID:
    """An identifier made of two unsigned 64-bit halves.

    Ordering compares the high half first, then the low half. The all-zero
    value is the invalid identifier.
    """

    high: int = 0
    low: int = 0

    def __post_init__(self) -> None:
        for name in ("high", "low"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= _MASK64:
                raise ValueError(f"UUID {name} half must be an unsigned 64-bit integer, got {value!r}")

    @classmethod
    def generate(cls) -> UUID:
        """Return a new random identifier."""
        return cls(secrets.randbits(64), secrets.randbits(64))

    @classmethod
    def invalid(cls) -> UUID:
        """Return the all-zero identifier."""
        return cls(0, 0)

    def is_valid(self) -> bool:
        return bool(self)

    def __bool__(self) -> bool:
        return bool(self.high or self.low)

    @staticmethod
    def decodes_to_uuid(text: str) -> bool:
        """True if ``text`` is an encoded identifier, the invalid one included."""
        return text == _INVALID_TEXT or UUID.decodes_to_valid_uuid(text)

    @staticmethod
    def decodes_to_valid_uuid(text: str) -> bool:
        """True if ``text`` matches the eight-group hexadecimal encoding."""
        return _PATTERN.fullmatch(text) is not None

    @classmethod
    def decode(cls, text: str) -> UUID:
        """Parse an encoded identifier; raise ``ValueError`` if it is malformed."""
        if text == _INVALID_TEXT:
            return cls.invalid()
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"cannot decode UUID from {text!r}")
        groups = match.groups()
        return cls(int("".join(groups[:4]), 16), int("".join(groups[4:]), 16))

    def encode(self) -> str:
        """Return the text form, ``UUID::XXXX:...`` or ``UUID::Invalid``."""
        if not self:
            return _INVALID_TEXT
        digits = f"{self.high:016X}{self.low:016X}"
        return "UUID::" + ":".join(digits[i:i + 4] for i in range(0, 32, 4))

    def __str__(self) -> str:
        return self.encode()