"""Identifier generation for short links."""

import base64
import secrets
import string
import threading
import time
from typing import Callable, Optional


class TimeToken:
    """Millisecond time token, strictly increasing within the process.

    Renders the current epoch time in milliseconds as lowercase base 36.
    When the clock has not advanced past the previous value the previous
    value plus one is used instead. The first call compares the clock with
    itself, so it always yields clock + 1.
    """

    BASE36_CHARS = string.digits + string.ascii_lowercase

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        """Initialize the token source.

        Args:
            clock: Optional callable returning epoch milliseconds
        """
        self._clock = clock or (lambda: time.time_ns() // 1_000_000)
        self._last: Optional[int] = None
        self._lock = threading.Lock()

    def next_millis(self) -> int:
        """Return the next strictly increasing millisecond value."""
        with self._lock:
            now = self._clock()
            last = self._last if self._last is not None else now
            value = now if now > last else last + 1
            self._last = value
            return value

    def next(self) -> str:
        """Return the next token as base 36 text."""
        return self.to_base36(self.next_millis())

    @classmethod
    def to_base36(cls, num: int) -> str:
        if num == 0:
            return cls.BASE36_CHARS[0]

        result = []
        while num > 0:
            num, remainder = divmod(num, 36)
            result.append(cls.BASE36_CHARS[remainder])

        return ''.join(reversed(result))


def lenient_hex_to_bytes(text: str) -> bytes:
    """Decode text two characters at a time as hexadecimal.

    Each pair yields the value of its leading run of hex digits, or 0 when
    the pair starts with a non-hex character ("k5" -> 0, "5k" -> 5,
    "ab" -> 171). Base 36 time tokens are decoded this way.

    Raises:
        ValueError: If text has an odd number of characters
    """
    if len(text) % 2 != 0:
        raise ValueError(f"Expected an even number of characters, got {len(text)}")

    out = bytearray()
    for i in range(0, len(text), 2):
        pair = text[i:i + 2]
        digits = ""
        for char in pair:
            if char not in string.hexdigits:
                break
            digits += char
        out.append(int(digits, 16) if digits else 0)

    return bytes(out)


def strip_base64(data: bytes) -> str:
    """Standard base64 with every '=' and '+' character deleted.

    Deleting rather than substituting is lossy: distinct inputs can map to
    the same output.
    """
    encoded = base64.b64encode(data).decode("ascii")
    return encoded.replace("=", "").replace("+", "")


class IdentifierGenerator:
    """Generate short link identifiers.

    identifier = strip_base64(lenient_hex(time_token) + 4 random bytes)
    """

    RANDOM_BYTES = 4

    def __init__(
        self,
        time_token: Optional[TimeToken] = None,
        random_bytes: Optional[Callable[[int], bytes]] = None,
    ):
        """Initialize identifier generator.

        Args:
            time_token: Optional time token source
            random_bytes: Optional callable returning n random bytes
        """
        self.time_token = time_token or TimeToken()
        self.random_bytes = random_bytes or secrets.token_bytes

    def generate(self) -> str:
        """Generate a candidate identifier.

        Returns:
            Identifier string (not checked for uniqueness)
        """
        time_bytes = lenient_hex_to_bytes(self.time_token.next())
        return strip_base64(time_bytes + self.random_bytes(self.RANDOM_BYTES))
