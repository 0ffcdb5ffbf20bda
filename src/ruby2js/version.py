"""Release version of ruby2js.

The triple below is the single source of truth; ``pyproject.toml`` must
declare the same dotted string (checked by the test suite). The value is
published once per process through :data:`SLOT` and never changes after
that, so consumers can take :data:`VERSION` as a plain value.

    from ruby2js.version import VERSION, STRING
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, fields
from typing import Iterator, Optional, Tuple

from .errors import ValidationError
from .logutil import get_logger

MAJOR = 3
MINOR = 0
TINY = 2


@dataclass(frozen=True)
class VersionInfo:
    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{f.name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValidationError(f"{f.name} must be non-negative, got {value}")

    @property
    def tiny(self) -> int:
        return self.patch

    @property
    def display(self) -> str:
        """Dotted form, e.g. ``3.0.2``."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())

    def __str__(self) -> str:
        return self.display

    @classmethod
    def parse(cls, text: str) -> "VersionInfo":
        """Inverse of :attr:`display`.

        Accepts exactly three dot-separated decimal components without
        signs, whitespace or leading zeros.
        """
        if not isinstance(text, str):
            raise ValidationError(f"version must be a str, got {type(text).__name__}")
        parts = text.split(".")
        if len(parts) != 3:
            raise ValidationError(f"expected MAJOR.MINOR.TINY, got {text!r}")
        numbers = []
        for part in parts:
            if not (part.isascii() and part.isdigit()):
                raise ValidationError(f"invalid version component {part!r} in {text!r}")
            if len(part) > 1 and part[0] == "0":
                raise ValidationError(f"leading zero in component {part!r} of {text!r}")
            numbers.append(int(part))
        return cls(*numbers)


class VersionSlot:
    """Holds one :class:`VersionInfo`, defined at most once.

    The first successful :meth:`initialize` publishes the value; every later
    call returns it untouched, whatever arguments it was given.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Optional[VersionInfo] = None

    @property
    def defined(self) -> bool:
        return self._value is not None

    def initialize(self, major: int = MAJOR, minor: int = MINOR, patch: int = TINY) -> VersionInfo:
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                # a ValidationError here leaves the slot undefined
                info = VersionInfo(major, minor, patch)
                self._value = info
                get_logger().debug("published version %s", info.display)
            return self._value

    def read(self) -> VersionInfo:
        value = self._value
        if value is None:
            value = self.initialize()
        return value


# importlib.reload keeps the module __dict__; a second load reuses the published slot
try:
    SLOT
except NameError:
    SLOT = VersionSlot()


def initialize(major: int = MAJOR, minor: int = MINOR, patch: int = TINY) -> VersionInfo:
    return SLOT.initialize(major, minor, patch)


def read() -> VersionInfo:
    return SLOT.read()


VERSION = initialize()
# literals from a later load never win over the published triple
MAJOR, MINOR, TINY = VERSION.as_tuple()
STRING = VERSION.display

__version__ = STRING
__version_info__ = VERSION.as_tuple()

__all__ = [
    "MAJOR",
    "MINOR",
    "TINY",
    "VersionInfo",
    "VersionSlot",
    "SLOT",
    "initialize",
    "read",
    "VERSION",
    "STRING",
    "__version__",
    "__version_info__",
]
