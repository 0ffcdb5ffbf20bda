"""Package metadata for ruby2js.

Expose a single source of truth for the version. The release triple lives in
``ruby2js.version`` and is published once per process; ``pyproject.toml``
declares the same string so wheels and editable installs agree with it.
"""

from __future__ import annotations

# No importlib.metadata lookup: the literal triple must hold before installation too.
from .errors import Ruby2JSError, ValidationError
from .version import VERSION, VersionInfo, __version__, __version_info__

__all__ = [
	"__version__",
	"__version_info__",
	"VERSION",
	"VersionInfo",
	"Ruby2JSError",
	"ValidationError",
]
