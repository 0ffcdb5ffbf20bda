from pathlib import Path
import sys

if sys.version_info >= (3, 11):
    import tomllib  # type: ignore
else:  # pragma: no cover - fallback for older interpreters
    import tomli as tomllib  # type: ignore

from ruby2js.version import STRING


def _pyproject() -> dict:
    pyproject = Path(__file__).parents[1] / "pyproject.toml"
    return tomllib.loads(pyproject.read_text(encoding="utf-8"))


def test_pyproject_version_matches_package():
    declared = _pyproject()["project"]["version"]
    assert declared == STRING, f"pyproject.toml declares {declared}, package publishes {STRING}"

