"""pushdown/config.py — TOML settings for the host shell and machine.

Settings live in ``data/settings.toml`` and are loaded once at startup.
Any module can read a value with::

    from pushdown.config import get
    fps = get("window", "fps", 60)

Call ``reload()`` to re-read the file.  ``Settings.from_config()``
returns a typed snapshot of everything the shell needs.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli


_data: dict = {}
_path: Path | None = None


def load(path: str | Path | None = None) -> None:
    """Load (or reload) settings from *path*.

    If *path* is ``None``, default to ``data/settings.toml`` relative to
    the project root (one level above ``pushdown/``).  A missing or
    malformed file leaves every value at its default.
    """
    global _data, _path

    if path is None:
        root = Path(__file__).resolve().parent.parent
        path = root / "data" / "settings.toml"
    else:
        path = Path(path)

    _path = path

    if not path.exists():
        print(f"[CONFIG] {path} not found, using defaults")
        _data = {}
        return

    try:
        with open(path, "rb") as f:
            _data = tomllib.load(f)
    except tomllib.TOMLDecodeError as ex:
        print(f"[CONFIG] {path} is not valid TOML ({ex}), using defaults")
        _data = {}
        return

    print(f"[CONFIG] Loaded {_count_leaves(_data)} values from {path}")


def reload() -> None:
    """Re-read the settings file from disk."""
    load(_path)


def get(section: str, key: str, default=None):
    """Read a setting.

    *section* uses dot-notation to traverse nested tables, e.g.
    ``"window"`` looks up ``[window]``.

    >>> get("window", "missing_key", 60)
    60
    """
    node = _data
    for part in section.split("."):
        if isinstance(node, dict):
            node = node.get(part)
        else:
            return default
        if node is None:
            return default
    if isinstance(node, dict):
        return node.get(key, default)
    return default


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    node = _data
    for part in section_path.split("."):
        if isinstance(node, dict):
            node = node.get(part)
        else:
            return {}
        if node is None:
            return {}
    if isinstance(node, dict):
        return dict(node)
    return {}


@dataclass(frozen=True)
class Settings:
    title: str = "pushdown"
    width: int = 640
    height: int = 400
    fps: int = 30
    verbose: bool = False
    journal_size: int = 200

    @classmethod
    def from_config(cls) -> Settings:
        """Snapshot of the currently loaded values over the defaults."""
        d = cls()
        return cls(
            title=str(get("window", "title", d.title)),
            width=int(get("window", "width", d.width)),
            height=int(get("window", "height", d.height)),
            fps=int(get("window", "fps", d.fps)),
            verbose=_flag(get("machine", "verbose", d.verbose), d.verbose),
            journal_size=int(get("machine", "journal_size", d.journal_size)),
        )


def _flag(value, default: bool) -> bool:
    """Only a real TOML boolean counts; quoted strings fall back."""
    if isinstance(value, bool):
        return value
    print(f"[CONFIG] expected true/false, got {value!r}, using {default}")
    return default


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
