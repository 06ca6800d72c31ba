"""test_config.py — Settings loader.

Writes throwaway TOML files to a temp dir and checks lookups, defaults,
reload, and the typed ``Settings`` snapshot.

Run:  python test_config.py   (pytest collects the same functions)
"""
from __future__ import annotations
import io, sys, tempfile, traceback
from contextlib import redirect_stdout
from pathlib import Path

from pushdown import config
from pushdown.config import Settings


def write(text: str) -> Path:
    tmp = Path(tempfile.mkdtemp()) / "settings.toml"
    tmp.write_text(text, encoding="utf-8")
    return tmp


def quiet_load(path=None) -> str:
    buf = io.StringIO()
    with redirect_stdout(buf):
        config.load(path)
    return buf.getvalue()


def test_missing_file_falls_back_to_defaults():
    out = quiet_load(Path(tempfile.mkdtemp()) / "nope.toml")
    assert out.startswith("[CONFIG]")
    assert "not found" in out
    assert config.get("window", "fps", 99) == 99
    assert Settings.from_config() == Settings()


def test_values_and_sections():
    path = write(
        '[window]\n'
        'title = "Demo"\n'
        'width = 800\n'
        '\n'
        '[machine]\n'
        'verbose = true\n'
        '\n'
        '[machine.extra]\n'
        'depth = 4\n'
    )
    out = quiet_load(path)
    assert "Loaded 4 values" in out

    assert config.get("window", "title") == "Demo"
    assert config.get("window", "height", 123) == 123
    assert config.get("machine.extra", "depth") == 4
    assert config.get("window.title", "x", "dflt") == "dflt"
    assert config.get("nosuch.section", "x", 0) == 0
    assert config.section("machine.extra") == {"depth": 4}
    assert config.section("nosuch") == {}

    s = Settings.from_config()
    assert s.title == "Demo"
    assert s.width == 800
    assert s.height == Settings().height
    assert s.verbose is True
    assert s.journal_size == Settings().journal_size


def test_quoted_boolean_falls_back_to_default():
    path = write('[machine]\nverbose = "false"\n')
    quiet_load(path)
    buf = io.StringIO()
    with redirect_stdout(buf):
        s = Settings.from_config()
    assert s.verbose is False
    assert "expected true/false" in buf.getvalue()

    path = write("[machine]\nverbose = true\n")
    quiet_load(path)
    assert Settings.from_config().verbose is True


def test_invalid_toml_uses_defaults():
    path = write("[window\ntitle = \n")
    out = quiet_load(path)
    assert "not valid TOML" in out
    assert config.section("window") == {}


def test_reload_rereads_same_path():
    path = write("[window]\nfps = 24\n")
    quiet_load(path)
    assert config.get("window", "fps") == 24

    path.write_text("[window]\nfps = 48\n", encoding="utf-8")
    buf = io.StringIO()
    with redirect_stdout(buf):
        config.reload()
    assert config.get("window", "fps") == 48


def test_default_path_is_project_settings():
    quiet_load()
    s = Settings.from_config()
    assert s.title == "pushdown demo"
    assert s.fps == 30
    assert s.verbose is False


if __name__ == "__main__":
    tests = [(n, fn) for n, fn in sorted(globals().items())
             if n.startswith("test_") and callable(fn)]
    _passed = 0
    _failed = 0
    for name, fn in tests:
        try:
            fn()
            _passed += 1
            print(f"  [PASS] {name}")
        except Exception:
            _failed += 1
            print(f"  [FAIL] {name}")
            traceback.print_exc()

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Config Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
