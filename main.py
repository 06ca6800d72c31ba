"""
main.py — Bootstrap

1. Load settings
2. Build the machine around the title screen
3. Hand it to the pygame shell
4. Run until the last state is gone
"""

from __future__ import annotations

from pushdown import config
from pushdown.app import App
from pushdown.config import Settings
from pushdown.journal import Journal
from pushdown.machine import StateMachine
from screens import TitleScreen


def build_machine(settings: Settings) -> StateMachine:
    journal = Journal(max_entries=settings.journal_size) if settings.journal_size > 0 else None
    return StateMachine(TitleScreen(), journal=journal, verbose=settings.verbose)


def main():
    config.load()
    settings = Settings.from_config()
    machine = build_machine(settings)
    App(machine, settings).run()

    if machine.journal is not None:
        stops = sum(1 for e in machine.journal.entries if e["kind"] == "on_stop")
        print(f"[MAIN] {len(machine.journal)} journal entries, {stops} states stopped")


if __name__ == "__main__":
    main()
