"""splitctl CLI bootstrap."""

from __future__ import annotations

from splitctl.cli import app

if __name__ == "__main__":
    app()
