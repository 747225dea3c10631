"""Console entry point for the interactive session."""

from __future__ import annotations

import sys

from usermgr.console.terminal_app import TerminalApp
from usermgr.core.log import configure_logging


def main() -> int:
    try:
        configure_logging()
        app = TerminalApp()
        app.start()
    except KeyboardInterrupt:
        print("\n Goodbye!")
        return 0
    except Exception as exc:
        sys.stderr.write(f"Application error : {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
