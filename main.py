"""Main CLI entry-point."""
from __future__ import annotations

import shutil
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_RESET = "\033[0m"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


_LOGO = r"""
  ██╗      ██████╗ ██╗         ███████╗████████╗ █████╗ ████████╗███████╗
  ██║     ██╔═══██╗██║         ██╔════╝╚══██╔══╝██╔══██╗╚══██╔══╝██╔════╝
  ██║     ██║   ██║██║         ███████╗   ██║   ███████║   ██║   ███████╗
  ██║     ██║   ██║██║         ╚════██║   ██║   ██╔══██║   ██║   ╚════██║
  ███████╗╚██████╔╝███████╗    ███████║   ██║   ██║  ██║   ██║   ███████║
  ╚══════╝ ╚═════╝ ╚══════╝    ╚══════╝   ╚═╝   ╚═╝  ╚═╝   ╚═╝   ╚══════╝
"""


def _print_logo() -> None:
    cols = shutil.get_terminal_size(fallback=(100, 20)).columns
    div = "═" * min(cols, 80)
    print(_g(div))
    for line in _LOGO.splitlines():
        print(_g(line))
    print(_c("  Champions, live games and leaderboards from the Riot Games API"))
    print(_g(div))


def main(argv: list[str]) -> int:
    bootstrap_logging(
        service="lol-stats",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="lol-stats.jsonl",
    )
    # Lazy import keeps logging configured before any module-level logger use
    from presentation.cli import run as run_cli

    try:
        if not argv and sys.stdout.isatty():
            _print_logo()
            argv = ["--help"]
        return run_cli(argv)
    finally:
        shutdown_logging()


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
