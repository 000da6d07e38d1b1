#!/usr/bin/env python3
"""
tasks.py: keyboard-driven hierarchical task list.

All tasks live in one SQLite file (tasks.db by default). This module parses
the command line, configures logging, opens the store and runs the TUI.
"""

import argparse
import logging
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError
from typing import List, Optional

from application.ports import StoreInitError
from config import get_database_path, get_log_path, get_user_theme
from core.desktop.devtools.application.task_manager import TaskManager
from infrastructure.sqlite_repository import SqliteTaskRepository
from util.logging_setup import setup_logging

from .i18n import translate
from .tui_app import TaskTreeTUI
from .tui_themes import THEMES, DEFAULT_THEME

logger = logging.getLogger("tasktree.app")


def _package_version() -> str:
    try:
        return pkg_version("tasktree")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasktree",
        description="Interactive hierarchical task list (j/k move, a add, s subtask, e edit, d delete, q quit).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def run_tui(manager: TaskManager, theme: str) -> None:
    TaskTreeTUI(manager, theme=theme).run()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    build_parser().parse_args(argv)
    setup_logging(get_log_path())

    db_path = get_database_path()
    theme = get_user_theme() or DEFAULT_THEME
    if theme not in THEMES:
        logger.warning("Unknown theme %r, using %s", theme, DEFAULT_THEME)
        theme = DEFAULT_THEME

    try:
        repository = SqliteTaskRepository.open(db_path)
    except StoreInitError as exc:
        logger.error("Cannot open task store %s: %s", db_path, exc)
        print(translate("STORE_INIT_FAILED", path=db_path, error=exc), file=sys.stderr)
        return 1

    logger.info("Task store opened: %s", db_path)
    try:
        with repository:
            run_tui(TaskManager(repository), theme)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    logger.info("Exit")
    return 0


__all__ = ["build_parser", "main", "run_tui"]


if __name__ == "__main__":
    sys.exit(main())
