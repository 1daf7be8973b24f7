"""Command-line entry point for the translation progress report."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .aggregate import analyze_progress
from .config import load_config, resolve_path
from .csv_utils import REQUIRED_COLUMNS, InputNotFoundError, load_csv_text, parse_csv_text
from .logging_utils import setup_logging
from .report import render_next_steps, render_report

logger = logging.getLogger(__name__)


def _display_path(path: Path) -> str:
    try:
        return os.path.relpath(path, Path.cwd())
    except ValueError:
        # Different drive on Windows
        return str(path)


def main(csv_path: Optional[Path] = None, todo_path: Optional[Path] = None) -> int:
    """Print the progress report and return the process exit code.

    ``csv_path`` and ``todo_path`` override the configured locations.
    """

    try:
        cfg = load_config()
        setup_logging(cfg["logging"]["level"])
        csv_path = Path(csv_path) if csv_path else resolve_path(cfg["paths"]["tracking_csv"])
        todo_path = Path(todo_path) if todo_path else resolve_path(cfg["paths"]["todo_doc"])

        records = parse_csv_text(load_csv_text(csv_path), required=REQUIRED_COLUMNS)
        analysis = analyze_progress(records)

        print(render_report(analysis, title=cfg["report"]["title"], source=csv_path.name))
        if analysis.total:
            print()
            print(render_next_steps(analysis, limit=int(cfg["advisor"]["max_new_modules"])))

        print()
        print("🔗 For detailed TODO items, see:")
        print(f"   {_display_path(todo_path)}")
    except InputNotFoundError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        logger.debug("Progress check failed", exc_info=True)
        print(f"❌ Error analyzing translation progress: {exc}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    """Console script entry point."""
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    sys.exit(main())


if __name__ == "__main__":
    run()
