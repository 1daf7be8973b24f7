#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
check_translation_progress.py
Summarize translation progress from the source mapping CSV.

Input:
  - docs/matrix/react-source-mapping.csv   (paths.tracking_csv in config/config.yaml)

Output:
  - progress report and suggested next steps on stdout
"""

from __future__ import annotations
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from progress_lib.cli import run  # noqa: E402

if __name__ == "__main__":
    run()
