"""Report rendering and next-step suggestions.

Both renderers are pure: they take an :class:`Analysis` and return text,
leaving printing to the caller. Layout lives in the Jinja templates under
``templates/``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from .models import Analysis, ModuleStats, StatusCounts

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

BAR_UNIT = 5
RULE = "=" * 50
COMPLETE_GLYPH = "█"
IN_PROGRESS_GLYPH = "▓"
NOT_STARTED_GLYPH = "░"


def percent(count: int, total: int) -> int:
    """Return ``count / total * 100`` rounded half up; ``0`` when ``total`` is 0."""
    if total <= 0:
        return 0
    return (200 * count + total) // (2 * total)


def progress_bar(counts: StatusCounts, unit: int = BAR_UNIT) -> str:
    """Build the three-part progress bar, one glyph per ``unit`` percent.

    The complete and in-progress runs use the rounded percentages; the
    not-started run uses the exact ratio. Each run is floored.
    """

    total = counts.total
    if total <= 0:
        return ""
    complete = percent(counts.complete, total) // unit
    in_progress = percent(counts.in_progress, total) // unit
    not_started = (counts.not_started * 100) // (total * unit)
    return (
        COMPLETE_GLYPH * complete
        + IN_PROGRESS_GLYPH * in_progress
        + NOT_STARTED_GLYPH * not_started
    )


def in_progress_modules(analysis: Analysis) -> List[ModuleStats]:
    """Modules with unfinished work, most in-progress files first."""
    active = [m for m in analysis.modules if m.in_progress > 0]
    return sorted(active, key=lambda m: m.in_progress, reverse=True)


def not_started_modules(analysis: Analysis, limit: int = 3) -> List[ModuleStats]:
    """Untouched modules, smallest first, at most ``limit`` of them."""
    fresh = [m for m in analysis.modules if m.complete == 0 and m.not_started > 0]
    return sorted(fresh, key=lambda m: m.not_started)[: max(limit, 0)]


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["percent"] = percent
    return env


def render_report(
    analysis: Analysis,
    title: str = "ReactCPP Translation Progress Report",
    source: str = "the tracking CSV",
) -> str:
    """Render overall and per-module progress.

    Parameters
    ----------
    analysis: Analysis
        Aggregated counts.
    title: str
        Heading shown on the first line.
    source: str
        Name of the input, shown when there is nothing to report.

    Returns
    -------
    str
        Report text without a trailing newline. When ``analysis.total`` is 0
        the text carries a "No data" line in place of percentages.
    """

    counts = analysis.status_count
    total = analysis.total
    tmpl = _environment().get_template("progress_report.jinja")
    return tmpl.render(
        title=title,
        rule=RULE,
        source=source,
        total=total,
        counts=counts,
        complete_pct=percent(counts.complete, total),
        in_progress_pct=percent(counts.in_progress, total),
        not_started_pct=percent(counts.not_started, total),
        bar=progress_bar(counts),
        modules=analysis.modules,
    ).rstrip("\n")


def render_next_steps(analysis: Analysis, limit: int = 3) -> str:
    """Render the suggested next steps for ``analysis``."""
    tmpl = _environment().get_template("next_steps.jinja")
    return tmpl.render(
        in_progress=in_progress_modules(analysis),
        not_started=not_started_modules(analysis, limit),
    ).rstrip("\n")
