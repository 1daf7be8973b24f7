import logging
from typing import Dict, Iterable, List, Optional

import pandas as pd
from rapidfuzz import fuzz, process, utils

from .models import Analysis, ModuleStats, Status, StatusCounts

logger = logging.getLogger(__name__)

STATUS_VALUES = [s.value for s in Status]
SUGGESTION_CUTOFF = 60


class InvalidStatusError(ValueError):
    """Raised when a record's status is not one of the known values."""

    def __init__(
        self,
        value: str,
        row_number: int,
        module: str,
        suggestion: Optional[str] = None,
    ) -> None:
        msg = (
            f"Invalid status {value!r} in row {row_number} (module {module!r}); "
            f"expected one of: {', '.join(STATUS_VALUES)}"
        )
        if suggestion:
            msg += f" (did you mean {suggestion!r}?)"
        super().__init__(msg)
        self.value = value
        self.row_number = row_number
        self.module = module
        self.suggestion = suggestion


def suggest_status(value: str) -> Optional[str]:
    """Return the known status closest to ``value``, if any is close enough."""
    if not value.strip():
        return None
    match = process.extractOne(
        value,
        STATUS_VALUES,
        scorer=fuzz.ratio,
        processor=utils.default_process,
        score_cutoff=SUGGESTION_CUTOFF,
    )
    return match[0] if match else None


def parse_status(value: str, row_number: int, module: str) -> Status:
    """Map a status cell to :class:`Status`.

    Parameters
    ----------
    value: str
        Cell text from the ``status`` column.
    row_number: int
        1-based data row number, used in the error message.
    module: str
        Module category of the row, used in the error message.

    Raises
    ------
    InvalidStatusError
        If ``value`` is not exactly one of the known statuses.
    """

    try:
        return Status(value)
    except ValueError:
        raise InvalidStatusError(value, row_number, module, suggest_status(value)) from None


def _counts(row: pd.Series) -> Dict[str, int]:
    return {
        "complete": int(row[Status.COMPLETE.value]),
        "in_progress": int(row[Status.IN_PROGRESS.value]),
        "not_started": int(row[Status.NOT_STARTED.value]),
    }


def analyze_progress(records: Iterable[Dict[str, str]]) -> Analysis:
    """Count records per status, overall and per module.

    Every status is validated before anything is counted. Modules appear in
    the order they are first seen.

    Parameters
    ----------
    records: Iterable[Dict[str, str]]
        Parsed CSV rows with ``module_category`` and ``status`` fields.

    Returns
    -------
    Analysis
        Fresh aggregate; ``total`` is ``0`` when there are no records.

    Raises
    ------
    InvalidStatusError
        On the first row whose status is unknown.
    """

    modules: List[str] = []
    statuses: List[str] = []
    for i, row in enumerate(records, start=1):
        module = row.get("module_category", "")
        statuses.append(parse_status(row.get("status", ""), i, module).value)
        modules.append(module)

    if not modules:
        return Analysis(modules=(), status_count=StatusCounts(0, 0, 0))

    frame = pd.DataFrame({"module": modules, "status": statuses})
    table = pd.crosstab(frame["module"], frame["status"]).reindex(
        index=frame["module"].unique(), columns=STATUS_VALUES, fill_value=0
    )
    by_module = tuple(
        ModuleStats(module=str(name), **_counts(row)) for name, row in table.iterrows()
    )
    overall = frame["status"].value_counts().reindex(STATUS_VALUES, fill_value=0)

    analysis = Analysis(modules=by_module, status_count=StatusCounts(**_counts(overall)))
    logger.info("Aggregated %d records across %d modules", analysis.total, len(by_module))
    return analysis
