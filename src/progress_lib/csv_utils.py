import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("module_category", "status")


class InputNotFoundError(FileNotFoundError):
    """Raised when the tracking CSV does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"CSV file not found: {path}")
        self.path = path


class MissingColumnsError(ValueError):
    """Raised when the header row lacks columns the report depends on."""


def load_csv_text(path: Path) -> str:
    """Read the tracking CSV as text.

    Parameters
    ----------
    path: Path
        Location of the tracking file.

    Returns
    -------
    str
        File content decoded as UTF-8, with any byte order mark removed.

    Raises
    ------
    InputNotFoundError
        If ``path`` does not exist. Checked before any read is attempted.
    """

    path = Path(path)
    if not path.exists():
        raise InputNotFoundError(path)
    text = path.read_text(encoding="utf-8-sig")
    logger.info("Loaded %d characters from %s", len(text), path)
    return text


def parse_csv_text(
    content: str, required: Optional[Iterable[str]] = None
) -> List[Dict[str, str]]:
    """Split CSV text into header-keyed records.

    The first non-empty line holds the headers. Fields are split on bare
    commas (quoted commas are not supported). Missing trailing fields become
    ``""`` and extra fields are dropped. Whitespace-only body lines are
    skipped.

    Parameters
    ----------
    content: str
        Raw CSV text.
    required: Iterable[str], optional
        Column names the header row must contain.

    Returns
    -------
    List[Dict[str, str]]
        One mapping per data line, in file order. Empty when ``content`` has
        no data lines, including when it is empty.

    Raises
    ------
    MissingColumnsError
        If ``required`` is given and a column is absent from the headers.
    """

    lines = content.strip().splitlines()
    if not lines:
        return []

    headers = [h.strip() for h in lines[0].split(",")]
    if required:
        missing = [c for c in required if c not in headers]
        if missing:
            raise MissingColumnsError(f"Missing required columns: {missing}")

    rows: List[Dict[str, str]] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        values = [v.strip() for v in line.split(",")]
        rows.append({
            header: values[i] if i < len(values) else ""
            for i, header in enumerate(headers)
        })
    logger.debug("Parsed %d records with headers %s", len(rows), headers)
    return rows
