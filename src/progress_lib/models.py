from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Status(str, Enum):
    """Translation state of a tracked source file."""
    COMPLETE = "complete"
    IN_PROGRESS = "in-progress"
    NOT_STARTED = "not-started"


@dataclass(frozen=True)
class StatusCounts:
    """Number of tracked files in each status."""
    complete: int
    in_progress: int
    not_started: int

    @property
    def total(self) -> int:
        return self.complete + self.in_progress + self.not_started

    def count(self, status: Status) -> int:
        if status is Status.COMPLETE:
            return self.complete
        if status is Status.IN_PROGRESS:
            return self.in_progress
        return self.not_started


@dataclass(frozen=True)
class ModuleStats(StatusCounts):
    """Status counts for a single module category."""
    module: str


@dataclass(frozen=True)
class Analysis:
    """Aggregated counts, overall and per module in first-seen order."""
    modules: Tuple[ModuleStats, ...]
    status_count: StatusCounts

    @property
    def total(self) -> int:
        return self.status_count.total

    @property
    def by_module(self) -> Dict[str, ModuleStats]:
        return {m.module: m for m in self.modules}
