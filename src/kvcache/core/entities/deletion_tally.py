"""Deletion tally entity."""

from dataclasses import dataclass
from enum import Enum


class PatternDeleteState(str, Enum):
    """Lifecycle of a single pattern delete call."""

    SCANNING = "scanning"
    DRAINING = "draining"
    DONE = "done"
    FAILED = "failed"


@dataclass
class DeletionTally:
    """Running, then final, result of one pattern delete call.

    ``deleted`` only counts deletions the store acknowledged. A key can
    be observed by the scan and still not be deleted (it expired in
    between), so ``deleted <= observed`` always holds.
    """

    pattern: str
    deleted: int = 0
    observed: int = 0
    batches: int = 0
    failed_batches: int = 0
    state: PatternDeleteState = PatternDeleteState.SCANNING

    @property
    def is_done(self) -> bool:
        return self.state is PatternDeleteState.DONE
