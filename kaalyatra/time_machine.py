"""
Kaalyatra - Time Machine Module

Handles the traveler's position in time:
- Traveler state (which era you are in)
- Immutable snapshots of that state
- Travel history with last-in-first-out undo
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistorySnapshot:
    """An immutable capture of the traveler's state at one moment"""
    era_id: Optional[str] = None


@dataclass
class TravelerState:
    """Where the traveler currently is. None until the first jump."""
    current_era_id: Optional[str] = None


@dataclass
class TimeTraveler:
    """
    The traveler being moved through history.

    Knows how to capture its own state as a snapshot and how to return to
    one. The history that holds those snapshots lives elsewhere.
    """

    state: TravelerState = field(default_factory=TravelerState)

    @property
    def current_era_id(self) -> Optional[str]:
        return self.state.current_era_id

    def set_era(self, era_id: str):
        self.state.current_era_id = era_id

    def save_state(self) -> HistorySnapshot:
        return HistorySnapshot(era_id=self.state.current_era_id)

    def restore_state(self, snapshot: HistorySnapshot):
        self.state.current_era_id = snapshot.era_id


@dataclass(frozen=True)
class UndoResult:
    """
    Outcome of an undo request.

    ``restored`` is False when there was nothing to undo; the traveler is
    untouched in that case.
    """
    restored: bool
    era_id: Optional[str] = None

    @property
    def nothing_to_undo(self) -> bool:
        return not self.restored


NOTHING_TO_UNDO = UndoResult(restored=False)


class TravelHistory:
    """Stack of snapshots for one traveler. Unbounded."""

    def __init__(self):
        self._snapshots: List[HistorySnapshot] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def is_empty(self) -> bool:
        return not self._snapshots

    def peek(self) -> Optional[HistorySnapshot]:
        """The snapshot the next undo would restore, if any"""
        return self._snapshots[-1] if self._snapshots else None

    def save(self, traveler: TimeTraveler):
        """Push a snapshot of the traveler's current state"""
        snapshot = traveler.save_state()
        self._snapshots.append(snapshot)
        logger.debug(f"Saved snapshot {snapshot} (depth {len(self._snapshots)})")

    def undo(self, traveler: TimeTraveler) -> UndoResult:
        """Restore the most recent snapshot, or report that there is none"""
        if not self._snapshots:
            logger.debug("Undo requested with empty history")
            return NOTHING_TO_UNDO

        snapshot = self._snapshots.pop()
        traveler.restore_state(snapshot)
        logger.info(f"Restored traveler to {snapshot.era_id or 'the present'}")
        return UndoResult(restored=True, era_id=snapshot.era_id)
