"""
Kaalyatra - Game State Module

Central session state that coordinates all systems:
- Era catalog
- Traveler and travel history
- Player profile (scholar mode)
- Session event log
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .eras import CATALOG, Era, get_era_by_id
from .profile import PlayerProfile
from .time_machine import TimeTraveler, TravelHistory, UndoResult

logger = logging.getLogger(__name__)


class GameMode(Enum):
    CLASSIC = "classic"
    SCHOLAR = "scholar"


class GamePhase(Enum):
    """Current phase of the session"""
    SETUP = "setup"             # Not started
    MENU = "menu"               # Choosing where to go
    EXPLORING = "exploring"     # Reading about the current era
    QUIZ = "quiz"               # Answering the era quiz
    ENDED = "ended"             # Player exited


@dataclass
class GameState:
    """
    Complete session state.

    This is the single source of truth for one run of the program. It is
    only ever touched from the session's control loop.
    """

    catalog: Tuple[Era, ...] = CATALOG

    # Core systems
    traveler: TimeTraveler = field(default_factory=TimeTraveler)
    history: TravelHistory = field(default_factory=TravelHistory)
    profile: Optional[PlayerProfile] = None

    # Session settings
    mode: GameMode = GameMode.SCHOLAR
    player_name: str = ""
    phase: GamePhase = GamePhase.SETUP

    # Timestamps
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None

    # Event log for the session (travel, undo, quiz)
    game_events: List[Dict] = field(default_factory=list)

    def start_game(self, player_name: str, mode: GameMode):
        """Initialize a new session"""
        self.player_name = player_name
        self.mode = mode
        self.started_at = datetime.now()
        self.phase = GamePhase.MENU
        if mode == GameMode.SCHOLAR:
            self.profile = PlayerProfile(name=player_name, catalog_size=len(self.catalog))
        logger.info(f"Session started for {player_name} in {mode.value} mode")

    # =========================================================================
    # TRAVEL
    # =========================================================================

    @property
    def current_era(self) -> Optional[Era]:
        era_id = self.traveler.current_era_id
        if era_id is None:
            return None
        return get_era_by_id(era_id, self.catalog)

    def travel_to(self, era: Era):
        """
        Move the traveler to ``era``.

        The state before the jump is pushed onto the history first, so one
        undo returns to where the traveler was before this call.
        """
        previous = self.traveler.current_era_id
        self.history.save(self.traveler)
        self.traveler.set_era(era.id)

        if self.profile:
            self.profile.visit_era(era.id)

        self.phase = GamePhase.EXPLORING
        self.log_event("travel", from_era=previous, to_era=era.id)
        logger.info(f"Traveled from {previous or 'the present'} to {era.id}")

    def undo_travel(self) -> UndoResult:
        """Step back one jump; reports rather than fails when there is none"""
        result = self.history.undo(self.traveler)
        self.log_event("undo", restored=result.restored, era_id=result.era_id)
        return result

    # =========================================================================
    # SESSION EVENT LOG
    # =========================================================================

    def log_event(self, event_type: str, **kwargs):
        """
        Log a session event.

        Event types:
        - "travel": {from_era, to_era}
        - "undo": {restored, era_id}
        - "quiz": {era_id, correct, total, passed}

        All events automatically include the current era and a timestamp.
        """
        event = {
            "type": event_type,
            "era_id": self.traveler.current_era_id,
            "at": datetime.now().isoformat(),
            **kwargs
        }
        self.game_events.append(event)

    def get_events_by_type(self, event_type: str) -> List[Dict]:
        """Retrieve all events of a specific type."""
        return [e for e in self.game_events if e["type"] == event_type]

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def end_game(self):
        self.phase = GamePhase.ENDED
        self.ended_at = datetime.now()
        logger.info(f"Session ended after {len(self.get_events_by_type('travel'))} jumps")

    def get_status(self) -> Dict[str, Any]:
        """Snapshot of the session for display"""
        era = self.current_era
        return {
            "mode": self.mode.value,
            "player_name": self.player_name,
            "phase": self.phase.value,
            "current_era": era.name if era else None,
            "history_depth": len(self.history),
            "score": self.profile.score if self.profile else None,
        }
