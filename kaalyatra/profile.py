"""
Kaalyatra - Profile Module

Tracks the player's progress across a session:
- Score from passed quizzes
- Visits per era
- Artifacts discovered
- Achievements, derived from the above

Achievements are one-way. Each one announces itself to listeners exactly
once, the first time its condition holds; re-checking never re-announces.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Set

from .config import ACHIEVEMENTS, ARTIFACT_HUNTER_COUNT, MASTER_HISTORIAN_SCORE

logger = logging.getLogger(__name__)


class ProfileEventType(Enum):
    ACHIEVEMENT_UNLOCKED = "achievement_unlocked"
    ARTIFACT_DISCOVERED = "artifact_discovered"


@dataclass(frozen=True)
class ProfileEvent:
    """A notification raised by the profile"""
    type: ProfileEventType
    key: str            # achievement id or artifact name
    title: str
    description: str = ""


@dataclass
class Achievement:
    """Single achievement; once unlocked it stays unlocked"""

    id: str
    name: str
    description: str
    unlocked: bool = False

    def unlock(self) -> bool:
        """Returns True only on the transition from locked to unlocked"""
        if self.unlocked:
            return False
        self.unlocked = True
        return True


def create_achievements() -> Dict[str, Achievement]:
    """Fresh, all-locked achievement set from config"""
    return {
        achievement_id: Achievement(achievement_id, data["name"], data["description"])
        for achievement_id, data in ACHIEVEMENTS.items()
    }


ProfileListener = Callable[[ProfileEvent], None]


@dataclass
class PlayerProfile:
    """
    A player's progress for one session.

    ``catalog_size`` is the number of eras that count toward the
    "visited-all-eras" achievement.
    """

    name: str
    catalog_size: int
    score: int = 0
    era_visits: Dict[str, int] = field(default_factory=dict)
    artifacts: List[str] = field(default_factory=list)
    achievements: Dict[str, Achievement] = field(default_factory=create_achievements)

    # Cultural highlight titles studied, per era
    studied_culture: Dict[str, Set[str]] = field(default_factory=dict)

    quizzes_taken: int = 0
    quizzes_passed: int = 0

    _listeners: List[ProfileListener] = field(default_factory=list, repr=False)

    # =========================================================================
    # NOTIFICATIONS
    # =========================================================================

    def subscribe(self, listener: ProfileListener):
        self._listeners.append(listener)

    def _notify(self, event: ProfileEvent):
        logger.info(f"{self.name}: {event.type.value} - {event.title}")
        for listener in self._listeners:
            listener(event)

    def _unlock(self, achievement_id: str):
        achievement = self.achievements[achievement_id]
        if achievement.unlock():
            self._notify(ProfileEvent(
                ProfileEventType.ACHIEVEMENT_UNLOCKED,
                achievement.id,
                achievement.name,
                achievement.description,
            ))

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def visit_era(self, era_id: str):
        self.era_visits[era_id] = self.era_visits.get(era_id, 0) + 1
        self._check_era_achievements()

    def add_score(self, points: int):
        if points < 0:
            raise ValueError(f"Score points must be non-negative, got {points}")
        self.score += points
        self._check_score_achievements()

    def unlock_artifact(self, artifact_name: str) -> bool:
        """Returns False (and stays silent) for an artifact already discovered"""
        if artifact_name in self.artifacts:
            return False
        self.artifacts.append(artifact_name)
        self._notify(ProfileEvent(
            ProfileEventType.ARTIFACT_DISCOVERED,
            artifact_name,
            artifact_name,
        ))
        self._check_artifact_achievements()
        return True

    def record_quiz_result(self, era_id: str, passed: bool):
        self.quizzes_taken += 1
        if passed:
            self.quizzes_passed += 1
            self._unlock("history-scholar")
        logger.debug(f"{self.name}: quiz for {era_id} {'passed' if passed else 'failed'}")

    def study_culture(self, era_id: str, titles: Iterable[str], total: int):
        """Record studied highlight titles; ``total`` is how many the era has"""
        studied = self.studied_culture.setdefault(era_id, set())
        studied.update(titles)
        if total > 0 and len(studied) >= total:
            self._unlock("cultural-expert")

    # =========================================================================
    # DERIVED RULES
    # =========================================================================

    def _check_era_achievements(self):
        if self.catalog_size > 0 and self.distinct_eras_visited >= self.catalog_size:
            self._unlock("visited-all-eras")

    def _check_score_achievements(self):
        if self.score >= MASTER_HISTORIAN_SCORE:
            self._unlock("master-historian")

    def _check_artifact_achievements(self):
        if len(self.artifacts) >= ARTIFACT_HUNTER_COUNT:
            self._unlock("artifact-hunter")

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def distinct_eras_visited(self) -> int:
        return len(self.era_visits)

    @property
    def total_visits(self) -> int:
        return sum(self.era_visits.values())

    @property
    def unlocked_artifacts(self) -> Set[str]:
        return set(self.artifacts)

    @property
    def unlocked_achievements(self) -> Set[str]:
        return {a.id for a in self.achievements.values() if a.unlocked}

    def is_unlocked(self, achievement_id: str) -> bool:
        achievement = self.achievements.get(achievement_id)
        return bool(achievement and achievement.unlocked)

    def get_summary_display(self) -> str:
        """Get formatted progress breakdown for display"""
        lines = []
        lines.append("-" * 40)
        lines.append(f"  {self.name.upper()}'S JOURNEY")
        lines.append("-" * 40)
        lines.append("")
        lines.append(f"  Score".ljust(32) + f"{self.score:>6}")
        lines.append(f"  Eras visited ({self.catalog_size} total)".ljust(32)
                     + f"{self.distinct_eras_visited:>6}")
        lines.append(f"  Total jumps".ljust(32) + f"{self.total_visits:>6}")
        lines.append(f"  Quizzes passed".ljust(32)
                     + f"{self.quizzes_passed:>3} /{self.quizzes_taken:>2}")
        lines.append(f"  Artifacts discovered".ljust(32) + f"{len(self.artifacts):>6}")
        lines.append("")
        lines.append("  Achievements:")
        for achievement in self.achievements.values():
            mark = "[x]" if achievement.unlocked else "[ ]"
            lines.append(f"    {mark} {achievement.name} - {achievement.description}")
        lines.append("-" * 40)
        return "\n".join(lines)
