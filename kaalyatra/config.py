"""
Kaalyatra - Configuration Module

All tunable game parameters live here. Adjust these to change game feel
without touching game logic.
"""

import os

# =============================================================================
# GAME MODES
# =============================================================================

MODES = {
    "classic": {
        "name": "Classic Journey",
        "description": "Travel between eras, read their key events, undo a jump",
        "quiz": False,
        "profile": False,
    },
    "scholar": {
        "name": "Scholar's Journey",
        "description": "Quizzes, cultural highlights, artifacts and achievements",
        "quiz": True,
        "profile": True,
    },
}

DEFAULT_MODE = "scholar"
DEFAULT_PLAYER_NAME = "Traveler"

# =============================================================================
# SCORING
# =============================================================================

# Points awarded for passing an era quiz (every answer correct)
QUIZ_PASS_POINTS = 100

# Cumulative score that unlocks "master-historian"
MASTER_HISTORIAN_SCORE = 1000

# Artifacts needed for "artifact-hunter"
ARTIFACT_HUNTER_COUNT = 10

# =============================================================================
# ACHIEVEMENTS
# =============================================================================

# Order here is display order on the profile screen
ACHIEVEMENTS = {
    "visited-all-eras": {
        "name": "Time Traveler",
        "description": "Visit all historical eras",
    },
    "history-scholar": {
        "name": "History Scholar",
        "description": "Score 100% in any era quiz",
    },
    "artifact-hunter": {
        "name": "Artifact Hunter",
        "description": f"Discover {ARTIFACT_HUNTER_COUNT} historical artifacts",
    },
    "cultural-expert": {
        "name": "Cultural Expert",
        "description": "Learn about all cultural aspects of an era",
    },
    "master-historian": {
        "name": "Master Historian",
        "description": f"Reach a total score of {MASTER_HISTORIAN_SCORE}",
    },
}

# =============================================================================
# QUIZ SETTINGS
# =============================================================================

HINT_TEXT = "Consider the time period and cultural context."

# Answers to the hint prompt that count as "yes"
HINT_ACCEPT = ("y", "yes")

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

DEFAULT_TEXT_SPEED = 0.02  # Seconds per character for typewriter effect
LINE_WIDTH = 65


def _float_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return max(0.0, float(raw))
    except ValueError:
        return default


TEXT_SPEED = _float_from_env("KAALYATRA_TEXT_SPEED", DEFAULT_TEXT_SPEED)

# =============================================================================
# LOGGING / DEBUG SETTINGS
# =============================================================================

# Logs go to stderr; WARNING keeps the console game uncluttered
LOG_LEVEL = os.environ.get("KAALYATRA_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# DEBUG_MODE=true disables the typewriter delay and raises log level to DEBUG
DEBUG_MODE = os.environ.get("DEBUG_MODE", "").lower() == "true"


def get_log_level() -> str:
    """Returns the effective log level name"""
    if DEBUG_MODE:
        return "DEBUG"
    if LOG_LEVEL in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return LOG_LEVEL
    return "WARNING"


def get_text_speed(fast: bool = False) -> float:
    """Typewriter delay, zero when fast output is requested or in debug mode"""
    if fast or DEBUG_MODE:
        return 0.0
    return TEXT_SPEED
