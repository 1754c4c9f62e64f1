"""
Kaalyatra - Main Game Module

A console time-travel simulator through the eras of Indian history.
Choose an era to read about it; jump back with undo. In scholar mode every
visit also brings a quiz, cultural highlights, artifacts and achievements.

Architecture:
- config.py: All tunable parameters
- eras.py: Historical era catalog
- time_machine.py: Traveler state and undo history
- quiz.py: Quiz administration and scoring
- profile.py: Score, visits, artifacts, achievements
- game_state.py: Central state coordination
- display.py: Console input/output and terminal helpers
- game.py: Session loop and command line (this file)
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from .config import (
    DEFAULT_MODE, DEFAULT_PLAYER_NAME, LOG_FORMAT, MODES, QUIZ_PASS_POINTS,
    get_log_level, get_text_speed,
)
from .display import Colors, Console
from .eras import CATALOG, Era, get_era_by_name
from .game_state import GameMode, GamePhase, GameState
from .profile import ProfileEvent, ProfileEventType
from .quiz import EnhancedQuizStrategy, QuizStrategy

logger = logging.getLogger(__name__)

GOODBYE = "Exiting the Time Travel Simulator. Goodbye!"


# =============================================================================
# SESSION CONTROLLER
# =============================================================================

class SessionController:
    """Main menu loop for one session"""

    def __init__(self,
                 console: Console,
                 mode: GameMode = GameMode.SCHOLAR,
                 player_name: Optional[str] = None,
                 catalog: Sequence[Era] = CATALOG,
                 quiz: Optional[QuizStrategy] = None):
        self.console = console
        self.mode = mode
        self.player_name = player_name
        self.state = GameState(catalog=tuple(catalog))
        self.quiz = quiz or EnhancedQuizStrategy(console)

    @property
    def is_scholar(self) -> bool:
        return self.mode == GameMode.SCHOLAR

    def run(self) -> GameState:
        """Run until the player exits or input ends"""
        try:
            if self.player_name is None:
                self.player_name = self._get_player_info() if self.is_scholar else DEFAULT_PLAYER_NAME
            self.state.start_game(self.player_name, self.mode)
            if self.state.profile:
                self.state.profile.subscribe(self._announce)
            self._show_title()

            while self.state.phase != GamePhase.ENDED:
                self._play_turn()
        except EOFError:
            logger.debug("Input closed, ending session")
            self.console.say()
            self._handle_exit()
        return self.state

    # -------------------------------------------------------------------------
    # Setup
    # -------------------------------------------------------------------------

    def _get_player_info(self) -> str:
        self.console.header("WHO ARE YOU?")
        name = self.console.ask("Enter your name:")
        return name if name else DEFAULT_PLAYER_NAME

    def _show_title(self):
        self.console.clear()
        mode = MODES[self.mode.value]
        self.console.box([
            "K A A L Y A T R A",
            "",
            f"Welcome to the Time Travel Simulator, {self.player_name}!",
            f"{mode['name']}: {mode['description']}",
        ])

    # -------------------------------------------------------------------------
    # Menu
    # -------------------------------------------------------------------------

    def _menu_options(self) -> List[Tuple[str, str]]:
        """(action, label) pairs in display order"""
        options = [("travel", era.name) for era in self.state.catalog]
        options.append(("undo", "Undo last travel"))
        if self.is_scholar:
            options.append(("profile", "View profile & achievements"))
        options.append(("exit", "Exit"))
        return options

    def _play_turn(self):
        options = self._menu_options()

        self.console.say()
        self.console.say("Choose an era to travel to:", Colors.CYAN)
        for number, (_, label) in enumerate(options, start=1):
            self.console.say(f"  {self.console.paint(f'[{number}]', Colors.CYAN)} {label}")

        raw = self.console.ask("Your choice:")

        try:
            choice = int(raw)
        except ValueError:
            # Allow typing an era's name directly
            era = get_era_by_name(raw, self.state.catalog)
            if era:
                self._travel(era)
            else:
                self.console.say("Era not found. Please try again.", Colors.RED)
            return

        if not 1 <= choice <= len(options):
            self.console.say("Invalid choice. Please try again.", Colors.RED)
            return

        action, _ = options[choice - 1]
        if action == "travel":
            self._travel(self.state.catalog[choice - 1])
        elif action == "undo":
            self._handle_undo()
        elif action == "profile":
            self._show_profile()
        else:
            self._handle_exit()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def _travel(self, era: Era):
        self.state.travel_to(era)
        self.console.say(f"You are now in: {era.name}", Colors.GREEN)
        self._describe_era(era)

        if self.is_scholar:
            self._scholar_visit(era)

        self.state.phase = GamePhase.MENU

    def _describe_era(self, era: Era):
        self.console.header(f"{era.name} ({era.timespan})")
        if era.description:
            self.console.slow(era.description)
        if era.key_events:
            self.console.say()
            for event in era.key_events:
                self.console.say(f"Historical Event: {event}")
        self.console.line()

    def _scholar_visit(self, era: Era):
        profile = self.state.profile

        if era.questions:
            self.state.phase = GamePhase.QUIZ
            result = self.quiz.administer_quiz(era.questions)
            self.state.log_event("quiz", quiz_era=era.id, correct=result.correct,
                                 total=result.total, passed=result.passed)
            profile.record_quiz_result(era.id, result.passed)

            if result.passed:
                self.console.say(f"+{QUIZ_PASS_POINTS} points", Colors.GREEN)
                profile.add_score(QUIZ_PASS_POINTS)
                for artifact in era.artifacts:
                    profile.unlock_artifact(artifact)

        self.state.phase = GamePhase.EXPLORING
        if era.cultural_highlights:
            answer = self.console.get_input("Study the cultural highlights? (Y/N):", ["Y", "N"])
            if answer == "Y":
                self._show_cultural_highlights(era)

    def _show_cultural_highlights(self, era: Era):
        self.console.say()
        self.console.slow(f"Cultural Highlights of the {era.name}:", Colors.CYAN)
        for title, description in era.cultural_highlights.items():
            self.console.say(f"  {title}: {description}")

        if era.figures:
            self.console.say()
            self.console.say("Notable figures:", Colors.CYAN)
            self.console.bullets(era.figures, indent=4)

        self.state.profile.study_culture(
            era.id, era.cultural_highlights.keys(), len(era.cultural_highlights)
        )

    def _handle_undo(self):
        result = self.state.undo_travel()
        if result.nothing_to_undo:
            self.console.say("No previous state to restore.", Colors.YELLOW)
            return

        era = self.state.current_era
        where = era.name if era else "the present day"
        self.console.say(f"Restored to: {where}", Colors.GREEN)

    def _show_profile(self):
        profile = self.state.profile
        self.console.say()
        self.console.say(profile.get_summary_display())
        if profile.artifacts:
            self.console.say("Artifacts:", Colors.CYAN)
            self.console.bullets(profile.artifacts)

    def _handle_exit(self):
        self.state.end_game()
        logger.info(f"Final status: {self.state.get_status()}")
        if self.state.profile:
            self.console.say()
            self.console.say(self.state.profile.get_summary_display())
        self.console.say(GOODBYE, Colors.CYAN)

    def _announce(self, event: ProfileEvent):
        if event.type == ProfileEventType.ACHIEVEMENT_UNLOCKED:
            self.console.say()
            self.console.slow(f"🏆 Achievement Unlocked: {event.title}", Colors.YELLOW)
            self.console.slow(f"📜 {event.description}")
        elif event.type == ProfileEventType.ARTIFACT_DISCOVERED:
            self.console.slow(f"🏺 New Artifact Discovered: {event.title}", Colors.GREEN)


# =============================================================================
# COMMAND LINE
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kaalyatra",
        description="Travel through the eras of Indian history.",
    )
    parser.add_argument("--mode", choices=sorted(MODES), default=DEFAULT_MODE,
                        help="classic: travel and undo; scholar: adds quizzes and achievements")
    parser.add_argument("--name", default=None, help="player name (asked for if omitted)")
    parser.add_argument("--fast", action="store_true", help="disable the typewriter effect")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)

    console = Console(text_speed=get_text_speed(args.fast), color=sys.stdout.isatty())
    game = SessionController(console, mode=GameMode(args.mode), player_name=args.name)
    try:
        game.run()
    except KeyboardInterrupt:
        console.say()
        console.say(GOODBYE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
