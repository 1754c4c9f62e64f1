"""
Kaalyatra - Quiz Module

Administers an era's questions to the player and scores them.

A run moves IDLE -> IN_PROGRESS -> COMPLETED. Every run starts fresh: the
score, the missed list and the single hint allowance are reset on entry.
Questions are asked once each, in catalog order.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Set, Tuple

from .config import HINT_ACCEPT, HINT_TEXT
from .display import Colors, Console
from .eras import Question

logger = logging.getLogger(__name__)


class QuizPhase(Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class QuizOutcome(Enum):
    PERFECT_SCORE = "perfect_score"
    NEEDS_REVIEW = "needs_review"


@dataclass(frozen=True)
class QuizResult:
    """Final tally of one quiz run"""

    correct: int
    total: int
    missed: Tuple[str, ...] = ()
    hint_used: bool = False

    @property
    def passed(self) -> bool:
        return self.correct == self.total

    @property
    def perfect(self) -> bool:
        return self.passed

    @property
    def outcome(self) -> QuizOutcome:
        return QuizOutcome.PERFECT_SCORE if self.passed else QuizOutcome.NEEDS_REVIEW


def parse_single_answer(raw: str, choice_count: int) -> Optional[int]:
    """1-based index, or None when the input is not a valid choice number"""
    try:
        index = int(raw.strip())
    except ValueError:
        return None
    if 1 <= index <= choice_count:
        return index
    return None


def parse_multi_answer(raw: str, choice_count: int) -> Set[int]:
    """1-based indices from a space-delimited list; anything invalid is dropped"""
    indices = set()
    for token in raw.split():
        try:
            index = int(token)
        except ValueError:
            continue
        if 1 <= index <= choice_count:
            indices.add(index)
    return indices


class QuizStrategy(ABC):
    """How a list of questions is put to the player"""

    @abstractmethod
    def administer_quiz(self, questions: Sequence[Question]) -> QuizResult:
        ...


class EnhancedQuizStrategy(QuizStrategy):
    """Console quiz with one hint per run and a review list at the end"""

    def __init__(self, console: Console, hint_text: str = HINT_TEXT):
        self.console = console
        self.hint_text = hint_text
        self.phase = QuizPhase.IDLE
        self.score = 0
        self.total_questions = 0
        self.missed: List[str] = []
        self.hint_used = False

    def administer_quiz(self, questions: Sequence[Question]) -> QuizResult:
        self._reset()
        self.phase = QuizPhase.IN_PROGRESS

        for question in questions:
            self._handle_question(question)

        self.phase = QuizPhase.COMPLETED
        result = QuizResult(
            correct=self.score,
            total=self.total_questions,
            missed=tuple(self.missed),
            hint_used=self.hint_used,
        )
        logger.info(f"Quiz completed: {result.correct}/{result.total} "
                    f"({result.outcome.value})")
        self._show_results(result)
        return result

    def _reset(self):
        self.score = 0
        self.total_questions = 0
        self.missed = []
        self.hint_used = False

    def _handle_question(self, question: Question):
        self._display_question(question)

        if not self.hint_used and self._offer_hint():
            self.console.say(f"Hint: {self.hint_text}", Colors.CYAN)
            self.hint_used = True

        if question.is_multi_choice:
            correct = self._ask_multi(question)
        else:
            correct = self._ask_single(question)

        if correct:
            self.score += 1
            self.console.say("Correct!", Colors.GREEN)
        else:
            self.missed.append(question.text)
            if question.is_multi_choice:
                answers = ", ".join(question.correct_answers)
                self.console.say(f"Incorrect. The correct answers were: {answers}", Colors.RED)
            else:
                self.console.say(
                    f"Incorrect. The correct answer was: {question.correct_answer}", Colors.RED
                )

        if question.explanation:
            self.console.say(question.explanation, Colors.DIM)

        self.total_questions += 1

    def _display_question(self, question: Question):
        self.console.say()
        self.console.slow(f"Question: {question.text}", Colors.BOLD)
        for i, choice in enumerate(question.choices, start=1):
            self.console.say(f"  {i}. {choice}")

    def _offer_hint(self) -> bool:
        answer = self.console.ask("Would you like to use a hint? (y/n):")
        return answer.lower() in HINT_ACCEPT

    def _ask_single(self, question: Question) -> bool:
        count = len(question.choices)
        while True:
            raw = self.console.ask(f"Your answer (1-{count}):")
            index = parse_single_answer(raw, count)
            if index is not None:
                return question.choices[index - 1] == question.correct_answer
            try:
                int(raw)
            except ValueError:
                self.console.say("Invalid input. Please enter a number.", Colors.RED)
            else:
                self.console.say(f"Please choose a number from 1 to {count}.", Colors.RED)

    def _ask_multi(self, question: Question) -> bool:
        count = len(question.choices)
        raw = self.console.ask("Enter your answers separated by spaces (e.g., 1 3 4):")
        indices = parse_multi_answer(raw, count)
        selected = [question.choices[i - 1] for i in sorted(indices)]
        return question.check_choices(selected)

    def _show_results(self, result: QuizResult):
        self.console.say()
        self.console.slow(f"Quiz Results: {result.correct} / {result.total} correct.", Colors.CYAN)
        if result.outcome is QuizOutcome.PERFECT_SCORE:
            self.console.say("Perfect score! Well done!", Colors.GREEN)
            return

        self.console.say("Keep trying to improve your knowledge!", Colors.YELLOW)
        if result.missed:
            self.console.say("Review the following questions:")
            for text in result.missed:
                self.console.say(f"  ✗ {text}", Colors.RED)
