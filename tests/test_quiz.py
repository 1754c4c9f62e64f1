import pytest

from kaalyatra.eras import Question
from kaalyatra.quiz import (
    EnhancedQuizStrategy,
    QuizOutcome,
    QuizPhase,
    QuizResult,
    parse_multi_answer,
    parse_single_answer,
)

SINGLE = Question(
    text="Who wrote the Arthashastra?",
    choices=("Megasthenes", "Kautilya", "Panini"),
    correct_answers=("Kautilya",),
    explanation="Kautilya advised Chandragupta.",
)

MULTI = Question(
    text="Which are Gupta achievements?",
    choices=("Nalanda", "Taj Mahal", "Shakuntala", "Red Fort"),
    correct_answers=("Nalanda", "Shakuntala"),
)


def _hint_prompts(scripted):
    return [p for p in scripted.prompts if "hint" in p]


# ── parsing ─────────────────────────────────────────────────


def test_parse_single_answer():
    assert parse_single_answer("2", 3) == 2
    assert parse_single_answer(" 3 ", 3) == 3
    assert parse_single_answer("0", 3) is None
    assert parse_single_answer("4", 3) is None
    assert parse_single_answer("two", 3) is None
    assert parse_single_answer("", 3) is None


def test_parse_multi_answer_discards_invalid():
    assert parse_multi_answer("1 3", 4) == {1, 3}
    assert parse_multi_answer("1  3 9 0 x -2", 4) == {1, 3}
    assert parse_multi_answer("", 4) == set()


# ── results ─────────────────────────────────────────────────


def test_result_passed_is_correct_equals_total():
    assert QuizResult(correct=2, total=2).passed
    assert QuizResult(correct=2, total=2).outcome is QuizOutcome.PERFECT_SCORE
    assert not QuizResult(correct=1, total=2, missed=("q",)).passed
    assert QuizResult(correct=1, total=2).outcome is QuizOutcome.NEEDS_REVIEW


# ── administer_quiz ─────────────────────────────────────────


def test_all_correct_passes_with_empty_missed_list(make_console):
    console, _, output = make_console("n", "2", "n", "1 3")
    quiz = EnhancedQuizStrategy(console)

    result = quiz.administer_quiz([SINGLE, MULTI])

    assert result.passed
    assert result.correct == 2
    assert result.total == 2
    assert result.missed == ()
    assert "Perfect score!" in output.getvalue()


def test_one_wrong_answer_is_reported_for_review(make_console):
    console, _, output = make_console("n", "1", "n", "1 3")
    quiz = EnhancedQuizStrategy(console)

    result = quiz.administer_quiz([SINGLE, MULTI])

    assert not result.passed
    assert result.correct == result.total - 1
    assert result.missed == (SINGLE.text,)
    text = output.getvalue()
    assert "The correct answer was: Kautilya" in text
    assert "Review the following questions:" in text


@pytest.mark.parametrize("answer, correct", [
    ("1 3", True),
    ("3 1", True),
    ("1 3 3", True),
    ("1", False),
    ("1 2 3", False),
    ("", False),
])
def test_multi_choice_requires_exact_set(make_console, answer, correct):
    console, _, _ = make_console("n", answer)
    result = EnhancedQuizStrategy(console).administer_quiz([MULTI])
    assert result.passed is correct


def test_multi_choice_ignores_out_of_range_indices(make_console):
    console, _, _ = make_console("n", "1 9 3 abc")
    result = EnhancedQuizStrategy(console).administer_quiz([MULTI])
    assert result.passed


def test_invalid_single_answer_is_reprompted(make_console):
    console, scripted, output = make_console("n", "abc", "7", "2")
    result = EnhancedQuizStrategy(console).administer_quiz([SINGLE])

    assert result.passed
    assert result.total == 1
    assert len([p for p in scripted.prompts if p.startswith("Your answer")]) == 3
    text = output.getvalue()
    assert "Invalid input. Please enter a number." in text
    assert "Please choose a number from 1 to 3." in text


def test_hint_offered_until_taken_then_never_again(make_console):
    console, scripted, output = make_console("n", "2", "y", "1 3", "2")
    quiz = EnhancedQuizStrategy(console)

    result = quiz.administer_quiz([SINGLE, MULTI, SINGLE])

    assert result.hint_used
    assert result.correct == 3
    assert len(_hint_prompts(scripted)) == 2
    assert output.getvalue().count("Hint:") == 1


def test_each_run_starts_fresh(make_console):
    console, scripted, _ = make_console("y", "1", "y", "2")
    quiz = EnhancedQuizStrategy(console)

    first = quiz.administer_quiz([SINGLE])
    second = quiz.administer_quiz([SINGLE])

    assert first.missed == (SINGLE.text,)
    assert second.missed == ()
    assert second.correct == 1
    assert second.hint_used
    assert len(_hint_prompts(scripted)) == 2


def test_phase_moves_to_completed(make_console):
    console, _, _ = make_console("n", "2")
    quiz = EnhancedQuizStrategy(console)
    assert quiz.phase is QuizPhase.IDLE

    quiz.administer_quiz([SINGLE])

    assert quiz.phase is QuizPhase.COMPLETED


def test_explanation_is_shown(make_console):
    console, _, output = make_console("n", "2")
    EnhancedQuizStrategy(console).administer_quiz([SINGLE])
    assert "Kautilya advised Chandragupta." in output.getvalue()


def test_end_of_input_propagates(make_console):
    console, _, _ = make_console("n")
    with pytest.raises(EOFError):
        EnhancedQuizStrategy(console).administer_quiz([SINGLE])
