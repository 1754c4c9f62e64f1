import io

import pytest

from kaalyatra.display import Console


class ScriptedInput:
    """Feeds canned answers to the console; EOFError once they run out."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def make_console():
    """Build a colorless, instant console from a list of answers.

    Returns (console, scripted_input, output_buffer).
    """
    def _make(*answers):
        scripted = ScriptedInput(answers)
        output = io.StringIO()
        console = Console(input_source=scripted, output=output, text_speed=0, color=False)
        return console, scripted, output
    return _make
