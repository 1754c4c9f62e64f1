"""
Kaalyatra - Display Module

Terminal presentation helpers and the Console that owns input and output.

The Console is created once by the session and passed to everything that
talks to the player, so tests can script input and capture output.
"""

import sys
import textwrap
import time
from typing import Callable, Iterable, Optional, TextIO

from .config import LINE_WIDTH, TEXT_SPEED


class Colors:
    """ANSI color codes"""
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    END = '\033[0m'


class Console:
    """
    Input source and output sink for one session.

    Args:
        input_source: callable taking a prompt and returning the typed line
            (defaults to the builtin ``input``). Raises EOFError when input ends.
        output: stream written to (defaults to stdout)
        text_speed: seconds per character for the typewriter effect
        color: emit ANSI color codes
    """

    def __init__(self,
                 input_source: Optional[Callable[[str], str]] = None,
                 output: Optional[TextIO] = None,
                 text_speed: float = TEXT_SPEED,
                 color: bool = True):
        self.input_source = input_source or input
        self.output = output or sys.stdout
        self.text_speed = text_speed
        self.color = color

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def paint(self, text: str, color: Optional[str] = None) -> str:
        if not color or not self.color:
            return text
        return f"{color}{text}{Colors.END}"

    def say(self, text: str = "", color: Optional[str] = None):
        self.output.write(self.paint(text, color) + "\n")
        self.output.flush()

    def slow(self, text: str, color: Optional[str] = None):
        """Typewriter effect"""
        if self.text_speed <= 0:
            self.say(text, color)
            return
        if color and self.color:
            self.output.write(color)
        for char in text:
            self.output.write(char)
            self.output.flush()
            time.sleep(self.text_speed)
        if color and self.color:
            self.output.write(Colors.END)
        self.output.write("\n")
        self.output.flush()

    def line(self, char: str = "═", color: Optional[str] = Colors.DIM):
        self.say(char * LINE_WIDTH, color)

    def header(self, text: str, color: str = Colors.HEADER):
        """Print a section header"""
        bar = "═" * LINE_WIDTH
        self.say()
        self.say(bar, color)
        self.say(f"  {text}", color)
        self.say(bar, color)
        self.say()

    def box(self, lines: Iterable[str], color: str = Colors.CYAN, width: int = LINE_WIDTH):
        """Print text in a box"""
        content_width = width - 2
        self.say("╔" + "═" * width + "╗", color)
        for line in lines:
            for subline in str(line).split("\n"):
                for wrapped in textwrap.wrap(subline, width=content_width) or [""]:
                    self.say(f"║ {wrapped.ljust(content_width)} ║", color)
        self.say("╚" + "═" * width + "╝", color)

    def bullets(self, items: Iterable[str], marker: str = "•", indent: int = 2):
        pad = " " * indent
        for item in items:
            self.say(f"{pad}{marker} {item}")

    def clear(self):
        """Clear the screen, only when writing to a real terminal"""
        if self.color and hasattr(self.output, "isatty") and self.output.isatty():
            self.output.write("\033[H\033[2J")
            self.output.flush()

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def ask(self, prompt: str) -> str:
        """Read one stripped line. EOFError propagates to the caller."""
        return self.input_source(self.paint(f"{prompt} ", Colors.YELLOW)).strip()

    def get_input(self, prompt: str, valid_options: Iterable[str]) -> str:
        """Get validated input, case-insensitive"""
        options = [o.upper() for o in valid_options]
        while True:
            response = self.ask(prompt).upper()
            if response in options:
                return response
            self.say(f"Please enter one of: {', '.join(options)}", Colors.RED)
