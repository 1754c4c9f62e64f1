import io

from kaalyatra.display import Colors, Console


def test_get_input_reprompts_until_valid(make_console):
    console, scripted, output = make_console("maybe", "", "y")
    assert console.get_input("Continue? (Y/N):", ["Y", "N"]) == "Y"
    assert len(scripted.prompts) == 3
    assert output.getvalue().count("Please enter one of: Y, N") == 2


def test_ask_strips_whitespace(make_console):
    console, _, _ = make_console("  3  ")
    assert console.ask("Pick:") == "3"


def test_slow_without_delay_writes_line(make_console):
    console, _, output = make_console()
    console.slow("Welcome to the Gupta Empire!")
    assert output.getvalue() == "Welcome to the Gupta Empire!\n"


def test_color_codes_only_when_enabled():
    plain = io.StringIO()
    Console(input_source=lambda p: "", output=plain, color=False).say("hi", Colors.RED)
    assert plain.getvalue() == "hi\n"

    colored = io.StringIO()
    Console(input_source=lambda p: "", output=colored, color=True).say("hi", Colors.RED)
    assert colored.getvalue() == f"{Colors.RED}hi{Colors.END}\n"


def test_box_wraps_long_lines(make_console):
    console, _, output = make_console()
    console.box(["word " * 40], width=30)
    lines = output.getvalue().splitlines()
    assert len(lines) > 3
    assert all(len(line) == 32 for line in lines)


def test_clear_is_silent_when_not_a_terminal(make_console):
    console, _, output = make_console()
    console.clear()
    assert output.getvalue() == ""
