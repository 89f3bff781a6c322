from wideriver.config import (
    BORDER_COLOR_FOCUSED_DEFAULT,
    BORDER_COLOR_UNFOCUSED_DEFAULT,
)
from wideriver.usage import defaults_text, usage_text


def test_usage_header():
    text = usage_text()
    assert text.startswith("Usage: wideriver [OPTIONS...|COMMANDS...]\n")
    assert text.endswith("\n\n")


def test_usage_lists_layouts_and_stacks():
    text = usage_text()
    assert "monocle|left|right|top|bottom|wide" in text
    assert "even|diminish|dwindle" in text
    assert "debug|info|warning|error|fatal" in text


def test_usage_ratio_range():
    assert usage_text().count("0.1 <= ratio <= 0.9") == 3


def test_usage_has_command_section():
    lines = usage_text().split("\n")
    start = lines.index("COMMANDS, sent via riverctl(1):")
    commands = lines[start:]
    assert "  --layout-toggle " in commands
    assert any(line.startswith("  --count ") for line in commands)
    assert any(line.startswith("  --ratio ") for line in commands)


def test_usage_shows_colour_defaults():
    text = usage_text()
    assert BORDER_COLOR_FOCUSED_DEFAULT in text
    assert BORDER_COLOR_UNFOCUSED_DEFAULT in text


def test_defaults_lines_continue():
    lines = defaults_text().rstrip("\n").split("\n")
    assert lines[0] == "wideriver \\"
    assert all(line.endswith("\\") for line in lines[:-1])
    assert lines[-1].endswith("2>&1 &")


def test_defaults_quotes_colours():
    text = defaults_text()
    assert f'"{BORDER_COLOR_FOCUSED_DEFAULT}"' in text
    assert "--no-smart-gaps" in text
    assert "--ratio-master                 0.50" in text