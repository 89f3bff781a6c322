from wideriver.config import Config
from wideriver.enums import Layout
from wideriver.style import Style, desired_style, style_commands
from wideriver.tag import Tag


def _tag(config, layout=None, smart_gaps=False):
    tag = Tag.from_config(config, 1)
    if layout is not None:
        tag.layout_cur = layout
    tag.smart_gaps = smart_gaps
    return tag


def test_monocle_style():
    config = Config(border_width_monocle=5, border_color_focused_monocle="0x112233")
    style = desired_style(config, _tag(config, Layout.MONOCLE), 3)
    assert style.border_width == 5
    assert style.border_color_focused == "0x112233"
    assert style.border_color_unfocused == config.border_color_unfocused


def test_smart_gaps_single_view():
    config = Config(border_width_smart_gaps=7)
    style = desired_style(config, _tag(config, Layout.LEFT, smart_gaps=True), 1)
    assert style.border_width == 7
    assert style.border_color_focused == config.border_color_focused


def test_smart_gaps_many_views_uses_normal_width():
    config = Config(border_width=3, border_width_smart_gaps=7)
    style = desired_style(config, _tag(config, Layout.LEFT, smart_gaps=True), 2)
    assert style.border_width == 3


def test_normal_style():
    config = Config(border_width=4)
    style = desired_style(config, _tag(config, Layout.WIDE), 1)
    assert style == Style(4, config.border_color_focused, config.border_color_unfocused)


def test_first_run_sends_everything():
    config = Config(border_width=0)
    desired = desired_style(config, _tag(config, Layout.LEFT), 2)
    commands = style_commands(desired, Style())
    assert commands == [
        ["border-width", "0"],
        ["border-color-focused", config.border_color_focused],
        ["border-color-unfocused", config.border_color_unfocused],
    ]


def test_no_commands_when_current():
    config = Config()
    desired = desired_style(config, _tag(config), 2)
    assert style_commands(desired, desired) == []


def test_only_differences_sent():
    desired = Style(2, "0xaaaaaa", "0xbbbbbb")
    current = Style(2, "0xcccccc", "0xbbbbbb")
    assert style_commands(desired, current) == [["border-color-focused", "0xaaaaaa"]]