"""Help text and the command line that spells out every default."""

from __future__ import annotations

from .config import (
    BORDER_COLOR_FOCUSED_DEFAULT,
    BORDER_COLOR_FOCUSED_MONOCLE_DEFAULT,
    BORDER_COLOR_UNFOCUSED_DEFAULT,
    BORDER_WIDTH_DEFAULT,
    BORDER_WIDTH_MIN,
    BORDER_WIDTH_MONOCLE_DEFAULT,
    BORDER_WIDTH_MONOCLE_MIN,
    BORDER_WIDTH_SMART_GAPS_DEFAULT,
    BORDER_WIDTH_SMART_GAPS_MIN,
    COUNT_MASTER_DEFAULT,
    COUNT_MIN,
    COUNT_WIDE_LEFT_DEFAULT,
    INNER_GAPS_DEFAULT,
    INNER_GAPS_MIN,
    LAYOUT_ALT_DEFAULT,
    LAYOUT_DEFAULT,
    LOG_THRESHOLD_DEFAULT,
    OUTER_GAPS_DEFAULT,
    OUTER_GAPS_MIN,
    RATIO_MASTER_DEFAULT,
    RATIO_MAX,
    RATIO_MIN,
    RATIO_WIDE_DEFAULT,
    STACK_DEFAULT,
)
from .enums import (
    Layout,
    LogThreshold,
    Stack,
    layout_name,
    log_threshold_name,
    stack_name,
)


def usage_text() -> str:
    """The full help text."""
    layouts = "|".join(layout_name(layout) for layout in Layout)
    stacks = "|".join(stack_name(stack) for stack in Stack)
    thresholds = "|".join(log_threshold_name(t) for t in LogThreshold)
    ratio_range = f"{RATIO_MIN:.1g} <= ratio <= {RATIO_MAX:.1g}"
    lines = [
        "Usage: wideriver [OPTIONS...|COMMANDS...]",
        "",
        "OPTIONS, startup:",
        "",
        f"  --layout                        {layouts}    {layout_name(LAYOUT_DEFAULT)}",
        f"  --layout-alt                    {layouts}    {layout_name(LAYOUT_ALT_DEFAULT)}",
        "",
        f"  --stack                         {stacks}                 {stack_name(STACK_DEFAULT)}",
        "",
        f"  --count-master                  count                                 {COUNT_MASTER_DEFAULT}           {COUNT_MIN} <= count",
        f"  --ratio-master                  ratio                                 {RATIO_MASTER_DEFAULT:.2f}      {ratio_range}",
        "",
        f"  --count-wide-left               count                                 {COUNT_WIDE_LEFT_DEFAULT}           {COUNT_MIN} <= count",
        f"  --ratio-wide                    ratio                                 {RATIO_WIDE_DEFAULT:.2f}      {ratio_range}",
        "",
        "  --(no-)smart-gaps",
        f"  --inner-gaps                    pixels                                {INNER_GAPS_DEFAULT}           {INNER_GAPS_MIN} <= gap size",
        f"  --outer-gaps                    pixels                                {OUTER_GAPS_DEFAULT}           {OUTER_GAPS_MIN} <= gap size",
        "",
        f"  --border-width                  pixels                                {BORDER_WIDTH_DEFAULT}           {BORDER_WIDTH_MIN} <= width",
        f"  --border-width-monocle          pixels                                {BORDER_WIDTH_MONOCLE_DEFAULT}           {BORDER_WIDTH_MONOCLE_MIN} <= width",
        f"  --border-width-smart-gaps       pixels                                {BORDER_WIDTH_SMART_GAPS_DEFAULT}           {BORDER_WIDTH_SMART_GAPS_MIN} <= width",
        "",
        f"  --border-color-focused          0xRRGGBB[AA]                          {BORDER_COLOR_FOCUSED_DEFAULT}",
        f"  --border-color-focused-monocle  0xRRGGBB[AA]                          {BORDER_COLOR_FOCUSED_MONOCLE_DEFAULT}",
        f"  --border-color-unfocused        0xRRGGBB[AA]                          {BORDER_COLOR_UNFOCUSED_DEFAULT}",
        "",
        "  --help",
        f"  --log-threshold                 {thresholds}        {log_threshold_name(LOG_THRESHOLD_DEFAULT)}",
        "  --version",
        "",
        "COMMANDS, sent via riverctl(1):",
        "",
        f"  --layout                        {layouts}",
        "  --layout-toggle ",
        "",
        f"  --stack                         {stacks}",
        "",
        f"  --count                         [+-]count                                         {COUNT_MIN} <= count",
        f"  --ratio                         [+-]ratio                                       {ratio_range}",
        "",
    ]
    return "\n".join(lines) + "\n"


def defaults_text() -> str:
    """A startup command line giving every option its default value."""
    lines = [
        "wideriver \\",
        f"    --layout                       {layout_name(LAYOUT_DEFAULT)}        \\",
        f"    --layout-alt                   {layout_name(LAYOUT_ALT_DEFAULT)}     \\",
        f"    --stack                        {stack_name(STACK_DEFAULT)}     \\",
        f"    --count-master                 {COUNT_MASTER_DEFAULT}           \\",
        f"    --ratio-master                 {RATIO_MASTER_DEFAULT:.2f}        \\",
        f"    --count-wide-left              {COUNT_WIDE_LEFT_DEFAULT}           \\",
        f"    --ratio-wide                   {RATIO_WIDE_DEFAULT:.2f}        \\",
        "    --no-smart-gaps                            \\",
        f"    --inner-gaps                   {INNER_GAPS_DEFAULT}           \\",
        f"    --outer-gaps                   {OUTER_GAPS_DEFAULT}           \\",
        f"    --border-width                 {BORDER_WIDTH_DEFAULT}           \\",
        f"    --border-width-monocle         {BORDER_WIDTH_MONOCLE_DEFAULT}           \\",
        f"    --border-width-smart-gaps      {BORDER_WIDTH_SMART_GAPS_DEFAULT}           \\",
        f'    --border-color-focused         "{BORDER_COLOR_FOCUSED_DEFAULT}"  \\',
        f'    --border-color-focused-monocle "{BORDER_COLOR_FOCUSED_MONOCLE_DEFAULT}"  \\',
        f'    --border-color-unfocused       "{BORDER_COLOR_UNFOCUSED_DEFAULT}"  \\',
        f"    --log-threshold                {log_threshold_name(LOG_THRESHOLD_DEFAULT)}        \\",
        '   > "/tmp/wideriver.${XDG_VTNR}.${USER}.log" 2>&1 &',
    ]
    return "\n".join(lines) + "\n"