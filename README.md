# wideriver

Layout calculations for a tiling window manager in the style of the river
Wayland compositor. Given a number of windows and a usable area, it works out
where each window goes for a set of layouts:

- `left`, `right`, `top`, `bottom`: a master area plus a stack
- `wide`: one centred master with stacks on either side
- `monocle`: every window fills the usable area

Stacks can be laid out `even`, `diminish` or `dwindle`. Each of the 32 tags
of an output keeps its own layout, master count, ratios and gaps, which start
out from the configuration.

## Configuration

`wideriver.config.Config` is a dataclass of startup settings with their
defaults. Each setter takes the text of a value, checks it, and raises
`ValueError` when it is invalid:

```python
from wideriver.config import Config, valid_colour

config = Config()
config.set_layout("wide")
config.set_stack("dwindle")
config.set_inner_gaps("5")
config.set_ratio_wide("0.4")              # must lie between 0.1 and 0.9
config.set_border_color_focused("0x93a1a1")

valid_colour("0x93a1a1ff")   # True
valid_colour("93a1a1")       # False
```

`wideriver.usage.usage_text()` returns the help text for the options and
commands, and `wideriver.usage.defaults_text()` a sample invocation with every
default spelled out.

Names of layouts, stacks and log thresholds convert both ways with the
functions in `wideriver.enums` (`layout_val("WIDE")` is `Layout.WIDE`,
`stack_name(Stack.EVEN)` is `"even"`); lookups ignore case and return `None`
for unknown names.

## Laying out windows

```python
from wideriver.arrange import Demand
from wideriver.config import Config
from wideriver.enums import LogThreshold
from wideriver.layout import layout, layout_description
from wideriver.tag import make_tags, tag_first

config = Config()
tags = make_tags(config)
tag = tag_first(tags, 0b1)

demand = Demand(view_count=3, usable_width=1920, usable_height=1080)
for box in layout(demand, tag):
    print(box.x, box.y, box.width, box.height)

print(layout_description(demand, tag, LogThreshold.INFO))
```

`layout_description` gives a short box-drawing picture of the layout; at
`LogThreshold.DEBUG` it adds the count and ratio. The building blocks
(`arrange_count`, `arrange_master_stack`, `arrange_wide`, `arrange_monocle`,
`arrange_views`) are in `wideriver.arrange`.

## Commands

A `wideriver.output.Command` describes a change to a tag: a new layout, a
layout toggle, a stack style, an absolute or relative count, and an absolute
or relative ratio. Apply it to one tag with `wideriver.output.apply_command`,
or to every tag selected by an output's `command_tags_mask`:

```python
from wideriver.enums import Layout
from wideriver.output import Command, Output

output = Output(name=1)
output.command_tags_mask = 0b101
output.apply_command(Command(layout=Layout.MONOCLE))
output.apply_command(Command(layout_toggle=True))
output.apply_command(Command(count_delta=1, ratio_delta=-0.05))
```

Counts never drop below zero, and ratios are kept between 0.1 and 0.9. In
the monocle layout counts and ratios are left alone.

## Borders

`wideriver.style.desired_style(config, tag, view_count)` picks the border
width and colours for the current layout (monocle and a lone window with
smart gaps have their own), and `style_commands(desired, current)` lists the
control command arguments needed to go from the current `Style` to the
desired one.

## Logging

`wideriver.log.Log` writes timestamped lines at or above a threshold; errors
and fatal messages go to the error stream. `column_start`, `column` and
`column_end` build debug lines out of fixed-width columns.

## Collections

Small ordered containers are included:

- `wideriver.orderedset.OrderedSet`: insertion-ordered set by identity
- `wideriver.inttable.OrderedTable`: insertion-ordered table with unsigned
  64-bit integer keys
- `wideriver.identitytable.IdentityTable`: the same, keyed by object identity
- `wideriver.stringtable.StringTable`: the same, keyed by strings, optionally
  ignoring ASCII case
- `wideriver.listops`: list helpers such as `remove_all`, `xor_merge`,
  `sort_by_less_than` and `move_matching`

## What it does not do

This package only computes layouts, styles and command effects. It has no
command line program, does not parse startup arguments into a `Config`, and
does not connect to a Wayland compositor: sending the boxes, layout names and
border commands to river is left to the caller.

## Tests

The test suite uses pytest; install the `test` extra to get it.