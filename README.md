# lsrender

Building blocks for rendering file listings in a terminal, in the style of a
long `ls` listing with colours, tree lines and icons.

You supply file metadata you already have, such as block counts, inode
numbers, link counts, owners, sizes, timestamps and Git status. The package
turns it into ANSI-styled text cells that know their Unicode display width.

## Installation

```
pip install lsrender
```

To run the tests, install with `pip install lsrender[test]` and run `pytest`.

## Modules

- `lsrender.style`: ANSI colours and styles.
  - `Colour` covers the eight basic colours (`Colour.RED`, `Colour.BLUE`
    and so on). `fixed(n)` gives a colour from the 256-colour palette.
  - Colours build a `Style` with `normal()`, `bold()`, `italic()`,
    `underline()`, `blink()` and `on(background)`.
  - `Style.paint(text)` gives a `StyledText`.
  - `render_strings` writes a run of styled strings and emits only the escape
    codes needed between neighbouring styles.
- `lsrender.cell`: `TextCell` holds styled strings and their combined width.
  It supports `add_spaces`, `push`, `append` and `render`.
  - `TextCellContents` holds the strings without a cached width.
    `promote()` turns it into a full cell.
  - `paint(style, text)` builds a one-string cell. `blank(style)` builds a
    cell holding a single hyphen.
  - `display_width(text)` counts terminal columns.
- `lsrender.escape`: `escape(string, good, bad)` splits a string into styled
  pieces. Control characters are replaced by escape sequences such as `\n`
  and painted in the `bad` style.
- `lsrender.tree`: tree-drawing characters.
  - `TreePart` is one column of tree characters.
  - `TreeParams(depth, last)` describes a row's place in the tree.
  - `TreeTrunk.new_row` returns the parts to draw before a row.
  - `iterate_over(items, depth)` pairs each item with parameters that mark
    the last item.
- `lsrender.numeric`: `NumericLocale` formats integers with grouped thousands
  and floats with fixed decimals. `english()` gives a point for decimals and
  commas for thousands.
- `lsrender.time`: `TimeFormat` has four members: `DEFAULT_FORMAT`,
  `ISO_FORMAT`, `LONG_ISO` and `FULL_ISO`.
  - Timestamps are integers of nanoseconds since the Unix epoch.
  - `format_local` writes a timestamp as UTC. `format_zoned` writes it in a
    given `tzinfo`; `FULL_ISO` then adds the UTC offset.
  - `determine_time_zone(environ)` loads the zone named by `TZ`, or
    `/etc/localtime` when `TZ` is unset.
- `lsrender.render`: renderers for the columns of a long listing.
  - `blocks.render_blocks(blocks, colours)`: a block count, or a hyphen for
    `None`.
  - `inode.render_inode(inode, style)`.
  - `links.Links(count, multiple).render(colours, numeric)`.
  - `git.Git(staged, unstaged).render(colours)`, with `git.GitStatus` for
    each status.
  - `users.render_user(uid, colours, users, format)`: highlights the current
    user.
    - `users.SystemUsers` looks users and groups up in the system databases
      and caches the results.
    - `users.UserFormat` chooses names or numbers.
  - `groups.render_group(gid, colours, users, format)`: highlights groups the
    current user belongs to.
  - `size.render_size(size, colours, size_format, numerics)`: a size with
    decimal or binary prefixes or as plain bytes, a `DeviceIDs` pair, or a
    hyphen for `None`. `size.number_prefix` does the scaling.
  - `times.render_time(time, style, tz, format)`: a timestamp, or a hyphen
    for `None`.
- `lsrender.icons`:
  - `icon_for_file(name, extension, points_to_directory)` picks an icon
    glyph by well-known file name, by directory, then by extension.
  - `iconify_style(style)` reduces a file name's style to a plain colour for
    its icon.
  - `Icons` holds the audio, image and video glyphs.

Each `colours` argument is any object with the style methods its renderer
asks for. These are described by the Protocol classes in each module, such as
`LinksColours` and `SizeColours`.

## Example

```python
from lsrender.style import Colour
from lsrender.cell import paint
from lsrender.tree import TreeTrunk, TreeParams
from lsrender.numeric import english
from lsrender.render.links import Links


class LinkStyles:
    def normal(self):
        return Colour.BLUE.normal()

    def multi_link_file(self):
        return Colour.BLUE.on(Colour.RED)


cell = paint(Colour.BLUE.bold(), "src")
cell.add_spaces(2)
print(cell.render(), cell.width)          # width is 5

links = Links(3005).render(LinkStyles(), english())
print(links.render())                     # "3,005" in blue

trunk = TreeTrunk()
for params in (TreeParams(0, False), TreeParams(1, True)):
    print("".join(part.ascii_art() for part in trunk.new_row(params)))
```

## What it does not do

This package renders individual cells and tree prefixes only.

- It does not read directories or stat files.
- It has no renderer for file-type characters, permission strings or octal
  modes.
- It does not choose columns, pad cells into aligned table rows, or assemble
  whole listing lines.
- It provides no command-line program.