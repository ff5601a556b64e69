# fdfkit

A small toolkit of character, byte, string and list helpers, a line reader
that pulls a stream in fixed-size chunks, and an isometric wireframe
renderer that draws a height map onto an in-memory pixel canvas.

It has no dependencies outside the standard library.

## Install

```
pip install fdfkit
pip install "fdfkit[test]"   # with pytest, to run the tests
```

## Modules

| Module | Contents |
| --- | --- |
| `fdfkit.chars` | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`. Each takes a one-character string or an integer code. |
| `fdfkit.output` | `put_char`, `put_str`, `put_endl`, `put_nbr`, which write to a text stream. `put_str` and `put_endl` stop at the first NUL character. |
| `fdfkit.memory` | `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc` on `bytearray`s and writable `memoryview`s. Counts that overrun a buffer raise `ValueError`. |
| `fdfkit.linereader` | `LineReader` and `read_lines`, which return lines (newline kept) from a text or binary stream read in chunks of `buffer_size` (default `DEFAULT_BUFFER_SIZE`, 1000). |
| `fdfkit.cstrings` | `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `strdup`. Strings end at their first NUL; searches return an index or `None`; `strlcpy` and `strlcat` return `(new_text, length)`. |
| `fdfkit.textops` | `substr`, `strjoin`, `strtrim`, `split`, `itoa`, `atoi`, `strmapi`, `striteri`. |
| `fdfkit.linked` | `Node` and `LinkedList` with `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration. |
| `fdfkit.wireframe` | `Canvas`, `View`, `Key`, `isometric`, `draw_segment`, `render`, `fit_zoom`, `handle_key`, `handle_mouse`. |

## Examples

Split text and convert numbers:

```python
from fdfkit.textops import split, atoi, itoa

split(",,Hello,there,,", ",")   # ['Hello', 'there']
atoi("   -42abc")               # -42
itoa(-2147483648)               # '-2147483648'
```

`atoi` accepts one sign, returns 0 for two signs in a row, and wraps its
result to a signed 32-bit value.

Move bytes around inside one buffer:

```python
from fdfkit.memory import memmove

buf = bytearray(b"CDCDE")
memmove(buf, 1, 0, 2)   # bytearray(b'CCDDE')
```

Read lines from a stream in chunks:

```python
import io
from fdfkit.linereader import read_lines

for line in read_lines(io.StringIO("0 0 1\n0 2 0\n"), 1000):
    print(line, end="")
```

Render a height map as a wireframe:

```python
from fdfkit.wireframe import Canvas, View, fit_zoom, render

grid = [[0, 0, 0], [0, 5, 0], [0, 0, 0]]
colors = [[0, 0, 0], [0, 0xFF0000, 0], [0, 0, 0]]
canvas = Canvas(1920, 1080)
view = View(zoom=fit_zoom(len(grid), len(grid[0]), 40, canvas))
render(canvas, view, grid, colors)
canvas.pixel(960, 100)   # colour at that pixel, 0 where nothing was drawn
```

`render` draws each point's edge to its right and lower neighbour in the
colour of the starting point; a colour of 0 means `DEFAULT_COLOR` (white).
Drawn pixels are kept in `canvas.pixels`, and `canvas.clear()` empties it.

`handle_key(view, key)` pans with W/A/S/D by 40 pixels and zooms by 2 with
`+`/`-` or the scroll codes; it returns `False` for Escape. `handle_mouse`
zooms on scroll up and down. Call `render` on a cleared canvas afterwards to
redraw.

## What it does not do

- It does not read map files. Build the height grid and colour grid yourself,
  for example from lines returned by `read_lines` and split with `split`.
- It opens no window and shows nothing on screen. The canvas lives in
  memory; turning its pixels into an image file or a display is left to the
  caller. There is no command-line program.