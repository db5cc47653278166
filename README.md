# dirvis

`dirvis` prints the contents of a directory as a tree. It draws branches
with box characters and colours names by kind: directories, regular files,
hidden files and executables.

## Installation

```
pip install .
```

This installs the `dirvis` command. The same entry point can also be run as
`python -m dirvis.cli`.

## Usage

```
dirvis <directory_path> [options]
```

The directory path comes first; options follow it.

| Option | Short | Effect |
| --- | --- | --- |
| `--help` | `-h` | Print the help menu and exit with status 1 |
| `--show-hidden` | `-a` | Include entries whose names start with `.` |
| `--max-depth N` | `-d N` | Descend at most `N` levels (a positive integer) |
| `--no-colour` | `-c` | Print plain text without colour codes |

Example:

```
dirvis ~/projects/site --max-depth 2 -a -c
```

```
site/
├── index.html
├── assets/
│   ├── style.css
│   └── logo.png
└── .gitignore
```

Entries appear in the order the operating system lists them; they are not
sorted. Directories are shown with a trailing `/`. A directory that cannot
be opened shows `[ERROR] Could not open directory`, and an entry that cannot
be examined shows `[ERROR: cannot stat]` after its name.

Running `dirvis` with no arguments prints a usage line and the help menu.
An unknown option, a missing depth value or a depth that is not a positive
integer prints an error. In all of these cases the exit status is 1.

## Colours

Colours are read from `/home/dirvis.ini`, an INI-style file with one
`key=value` line per kind. The keys are `directory`, `file`, `hidden` and
`executable`. Values are hex colours of six or three digits, with or
without a leading `#`:

```
[colours]
directory=#5fafff
file=ffffff
hidden=#888
executable=#5f5
```

Section headers are skipped, unknown keys and values that are not valid hex
colours are ignored, and a line that starts with `!` ends the file. Kinds
that are not set are drawn in black (`0,0,0`). If the file cannot be opened,
output is printed without colour.

## Library use

The pieces behind the command can be used directly:

```python
from dirvis.flags import Flags
from dirvis.config import Config, hex_to_rgb, load_config
from dirvis.tree import render_tree, print_tree

flags = Flags(no_colour=True, max_depth=2)
for line in render_tree("/tmp", flags, Config(), 1):
    print(line)

print(hex_to_rgb("#0af"))   # RGB(r=0, g=170, b=255)

flags = Flags()
config = load_config(flags, "my-theme.ini")
print_tree(".", flags, config)
```

- `dirvis.flags.Flags` holds the options (`help`, `show_hidden`,
  `max_depth`, `no_colour`).
- `dirvis.config` provides `RGB`, `ColourTheme`, `Config`, `hex_to_rgb`
  (raises `ValueError` for an invalid colour) and `load_config`.
- `dirvis.tree` provides `render_tree` (yields lines without line endings),
  `print_tree` (writes them to a stream, standard output by default) and
  the helpers `colourise`, `build_path`, `indentation`,
  `count_visible_entries` and `is_hidden_folder`.
- `dirvis.cli` provides `main`, `parse_flags`, `parse_depth`, `root_line`,
  `help_text` and the `UsageError` exception.