# ethawin

A small text-mode windowing toolkit: a title line, a menu bar with
pull-down menus, shaded pop-up boxes, yes/no prompts, line input and a
scrolling list chooser. It runs in a terminal through `curses`, and can
also be driven headlessly from a scripted list of events, which is how the
test suite exercises it.

Three programs ship with the package:

| Command        | What it does                                              |
|----------------|-----------------------------------------------------------|
| `ethawin-demo` | A tour of the menus, dialogs and configuration settings.  |
| `labeler`      | The skeleton of a label printer with File and Misc menus; it ends as soon as any menu option is chosen. |
| `labor`        | A weekly employee shift planner with a coverage graph.    |

## Installing

```
pip install .
```

Python 3.10 or newer is required. There are no third-party dependencies.

## Running

Each command accepts `-?`, which prints a usage summary and exits.
Otherwise it takes over the terminal until you quit.

### Keys

- A key code with the high bit set (Alt + letter, on terminals that send it
  that way) opens the menu with that underlined letter; Alt+A shows
  *About*, Alt+H shows *Help*.
- **Up/Down** move through a menu or list, **Left/Right** step to the
  neighbouring menu, **Enter** selects, **Esc** aborts.
- Inside a menu, pressing an option's underlined letter moves to it; with
  hot keys enabled it selects it straight away.
- In the list chooser, **Page Up/Page Down** page and **Home/End** jump to
  the top or bottom.
- When the mouse is enabled, clicks work on the menu bar, in menus, in
  yes/no boxes and on the chooser's UP/DOWN/QUIT buttons.

In `labor`, Left/Right change the day, Up/Down pick an employee and Enter
asks for that employee's hours on that day. The Edit menu adds, deletes
and edits employees and sets how many should be on duty at a time.

## Configuration

`ethawin.config.load_config(path)` reads settings from a plain text file of
`KEYWORD=value` lines (by default `/DD/SYS/ETHAWIN/EthaWin.cfg`; if it
cannot be opened the defaults are used). `parse_config(lines)` does the
same from any iterable of lines. Keywords are case-insensitive, leading
blanks are ignored, lines without `=` are skipped and a `*` before the `=`
marks a remark.

```
* colour slots and palette
COLOR0=0
FOREGROUND=3
BACKGROUND=0
MENUBARFORE=0
MENUBARBACK=2
USEMOUSE=YES
MOUSEPORT=RIGHT
MOUSERES=HIGH
HOTKEYS=YES
```

`USEMOUSE=N...` turns the mouse off, `MOUSEPORT=L...` and `MOUSERES=L...`
select the left port and low resolution, and `HOTKEYS=Y...` makes menu
letters and the Y/N keys act immediately.

## Using the toolkit from Python

```python
from ethawin.config import parse_config
from ethawin.screen import session
from ethawin.dialogs import yes_no
from ethawin.menuloop import Desktop
from ethawin.demo import build_menu_bar, about, help_screen

settings = parse_config(["HOTKEYS=YES"])

with session(settings) as screen:
    screen.top_text("", "My Program", "")
    bar = build_menu_bar()
    screen.menu_bar(bar)
    desk = Desktop(screen, bar, about, help_screen)
    while True:
        event = desk.check_menu()
        if event.selected and yes_no(screen, "QUIT"):
            break
```

- `ethawin.menus` holds the menu model (`Menu`, `MenuOption`, `MenuBar`).
- `ethawin.listview.ListView` is the scrolling-list logic behind
  `ethawin.dialogs.choose`.
- `ethawin.dialogs` has `yes_no`, `line_input` and `choose`.
- `ethawin.screen.Screen` is the drawing surface, with `HeadlessTerminal`
  (scripted events, every frame kept) and `CursesTerminal` back ends.
- `ethawin.labor.schedule` holds the planner's model: `Employee`,
  `Schedule`, `int_to_time` and `time_to_int`.

## Disk utility pieces

`ethawin.towel` holds the parts of a point-and-click disk utility:

- `ethawin.towel.config` reads its command file with `load_towel_config`,
  which tries `/DD/SYS/ETHAWIN/Towel.cfg` and then `Towel.cfg`. Each of
  `COPY`, `DELETE`, `FILEINFO`, `RENAME`, `BACKUP`, `COBBLER`, `DCHECK`,
  `FORMAT`, `DISKINFO`, `DELDIR`, `MAKEDIR`, `LIST`, `MOVE` and `USER1` to
  `USER8` names the shell command used for that action; `SORTDIR=Y` and
  `SHOWHIDDEN=Y` set those flags.
- `ethawin.towel.actions` builds the commands, runs them in a shell
  monitor window, offers a drive/path picker (`drive_path`) and carries out
  a File, Disk, Directory or User menu choice on tagged `FileEntry` items
  through `process`. A user command beginning with `$` is run once per
  tagged file, with the file name appended.

### What is not included

There is no file-browser program: nothing lists a directory on screen,
lets you tag files and feeds them to `process`, and no `towel` command is
installed. The pieces above have to be driven from your own code.

## Running the tests

```
pip install ".[test]"
pytest
```