"""A small terminal address book: a highlighted menu and contact creation."""

from __future__ import annotations

import argparse
import getpass
import os
import re
import sys
from enum import Enum, IntEnum
from pathlib import Path
from typing import TextIO

USERNAME_MIN = 3
USERNAME_MAX = 15
DEFAULT_CONTACT_FILE = "./contact.txt"

_FORBIDDEN_USERNAME_CHARS = re.compile(r"[!@$]")
_MENU_SIZE = 5
_CLEAR_SCREEN = "\033[H\033[2J"
_HIDDEN_ENTRY_PROMPT = "Password: "


class MenuOption(IntEnum):
    """Entries of the main menu, numbered as the selection index."""

    EXIT = 0
    ADDITION = 1
    DELETE = 2
    SEARCH = 3
    MODIFY = 4


class Key(str, Enum):
    """Keys that drive the menu."""

    UP = "A"
    DOWN = "S"
    ENTER = "D"


class InvalidUsername(ValueError):
    """Raised when a username is too short, too long or has forbidden characters."""


_MENU_LABELS = (
    (MenuOption.ADDITION, "New contact   "),
    (MenuOption.DELETE, "Delete contact"),
    (MenuOption.SEARCH, "Find contact  "),
    (MenuOption.MODIFY, "Edit contact  "),
    (MenuOption.EXIT, "Quit          "),
)


def render_menu(highlight: int) -> str:
    """Return the menu text with the entry numbered ``highlight`` shown bold."""
    lines = [
        f"\033[{1 if option == highlight else 0};31;47m {label}  \033[0m"
        for option, label in _MENU_LABELS
    ]
    return "\n".join(lines) + "\n"


def check_username(name: str) -> str:
    """Return ``name`` if it is a valid username, else raise InvalidUsername."""
    if not USERNAME_MIN <= len(name) <= USERNAME_MAX:
        raise InvalidUsername(
            f"username must be {USERNAME_MIN} to {USERNAME_MAX} characters long"
        )
    found = _FORBIDDEN_USERNAME_CHARS.search(name)
    if found:
        raise InvalidUsername(f"username may not contain {found.group()!r}")
    return name


def move_selection(current: int, key: Key | str) -> int:
    """Return the menu selection after pressing ``key``.

    UP and DOWN move through the five entries, wrapping around; ENTER keeps
    the selection. Any other key raises ValueError.
    """
    pressed = Key(key.value if isinstance(key, Key) else key.upper())
    if pressed is Key.UP:
        return (current - 1) % _MENU_SIZE
    if pressed is Key.DOWN:
        return (current + 1) % _MENU_SIZE
    return current


def add_person(name: str, password: str, path: str | os.PathLike[str] = DEFAULT_CONTACT_FILE) -> str:
    """Validate a contact and append it to the contact file.

    Any password is accepted. Returns the record line that was written.
    """
    check_username(name)
    record = f"{name}\t{password}\n"
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o644)
    with os.fdopen(fd, "a", encoding="utf-8") as handle:
        handle.write(record)
    return record


def _read_key(stream: TextIO) -> str:
    """Read one character without waiting for Enter when on a terminal."""
    if stream.isatty():
        import termios
        import tty

        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            return os.read(fd, 1).decode(errors="replace")
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    return stream.read(1)


def _read_line(stream: TextIO) -> str | None:
    """Return the next non-empty line, stripped, or None at end of input."""
    while True:
        line = stream.readline()
        if not line:
            return None
        if line.strip():
            return line.strip()


def _prompt_new_contact(stdin: TextIO, stdout: TextIO, path: Path) -> None:
    stdout.write("Username: ")
    stdout.flush()
    line = _read_line(stdin)
    if line is None:
        return
    name = line.split()[0]
    if stdin.isatty():
        entered = getpass.getpass(_HIDDEN_ENTRY_PROMPT, stream=stdout)
    else:
        stdout.write(_HIDDEN_ENTRY_PROMPT)
        stdout.flush()
        entered = _read_line(stdin)
    hidden_entry = entered if entered is not None else str()
    try:
        add_person(name, hidden_entry, path)
    except InvalidUsername as error:
        stdout.write(f"Failed to add contact: {error}\n")
        return
    stdout.write("Contact added\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu until Quit is chosen or input ends."""
    parser = argparse.ArgumentParser(description="Terminal address book.")
    parser.add_argument(
        "--file", default=DEFAULT_CONTACT_FILE, help="contact file to append to"
    )
    args = parser.parse_args(argv)
    path = Path(args.file)
    stdin, stdout = sys.stdin, sys.stdout

    selection = int(MenuOption.ADDITION)
    while True:
        stdout.write(render_menu(selection))
        stdout.flush()
        char = _read_key(stdin)
        if not char:
            return 0
        if char.isspace():
            continue
        try:
            pressed = Key(char.upper())
        except ValueError:
            stdout.write("Unknown key, try again...\n")
            continue
        if pressed is Key.ENTER:
            stdout.write(_CLEAR_SCREEN)
            option = MenuOption(selection)
            if option is MenuOption.EXIT:
                return 0
            if option is MenuOption.ADDITION:
                _prompt_new_contact(stdin, stdout, path)
        else:
            selection = move_selection(selection, pressed)
        stdout.write(_CLEAR_SCREEN)


if __name__ == "__main__":
    sys.exit(main())