import io
import stat

import pytest

from dsbasics.contact import (
    InvalidUsername,
    Key,
    MenuOption,
    add_person,
    check_username,
    main,
    move_selection,
    render_menu,
)


def test_render_menu_highlights_only_selected_entry():
    text = render_menu(MenuOption.ADDITION)
    lines = text.splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("\033[1;31;47m")
    assert all(line.startswith("\033[0;31;47m") for line in lines[1:])
    assert all(line.endswith("\033[0m") for line in lines)


def test_render_menu_exit_is_last_line():
    lines = render_menu(MenuOption.EXIT).splitlines()
    assert lines[-1].startswith("\033[1;31;47m")
    assert sum(line.startswith("\033[1;") for line in lines) == 1


def test_render_menu_out_of_range_highlights_nothing():
    lines = render_menu(-1).splitlines()
    assert not any(line.startswith("\033[1;") for line in lines)


@pytest.mark.parametrize("name", ["abc", "a" * 15, "alice_b"])
def test_check_username_accepts_valid(name):
    assert check_username(name) == name


@pytest.mark.parametrize("name", ["", "ab", "a" * 16])
def test_check_username_rejects_bad_length(name):
    with pytest.raises(InvalidUsername):
        check_username(name)


@pytest.mark.parametrize("name", ["ali!ce", "bob@host", "$money"])
def test_check_username_rejects_forbidden_chars(name):
    with pytest.raises(InvalidUsername):
        check_username(name)


def test_invalid_username_is_value_error():
    with pytest.raises(ValueError):
        check_username("x")


def test_move_selection_down_and_up_are_inverse():
    for start in range(5):
        moved = move_selection(start, Key.DOWN)
        assert move_selection(moved, Key.UP) == start


def test_move_selection_wraps():
    assert move_selection(MenuOption.MODIFY, Key.DOWN) == MenuOption.EXIT
    assert move_selection(MenuOption.EXIT, Key.UP) == MenuOption.MODIFY


def test_move_selection_accepts_lowercase_characters():
    assert move_selection(2, "s") == move_selection(2, Key.DOWN)
    assert move_selection(2, "a") == move_selection(2, Key.UP)


def test_move_selection_enter_keeps_selection():
    assert move_selection(3, Key.ENTER) == 3


def test_move_selection_unknown_key():
    with pytest.raises(ValueError):
        move_selection(1, "x")


def test_add_person_appends_records(tmp_path):
    path = tmp_path / "contact.txt"
    password = "password"
    first = add_person("alice", password, path)
    second = add_person("bobby", password, path)
    assert path.read_text(encoding="utf-8") == first + second
    assert first.startswith("alice")
    assert first.endswith("\n")


def test_add_person_creates_file_with_mode(tmp_path):
    path = tmp_path / "contact.txt"
    add_person("carol", "secret", path)
    mode = stat.S_IMODE(path.stat().st_mode)
    assert mode & 0o600 == 0o600
    assert not mode & 0o022


def test_add_person_invalid_name_writes_nothing(tmp_path):
    path = tmp_path / "contact.txt"
    with pytest.raises(InvalidUsername):
        add_person("a!", "secret", path)
    assert not path.exists()


def test_main_adds_contact_and_exits(tmp_path, monkeypatch, capsys):
    path = tmp_path / "contact.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("D\nalice\nsecret\nAD"))
    assert main(["--file", str(path)]) == 0
    assert path.read_text(encoding="utf-8").startswith("alice")
    assert "Contact added" in capsys.readouterr().out


def test_main_reports_unknown_key_and_rejects_bad_name(tmp_path, monkeypatch, capsys):
    path = tmp_path / "contact.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("zD\nx\nsecret\n"))
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Unknown key" in out
    assert "Failed to add contact" in out
    assert not path.exists()