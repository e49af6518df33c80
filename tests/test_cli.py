import pytest

from poker_rank.cli import main
from poker_rank.config import (
    EXIT_BAD_HAND,
    EXIT_FILE_OPEN,
    EXIT_FILE_READ,
    EXIT_INTERNAL,
    EXIT_NO_INPUT,
    EXIT_OK,
    EXIT_TABLES,
    FLUSH_TABLE_FILE,
    UNSUITED_TABLE_FILE,
)
from poker_rank.tables.lookup import save_tables


def test_scores_args(capsys):
    assert main(["As", "Ks", "Qs", "Js", "Ts"]) == EXIT_OK
    assert capsys.readouterr().out == "1\n"


def test_show_hand(capsys):
    assert main(["-s", "7c", "5d", "4h", "3s", "2c"]) == EXIT_OK
    assert capsys.readouterr().out == "7462 7c 5d 4h 3s 2c\n"


def test_show_class(capsys):
    assert main(["--show-class", "As", "Ks", "Qs", "Js", "Ts"]) == EXIT_OK
    assert capsys.readouterr().out == "1 [Straight Flush]\n"


def test_no_input(capsys):
    assert main([]) == EXIT_NO_INPUT
    assert "no cards" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "nope.txt")]) == EXIT_FILE_OPEN
    err = capsys.readouterr().err
    assert "nope.txt" in err


def test_scores_file(tmp_path, capsys):
    path = tmp_path / "hands.txt"
    path.write_text("As Ks Qs Js Ts\n\n7c 5d 4h 3s 2c  Kd\n7c 5d 4h 3s 2c\n")
    assert main(["-f", str(path), "-s"]) == EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0] == "1 As Ks Qs Js Ts"
    assert lines[1].endswith(" 7c 5d 4h 3s 2c Kd")
    assert int(lines[1].split()[0]) < 7462
    assert lines[2] == "7462 7c 5d 4h 3s 2c"


def test_bad_hand_in_file_is_reported_and_skipped(tmp_path, capsys):
    path = tmp_path / "hands.txt"
    path.write_text("As Ks Qs Js Xs\nAs Ks Qs Js Ts\nAs Ks\n")
    assert main(["--file", str(path)]) == EXIT_BAD_HAND
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert "hands.txt:1" in captured.err
    assert "Xs" in captured.err
    assert "hands.txt:3" in captured.err


def test_bad_token_in_args(capsys):
    assert main(["As", "Ks", "Qs", "Js", "ts"]) == EXIT_BAD_HAND
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "'ts'" in captured.err


def test_tables_dir(tables, tmp_path, capsys):
    save_tables(tables, tmp_path)
    assert main(["--tables", str(tmp_path), "As", "Ks", "Qs", "Js", "Ts"]) == EXIT_OK
    assert capsys.readouterr().out == "1\n"


def test_missing_tables_dir(tmp_path, capsys):
    assert main(["--tables", str(tmp_path), "As", "Ks", "Qs", "Js", "Ts"]) == EXIT_TABLES
    assert "flush_lookup.csv" in capsys.readouterr().err


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0


def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / "hands.txt"
    path.write_bytes(b"\xff\xfe As Ks Qs Js Ts\n")
    assert main(["-f", str(path)]) == EXIT_FILE_READ
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "hands.txt" in captured.err


def test_incomplete_tables_are_internal_error(tmp_path, capsys):
    (tmp_path / FLUSH_TABLE_FILE).write_text("2310,1\n")
    (tmp_path / UNSUITED_TABLE_FILE).write_text("2310,7000\n")
    assert main(["--tables", str(tmp_path), "As", "Ks", "Qs", "Js", "Ts"]) == EXIT_INTERNAL
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Internal error" in captured.err
