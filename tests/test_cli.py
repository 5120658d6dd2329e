import pytest

from lineparse.cli import (
    EXIT_BAD_EXTENSION,
    EXIT_OK,
    EXIT_PARSE_ERROR,
    EXIT_USAGE,
    csv_main,
    json_main,
    main,
    txt_main,
)


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.write_bytes(content)
    return str(path)


@pytest.mark.parametrize("entry", [main, txt_main, csv_main, json_main])
def test_missing_argument_prints_usage(entry, capsys):
    assert entry([]) == EXIT_USAGE
    assert "Usage" in capsys.readouterr().err


def test_main_accepts_any_extension(tmp_path):
    path = _write(tmp_path, "notes.log", b"ligne1\nligne2\n")
    assert main([path]) == EXIT_OK


def test_main_missing_file(capsys):
    assert main(["/tmp/__fichier_inexistant__.txt"]) == EXIT_PARSE_ERROR
    assert capsys.readouterr().err.startswith("Error:")


def test_main_malformed_utf8(tmp_path):
    path = _write(tmp_path, "bad.txt", b"ligne1\nligne2\n\xFF\xFF\xFF")
    assert main([path]) == EXIT_PARSE_ERROR


def test_txt_main_valid(tmp_path):
    path = _write(tmp_path, "test.txt", b"ligne1\nligne2\nligne3\n")
    assert txt_main([path]) == EXIT_OK


def test_txt_main_uppercase_extension(tmp_path):
    path = _write(tmp_path, "TEST.TXT", b"ligne1\n")
    assert txt_main([path]) == EXIT_OK


def test_txt_main_wrong_extension(tmp_path, capsys):
    path = _write(tmp_path, "test.csv", b"a,b,c\n")
    assert txt_main([path]) == EXIT_BAD_EXTENSION
    assert ".txt" in capsys.readouterr().err


def test_txt_main_malformed_utf8(tmp_path, capsys):
    path = _write(tmp_path, "bad.txt", b"ligne1\nligne2\n\xFF\xFF\xFF")
    assert txt_main([path]) == EXIT_PARSE_ERROR
    assert "TXT" in capsys.readouterr().err


def test_txt_main_file_not_found():
    assert txt_main(["/tmp/__fichier_inexistant__.txt"]) == EXIT_PARSE_ERROR


@pytest.mark.parametrize(
    "name,content",
    [
        ("data.csv", b"a,b,c\n1,2,3\n4,5,6\n"),
        ("data.tsv", b"a\tb\tc\n1\t2\t3\n4\t5\t6\n"),
        ("DATA.CSV", b"a,b,c\n"),
        ("empty.csv", b""),
    ],
)
def test_csv_main_valid(tmp_path, name, content):
    assert csv_main([_write(tmp_path, name, content)]) == EXIT_OK


def test_csv_main_wrong_extension(tmp_path, capsys):
    path = _write(tmp_path, "data.txt", b"a,b,c\n")
    assert csv_main([path]) == EXIT_BAD_EXTENSION
    assert ".csv" in capsys.readouterr().err


def test_csv_main_hidden_file_has_no_extension(tmp_path):
    path = _write(tmp_path, ".csv", b"a,b,c\n")
    assert csv_main([path]) == EXIT_BAD_EXTENSION


def test_csv_main_malformed_utf8(tmp_path, capsys):
    path = _write(tmp_path, "bad.csv", b"a,b,c\n1,2,\n\xFF\xFF\xFF")
    assert csv_main([path]) == EXIT_PARSE_ERROR
    assert "CSV" in capsys.readouterr().err


def test_csv_main_file_not_found():
    assert csv_main(["/tmp/__fichier_inexistant__.csv"]) == EXIT_PARSE_ERROR


@pytest.mark.parametrize(
    "name,content",
    [
        ("data.jsonl", b'{"a":1}\n{"b":2}\n{"c":3}\n'),
        ("data.json", b'[{"a":1},{"b":2},{"c":3}]'),
    ],
)
def test_json_main_valid(tmp_path, name, content):
    assert json_main([_write(tmp_path, name, content)]) == EXIT_OK


def test_json_main_wrong_extension(tmp_path, capsys):
    path = _write(tmp_path, "data.txt", b'{"a":1}')
    assert json_main([path]) == EXIT_BAD_EXTENSION
    assert ".json" in capsys.readouterr().err


def test_json_main_malformed(tmp_path, capsys):
    path = _write(tmp_path, "bad.json", b"{not_json}")
    assert json_main([path]) == EXIT_PARSE_ERROR
    assert "JSON" in capsys.readouterr().err


def test_json_main_file_not_found():
    assert json_main(["/tmp/__fichier_inexistant__.json"]) == EXIT_PARSE_ERROR


def test_extra_arguments_are_ignored(tmp_path):
    path = _write(tmp_path, "test.txt", b"ligne1\n")
    assert txt_main([path, "ignored.csv"]) == EXIT_OK