import pytest
#
from inireader.commandline import (main, run, EXIT_FOUND, EXIT_USAGE, EXIT_NOT_FOUND,
                                   EXIT_SOURCE_ERROR, EXIT_CONVERSION_ERROR)
from inireader.exceptions import UsageError


@pytest.fixture
def inifile(tmp_path):
    path = tmp_path / "sample.ini"
    path.write_text('[USER]\nemail = "somebody@domain.com"\n'
                    '[CLIENT]\nphone = "555-555-1212"\ncount = 3\n#skipped = 1\n')
    return str(path)


def _exit_code(argv):
    with pytest.raises(SystemExit) as err:
        main(argv)
    return err.value.code


def test_found(inifile, capsys):
    assert _exit_code([inifile, "CLIENT", "phone"]) == EXIT_FOUND
    assert capsys.readouterr().out == "555-555-1212\n"


def test_not_found(inifile, capsys):
    assert _exit_code([inifile, "CLIENT", "fax"]) == EXIT_NOT_FOUND
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Key 'fax' not found in section 'CLIENT'" in captured.err


def test_missing_section(inifile):
    assert _exit_code([inifile, "ADMIN", "x"]) == EXIT_NOT_FOUND


def test_default(inifile, capsys):
    assert _exit_code([inifile, "CLIENT", "fax", "--default", "none"]) == EXIT_FOUND
    assert capsys.readouterr().out == "none\n"


def test_source_error(tmp_path, capsys):
    missing = str(tmp_path / "missing.ini")
    assert _exit_code([missing, "CLIENT", "phone"]) == EXIT_SOURCE_ERROR
    assert f"Couldn't open file {missing} for reading" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["file.ini"], ["file.ini", "S"], ["file.ini", "S", "k", "extra"]])
def test_wrong_number_of_arguments(argv, capsys):
    assert _exit_code(argv) == EXIT_USAGE
    assert "Invalid usage" in capsys.readouterr().err


def test_empty_names_are_usage_errors(inifile):
    assert _exit_code([inifile, "", "phone"]) == EXIT_USAGE
    assert _exit_code([inifile, "CLIENT", " "]) == EXIT_USAGE


def test_unknown_type_and_encoding(inifile):
    assert _exit_code([inifile, "CLIENT", "count", "--type", "complex"]) == EXIT_USAGE
    assert _exit_code([inifile, "CLIENT", "count", "--encoding", "no-such-codec"]) == EXIT_USAGE


def test_exit_codes_are_distinct():
    codes = {EXIT_FOUND, EXIT_USAGE, EXIT_NOT_FOUND, EXIT_SOURCE_ERROR, EXIT_CONVERSION_ERROR}
    assert len(codes) == 5


def test_typed_value(inifile, capsys):
    assert _exit_code([inifile, "client", "COUNT", "-t", "int"]) == EXIT_FOUND
    assert capsys.readouterr().out == "3\n"
    assert _exit_code([inifile, "client", "phone", "-t", "float"]) == EXIT_CONVERSION_ERROR
    assert "Could not convert value '555-555-1212' to float" in capsys.readouterr().err


def test_comment_markers(inifile, capsys):
    assert _exit_code([inifile, "CLIENT", "#skipped"]) == EXIT_NOT_FOUND
    assert _exit_code([inifile, "CLIENT", "#skipped", "--comment-markers", ";"]) == EXIT_FOUND
    assert capsys.readouterr().out == "1\n"


def test_verbose(inifile, capsys):
    assert _exit_code([inifile, "USER", "email", "-v"]) == EXIT_FOUND
    captured = capsys.readouterr()
    assert captured.out == "somebody@domain.com\n"
    assert "Looking up 'email' in section 'USER'" in captured.err


def test_run_raises_usage_error():
    with pytest.raises(UsageError):
        run(["only-a-path"])


def test_file_with_byte_order_mark(tmp_path, capsys):
    path = tmp_path / "bom.ini"
    path.write_bytes(b"\xef\xbb\xbf[USER]\nemail = x\n")
    assert _exit_code([str(path), "USER", "email"]) == EXIT_FOUND
    assert capsys.readouterr().out == "x\n"
