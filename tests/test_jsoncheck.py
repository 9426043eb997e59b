import pytest

from crusttools.jsoncheck import (
    JsonSyntaxError,
    main,
    parse_string,
    skip_whitespace,
    validate_object,
)


def test_skip_whitespace_stops_at_content():
    data = b" \t\r\n x"
    pos = skip_whitespace(data, 0)
    assert data[pos:] == b"x"


def test_skip_whitespace_reaches_end():
    data = b"   \n"
    assert skip_whitespace(data, 0) == len(data)


def test_skip_whitespace_without_whitespace_keeps_position():
    assert skip_whitespace(b"ab", 1) == 1


def test_parse_string_returns_offset_after_quote():
    data = b'"abc" rest'
    assert data[parse_string(data, 0):] == b" rest"


def test_parse_string_handles_escaped_quote():
    data = b'"a\\"b" rest'
    assert data[parse_string(data, 0):] == b" rest"


@pytest.mark.parametrize("data", [b'"abc', b'"abc\\', b'"'])
def test_parse_string_unterminated(data):
    with pytest.raises(JsonSyntaxError, match="Unterminated string"):
        parse_string(data, 0)


def test_parse_string_requires_quote():
    with pytest.raises(ValueError, match="no string"):
        parse_string(b"abc", 0)


@pytest.mark.parametrize(
    "data",
    [
        b"{}",
        b' { "key" : "value" } ',
        b'{"key": "value", "key2": "value"}',
        b'{\n  "key": "value",\n  "other": "esc\\"aped"\n}\n',
    ],
)
def test_valid_objects(data):
    end = validate_object(data)
    assert data[end - 1:end] == b"}"
    assert data[end:].strip() == b""


def test_validate_object_accepts_text():
    text = '{"key": "value"}'
    assert validate_object(text) == len(text)


def test_validate_object_ignores_trailing_content():
    data = b"{} trailing"
    assert data[validate_object(data):] == b" trailing"


@pytest.mark.parametrize(
    "data, message",
    [
        (b"", "Expected '{'"),
        (b"[]", "Expected '{'"),
        (b'{"key": "value",}', "Trailing comma"),
        (b'{"key" "value"}', "Unexpected End-of-File after ':'"),
        (b'{"key": 101}', 'Expected literal or "value"'),
        (b'{"key": "value" "key2": "value"}', "Expected ',' or '}' after pair"),
        (b'{"key": "value"', "Expected ',' or '}' after pair"),
        (b"{,}", "Expected '}' or \"key\" after '{'"),
        (b"{key: value}", "Expected '}' or \"key\" after '{'"),
        (b'{"key', "Unterminated string"),
    ],
)
def test_invalid_objects(data, message):
    with pytest.raises(JsonSyntaxError, match=message):
        validate_object(data)


def test_error_offset_points_into_input():
    data = b'{"key": "value",}'
    with pytest.raises(JsonSyntaxError) as info:
        validate_object(data)
    assert data[info.value.offset:info.value.offset + 1] == b"}"


def test_main_valid_file(tmp_path, capsys):
    path = tmp_path / "valid.json"
    path.write_bytes(b'{"key": "value"}\n')
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == f"Json file: {path} is VALID\n"


def test_main_uppercase_extension(tmp_path, capsys):
    path = tmp_path / "VALID.JSON"
    path.write_bytes(b"{}")
    assert main([str(path)]) == 0
    assert "is VALID" in capsys.readouterr().out


def test_main_invalid_file(tmp_path, capsys):
    path = tmp_path / "invalid.json"
    path.write_bytes(b'{"key": "value",}')
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "Trailing comma" in captured.err
    assert captured.out == ""


def test_main_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.json"
    path.write_bytes(b"")
    assert main([str(path)]) == 1
    assert "can not be empty" in capsys.readouterr().err


@pytest.mark.parametrize("name", ["noextension", "data.txt", "data.jsonl"])
def test_main_rejects_other_extensions(name, capsys):
    assert main([name]) == 1
    assert "must be a valid JSON file" in capsys.readouterr().err


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert "<input.json>" in capsys.readouterr().err


def test_main_without_input(capsys):
    assert main([]) == 1
    assert "No input is provided" in capsys.readouterr().err


def test_main_rejects_two_inputs(capsys):
    assert main(["a.json", "b.json"]) == 1
    assert "not supported" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.json")]) == 1
    assert capsys.readouterr().out == ""