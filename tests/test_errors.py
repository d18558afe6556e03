import io

from cubraycast.errors import CubError, format_error, report


def test_format_error_has_header_and_message():
    assert format_error("Map is not closed") == "Error\nMap is not closed\n"


def test_format_error_without_message():
    assert format_error(None) == "Error\n\n"


def test_format_error_starts_with_error_line():
    text = format_error("missing player")
    first, rest = text.split("\n", 1)
    assert first == "Error"
    assert rest == "missing player\n"


def test_report_writes_to_stream():
    buf = io.StringIO()
    report("invalid map char", buf)
    assert buf.getvalue() == format_error("invalid map char")


def test_report_defaults_to_stderr(capsys):
    report("no map found")
    captured = capsys.readouterr()
    assert captured.err == "Error\nno map found\n"
    assert captured.out == ""


def test_cub_error_carries_message():
    err = CubError("texture set twice")
    assert err.message == "texture set twice"
    assert str(err) == "texture set twice"