import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char():
    stream = io.StringIO()
    put_char("x", stream)
    put_char("y", stream)
    assert stream.getvalue() == "xy"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_and_none():
    stream = io.StringIO()
    put_str("Error", stream)
    put_str(None, stream)
    assert stream.getvalue() == "Error"


def test_put_endl_appends_newline():
    stream = io.StringIO()
    put_endl("OK", stream)
    put_endl(None, stream)
    assert stream.getvalue() == "OK\n"


@pytest.mark.parametrize("number", [0, 7, -7, 42, 2147483647, -2147483648])
def test_put_nbr(number):
    stream = io.StringIO()
    put_nbr(number, stream)
    assert stream.getvalue() == str(number)


def test_default_stream_is_stdout(capsys):
    put_str("KO", None)
    put_endl("", None)
    assert capsys.readouterr().out == "KO\n"