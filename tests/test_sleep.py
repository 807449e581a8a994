import pytest

from progbook.sleep import format_duration, main, parse_duration


def test_parse_one_second():
    assert parse_duration("1s") == 1.0


@pytest.mark.parametrize("text", ["2m3.5s", "1h0m0s", "500ms", "1.5µs", "7ns", "-3s"])
def test_round_trip(text):
    assert format_duration(parse_duration(text)) == text


def test_zero():
    assert format_duration(0) == "0s"
    assert parse_duration("0") == 0.0


@pytest.mark.parametrize("text", ["", "abc", "5", "1x", "."])
def test_invalid(text):
    with pytest.raises(ValueError, match="invalid duration"):
        parse_duration(text)


def test_main(capsys):
    main(["-period", "0s"])
    assert capsys.readouterr().out == "Sleeping for 0s...\n"