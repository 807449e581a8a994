import pytest

from progbook.tempconv import Celsius, c_to_f, f_to_c, main, parse_celsius


def test_boiling_point():
    assert c_to_f(Celsius(100)) == 212


def test_round_trip():
    assert f_to_c(c_to_f(37.5)) == pytest.approx(37.5)


def test_str():
    assert str(Celsius(20.0)) == "20°C"


@pytest.mark.parametrize("text", ["100C", "100°C", "212F", "212°F"])
def test_parse_units(text):
    assert parse_celsius(text) == pytest.approx(100.0)


def test_parse_invalid():
    with pytest.raises(ValueError, match='invalid temperature "100K"'):
        parse_celsius("100K")


def test_main_default(capsys):
    main([])
    assert capsys.readouterr().out == "20°C\n"


def test_main_fahrenheit(capsys):
    main(["-temp", "-40F"])
    assert capsys.readouterr().out == f"{Celsius(-40.0)}\n"