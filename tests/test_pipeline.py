import io
import itertools

from progbook.pipeline import counter, main, printer, squarer


def test_counter_limited():
    assert list(counter(5)) == list(range(5))
    assert len(list(counter(100))) == 100


def test_counter_infinite():
    assert list(itertools.islice(counter(), 7)) == list(range(7))


def test_squarer_values():
    assert list(squarer(counter(4))) == [0, 1, 4, 9]


def test_squarer_roots():
    for n, sq in enumerate(squarer(counter(50))):
        assert int(sq ** 0.5) == n


def test_printer_writes_lines():
    out = io.StringIO()
    printer([7, 11], out)
    assert out.getvalue().splitlines() == ["7", "11"]


def test_main(capsys):
    main(["--limit", "3"])
    assert capsys.readouterr().out == "0\n1\n4\n"