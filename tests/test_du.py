import threading

from progbook.du import disk_usage, format_usage, main, walk_dir


def _make_tree(root, sizes):
    (root / "a" / "b").mkdir(parents=True)
    paths = [root / "top.bin", root / "a" / "mid.bin", root / "a" / "b" / "deep.bin"]
    for path, size in zip(paths, sizes):
        path.write_bytes(b"x" * size)
    return paths


def test_walk_dir_yields_every_file_size(tmp_path):
    sizes = [10, 200, 3000]
    _make_tree(tmp_path, sizes)
    assert sorted(walk_dir(str(tmp_path))) == sorted(sizes)


def test_walk_dir_empty_directory(tmp_path):
    assert list(walk_dir(str(tmp_path))) == []


def test_walk_dir_missing_directory_reports_error(tmp_path, capsys):
    missing = tmp_path / "nope"
    assert list(walk_dir(str(missing))) == []
    assert capsys.readouterr().err.startswith("du: ")


def test_walk_dir_cancelled(tmp_path):
    _make_tree(tmp_path, [1, 2, 3])
    cancel = threading.Event()
    cancel.set()
    assert list(walk_dir(str(tmp_path), cancel)) == []


def test_disk_usage_totals(tmp_path):
    sizes = [7, 70, 700]
    _make_tree(tmp_path, sizes)
    assert disk_usage([str(tmp_path)]) == (len(sizes), sum(sizes))


def test_disk_usage_several_roots(tmp_path):
    first, second = tmp_path / "one", tmp_path / "two"
    first.mkdir()
    second.mkdir()
    _make_tree(first, [5, 6, 7])
    _make_tree(second, [8, 9, 10])
    assert disk_usage([str(first), str(second)]) == (6, 5 + 6 + 7 + 8 + 9 + 10)


def test_disk_usage_no_roots():
    assert disk_usage([]) == (0, 0)


def test_disk_usage_cancelled(tmp_path):
    _make_tree(tmp_path, [1, 2, 3])
    cancel = threading.Event()
    cancel.set()
    assert disk_usage([str(tmp_path)], cancel) == (0, 0)


def test_format_usage():
    assert format_usage(0, 0) == "0 files  0.0 GB"
    assert format_usage(3, 1_500_000_000) == "3 files  1.5 GB"


def test_main_prints_totals(tmp_path, capsys):
    sizes = [4, 40, 400]
    _make_tree(tmp_path, sizes)
    main([str(tmp_path)])
    assert capsys.readouterr().out == format_usage(3, sum(sizes)) + "\n"