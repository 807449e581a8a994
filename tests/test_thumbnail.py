import io
from concurrent.futures import ThreadPoolExecutor

import pytest
from PIL import Image

from progbook.thumbnail import image_file, image_file2, image_stream, main, thumbnail_image


def _write_jpeg(path, size, color=(200, 30, 30)):
    Image.new("RGB", size, color).save(path, "JPEG")
    return str(path)


def test_landscape_size():
    assert thumbnail_image(Image.new("RGB", (256, 128))).size == (128, 64)


def test_portrait_size():
    assert thumbnail_image(Image.new("RGB", (100, 200))).size == (64, 128)


def test_square_size():
    assert thumbnail_image(Image.new("RGB", (50, 50))).size == (128, 128)


def test_scaling_keeps_halves():
    src = Image.new("RGB", (256, 256), (255, 0, 0))
    src.paste((0, 0, 255), (128, 0, 256, 256))
    dst = thumbnail_image(src)
    assert dst.getpixel((0, 10)) == (255, 0, 0)
    assert dst.getpixel((127, 10)) == (0, 0, 255)


def test_image_stream_writes_jpeg():
    src = io.BytesIO()
    Image.new("RGB", (300, 150), (10, 200, 10)).save(src, "PNG")
    src.seek(0)
    out = io.BytesIO()
    image_stream(out, src)
    out.seek(0)
    with Image.open(out) as result:
        assert result.format == "JPEG"
        assert result.size == (128, 64)


def test_image_file_names_output(tmp_path):
    infile = _write_jpeg(tmp_path / "foo.jpeg", (400, 200))
    outfile = image_file(infile)
    assert outfile == str(tmp_path / "foo.thumb.jpeg")
    with Image.open(outfile) as result:
        assert result.size == (128, 64)


def test_image_file2_rejects_non_image(tmp_path):
    infile = tmp_path / "bad.jpg"
    infile.write_text("not an image")
    outfile = str(tmp_path / "bad.thumb.jpg")
    with pytest.raises(OSError, match="^scaling "):
        image_file2(outfile, str(infile))


def test_image_file_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        image_file(str(tmp_path / "missing.jpg"))


def test_thumbnails_in_parallel(tmp_path):
    names = [_write_jpeg(tmp_path / f"img{i}.jpg", (64 * (i + 1), 64)) for i in range(4)]
    with ThreadPoolExecutor() as pool:
        thumbs = list(pool.map(image_file, names))
    assert thumbs == [str(tmp_path / f"img{i}.thumb.jpg") for i in range(4)]
    total = sum((tmp_path / f"img{i}.thumb.jpg").stat().st_size for i in range(4))
    assert total > 0


def test_main_reads_names(tmp_path, monkeypatch, capsys):
    good = _write_jpeg(tmp_path / "a.jpg", (128, 128))
    missing = str(tmp_path / "missing.jpg")
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{good}\n{missing}\n"))
    main([])
    captured = capsys.readouterr()
    assert captured.out == str(tmp_path / "a.thumb.jpg") + "\n"
    assert "missing.jpg" in captured.err