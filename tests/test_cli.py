from PIL import Image

from gfdecode.app.cli import main


def test_field_argument(capsys):
    assert main(["--field", "A,2,2,1,FF00"]) == 0
    assert capsys.readouterr().out == "8x2\n"


def test_preview(capsys):
    assert main(["--field", "^GFA,2,2,1,F0,^FS", "--preview"]) == 0
    assert capsys.readouterr().out == "8x2\n####....\n........\n"


def test_file_and_png_output(tmp_path, capsys):
    source = tmp_path / "field.txt"
    source.write_text("^GFA,4,4,2,FF00:^FS\n", encoding="ascii")
    target = tmp_path / "field.png"
    assert main([str(source), "--output", str(target)]) == 0
    with Image.open(target) as img:
        assert img.size == (16, 2)
    assert capsys.readouterr().out == "16x2\n"


def test_decode_error(capsys):
    assert main(["--field", "^GFB,1,1,1,FF^FS"]) == 2
    assert "Unsupported" in capsys.readouterr().err


def test_path_and_field_conflict(tmp_path, capsys):
    assert main([str(tmp_path / "x.txt"), "--field", "A,1,1,1,FF"]) == 2
    assert "either" in capsys.readouterr().err
