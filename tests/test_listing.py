import io

import pytest

from xvtools.listing import DIRSIZ, FileType, find, find_main, fmtname, ls, ls_main


@pytest.mark.parametrize("path", ["name", "a/b/name", "/abs/x"])
def test_fmtname_pads_last_component(path):
    result = fmtname(path)
    assert len(result) == DIRSIZ
    assert result.rstrip(" ") == path.rsplit("/", 1)[-1]


def test_fmtname_long_name_unpadded():
    long_name = "12345678901234567"
    assert fmtname("dir/" + long_name) == long_name


def test_ls_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abcdef")
    out = io.StringIO()
    ls(str(path), out)
    fields = out.getvalue().split()
    assert fields[0] == "data.bin"
    assert fields[1] == str(int(FileType.FILE))
    assert fields[3] == "6"
    assert out.getvalue().endswith("\n")


def test_ls_directory(tmp_path):
    (tmp_path / "f1").write_bytes(b"xyz")
    (tmp_path / "sub").mkdir()
    out = io.StringIO()
    ls(str(tmp_path), out)
    lines = out.getvalue().splitlines()
    names = [line.split()[0] for line in lines]
    assert names == [".", "..", "f1", "sub"]
    kinds = {line.split()[0]: line.split()[1] for line in lines}
    assert kinds["sub"] == str(int(FileType.DIR))
    assert kinds["f1"] == str(int(FileType.FILE))


def test_ls_missing(tmp_path, capsys):
    missing = tmp_path / "missing"
    ls(str(missing), io.StringIO())
    assert capsys.readouterr().err == f"ls: cannot open {missing}\n"


def test_ls_main_defaults_to_cwd(tmp_path, monkeypatch, capsys):
    (tmp_path / "only").write_bytes(b"")
    monkeypatch.chdir(tmp_path)
    assert ls_main([]) == 0
    names = [line.split()[0] for line in capsys.readouterr().out.splitlines()]
    assert names == [".", "..", "only"]


def _tree(root):
    (root / "a").mkdir()
    (root / "a" / "target").write_bytes(b"1")
    (root / "target").write_bytes(b"2")
    (root / "b.").mkdir()
    (root / "b." / "target").write_bytes(b"3")
    (root / "c").mkdir()
    (root / "c" / "target").mkdir()


def test_find_reports_matching_files(tmp_path):
    _tree(tmp_path)
    out = io.StringIO()
    find(str(tmp_path), "target", out)
    root = str(tmp_path)
    assert out.getvalue().splitlines() == [f"{root}/a/target", f"{root}/target"]


def test_find_missing_path_raises(tmp_path):
    with pytest.raises(OSError):
        find(str(tmp_path / "missing"), "x", io.StringIO())


def test_find_main_in_cwd(tmp_path, monkeypatch, capsys):
    _tree(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert find_main(["target"]) == 0
    assert capsys.readouterr().out.splitlines() == ["./a/target", "./target"]


def test_find_main_errors(tmp_path, capsys):
    assert find_main([]) == 1
    assert "Please Input File Name You want to Find" in capsys.readouterr().err
    assert find_main(["a", "b", "c"]) == 1
    assert "The Find Can only accept [Path] [File_Name]" in capsys.readouterr().err
    assert find_main([str(tmp_path / "missing"), "x"]) == 1
    assert "Find Fail" in capsys.readouterr().err
    assert find_main([str(tmp_path), "n" * 300]) == 1
    assert "The File Name is too Long" in capsys.readouterr().err