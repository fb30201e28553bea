import io
import os

import pytest

from xvtools.procdemo import pingpong, stressfs, zombie


def test_pingpong_reports_both_bytes():
    out = io.StringIO()
    ping, pong = pingpong(out)
    assert ping == os.getpid() & 0xFF
    assert 0 <= pong <= 255
    assert out.getvalue() == f"{ping}: received ping \n{pong}: received pong \n"


def test_stressfs_writes_files(tmp_path):
    out = io.StringIO()
    paths = stressfs(str(tmp_path), out)
    assert [os.path.basename(p) for p in paths] == [f"stressfs{i}" for i in range(5)]
    for path in paths:
        with open(path, "rb") as handle:
            assert handle.read() == b"a" * (20 * 512)


def test_stressfs_output(tmp_path):
    out = io.StringIO()
    stressfs(str(tmp_path), out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "stressfs starting"
    assert sorted(line for line in lines if line.startswith("write")) == [
        f"write {i}" for i in range(5)
    ]
    assert lines.count("read") == 5


def test_stressfs_does_not_truncate_longer_file(tmp_path):
    (tmp_path / "stressfs0").write_bytes(b"b" * (20 * 512 + 3))
    stressfs(str(tmp_path), io.StringIO())
    data = (tmp_path / "stressfs0").read_bytes()
    assert data == b"a" * (20 * 512) + b"bbb"


def test_zombie_child_finishes_first():
    assert zombie(0.05) is True


def test_zombie_rejects_negative_delay():
    with pytest.raises(ValueError):
        zombie(-1)