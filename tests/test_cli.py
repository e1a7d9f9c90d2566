import errno
import os

import pytest

from writebench.cli.write_test import main
from writebench.core.targets import RawTarget


def report_lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_report(target, capsys):
    stats = target + ".stats"
    rc = main([target, "-s", "1000", "-c", "10", "--nosync", "-S", stats])

    assert rc == 0
    lines = report_lines(capsys)
    assert lines[0] == f"writting 10 x 1000-byte to {target}..."
    assert lines[1] == "written: 10000 bytes"
    assert lines[2].startswith("duration: ") and lines[2].endswith(" seconds")
    assert lines[3] == "sync-duration: 0.000000 seconds"
    assert lines[4].startswith("bitrate: ") and lines[4].endswith(" MB/s")
    assert len(lines) == 5

    with open(stats) as f:
        assert len(f.read().splitlines()) == 10


def test_defaults(target, capsys):
    assert main([target, "--nosync"]) == 0
    lines = report_lines(capsys)
    assert lines[0] == f"writting 100 x 1000000-byte to {target}..."
    assert lines[1] == "written: 100000000 bytes"
    assert os.path.getsize(target) == 100000000


def test_options_after_or_before_target(target, capsys):
    assert main(["-F", "--size", "64", "--count", "4", target]) == 0
    assert report_lines(capsys)[1] == "written: 256 bytes"


def test_missing_target(capsys):
    assert main(["-s", "1000"]) == -errno.EINVAL
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "no file path specified" in captured.err


def test_unopenable_target(tmp_path, capsys):
    missing = str(tmp_path / "missing" / "target.bin")
    assert main([missing, "-c", "1"]) == -errno.EINVAL
    assert "Unable to open" in capsys.readouterr().err


def test_invalid_count(target):
    assert main([target, "-c", "0"]) == -errno.EINVAL


def test_non_integer_size(target):
    with pytest.raises(SystemExit) as exc:
        main([target, "-s", "big"])
    assert exc.value.code == 2


def test_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    assert "--nosync" in capsys.readouterr().out


def test_stats_unwritable_is_not_fatal(target, tmp_path, capsys):
    stats = tmp_path / "no-such-dir" / "stats.txt"
    rc = main([target, "-s", "100", "-c", "3", "-S", str(stats)])

    assert rc == 0
    assert report_lines(capsys)[1] == "written: 300 bytes"
    assert not stats.exists()


def test_save_alias(target):
    stats = target + ".stats"
    assert main([target, "-s", "10", "-c", "2", "--save", stats]) == 0
    assert os.path.exists(stats)


def test_nosync_runs_have_same_sample_count(tmp_path):
    lengths = []
    for i in range(2):
        stats = tmp_path / f"stats-{i}.txt"
        rc = main([str(tmp_path / "t.bin"), "-s", "256", "-c", "20", "-U", "-S", str(stats)])
        assert rc == 0
        lengths.append(len(stats.read_text().splitlines()))
    assert lengths == [20, 20]


def test_write_failure_exit_status(target, monkeypatch, capsys):
    monkeypatch.setattr(RawTarget, "write", lambda self, buf: 0)
    stats = target + ".stats"

    assert main([target, "-s", "100", "-S", stats]) == -errno.EIO
    captured = capsys.readouterr()
    assert "written:" not in captured.out
    assert "write error" in captured.err
    assert not os.path.exists(stats)


def test_plot(target, tmp_path):
    plot = tmp_path / "latency.png"
    assert main([target, "-s", "100", "-c", "5", "-P", str(plot)]) == 0
    assert plot.stat().st_size > 0


@pytest.mark.skipif(not os.path.exists("/dev/full"), reason="requires /dev/full")
@pytest.mark.parametrize("extra", [[], ["--nosync"]])
def test_buffered_device_full(extra, capsys):
    assert main(["/dev/full", "-F", "-s", "10", "-c", "2"] + extra) == 0
    assert report_lines(capsys)[1] == "written: 20 bytes"


def test_oversized_size_exit_status(target, capsys):
    assert main([target, "-s", str(10**20), "-c", "1"]) == -errno.ENOMEM
    assert "Unable to alloc" in capsys.readouterr().err
