import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner
from dfree.cli import main
from dfree.mounts.models import MountStat

MOCK_MOUNTS = """\
proc /proc proc rw,nosuid 0 0
/dev/sda1 / ext4 rw,relatime 0 1
tmpfs /tmp tmpfs rw,nosuid 0 0
/dev/mapper/vg-home /home ext4 rw,relatime 0 2
server:/export /srv/nfs nfs4 rw 0 0
"""

MOCK_STATS = {
    "/": MountStat(capacity=1000, free=250),
    "/tmp": MountStat(capacity=4096, free=4096),
    "/srv/nfs": MountStat(capacity=2048, free=1024),
}

def fake_stat(directory, inodes=False):
    if directory == "/home":
        raise PermissionError(13, "Permission denied")
    return MOCK_STATS.get(directory, MountStat())

@pytest.fixture
def mounts_file(tmp_path):
    path = tmp_path / "mounts"
    path.write_text(MOCK_MOUNTS)
    return str(path)

@pytest.fixture(autouse=True)
def mock_stat():
    with patch('dfree.mounts.stats.stat_mount', side_effect=fake_stat) as mock:
        yield mock

@pytest.fixture(autouse=True)
def no_theme_file():
    with patch('dfree.config.settings.find_theme_file', side_effect=lambda path=None: path):
        yield

def invoke(*args):
    runner = CliRunner()
    return runner.invoke(main, list(args))

def test_help():
    result = invoke('--help')
    assert result.exit_code == 0
    assert "Show disk usage per mount" in result.output
    assert "--human-readable" in result.output

def test_version():
    result = invoke('--version')
    assert result.exit_code == 0
    assert result.output.startswith("dfree ")

def test_default_listing(mounts_file):
    result = invoke('--mounts', mounts_file, '--columns', 'filesystem,used_percentage,mounted_on')

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Filesystem   Used% Mounted on",
        "/dev/sda1    75.0% /",
        "/dev/vg/home     - /home",
    ]

def test_output_has_no_colors_when_not_a_tty(mounts_file):
    result = invoke('--mounts', mounts_file)
    assert result.exit_code == 0
    assert "\x1b[" not in result.output

@pytest.mark.parametrize("flag", [['-c'], ['--color', 'always']])
def test_forced_colors(mounts_file, flag):
    result = invoke('--mounts', mounts_file, *flag)
    assert result.exit_code == 0
    assert "\x1b[" in result.output

def test_no_aliases(mounts_file):
    result = invoke('--mounts', mounts_file, '--no-aliases', '--columns', 'filesystem')
    assert result.output.splitlines()[-1] == "/dev/mapper/vg-home"

@pytest.mark.parametrize("flags, expected", [
    (['-a'], ["/", "/tmp", "/home"]),
    (['--more'], ["/", "/tmp", "/home"]),
    (['-aa'], ["/", "/srv/nfs", "/tmp", "/home", "/proc"]),
    (['--all'], ["/", "/srv/nfs", "/tmp", "/home", "/proc"]),
    (['--all', '-l'], ["/", "/tmp", "/home", "/proc"]),
])
def test_display_filters(mounts_file, flags, expected):
    result = invoke('--mounts', mounts_file, '--columns', 'mounted_on', *flags)

    assert result.exit_code == 0
    assert result.output.splitlines()[1:] == expected

def test_total_row(mounts_file):
    result = invoke('--mounts', mounts_file, '--total', '--columns', 'filesystem,capacity,used,mounted_on')

    lines = result.output.splitlines()
    assert result.exit_code == 0
    assert lines[-1].split() == ["total", "1000.0B", "750.0B", "-"]

def test_si_units(mounts_file):
    result = invoke('--mounts', mounts_file, '-aa', '-H', '--columns', 'capacity,mounted_on')
    assert "2.0k /srv/nfs" in result.output
    result = invoke('--mounts', mounts_file, '-aa', '--columns', 'capacity,mounted_on')
    assert "2.0k /srv/nfs" in result.output
    assert "4.0k /tmp" in result.output

def test_inodes_mode(mounts_file, mock_stat):
    result = invoke('--mounts', mounts_file, '-i', '--columns', 'capacity')

    assert result.exit_code == 0
    assert result.output.splitlines()[0].strip() == "Inodes"
    assert all(call.args[1] is True for call in mock_stat.call_args_list)

def test_paths(tmp_path):
    base = os.path.realpath(tmp_path)
    data = os.path.join(base, "data")
    os.makedirs(os.path.join(data, "nested"))
    mounts = tmp_path / "mounts"
    mounts.write_text(
        f"/dev/sdb1 {base} ext4 rw 0 0\n"
        f"/dev/sdc1 {data} xfs rw 0 0\n"
    )

    result = invoke('--mounts', str(mounts), '--columns', 'filesystem',
                    os.path.join(data, "nested"), os.path.join(base, "nope"), base)

    assert result.exit_code == 0
    assert "dfree: " + os.path.join(base, "nope") in result.output
    lines = [line for line in result.output.splitlines() if not line.startswith("dfree:")]
    assert lines == ["Filesystem", "/dev/sdc1", "/dev/sdb1"]

def test_malformed_mount_table(tmp_path):
    mounts = tmp_path / "mounts"
    mounts.write_text("/dev/sda1 / ext4 rw 0\n")

    result = invoke('--mounts', str(mounts))

    assert result.exit_code == 1
    assert "Missing value passno" in result.output

def test_missing_mount_table(tmp_path):
    result = invoke('--mounts', str(tmp_path / "missing"))
    assert result.exit_code == 1
    assert "Cannot read mount table" in result.output

def test_unknown_column(mounts_file):
    result = invoke('--mounts', mounts_file, '--columns', 'filesystem,size')
    assert result.exit_code == 2
    assert "Choose from" in result.output

def test_invalid_theme(mounts_file, tmp_path):
    theme = tmp_path / "theme.yaml"
    theme.write_text("color_heading: plaid\n")

    result = invoke('--mounts', mounts_file, '--theme', str(theme))

    assert result.exit_code == 1
    assert "Invalid theme" in result.output

@pytest.mark.parametrize("flags", [
    ['--more', '--all'],
    ['-a', '--all'],
    ['-c', '--color', 'never'],
    ['-h', '-H'],
])
def test_mutually_exclusive(mounts_file, flags):
    result = invoke('--mounts', mounts_file, *flags)
    assert result.exit_code == 2
    assert "mutually exclusive" in result.output
