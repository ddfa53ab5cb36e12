"""
Unit tests for the hashreg CLI commands.

Runs the Click group through CliRunner against the real default registry.
"""

import hashlib
import warnings

import pytest
from click.testing import CliRunner

from hashreg.cli import cli


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


class TestGroup:
    """Tests for the top-level group."""

    def test_no_subcommand_shows_help(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "hashreg list" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "hashreg" in result.output


class TestList:
    """Tests for 'hashreg list'."""

    def test_lists_every_identity(self, runner):
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert lines[0].split() == ["ID", "NAME", "SIZE", "AVAILABLE"]
        assert len(lines) == 1 + 21
        assert lines[5].split() == ["5", "SHA-256", "32", "yes"]
        assert lines[8].split() == ["8", "MD5+SHA1", "36", "no"]

    def test_available_only_hides_hybrid(self, runner):
        result = runner.invoke(cli, ["list", "--available-only"])
        assert result.exit_code == 0
        assert "MD5+SHA1" not in result.output
        assert "SHA-256" in result.output

    def test_config_disables_provider(self, runner, tmp_path):
        config = tmp_path / "hashreg.toml"
        config.write_text('[providers]\ndisabled = ["sha256"]\n')
        result = runner.invoke(cli, ["--config", str(config), "list"])
        assert result.exit_code == 0
        sha256_line = next(line for line in result.output.splitlines() if "SHA-256" in line)
        assert sha256_line.split()[-1] == "no"


class TestInfo:
    """Tests for 'hashreg info'."""

    def test_info_available(self, runner):
        result = runner.invoke(cli, ["info", "sha3_256"])
        assert result.exit_code == 0
        assert "Name:      SHA3-256" in result.output
        assert "Identity:  11" in result.output
        assert "Size:      32 bytes" in result.output
        assert "Available: yes" in result.output

    def test_info_unavailable(self, runner):
        result = runner.invoke(cli, ["info", "MD5+SHA1"])
        assert result.exit_code == 0
        assert "Size:      36 bytes" in result.output
        assert "Available: no" in result.output

    def test_info_unknown_name(self, runner):
        result = runner.invoke(cli, ["info", "whirlpool"])
        assert result.exit_code == 2
        assert "Unknown hash function" in result.output


class TestSum:
    """Tests for 'hashreg sum'."""

    def test_sum_files(self, runner, tmp_path):
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        a.write_bytes(b"hello")
        b.write_bytes(b"world" * 50000)

        result = runner.invoke(cli, ["sum", "-a", "SHA-256", str(a), str(b)])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == f"{hashlib.sha256(b'hello').hexdigest()}  {a}"
        assert lines[1] == f"{hashlib.sha256(b'world' * 50000).hexdigest()}  {b}"

    def test_sum_default_algorithm_is_sha256(self, runner, tmp_path):
        f = tmp_path / "f"
        f.write_bytes(b"abc")
        result = runner.invoke(cli, ["sum", str(f)])
        assert result.output.split()[0] == hashlib.sha256(b"abc").hexdigest()

    def test_sum_stdin(self, runner):
        result = runner.invoke(cli, ["sum", "-a", "md5"], input=b"abc")
        assert result.exit_code == 0, result.output
        assert result.output.split()[0] == hashlib.md5(b"abc").hexdigest()

    def test_sum_stdin_raises_no_deprecation_warning(self, runner):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = runner.invoke(cli, ["sum"], input=b"abc")
        assert result.exit_code == 0, result.output
        assert result.output.split()[1] == "-"
        from_command = [
            w for w in caught
            if issubclass(w.category, DeprecationWarning) and w.filename.endswith("checksum.py")
        ]
        assert from_command == []

    def test_sum_unavailable_algorithm(self, runner, tmp_path):
        f = tmp_path / "f"
        f.write_bytes(b"abc")
        result = runner.invoke(cli, ["sum", "-a", "MD5+SHA1", str(f)])
        assert result.exit_code == 1
        assert "unavailable" in result.output

    def test_sum_unknown_algorithm(self, runner):
        result = runner.invoke(cli, ["sum", "-a", "nope"], input=b"")
        assert result.exit_code == 2
