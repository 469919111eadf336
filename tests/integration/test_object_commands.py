"""Integration tests for cat-file and hash-object."""

import hashlib
import pytest
from click.testing import CliRunner
from kit.cli.main import cli
from kit.core.objects import ObjectKind, KitObject


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def in_repo(repo, monkeypatch):
    """Run commands from a nested directory of the repository."""
    nested = repo.work_tree / 'src' / 'pkg'
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    return repo


class TestHashObject:
    """Tests for kit hash-object."""

    def test_hash_outside_repository(self, runner, sample_file, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        result = runner.invoke(cli, ['hash-object', str(sample_file)])

        assert result.exit_code == 0
        assert result.output.strip() == hashlib.sha1(b'blob 9\x00Hello Joe').hexdigest()

    def test_hash_with_type(self, runner, sample_file):
        result = runner.invoke(cli, ['hash-object', '--type', 'tag', str(sample_file)])

        assert result.exit_code == 0
        assert result.output.strip() == hashlib.sha1(b'tag 9\x00Hello Joe').hexdigest()

    def test_hash_rejects_unknown_type(self, runner, sample_file):
        result = runner.invoke(cli, ['hash-object', '-t', 'widget', str(sample_file)])
        assert result.exit_code != 0

    def test_hash_missing_file(self, runner, temp_dir):
        result = runner.invoke(cli, ['hash-object', str(temp_dir / 'missing')])
        assert result.exit_code != 0

    def test_write_outside_repository(self, runner, sample_file, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        result = runner.invoke(cli, ['hash-object', '--write', str(sample_file)])

        assert result.exit_code != 0
        assert 'requires a kit repository' in result.output

    def test_write_inside_repository(self, runner, in_repo, sample_file):
        result = runner.invoke(cli, ['hash-object', '-w', str(sample_file)])

        assert result.exit_code == 0
        sha = result.output.strip()
        assert (in_repo.kit_dir / 'objects' / sha[:2] / sha[2:]).is_file()


class TestCatFile:
    """Tests for kit cat-file."""

    def test_prints_content(self, runner, in_repo):
        sha = in_repo.write_object(KitObject(ObjectKind.BLOB, b'Hello Joe'))
        result = runner.invoke(cli, ['cat-file', sha])

        assert result.exit_code == 0
        assert result.output == 'Hello Joe'

    def test_shows_type(self, runner, in_repo):
        sha = in_repo.write_object(KitObject(ObjectKind.COMMIT, b'tree abc\n'))
        result = runner.invoke(cli, ['cat-file', '-t', sha])

        assert result.exit_code == 0
        assert result.output.strip() == 'commit'

    def test_shows_size(self, runner, in_repo):
        sha = in_repo.write_object(KitObject(ObjectKind.BLOB, b'12345'))
        result = runner.invoke(cli, ['cat-file', '-s', sha])

        assert result.exit_code == 0
        assert result.output.strip() == '5'

    def test_missing_object(self, runner, in_repo):
        result = runner.invoke(cli, ['cat-file', '0' * 40])

        assert result.exit_code != 0
        assert 'not found' in result.output

    def test_outside_repository(self, runner, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        result = runner.invoke(cli, ['cat-file', '0' * 40])

        assert result.exit_code != 0
        assert 'Not a kit repository' in result.output

    def test_undecodable_config(self, runner, in_repo):
        in_repo.config_file.write_bytes(b'\xff\xfe garbage')
        result = runner.invoke(cli, ['cat-file', '0' * 40])

        assert result.exit_code != 0
        assert isinstance(result.exception, SystemExit)
        assert 'Configuration file unreadable' in result.output

    def test_round_trip_through_commands(self, runner, in_repo, sample_file):
        sha = runner.invoke(cli, ['hash-object', '-w', str(sample_file)]).output.strip()
        result = runner.invoke(cli, ['cat-file', sha])

        assert result.exit_code == 0
        assert result.output == 'Hello Joe'
