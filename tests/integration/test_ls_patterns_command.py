"""Integration tests for the ls-patterns command."""

import logging

from click.testing import CliRunner
from pathignore.cli.main import cli


class TestLsPatternsCommand:
    """Tests for pathignore ls-patterns."""

    def test_lists_patterns_in_order(self, isolated_config, write_ignore_file):
        write_ignore_file("# comment\n*.log\n!keep.log\nbuild/\n")
        runner = CliRunner()
        result = runner.invoke(cli, ['ls-patterns'])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 3
        assert lines[0].rstrip().endswith('*.log')
        assert lines[1].rstrip().endswith('!keep.log')
        assert lines[2].rstrip().endswith('build/')

    def test_show_regex(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['ls-patterns', '-r', '-p', '/g'])
        assert result.exit_code == 0
        assert 'g(?:/.*)?' in result.output

    def test_no_patterns(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['ls-patterns'])
        assert result.exit_code == 0
        assert 'No patterns' in result.output

    def test_invalid_pattern(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['ls-patterns', '-p', '[x'])
        assert result.exit_code == 128


class TestMainGroup:
    """Tests for the top-level command group."""

    def test_help_shows_banner(self):
        runner = CliRunner()
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'pathignore' in result.output
        assert 'check-ignore' in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ['--version'])
        assert '0.1.0' in result.output

    def test_debug_flag(self, isolated_config, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: calls.append(kwargs))
        runner = CliRunner()
        result = runner.invoke(cli, ['--debug', 'check-ignore', '-p', '*.log', 'a.log'])
        assert result.exit_code == 0
        assert calls[0]['level'] == logging.DEBUG
