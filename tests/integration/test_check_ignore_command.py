"""Integration tests for the check-ignore command."""

import pytest
from click.testing import CliRunner
from pathignore.cli.main import cli


class TestCheckIgnoreCommand:
    """Tests for pathignore check-ignore."""

    def test_prints_ignored_paths(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '-p', '*.log', 'a.log', 'b.txt', 'logs/c.log'])
        assert result.exit_code == 0
        assert result.output.splitlines() == ['a.log', 'logs/c.log']

    def test_nothing_ignored_exits_one(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '-p', '*.log', 'b.txt'])
        assert result.exit_code == 1
        assert result.output == ''

    def test_negation_on_command_line(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '-p', '*.log', '-p', '!keep.log',
                                     'keep.log', 'drop.log'])
        assert result.exit_code == 0
        assert result.output.splitlines() == ['drop.log']

    def test_verbose_shows_deciding_pattern(self, isolated_config, write_ignore_file):
        write_ignore_file("# logs\n*.log\n!keep.log\n")
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '-v', 'drop.log', 'keep.log'])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].endswith('.gitignore:2:*.log\tdrop.log')
        assert lines[1].endswith('.gitignore:3:!keep.log\tkeep.log')

    def test_non_matching(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '-v', '-n', '-p', '*.log', 'a.log', 'b.txt'])
        assert result.exit_code == 0
        assert result.output.splitlines() == ['<command line>:1:*.log\ta.log', '::\tb.txt']

    def test_non_matching_requires_verbose(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '-n', '-p', '*.log', 'a.log'])
        assert result.exit_code == 128
        assert '--non-matching' in result.output

    def test_no_paths(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '-p', '*.log'])
        assert result.exit_code == 128
        assert 'No path specified' in result.output

    def test_uses_gitignore_by_default(self, isolated_config, write_ignore_file):
        write_ignore_file("build/\n")
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', 'build/out.o', 'src/main.c'])
        assert result.exit_code == 0
        assert result.output.splitlines() == ['build/out.o']

    def test_files_in_order(self, isolated_config, write_ignore_file):
        first = write_ignore_file("*.log\n", name='one')
        second = write_ignore_file("!keep.log\n", name='two')
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '-f', str(first), '-f', str(second),
                                     'keep.log', 'x.log'])
        assert result.output.splitlines() == ['x.log']

    def test_defaults_flag(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '--defaults', '-p', '!dist/',
                                     'node_modules/x/index.js', 'dist/app.js'])
        assert result.exit_code == 0
        assert result.output.splitlines() == ['node_modules/x/index.js']

    def test_stdin(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '--stdin', '-p', '*.log'],
                               input='a.log\nb.txt\n\nc/d.log\n')
        assert result.exit_code == 0
        assert result.output.splitlines() == ['a.log', 'c/d.log']

    def test_missing_file(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '-f', 'does-not-exist', 'a.log'])
        assert result.exit_code == 128
        assert 'does-not-exist' in result.output

    def test_invalid_pattern(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['check-ignore', '-p', 'foo[', 'foo'])
        assert result.exit_code == 128
        assert 'unterminated character class' in result.output
