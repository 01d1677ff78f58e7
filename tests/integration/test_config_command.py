"""Integration tests for config command."""

from click.testing import CliRunner
from pathignore.cli.main import cli


class TestConfigCommand:
    """Tests for pathignore config command."""

    def test_config_set_local(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'set', 'core.ignorefile', '.dockerignore'])
        assert result.exit_code == 0
        assert (isolated_config / '.pathignore').exists()

        result = runner.invoke(cli, ['config', 'get', 'core.ignorefile'])
        assert '.dockerignore' in result.output

    def test_config_set_global(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'set', '--global', 'core.excludesfile', '~/ignore'])
        assert result.exit_code == 0
        assert (isolated_config / 'global.pathignorerc').exists()

    def test_config_get_default(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'get', 'core.ignorefile'])
        assert result.exit_code == 0
        assert '.gitignore' in result.output

    def test_config_get_nonexistent(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'get', 'nonexistent.key'])
        assert result.exit_code == 1
        assert 'not found' in result.output

    def test_config_list(self, isolated_config):
        runner = CliRunner()
        runner.invoke(cli, ['config', 'set', 'ignorefile', '.ignore'])
        result = runner.invoke(cli, ['config', 'list'])
        assert result.exit_code == 0
        assert 'core.ignorefile' in result.output
        assert '.ignore' in result.output

    def test_config_list_empty(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'list'])
        assert 'No configuration set' in result.output

    def test_config_unset(self, isolated_config):
        runner = CliRunner()
        runner.invoke(cli, ['config', 'set', 'core.excludesfile', '~/ignore'])
        result = runner.invoke(cli, ['config', 'unset', 'core.excludesfile'])
        assert result.exit_code == 0
        result = runner.invoke(cli, ['config', 'unset', 'core.excludesfile'])
        assert result.exit_code == 1

    def test_config_drives_check_ignore(self, isolated_config, write_ignore_file):
        write_ignore_file("*.tmp\n", name='.dockerignore')
        runner = CliRunner()
        runner.invoke(cli, ['config', 'set', 'core.ignorefile', '.dockerignore'])
        result = runner.invoke(cli, ['check-ignore', 'x.tmp'])
        assert result.exit_code == 0
        assert result.output.splitlines() == ['x.tmp']
