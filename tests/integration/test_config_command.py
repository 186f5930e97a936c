"""Integration tests for config command."""

from click.testing import CliRunner

from gitvis.cli.main import cli


class TestConfigCommand:
    """Tests for gitvis config command."""

    def test_config_set_and_get_file(self, tmp_path):
        """Test setting and reading a value in an explicit file."""
        runner = CliRunner()
        path = str(tmp_path / 'lesson.ini')

        result = runner.invoke(cli, ['config', 'set', '--file', path, 'modify.max_insertions', '4'])
        assert result.exit_code == 0

        result = runner.invoke(cli, ['config', 'get', '--file', path, 'modify.max_insertions'])
        assert result.exit_code == 0
        assert '4' in result.output

    def test_config_global(self, isolated_home):
        """Test the global flag writes to the home directory."""
        runner = CliRunner()

        result = runner.invoke(cli, ['config', 'set', '--global', 'seed', '12'])
        assert result.exit_code == 0
        assert (isolated_home / '.gitvisconfig').exists()

        result = runner.invoke(cli, ['config', 'get', 'session.seed'])
        assert '12' in result.output

    def test_config_set_needs_target(self):
        """Test set without --global or --file fails."""
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'set', 'session.seed', '1'])

        assert result.exit_code != 0
        assert 'Use --global or --file' in result.output

    def test_config_get_missing(self):
        """Test getting an unset key fails."""
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'get', 'nonexistent.key'])

        assert result.exit_code != 0
        assert 'Config key not found' in result.output

    def test_config_list(self, tmp_path):
        """Test listing shows stored values."""
        runner = CliRunner()
        path = str(tmp_path / 'lesson.ini')
        runner.invoke(cli, ['config', 'set', '--file', path, 'session.seed', '8'])

        result = runner.invoke(cli, ['config', 'list', '--file', path])
        assert result.exit_code == 0
        assert 'session.seed=8' in result.output

    def test_config_list_empty(self):
        """Test listing with nothing set."""
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'list'])

        assert result.exit_code == 0
        assert 'No configuration set' in result.output

    def test_config_drives_run(self, tmp_path):
        """Test a config file limits random edits in a run."""
        path = tmp_path / 'lesson.ini'
        path.write_text("[modify]\nmax_insertions = 0\nmax_deletions = 0\n")

        runner = CliRunner()
        result = runner.invoke(cli, ['run', '--config', str(path), 'add; modify file1; stage file1'])

        assert result.exit_code == 0
        assert 'file1 was modified.' in result.output
