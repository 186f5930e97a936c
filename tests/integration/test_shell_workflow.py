"""Integration tests for the interactive shell."""

from click.testing import CliRunner

from gitvis.cli.main import cli


def test_shell_session():
    """Test a short interactive session."""
    runner = CliRunner()
    result = runner.invoke(
        cli, ['shell', '--seed', '1'],
        input='add\nadd\nstage-all\ncommit\ndelete file2\nstatus\nlog\nquit\n',
    )

    assert result.exit_code == 0
    assert "Type 'help'" in result.output
    assert 'A new file file2 was added.' in result.output
    assert 'file2 was deleted.' in result.output
    assert 'Working Directory' in result.output
    assert 'Staging Area' in result.output
    assert 'deleted' in result.output


def test_shell_help():
    """Test help lists the commands."""
    runner = CliRunner()
    result = runner.invoke(cli, ['shell'], input='help\nquit\n')

    assert result.exit_code == 0
    assert 'stage-all' in result.output
    assert 'revert <commit>' in result.output


def test_shell_ends_on_eof():
    """Test the shell exits cleanly when input runs out."""
    runner = CliRunner()
    result = runner.invoke(cli, ['shell'], input='add\n')

    assert result.exit_code == 0
    assert 'A new file file1 was added.' in result.output


def test_shell_usage_errors():
    """Test missing arguments print usage."""
    runner = CliRunner()
    result = runner.invoke(cli, ['shell'], input='stage\nrevert\nquit\n')

    assert 'Usage: stage <file>' in result.output
    assert 'Usage: revert <commit>' in result.output


def test_help_shows_banner():
    """Test top-level help includes the banner."""
    runner = CliRunner()
    result = runner.invoke(cli, ['--help'])

    assert result.exit_code == 0
    assert 'Learn Git by watching it work' in result.output
