"""Configuration tests."""

import pytest

from gitvis.core.config import Config, get_config
from gitvis.core.errors import ConfigError
from gitvis.core.modifications import DEFAULT_MAX_DELETIONS, DEFAULT_MAX_INSERTIONS


def test_defaults():
    """Test defaults apply without any config."""
    config = get_config()
    assert config.modification_limits() == (DEFAULT_MAX_INSERTIONS, DEFAULT_MAX_DELETIONS)
    assert config.seed() is None


def test_local_file(tmp_path):
    """Test values are read from an explicit file."""
    path = tmp_path / 'lesson.ini'
    path.write_text("[modify]\nmax_insertions = 3\n\n[session]\nseed = 9\n")

    config = Config(path)
    assert config.modification_limits() == (3, DEFAULT_MAX_DELETIONS)
    assert config.seed() == 9


def test_global_file(isolated_home):
    """Test the global file is read from the home directory."""
    (isolated_home / '.gitvisconfig').write_text("[modify]\nmax_deletions = 1\n")
    assert Config().modification_limits() == (DEFAULT_MAX_INSERTIONS, 1)


def test_local_overrides_global(tmp_path, isolated_home):
    """Test the explicit file wins over the global file."""
    (isolated_home / '.gitvisconfig').write_text("[session]\nseed = 1\n")
    path = tmp_path / 'lesson.ini'
    path.write_text("[session]\nseed = 2\n")

    assert Config(path).seed() == 2


def test_env_overrides_files(tmp_path, monkeypatch):
    """Test environment variables win over files."""
    path = tmp_path / 'lesson.ini'
    path.write_text("[session]\nseed = 2\n")
    monkeypatch.setenv('GITVIS_SESSION_SEED', '5')

    assert Config(path).seed() == 5


def test_invalid_integer(monkeypatch):
    """Test malformed numbers raise ConfigError."""
    monkeypatch.setenv('GITVIS_MODIFY_MAX_INSERTIONS', 'many')
    with pytest.raises(ConfigError, match="must be an integer"):
        Config().modification_limits()


def test_negative_integer(monkeypatch):
    """Test negative numbers raise ConfigError."""
    monkeypatch.setenv('GITVIS_MODIFY_MAX_DELETIONS', '-2')
    with pytest.raises(ConfigError, match="must not be negative"):
        Config().modification_limits()


def test_set_and_list(tmp_path):
    """Test writing a value persists it."""
    path = tmp_path / 'lesson.ini'
    Config(path).set('modify', 'max_insertions', '7')

    config = Config(path)
    assert config.get('modify', 'max_insertions') == '7'
    assert config.list_all() == {'modify': {'max_insertions': '7'}}


def test_set_global(isolated_home):
    """Test writing to the global file."""
    Config().set('session', 'seed', '3', global_config=True)
    assert (isolated_home / '.gitvisconfig').exists()
    assert Config().seed() == 3


def test_set_without_file():
    """Test writing needs a target file."""
    with pytest.raises(ConfigError):
        Config().set('session', 'seed', '3')


def test_modification_generator(tmp_path):
    """Test the generator takes configured limits and seed."""
    path = tmp_path / 'lesson.ini'
    path.write_text("[modify]\nmax_insertions = 2\nmax_deletions = 0\n\n[session]\nseed = 4\n")

    generator = Config(path).modification_generator()
    assert generator.max_insertions == 2
    assert generator.max_deletions == 0
    assert draw(generator) == draw(
        Config(path).modification_generator()
    )


def draw(generator):
    return [generator.create() for _ in range(5)]
