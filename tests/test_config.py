import os

import pytest
from pydantic import ValidationError

from stopwatch_buttons.config import Config

KEYS = ('STOPWATCH_TICK_INTERVAL', 'STOPWATCH_LOG_LEVEL')

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for key in KEYS:
        os.environ.pop(key, None)

def test_defaults(tmp_path):
    config = Config.fromEnv(str(tmp_path / 'missing.env'))
    assert config.tick_interval == 0.01
    assert config.log_level == 'INFO'

def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv('STOPWATCH_TICK_INTERVAL', '0.05')
    monkeypatch.setenv('STOPWATCH_LOG_LEVEL', 'debug')
    config = Config.fromEnv(str(tmp_path / 'missing.env'))
    assert config.tick_interval == 0.05
    assert config.log_level == 'DEBUG'

def test_dotenv_file(tmp_path):
    env = tmp_path / '.env'
    env.write_text('STOPWATCH_TICK_INTERVAL=0.25\n', encoding='utf-8')
    assert Config.fromEnv(str(env)).tick_interval == 0.25

def test_real_env_wins_over_dotenv(monkeypatch, tmp_path):
    env = tmp_path / '.env'
    env.write_text('STOPWATCH_TICK_INTERVAL=0.25\n', encoding='utf-8')
    monkeypatch.setenv('STOPWATCH_TICK_INTERVAL', '0.5')
    assert Config.fromEnv(str(env)).tick_interval == 0.5

@pytest.mark.parametrize('key, value', [
    ('STOPWATCH_TICK_INTERVAL', '0'),
    ('STOPWATCH_TICK_INTERVAL', 'fast'),
    ('STOPWATCH_LOG_LEVEL', 'LOUD'),
])
def test_invalid(monkeypatch, tmp_path, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        Config.fromEnv(str(tmp_path / 'missing.env'))
