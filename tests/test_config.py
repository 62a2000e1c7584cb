import pytest

from taskapi.config import DEBUG_MODE, RELEASE_MODE, TEST_MODE, Config


def test_defaults_with_empty_environment():
    cfg = Config.load({})
    assert cfg.port == "8080"
    assert cfg.env == "development"
    assert cfg.mode == DEBUG_MODE
    assert cfg.is_development()
    assert not cfg.is_production()


def test_empty_values_fall_back_to_defaults():
    cfg = Config.load({"PORT": "", "APP_ENV": ""})
    assert cfg.port == "8080"
    assert cfg.env == "development"


def test_port_from_environment():
    assert Config.load({"PORT": "9000"}).port == "9000"


@pytest.mark.parametrize(
    "env, mode",
    [
        ("production", RELEASE_MODE),
        ("test", TEST_MODE),
        ("development", DEBUG_MODE),
        ("staging", DEBUG_MODE),
    ],
)
def test_mode_follows_app_env(env, mode):
    cfg = Config.load({"APP_ENV": env})
    assert cfg.mode == mode
    assert cfg.env == env


def test_production_flags():
    cfg = Config.load({"APP_ENV": "production"})
    assert cfg.is_production()
    assert not cfg.is_development()


def test_load_reads_process_environment(monkeypatch):
    monkeypatch.setenv("PORT", "7070")
    monkeypatch.setenv("APP_ENV", "test")
    cfg = Config.load()
    assert cfg.port == "7070"
    assert cfg.mode == TEST_MODE