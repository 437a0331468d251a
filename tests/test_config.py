import config


def test_env_overrides_module_constant(monkeypatch):
    monkeypatch.setenv("NBSTATS_LOG_LEVEL", "DEBUG")
    assert config.get_setting("NBSTATS_LOG_LEVEL") == "DEBUG"
    monkeypatch.delenv("NBSTATS_LOG_LEVEL")
    assert config.get_setting("NBSTATS_LOG_LEVEL") == "WARNING"


def test_empty_env_falls_back(monkeypatch):
    monkeypatch.setenv("NBSTATS_CHUNK_SIZE", "")
    assert config.get_int_setting("NBSTATS_CHUNK_SIZE", 1) == config.NBSTATS_CHUNK_SIZE


def test_unknown_and_bad_values(monkeypatch):
    assert config.get_setting("NBSTATS_NOT_A_SETTING", "x") == "x"
    monkeypatch.setenv("NBSTATS_INITIAL_CAPACITY", "lots")
    assert config.get_int_setting("NBSTATS_INITIAL_CAPACITY", 4) == 4


def test_minimum_clamps_int_settings(monkeypatch):
    monkeypatch.setenv("NBSTATS_CHUNK_SIZE", "0")
    assert config.get_int_setting("NBSTATS_CHUNK_SIZE", 1024, minimum=1) == 1
    assert config.get_int_setting("NBSTATS_CHUNK_SIZE", 1024) == 0
    monkeypatch.setenv("NBSTATS_CHUNK_SIZE", "-5")
    assert config.get_int_setting("NBSTATS_CHUNK_SIZE", 1024, minimum=1) == 1
