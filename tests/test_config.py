from inventory_dashboard import config


def test_env_vars_take_precedence(monkeypatch):
    monkeypatch.setenv("INVENTORY_API_URL", "http://api.example.com/")
    monkeypatch.setenv("INVENTORY_API_TIMEOUT", "2.5")
    assert config.load_api_config() == {"base_url": "http://api.example.com", "timeout": 2.5}


def test_secrets_fill_missing_values(monkeypatch):
    monkeypatch.delenv("INVENTORY_API_URL", raising=False)
    monkeypatch.setenv("INVENTORY_API_TIMEOUT", "4")
    monkeypatch.setattr(config, "_read_secrets", lambda: {"base_url": "http://secret"})
    assert config.load_api_config() == {"base_url": "http://secret", "timeout": 4.0}


def test_defaults(monkeypatch):
    monkeypatch.delenv("INVENTORY_API_URL", raising=False)
    monkeypatch.delenv("INVENTORY_API_TIMEOUT", raising=False)
    monkeypatch.setattr(config, "_read_secrets", lambda: {})
    assert config.load_api_config() == {
        "base_url": config.DEFAULT_API_URL,
        "timeout": config.DEFAULT_API_TIMEOUT,
    }


def test_invalid_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("INVENTORY_API_URL", "http://svc")
    monkeypatch.setenv("INVENTORY_API_TIMEOUT", "soon")
    assert config.load_api_config()["timeout"] == config.DEFAULT_API_TIMEOUT
