"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("ERP_DB_URL", "postgresql://erp")

    assert db_module._get_env_var("ERP_DB_URL") == "postgresql://erp"


def test_get_env_var_raises_when_missing(monkeypatch):
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("ERP_DB_URL", raising=False)

    with pytest.raises(RuntimeError, match="ERP_DB_URL"):
        db_module._get_env_var("ERP_DB_URL")


def test_create_engine_configures_pool(monkeypatch):
    """_create_engine should use a small QueuePool with pre-ping."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured.update(kwargs)
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    assert db_module._create_engine("postgresql://erp") == "engine"
    assert captured["db_url"] == "postgresql://erp"
    assert captured["poolclass"] is db_module.QueuePool
    assert captured["pool_size"] == 5
    assert captured["max_overflow"] == 5
    assert captured["pool_pre_ping"] is True


def test_get_erp_engine_is_memoized(monkeypatch):
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_erp_engine", None)
    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("ERP_DB_URL", "postgresql://erp")

    first = db_module.get_erp_engine()
    second = db_module.get_erp_engine()

    assert first is second
    assert created == ["postgresql://erp"]


def test_adapter_proxies_module_engine(monkeypatch):
    monkeypatch.setattr(db_module, "get_erp_engine", lambda: "erp_engine")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_erp_engine() == "erp_engine"
