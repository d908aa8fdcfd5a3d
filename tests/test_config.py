"""Tests for configuration management."""

from __future__ import annotations

import json

import pytest

from taskpad.config import Config, ConfigManager, get_config_manager
from taskpad.models import ValidationError
from taskpad.services.context_manager import get_strategy_context


@pytest.fixture()
def manager():
    return ConfigManager()


def test_defaults(manager):
    config = manager.config
    assert isinstance(config, Config)
    assert config.storage.backend == "file"
    assert config.storage.seed is True
    assert config.storage.latency == 0.0
    assert config.output.format == "pretty"
    assert config.ui.timezone is None


def test_set_and_get_persist(manager):
    manager.set("storage.backend", "memory")

    assert manager.get("storage.backend") == "memory"
    saved = json.loads(manager.config_file.read_text())
    assert saved["storage"]["backend"] == "memory"
    assert ConfigManager().get("storage.backend") == "memory"


def test_set_unknown_key_raises(manager):
    with pytest.raises(ValidationError, match="Unknown config key"):
        manager.set("storage.colour", "red")


def test_set_invalid_value_raises(manager):
    with pytest.raises(ValidationError, match="Invalid value"):
        manager.set("output.format", "xml")
    assert manager.get("output.format") == "pretty"


def test_get_unknown_key_raises(manager):
    with pytest.raises(ValidationError):
        manager.get("ui.theme")


def test_reset_single_key(manager):
    manager.set("storage.latency", 0.5)
    manager.reset("storage.latency")
    assert manager.get("storage.latency") == 0.0


def test_reset_everything(manager):
    manager.set("output.format", "json")
    manager.set("storage.seed", False)

    manager.reset()

    assert manager.config == Config()


def test_corrupt_config_falls_back_to_defaults(manager):
    manager.config_file.write_text("{not json")
    assert ConfigManager().config == Config()


def test_data_file_default_and_override(manager, tmp_path):
    assert manager.data_file == manager.data_dir / "default.data.json"

    manager.set("storage.path", str(tmp_path / "mine.json"))

    assert manager.data_file == tmp_path / "mine.json"


def test_list_profiles(manager):
    manager.save_config()
    ConfigManager("work").save_config()

    assert sorted(manager.list_profiles()) == ["default", "work"]


def test_get_config_manager_is_cached_per_profile():
    first = get_config_manager()
    assert get_config_manager() is first
    assert get_config_manager("work") is not first


@pytest.mark.asyncio
async def test_strategy_context_follows_backend_setting(tmp_path):
    manager = get_config_manager()
    manager.set("storage.path", str(tmp_path / "tasks.json"))
    manager.set("storage.seed", False)

    strategy = get_strategy_context()

    assert strategy.storage_type == "file"
    assert get_strategy_context() is strategy
    await strategy.task_repository.add({"title": "on disk"})
    assert (tmp_path / "tasks.json").exists()


def test_strategy_context_memory_backend():
    get_config_manager().set("storage.backend", "memory")
    assert get_strategy_context().storage_type == "memory"
