from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from postraid.config import (
    ConfigurationError,
    MissingConfigurationError,
    ReconciliationConfig,
    env_bool,
    env_list,
    get_database_config,
    get_reconciliation_config,
    get_storage_config,
    require_env_vars,
)

if TYPE_CHECKING:
    from pathlib import Path

RECONCILIATION_VARS = (
    "POSTRAID_SAVE_LOOT_ON_EXIT",
    "POSTRAID_REMOVE_QUEST_ITEMS_ON_DEATH",
    "POSTRAID_SCAV_EXTRACT_STANDING_GAIN",
    "POSTRAID_INSURANCE_RUN_INTERVAL_SECONDS",
    "POSTRAID_KEPT_SLOTS_ON_DEATH",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in RECONCILIATION_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    assert require_env_vars(["EXAMPLE_VAR"]) == {"EXAMPLE_VAR": "value"}


def test_require_env_vars_raises_when_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLANK_VAR", "  ")
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR", "BLANK_VAR"])

    assert "BLANK_VAR, MISSING_VAR" in str(exc.value)


@pytest.mark.parametrize(("raw", "expected"), [("yes", True), ("0", False), ("TRUE", True)])
def test_env_bool_parses_common_spellings(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("FLAG", raw)

    assert env_bool("FLAG", default=not expected) is expected


def test_env_bool_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLAG", "maybe")

    with pytest.raises(ConfigurationError, match="FLAG"):
        env_bool("FLAG", default=True)


def test_env_list_splits_on_commas(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLOTS", "SecuredContainer, Scabbard,,")

    assert env_list("SLOTS", ()) == ("SecuredContainer", "Scabbard")


def test_reconciliation_defaults(clean_env: pytest.MonkeyPatch) -> None:
    config = get_reconciliation_config()

    assert config == ReconciliationConfig()
    assert config.save_loot_on_exit is True
    assert config.remove_quest_items_on_death is True
    assert config.scav_extract_standing_gain == 0.01
    assert config.insurance_run_interval_seconds == 600.0
    assert "SecuredContainer" in config.kept_slots_on_death


def test_reconciliation_from_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("POSTRAID_SAVE_LOOT_ON_EXIT", "false")
    clean_env.setenv("POSTRAID_SCAV_EXTRACT_STANDING_GAIN", "0.2")
    clean_env.setenv("POSTRAID_INSURANCE_RUN_INTERVAL_SECONDS", "0")

    config = get_reconciliation_config()

    assert config.save_loot_on_exit is False
    assert config.scav_extract_standing_gain == 0.2
    assert config.insurance_run_interval_seconds == 0.0


def test_reconciliation_rejects_bad_numbers(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("POSTRAID_SCAV_EXTRACT_STANDING_GAIN", "lots")

    with pytest.raises(ConfigurationError, match="POSTRAID_SCAV_EXTRACT_STANDING_GAIN"):
        get_reconciliation_config()


def test_negative_insurance_interval_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        ReconciliationConfig(insurance_run_interval_seconds=-1)


def test_storage_config_uses_data_dir_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("POSTRAID_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("DATABASE_URI", raising=False)

    storage = get_storage_config()
    database = get_database_config()

    assert storage.resolve_data_dir() == (tmp_path / "data").resolve()
    assert database.uri.endswith("profiles.db")
    assert (tmp_path / "data").is_dir()


def test_database_uri_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")

    assert get_database_config().uri == "sqlite+pysqlite:///:memory:"
