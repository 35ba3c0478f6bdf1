"""Unit tests for VaultConfig environment loading."""

from pathlib import Path

import pytest

from quorumvault.config.vault_config import USDC_CONTRACT, VaultConfig

ENV_VARS = (
    "VAULT_ENVIRONMENT",
    "VAULT_STATE_PATH",
    "VAULT_NATIVE_ASSET_LABEL",
    "VAULT_ASSET_LABELS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestVaultConfigFromEnv:
    def test_defaults(self) -> None:
        config = VaultConfig.from_env()

        assert config.environment == "development"
        assert not config.is_production
        assert config.state_path is None
        assert config.native_asset_label == "XLM"
        assert config.asset_labels == {USDC_CONTRACT: "USDC"}

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("VAULT_ENVIRONMENT", "production")
        monkeypatch.setenv("VAULT_STATE_PATH", str(tmp_path / "state.json"))
        monkeypatch.setenv("VAULT_NATIVE_ASSET_LABEL", "Lumens")
        monkeypatch.setenv("VAULT_ASSET_LABELS", "CAAA=AAA, CBBB = BBB")

        config = VaultConfig.from_env()

        assert config.is_production
        assert config.state_path == tmp_path / "state.json"
        assert config.native_asset_label == "Lumens"
        assert config.asset_labels == {"CAAA": "AAA", "CBBB": "BBB"}

    def test_blank_values_fall_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VAULT_ENVIRONMENT", "   ")
        monkeypatch.setenv("VAULT_STATE_PATH", "")
        monkeypatch.setenv("VAULT_ASSET_LABELS", "garbage,=x,y=")

        config = VaultConfig.from_env()

        assert config.environment == "development"
        assert config.state_path is None
        assert config.asset_labels == {USDC_CONTRACT: "USDC"}
