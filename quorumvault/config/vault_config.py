"""Vault runtime configuration.

Environment Variables:
- VAULT_ENVIRONMENT: 'production' selects JSON logs (default: development)
- VAULT_STATE_PATH: JSON state file; unset keeps state in memory only
- VAULT_NATIVE_ASSET_LABEL: Display label for the native asset (default: XLM)
- VAULT_ASSET_LABELS: Comma-separated CONTRACT=LABEL pairs for known tokens
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from quorumvault.application.dtos.proposal_view import DEFAULT_NATIVE_ASSET_LABEL

DEFAULT_ENVIRONMENT = "development"

USDC_CONTRACT = "CCW67TSZV3SSS2HXMBQ5JFGCKJNXKZM7UQUWUZPUTHXSTZLEO7SJMI75"
DEFAULT_ASSET_LABELS = f"{USDC_CONTRACT}=USDC"


def _get_str_env(key: str, default: str) -> str:
    """Get a non-blank string environment variable, else ``default``."""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _parse_asset_labels(raw: str) -> dict[str, str]:
    """Parse ``CONTRACT=LABEL`` pairs; malformed pairs are skipped."""
    labels: dict[str, str] = {}
    for pair in raw.split(","):
        contract, sep, label = pair.partition("=")
        contract, label = contract.strip(), label.strip()
        if sep and contract and label:
            labels[contract] = label
    return labels


@dataclass(frozen=True)
class VaultConfig:
    """Configuration for a vault process.

    Attributes:
        environment: Deployment environment; drives the log renderer.
        state_path: Where snapshots are persisted, or None for in-memory.
        native_asset_label: Display label for the native asset sentinel.
        asset_labels: Contract identifier -> display label.
    """

    environment: str = DEFAULT_ENVIRONMENT
    state_path: Path | None = None
    native_asset_label: str = DEFAULT_NATIVE_ASSET_LABEL
    asset_labels: dict[str, str] = field(
        default_factory=lambda: _parse_asset_labels(DEFAULT_ASSET_LABELS)
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> VaultConfig:
        """Create config from environment variables with defaults."""
        raw_path = os.environ.get("VAULT_STATE_PATH", "").strip()
        labels = _parse_asset_labels(
            _get_str_env("VAULT_ASSET_LABELS", DEFAULT_ASSET_LABELS)
        )
        return cls(
            environment=_get_str_env("VAULT_ENVIRONMENT", DEFAULT_ENVIRONMENT),
            state_path=Path(raw_path) if raw_path else None,
            native_asset_label=_get_str_env(
                "VAULT_NATIVE_ASSET_LABEL", DEFAULT_NATIVE_ASSET_LABEL
            ),
            asset_labels=labels or _parse_asset_labels(DEFAULT_ASSET_LABELS),
        )
