"""
Pytest configuration and shared fixtures for Quorum Vault tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from quorumvault.application.services.vault_engine import VaultEngine
from quorumvault.infrastructure.adapters.html_text_sanitizer import HtmlTextSanitizer
from quorumvault.infrastructure.adapters.stellar_identifier_validator import (
    StellarIdentifierValidator,
)
from tests.helpers import FakeTimeAuthority, SequentialReceiptIssuer
from tests.helpers.identities import ALICE, BOB, CAROL, TOKEN


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from quorumvault import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    return FakeTimeAuthority()


@pytest.fixture
def receipt_issuer() -> SequentialReceiptIssuer:
    return SequentialReceiptIssuer()


@pytest.fixture
def identifier_validator() -> StellarIdentifierValidator:
    return StellarIdentifierValidator()


@pytest.fixture
def engine_factory(
    identifier_validator: StellarIdentifierValidator,
    fake_time_authority: FakeTimeAuthority,
    receipt_issuer: SequentialReceiptIssuer,
) -> Callable[[], VaultEngine]:
    """Builds unconfigured engines sharing the fake clock and receipts."""

    def build() -> VaultEngine:
        return VaultEngine(
            identifier_validator=identifier_validator,
            text_sanitizer=HtmlTextSanitizer(),
            time_authority=fake_time_authority,
            receipt_issuer=receipt_issuer,
            known_assets={TOKEN: "TKN"},
        )

    return build


@pytest.fixture
def engine(engine_factory: Callable[[], VaultEngine]) -> VaultEngine:
    """Unconfigured engine with deterministic clock and receipts."""
    return engine_factory()


@pytest.fixture
async def configured_engine(engine: VaultEngine) -> VaultEngine:
    """Engine configured as a 2-of-3 vault (Alice, Bob, Carol)."""
    await engine.configure([ALICE, BOB, CAROL], threshold=2)
    return engine
