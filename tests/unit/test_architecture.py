"""Tests to verify hexagonal architecture structure."""

from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the quorumvault package path."""
    return PROJECT_ROOT / "quorumvault"


def _import_lines(py_file: Path) -> list[str]:
    return [
        line.strip()
        for line in py_file.read_text().splitlines()
        if line.strip().startswith(("from quorumvault", "import quorumvault"))
    ]


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all main layer directories exist."""
    for layer in ["domain", "application", "infrastructure", "api", "config", "bootstrap"]:
        assert (package_path / layer).is_dir(), f"Missing layer: {layer}"
        assert (package_path / layer / "__init__.py").is_file(), (
            f"Missing {layer}/__init__.py"
        )


def test_domain_imports_only_domain(package_path: Path) -> None:
    """Domain is the innermost layer and depends on nothing else."""
    for py_file in (package_path / "domain").rglob("*.py"):
        for line in _import_lines(py_file):
            assert line.startswith(("from quorumvault.domain", "import quorumvault.domain")), (
                f"{py_file} contains forbidden import: {line}"
            )


def test_application_has_no_outer_layer_imports(package_path: Path) -> None:
    """Application depends on domain and its own ports only."""
    forbidden = (
        "quorumvault.infrastructure",
        "quorumvault.api",
        "quorumvault.bootstrap",
        "quorumvault.config",
    )
    for py_file in (package_path / "application").rglob("*.py"):
        for line in _import_lines(py_file):
            assert not any(f in line for f in forbidden), (
                f"{py_file} contains forbidden import: {line}"
            )


def test_infrastructure_does_not_import_api(package_path: Path) -> None:
    for py_file in (package_path / "infrastructure").rglob("*.py"):
        for line in _import_lines(py_file):
            assert "quorumvault.api" not in line, (
                f"{py_file} contains forbidden import: {line}"
            )


def test_only_system_clock_reads_wall_time(package_path: Path) -> None:
    """Services take time from an injected TimeAuthorityProtocol."""
    for py_file in (package_path / "application").rglob("*.py"):
        assert "datetime.now(" not in py_file.read_text(), py_file
