"""Application layer: ports, services and DTOs for Quorum Vault."""
