"""Bootstrap wiring: builds concrete objects from configuration."""
