"""Domain layer for Quorum Vault.

Pure models, primitives and the typed error hierarchy. This layer imports
nothing from the application, infrastructure or api layers.
"""
