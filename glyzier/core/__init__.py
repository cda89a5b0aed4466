"""Configuration, database, security, cache and storage helpers."""
