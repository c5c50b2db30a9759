"""Configuration, logging setup and application paths."""
