"""Configuration layer — settings, property source, and logging setup."""
