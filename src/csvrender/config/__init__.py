"""Visual constants and runtime configuration."""
