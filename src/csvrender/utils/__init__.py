"""Shared helpers: logging setup, error formatting, environment flags."""
