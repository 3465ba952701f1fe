"""Shared helpers for logging and configuration validation."""
