"""Shared helpers: logging, seeding and configuration."""
