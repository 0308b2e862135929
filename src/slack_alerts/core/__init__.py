"""Configuration, exceptions and the webhook registry."""
