"""Sensu event handler that creates Opsgenie alerts."""

__version__ = "0.1.0"
