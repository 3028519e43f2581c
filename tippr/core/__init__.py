"""Core application wiring: settings, logging, metrics and dependencies."""
