"""Core infrastructure: settings, logging, storage, errors and parsing helpers."""
