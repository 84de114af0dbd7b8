"""
Top‑level package for the Exercise Tracker API.

The service itself lives in the ``app`` subpackage (importable as
``exercise_tracker.app.main``); ``client`` provides a small
``requests`` based wrapper for talking to a running instance.
"""

__all__ = []
