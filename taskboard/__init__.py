"""Taskboard: multi-user task lists behind session login."""

__version__ = "0.1.0"
