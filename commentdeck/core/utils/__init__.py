"""Utility functions shared across commentdeck packages."""

from .checks import ifnone

__all__ = ["ifnone"]
