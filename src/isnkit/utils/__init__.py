"""Common utility functions for isnkit."""

from isnkit.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
