"""climb-log: personal activity log for rock climbers."""

__version__ = "0.1.0"
