"""Convert 'LEVEL [MM-DD|HH:MM:SS] message' log files to JSON lines."""

__version__ = "0.1.0"
