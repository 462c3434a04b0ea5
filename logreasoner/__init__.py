"""Parse log files, group lines into patterns and report the most frequent ones."""

__version__ = "0.1.0"