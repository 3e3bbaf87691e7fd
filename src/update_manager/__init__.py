"""Update Manager - classify available project updates and queue downloads."""

__version__ = "0.1.0"
