"""Media source identity, audio session tracking and playback-ownership arbitration."""

__version__ = "0.1.1"