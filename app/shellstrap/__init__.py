"""shellstrap - bootstrap a Windows machine from a profile repository."""

__version__ = "0.1.0"
