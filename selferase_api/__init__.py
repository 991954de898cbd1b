"""SelfErase public broker API: directory data and opt-out endpoint health checks."""

__version__ = "1.0.0"
