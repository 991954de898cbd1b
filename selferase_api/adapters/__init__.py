"""Adapter layer package for outbound network boundaries."""

from .http_probe import HttpxReachabilityProbe
from .interfaces import ReachabilityProbePort

__all__ = ["HttpxReachabilityProbe", "ReachabilityProbePort"]
