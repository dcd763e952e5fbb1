"""Seed Uptime Kuma with monitors for the mock server endpoints."""
from __future__ import annotations

__version__ = "1.0.0"
