"""Telemetry and observability helpers.

This package emits deterministic panel event logs.
"""

from .logger import PanelLogger

__all__ = ["PanelLogger"]
