"""Run logging for fix commands."""

from .logger import RunLogger

__all__ = ["RunLogger"]
