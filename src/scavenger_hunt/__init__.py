"""Scavenger hunt: photo + location evidence for checklist objectives."""

__version__ = "0.1.0"
