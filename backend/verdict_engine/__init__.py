"""Viability Verdict Engine — deterministic idea-viability scoring."""

__version__ = "0.1.0"
