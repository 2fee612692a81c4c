"""Typed models of Discord objects used by slash command bots."""

__version__ = "0.5.0"