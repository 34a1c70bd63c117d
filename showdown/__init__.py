"""Showdown host package: serves the hand evaluator over WebSocket."""

from .server import ShowdownServer, ShowdownServerError

__all__ = ["ShowdownServer", "ShowdownServerError"]
