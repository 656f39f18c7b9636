"""Game domain services: player registry, phase control and scoring.

This package holds the session state machine. It knows nothing about
Flask or Socket.IO; outbound messages go through the fan-out object the
session is constructed with.
"""
from .controller import GameSession
from .registry import JoinRejected, PlayerRegistry

__all__ = ['GameSession', 'JoinRejected', 'PlayerRegistry']
