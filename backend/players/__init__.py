"""
Input controllers for the snake arena.

This module contains the controller abstraction the session polls each
tick and the keyboard-backed implementation.
"""

from .base import InputController
from .key_controller import KeyController, KEY_BINDINGS

__all__ = [
    'InputController',
    'KeyController',
    'KEY_BINDINGS',
]
