"""
Logging utilities for tracking game activity in a session.
"""

import logging

from flask import has_request_context, request

logger = logging.getLogger("morpion.activity")


def log_game_event(category, description):
    """
    Log a user intent handled by the game.

    Args:
        category (str): Short event name (e.g., 'Visit', 'Start', 'Quit')
        description (str): Human-readable description of what happened
    """
    remote = request.remote_addr if has_request_context() else None
    logger.info("[%s] %s (from %s)", category, description, remote or "unknown")
