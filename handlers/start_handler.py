"""
handlers/start_handler.py
--------------------------
Handles the root endpoint that greets anyone hitting the server.
"""

from handlers.common import reply

WELCOME_TEXT = "Bem-vindo ao meu servidor"


def welcome():
    """GET / - welcome message."""
    return reply(200, WELCOME_TEXT)
