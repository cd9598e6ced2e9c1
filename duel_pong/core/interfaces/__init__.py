"""
Protocols the host layer implements
"""

from duel_pong.core.interfaces.input import InputSource

__all__ = ["InputSource"]
