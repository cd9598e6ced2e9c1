"""
Duel Pong: a two-player ball-and-paddle simulation
"""

__version__ = "0.1.0"
