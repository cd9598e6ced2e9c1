"""
PyGame host for Duel Pong
"""
