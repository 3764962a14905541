"""
Ping Pong: a human vs. computer Pong simulation
"""

__version__ = "1.0.0"
