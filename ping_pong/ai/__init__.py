"""
AI module for Ping Pong
"""

from ping_pong.ai.opponent import TrackingAI

__all__ = ["TrackingAI"]
