"""
Protocols implemented by the collaborators of the simulation core
"""

from ping_pong.core.interfaces.listener import MatchListener
from ping_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["MatchListener", "RendererProtocol"]
