"""World package: re-export the scene and session for simpler imports.

    from world import CubeScene, AnimationSession
"""

from .session import AnimationSession
from .cubescene import CubeScene, canvas_rect

__all__ = [
    "AnimationSession",
    "CubeScene",
    "canvas_rect",
]
