from .camera import Camera, ViewAngles, project, unproject_angles
from .cameracontroller import KeyboardController

__all__ = [
    "Camera",
    "ViewAngles",
    "project",
    "unproject_angles",
    "KeyboardController",
]
