"""Camera parameters: field of view, clipping planes and movement directions."""

import math
from dataclasses import dataclass

_NEAR_PLANE = 0.01
_FAR_PLANE = 10000.0


@dataclass
class Camera:
    """Camera state driven by input.

    ``rotation`` is (pitch, yaw) in radians. Movement happens in a z-up
    world, so forward and right directions depend only on the yaw.
    """

    rotation: tuple = (0.0, 0.0)
    move_speed: float = 32.0
    mouse_sensitivity: float = 0.002
    resolution: tuple = (0.0, 0.0)

    def horizontal_fov(self):
        """Horizontal field of view in radians."""
        return math.pi / 2

    def vertical_fov(self):
        """Vertical field of view in radians, derived from the aspect ratio."""
        return 2 * math.atan(math.tan(self.horizontal_fov() / 2) / self.aspect_ratio())

    def aspect_ratio(self):
        """Width divided by height of the resolution."""
        width, height = self.resolution
        return width / height

    def near_plane(self):
        """Distance to the near clipping plane."""
        return _NEAR_PLANE

    def far_plane(self):
        """Distance to the far clipping plane."""
        return _FAR_PLANE

    def right_move_direction(self):
        """Unit vector pointing right of the camera in the horizontal plane."""
        yaw = self.rotation[1]
        return (math.sin(yaw), -math.cos(yaw), 0.0)

    def forward_move_direction(self):
        """Unit vector pointing where the camera faces in the horizontal plane."""
        yaw = self.rotation[1]
        return (math.cos(yaw), math.sin(yaw), 0.0)

    def up_move_direction(self):
        """World up vector."""
        return (0.0, 0.0, 1.0)