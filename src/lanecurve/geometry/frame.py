"""
Affine coordinate frames.

A frame is the translation, rotation and scale of the scene entity that owns
a curve. Curves store control points in frame-local coordinates and use the
frame to move them to and from world space.
"""

import math
from typing import List

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Local axis a curve is seeded along.
LOCAL_FORWARD = np.array([0.0, 0.0, 1.0])


class CoordinateFrame(BaseModel):
    """
    Translation, rotation and scale of a scene entity.

    rotation holds Euler angles in degrees, applied about Z, then X, then Y.
    The matrix is rebuilt on every call, so a frame moved by its owner is
    picked up immediately by every curve holding it.
    """
    position: List[float] = Field(default_factory=lambda: [0.0, 0.0, 0.0], min_length=3, max_length=3)
    rotation: List[float] = Field(default_factory=lambda: [0.0, 0.0, 0.0], min_length=3, max_length=3)
    scale: List[float] = Field(default_factory=lambda: [1.0, 1.0, 1.0], min_length=3, max_length=3)

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @field_validator("scale")
    @classmethod
    def _check_scale(cls, value):
        if any(s == 0 for s in value):
            raise ValueError("scale components must be non-zero")
        return value

    def rotation_matrix(self):
        """3x3 rotation matrix for the Euler angles."""
        rx, ry, rz = (math.radians(a) for a in self.rotation)
        cx, sx = math.cos(rx), math.sin(rx)
        cy, sy = math.cos(ry), math.sin(ry)
        cz, sz = math.cos(rz), math.sin(rz)

        rot_x = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
        rot_y = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
        rot_z = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])

        return rot_y @ rot_x @ rot_z

    def matrix(self):
        """4x4 local-to-world matrix (translate * rotate * scale)."""
        m = np.eye(4)
        m[:3, :3] = self.rotation_matrix() * np.asarray(self.scale, dtype=float)
        m[:3, 3] = self.position
        return m

    def transform_points(self, points):
        """Map an (N, 3) array of local points to world space."""
        points = np.asarray(points, dtype=float)
        scaled = points * np.asarray(self.scale, dtype=float)
        return scaled @ self.rotation_matrix().T + np.asarray(self.position, dtype=float)

    def inverse_transform_points(self, points):
        """Map an (N, 3) array of world points to local space."""
        points = np.asarray(points, dtype=float)
        unrotated = (points - np.asarray(self.position, dtype=float)) @ self.rotation_matrix()
        return unrotated / np.asarray(self.scale, dtype=float)

    def transform_point(self, point):
        """Map a single local point to world space."""
        return self.transform_points(np.asarray(point, dtype=float).reshape(1, 3))[0]

    def inverse_transform_point(self, point):
        """Map a single world point to local space."""
        return self.inverse_transform_points(np.asarray(point, dtype=float).reshape(1, 3))[0]

    def forward(self):
        """World-space direction of the local forward axis (unit length)."""
        return self.rotation_matrix() @ LOCAL_FORWARD
