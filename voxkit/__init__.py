"""Voxelization of triangle models, with mesh, overlap, camera and material types."""

__version__ = "0.1.0"