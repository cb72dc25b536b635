"""Planet simulator: affine math, camera, sphere mesh, scene and window."""

__version__ = "0.1.0"
__all__ = ["__version__"]