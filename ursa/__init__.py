"""OpenGL demo rendering a rotating textured quad, with a shader wrapper and a console logger."""

__version__ = "0.1.0"
__all__ = ["__version__"]