"""Vector and matrix math, transforms, camera, procedural meshes, lights and GL version handling for a small OpenGL renderer."""

__version__ = "0.1.0"