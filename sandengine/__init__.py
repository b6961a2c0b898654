"""A small OpenGL rendering engine with a fly camera, OBJ loading and a sandbox viewer."""

__version__ = "0.1.0"
__all__ = ["transforms", "camera", "objmesh", "window", "renderer", "sandbox"]