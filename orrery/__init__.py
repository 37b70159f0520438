"""Solar system model: orbits, trails, camera, sphere meshes and text layout."""

__version__ = "0.1.0"

__all__ = ["bodies", "camera", "sphere", "system", "text_layout", "transforms"]