"""RICOAI

Data-access layer for user photo metadata. Records who owns an image,
where the full-resolution and thumbnail objects live, and whether the
image is publicly visible.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
