"""raycore main package.

Vector algebra, rays and a PPM image buffer for a ray tracer.
Install from the repo root and use via `raycore.*` and `python -m raycore.cli.*`.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
