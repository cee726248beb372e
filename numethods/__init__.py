"""Classic numerical methods: linear systems, roots, fitting, interpolation, integration and a command line."""

__version__ = "0.1.0"

__all__ = ["cli", "curve_fit", "integration", "interpolation", "linear", "roots"]