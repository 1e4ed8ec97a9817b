"""Step-by-step visualisation of sorting algorithms with bars and tones."""

__version__ = "0.1.0"
__all__ = ["__version__"]