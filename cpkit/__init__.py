"""Graph algorithms, angle conversions and classic contest problem solutions."""

__version__ = "0.1.0"