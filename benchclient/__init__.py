"""BenchClient - streaming inference benchmark client"""

__version__ = "0.1.0"
