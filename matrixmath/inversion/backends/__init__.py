"""
Inversion backends.

Only a CPU backend exists: inversion of one matrix is a sequential
algorithm and runs on the calling thread.
"""

from matrixmath.inversion.backends.cpu import CPUGaussJordanBackend

__all__ = ["CPUGaussJordanBackend"]
