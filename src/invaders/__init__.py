"""
Row-marching invaders arcade game built on pygame
"""

__version__ = "0.1.0"
