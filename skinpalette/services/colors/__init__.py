"""
SkinPalette Colors Module

Provides Lab conversion, the static brand catalog and the two palette
matching strategies (diversity-constrained scoring and nearest-by-distance).
"""

__version__ = "1.0.0"
