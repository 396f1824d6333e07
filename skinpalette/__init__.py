"""
SkinPalette

Maps a measured skin tone to a curated 48-color brand catalog and returns
a five color palette with a dominant style label.
"""

__version__ = "1.0.0"
