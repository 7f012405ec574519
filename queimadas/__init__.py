"""
Queimadas por Bioma
Wildfire detections over Brazilian biome outlines, by month and biome.
"""

__version__ = "0.1.0"
