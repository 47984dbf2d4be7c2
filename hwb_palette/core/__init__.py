"""hwb_palette.core — Foundation layer.

Contains the colour conversions, pixel buffer, rasterizer, image sink,
settings and report builder.
This module has NO dependencies on hwb_palette.renders or hwb_palette.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
