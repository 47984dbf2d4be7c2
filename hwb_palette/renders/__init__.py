"""Palette render modules.

Every .py file in this package that defines a `render` object is
auto-registered by hwb_palette.registry.discover().
"""
