"""Felt - Render phrases as felt letter board images.

Felt lays out a short phrase with a pair of fonts (the letters and their shading),
composites the lettering onto a seamlessly tiled felt texture and optionally frames
the result with a mitred wooden border.

Example:
    $ felt "hello, world!"

This reads gray.jpg, oak.jpg, font.ttf and shade.ttf from the working directory
and writes output.png.
"""

__version__ = "0.1.0"
__author__ = "Felt Contributors"

__all__ = ["__author__", "__version__"]
