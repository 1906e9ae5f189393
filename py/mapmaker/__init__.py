"""
mapmaker: axis-aligned coordinate mappings between rectangular extents
"""

from ._version import __version__
