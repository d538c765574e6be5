"""BMFont text format decoder

Load AngelCode BMFont text files into FontData.
"""
# flake8: noqa

from bmfont.font import FontData, Glyph, Kerning
from bmfont.parser import assemble, load, parse


__version__ = "0.1.0"
