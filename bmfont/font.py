'''Font module

This module contains the in-memory description of a BMFont:
metadata, texture pages, glyphs and kernings.
See http://www.angelcode.com/products/bmfont/doc/file_format.html
'''
from collections import OrderedDict, namedtuple
from enum import IntFlag

from path import Path

from bmfont.shape import Coordinates, Dimensions


Padding = namedtuple('Padding', ['up', 'right', 'down', 'left'])
Spacing = namedtuple('Spacing', ['horizontal', 'vertical'])


class Channel(IntFlag):
    '''Texture channels where a glyph is stored'''
    NONE = 0
    BLUE = 1
    GREEN = 2
    RED = 4
    ALPHA = 8
    ALL = 15


class Glyph():
    """Description of one character in the texture pages

    The glyph is stored as nested value objects, flat properties are
    provided for convenience.
    """
    def __init__(self, id, texture_coordinates=None, texture_dimensions=None,
                 offset=None, advance=0, page=0, channel=0):
        # pylint: disable=redefined-builtin
        """
        Args:
            id (int): Character code
            texture_coordinates (Coordinates): Top left position in page
            texture_dimensions (Dimensions): Size of the glyph in page
            offset (Coordinates): Offset to apply when rendering
            advance (int): Horizontal advance after the glyph
            page (int): Texture page index
            channel (int): Channel mask (1=blue, 2=green, 4=red, 8=alpha)
        """
        self.id = id
        self.texture_coordinates = texture_coordinates or Coordinates()
        self.texture_dimensions = texture_dimensions or Dimensions()
        self.offset = offset or Coordinates()
        self.advance = advance
        self.page = page
        self.channel = channel

    @property
    def x(self):
        return self.texture_coordinates.x

    @x.setter
    def x(self, value):
        self.texture_coordinates.x = value

    @property
    def y(self):
        return self.texture_coordinates.y

    @y.setter
    def y(self, value):
        self.texture_coordinates.y = value

    @property
    def width(self):
        return self.texture_dimensions.width

    @width.setter
    def width(self, value):
        self.texture_dimensions.width = value

    @property
    def height(self):
        return self.texture_dimensions.height

    @height.setter
    def height(self, value):
        self.texture_dimensions.height = value

    @property
    def offset_x(self):
        return self.offset.x

    @offset_x.setter
    def offset_x(self, value):
        self.offset.x = value

    @property
    def offset_y(self):
        return self.offset.y

    @offset_y.setter
    def offset_y(self, value):
        self.offset.y = value

    @property
    def channel_flags(self):
        return Channel(self.channel)

    def __eq__(self, other):
        if not isinstance(other, Glyph):
            return NotImplemented
        return (self.id == other.id and
                self.texture_coordinates == other.texture_coordinates and
                self.texture_dimensions == other.texture_dimensions and
                self.offset == other.offset and
                self.advance == other.advance and
                self.page == other.page and
                self.channel == other.channel)

    def __repr__(self):
        return ('Glyph[id={}, x={}, y={}, width={}, height={}, offset_x={}, '
                'offset_y={}, advance={}, page={}, channel={}]').format(
                    self.id, self.x, self.y, self.width, self.height,
                    self.offset_x, self.offset_y, self.advance, self.page,
                    self.channel)


class Kerning():
    """Spacing adjustment between two characters

    Two kernings are equal when they concern the same pair of characters,
    whatever their amount.
    """
    def __init__(self, first, second, amount=0):
        self.first = first
        self.second = second
        self.amount = amount

    @property
    def pair(self):
        return (self.first, self.second)

    def __eq__(self, other):
        if not isinstance(other, Kerning):
            return NotImplemented
        return self.pair == other.pair

    def __hash__(self):
        return hash(self.pair)

    def __repr__(self):
        return 'Kerning[first={}, second={}, amount={}]'.format(
            self.first, self.second, self.amount)


class FontData():
    """BMFont descriptor

    Filled by `bmfont.parser`. Glyphs are indexed by character code,
    kernings by `(first, second)` pair and pages by id.
    """
    def __init__(self):
        self.filepath = None

        self.face = ''
        self.charset = ''
        self.size = 0
        self.stretch_h = 100
        self.bold = False
        self.italic = False
        self.unicode = False
        self.smooth = False
        self.anti_aliased = False
        self.padding = Padding(0, 0, 0, 0)
        self.spacing = Spacing(0, 0)

        self.line_height = 0
        self.base = 0
        self.scale = Dimensions()
        self.packed = False

        self._glyphs = OrderedDict()
        self._kernings = OrderedDict()
        self._pages = []

    def __repr__(self):
        return ('FontData[face={!r}, size={}, glyphs={}, kernings={}, '
                'pages={}]').format(self.face, self.size, len(self._glyphs),
                                    len(self._kernings), len(self._pages))

    @property
    def scale_w(self):
        return self.scale.width

    @scale_w.setter
    def scale_w(self, value):
        self.scale.width = value

    @property
    def scale_h(self):
        return self.scale.height

    @scale_h.setter
    def scale_h(self, value):
        self.scale.height = value

    # Glyphs

    @property
    def glyphs(self):
        '''List of glyphs in insertion order'''
        return list(self._glyphs.values())

    @property
    def codes(self):
        '''List of character codes in insertion order'''
        return list(self._glyphs.keys())

    def has_glyph(self, code):
        return code in self._glyphs

    def get_glyph(self, code):
        """Get glyph of a character code

        Args:
            code (int): Character code

        Returns:
            Glyph or None if the font doesn't contain it
        """
        return self._glyphs.get(code)

    def add_glyph(self, glyph):
        '''Add glyph, replacing any glyph with the same id'''
        self._glyphs[glyph.id] = glyph
        return self

    def remove_glyph(self, code):
        self._glyphs.pop(code, None)
        return self

    def clear_glyphs(self):
        self._glyphs.clear()
        return self

    # Kernings

    @property
    def kernings(self):
        '''List of kernings in insertion order'''
        return list(self._kernings.values())

    def get_kerning(self, first, second):
        """Get kerning between two characters

        Args:
            first (int): Code of previous character
            second (int): Code of current character

        Returns:
            Kerning or None
        """
        return self._kernings.get((first, second))

    def kerning_amount(self, first, second):
        '''Return kerning amount between two characters, 0 if unknown'''
        kerning = self.get_kerning(first, second)
        if kerning is None:
            return 0

        return kerning.amount

    def add_kerning(self, kerning):
        '''Add kerning, replacing any kerning of the same pair'''
        self._kernings[kerning.pair] = kerning
        return self

    def remove_kerning(self, first, second):
        self._kernings.pop((first, second), None)
        return self

    def clear_kernings(self):
        self._kernings.clear()
        return self

    # Pages

    @property
    def pages(self):
        '''List of page file names ordered by id'''
        return list(self._pages)

    def _check_page(self, id):
        # pylint: disable=redefined-builtin
        if not 0 <= id < len(self._pages):
            raise IndexError("Page id {} out of range [0, {})".format(
                id, len(self._pages)))

    def get_page(self, id):
        # pylint: disable=redefined-builtin
        self._check_page(id)
        return self._pages[id]

    def add_page(self, id, file):
        """Insert a page at position `id`

        Page ids are expected to be dense and to start at 0. Inserting
        beyond the current number of pages is refused.

        Args:
            id (int): Page id
            file (str): Texture file name

        Raises:
            IndexError: if id is negative or greater than the page count
        """
        # pylint: disable=redefined-builtin
        if not 0 <= id <= len(self._pages):
            raise IndexError("Page id {} out of range [0, {}]".format(
                id, len(self._pages)))

        self._pages.insert(id, file)
        return self

    def remove_page(self, page):
        """Remove a page

        Unknown file names are ignored, an unknown id raises IndexError.

        Args:
            page (int or str): Page id or texture file name
        """
        if isinstance(page, str):
            if page in self._pages:
                self._pages.remove(page)
        else:
            self._check_page(page)
            del self._pages[page]
        return self

    def clear_pages(self):
        self._pages.clear()
        return self

    def page_path(self, id):
        """Return the path of the page texture

        The file name is resolved against the directory of the font file
        when the font was loaded from disk.

        Args:
            id (int): Page id

        Returns:
            path.Path
        """
        # pylint: disable=redefined-builtin
        self._check_page(id)
        page = Path(self._pages[id])
        if self.filepath is None:
            return page

        return Path(self.filepath).parent / page
