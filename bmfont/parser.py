'''Parser module

This module builds a FontData from the lines of a BMFont text file.
Each line is decoded by `bmfont.line` then dispatched on its header tag.
Unknown headers are ignored so that files written by newer tools still load.
'''
import io
import logging

from path import Path

from bmfont.exception import (IOFailure, MalformedLine, MissingField,
                              PageIndexError, TypeConversionError)
from bmfont.font import FontData, Glyph, Kerning, Padding, Spacing
from bmfont.line import decode_line
from bmfont.shape import Coordinates, Dimensions


logger = logging.getLogger()


class Record():
    """Typed access to the fields of one decoded line

    Every failure is raised with the header, the line and its number so the
    caller can find the faulty input.
    """
    def __init__(self, line, header, fields, lineno=None):
        self.line = line
        self.header = header
        self.fields = fields
        self.lineno = lineno

    def error(self, error_class, message, field):
        error = error_class(message, header=self.header, field=field,
                            line=self.line, lineno=self.lineno)
        logger.error(str(error))
        return error

    def value(self, name):
        try:
            return self.fields[name]
        except KeyError:
            raise self.error(MissingField, "Missing field", name) from None

    def get_str(self, name):
        return self.value(name).as_str()

    def get_int(self, name):
        value = self.value(name)
        try:
            return value.as_int()
        except ValueError:
            raise self.error(TypeConversionError,
                             "Not an integer: %r" % value.as_str(),
                             name) from None

    def get_bool(self, name):
        return self.get_int(name) != 0

    def get_int_array(self, name, count):
        value = self.value(name)
        try:
            return value.as_int_array(',', count).tolist()
        except ValueError as e:
            raise self.error(TypeConversionError,
                             "Invalid integer array %r (%s)" % (
                                 value.as_str(), e),
                             name) from None


def _info(record, font):
    face = record.get_str('face')
    size = record.get_int('size')
    bold = record.get_bool('bold')
    italic = record.get_bool('italic')
    charset = record.get_str('charset')
    unicode = record.get_bool('unicode')
    stretch_h = record.get_int('stretchH')
    smooth = record.get_bool('smooth')
    anti_aliased = record.get_bool('aa')
    padding = Padding(*record.get_int_array('padding', 4))
    spacing = Spacing(*record.get_int_array('spacing', 2))

    font.face = face
    font.size = size
    font.bold = bold
    font.italic = italic
    font.charset = charset
    font.unicode = unicode
    font.stretch_h = stretch_h
    font.smooth = smooth
    font.anti_aliased = anti_aliased
    font.padding = padding
    font.spacing = spacing


def _common(record, font):
    line_height = record.get_int('lineHeight')
    base = record.get_int('base')
    scale = Dimensions(record.get_int('scaleW'), record.get_int('scaleH'))
    packed = record.get_bool('packed')

    font.line_height = line_height
    font.base = base
    font.scale.set(scale)
    font.packed = packed


def _page(record, font):
    page_id = record.get_int('id')
    file = record.get_str('file')

    try:
        font.add_page(page_id, file)
    except IndexError as e:
        raise record.error(PageIndexError, str(e), 'id') from None


def _char(record, font):
    glyph = Glyph(
        record.get_int('id'),
        texture_coordinates=Coordinates(record.get_int('x'),
                                        record.get_int('y')),
        texture_dimensions=Dimensions(record.get_int('width'),
                                      record.get_int('height')),
        offset=Coordinates(record.get_int('xoffset'),
                           record.get_int('yoffset')),
        advance=record.get_int('xadvance'),
        page=record.get_int('page'),
        channel=record.get_int('chnl'))

    font.add_glyph(glyph)


def _kerning(record, font):
    kerning = Kerning(record.get_int('first'), record.get_int('second'),
                      record.get_int('amount'))

    font.add_kerning(kerning)


HANDLERS = {
    'info': _info,
    'common': _common,
    'page': _page,
    'char': _char,
    'kerning': _kerning
}


def assemble(lines, target=None):
    """Build a FontData from BMFont lines

    If `target` is given, its glyphs, kernings and pages are cleared before
    parsing. Its metadata is kept until overwritten by `info` and `common`
    lines.

    Args:
        lines (iterable): Lines of text, trailing newlines are ignored
        target (FontData): Font to fill, None to create a new one

    Returns:
        FontData
    """
    if target is None:
        target = FontData()
    else:
        target.clear_glyphs().clear_kernings().clear_pages()

    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip('\r\n')
        if lineno == 1:
            line = line.lstrip('\ufeff')
        try:
            header, fields = decode_line(line)
        except MalformedLine as e:
            e.lineno = lineno
            logger.error(str(e))
            raise

        if header is None:
            continue

        handler = HANDLERS.get(header)
        if handler is None:
            logger.debug("Ignoring unknown header '%s' at line %d",
                         header, lineno)
            continue

        handler(Record(line, header, fields, lineno), target)

    logger.debug("Font '%s' parsed: %d glyphs, %d kernings, %d pages",
                 target.face, len(target.codes), len(target.kernings),
                 len(target.pages))

    return target


def _read_lines(stream):
    """Yield lines of a stream, wrapping read errors in IOFailure"""
    lines = iter(stream)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            msg = "Cannot read BMFont source: %s" % e
            logger.error(msg)
            raise IOFailure(msg) from e

        yield line


def parse(source, target=None, encoding='utf-8-sig'):
    """Parse BMFont text data

    Streams are read line by line. Streams given by the caller are not
    closed, the ones created here are closed even on error.

    Args:
        source: `str` content, `bytes` content, text stream or binary stream
        target (FontData): Font to fill, None to create a new one
        encoding (str): Encoding used for bytes and binary streams, the
                        default skips a UTF-8 byte order mark

    Returns:
        FontData
    """
    if isinstance(source, str):
        with io.StringIO(source) as stream:
            return assemble(_read_lines(stream), target)

    if isinstance(source, (bytes, bytearray)):
        with io.TextIOWrapper(io.BytesIO(source), encoding=encoding) as stream:
            return assemble(_read_lines(stream), target)

    if isinstance(source, io.TextIOBase):
        return assemble(_read_lines(source), target)

    stream = io.TextIOWrapper(source, encoding=encoding)
    try:
        return assemble(_read_lines(stream), target)
    finally:
        stream.detach()


def load(filepath, target=None, encoding='utf-8-sig'):
    """Load a BMFont text file

    The file path is kept in the font to resolve page textures.

    Args:
        filepath (str): BMFont file
        target (FontData): Font to fill, None to create a new one
        encoding (str): File encoding

    Returns:
        FontData
    """
    filepath = Path(filepath)
    try:
        f = filepath.open(encoding=encoding)
    except OSError as e:
        msg = "Cannot open BMFont file %s: %s" % (filepath, e)
        logger.error(msg)
        raise IOFailure(msg) from e

    with f:
        font = assemble(_read_lines(f), target)

    font.filepath = filepath
    return font
