from bmfont.parser import load


class FontDumper():
    """Print the content of a FontData, one record per line"""

    def __init__(self, font, out=None):
        self.font = font
        self.out = out

    def write(self, text):
        print(text, file=self.out)

    def info(self):
        font = self.font
        self.write("face: %s" % font.face)
        self.write("size: %d" % font.size)
        self.write("bold: %s" % font.bold)
        self.write("italic: %s" % font.italic)
        self.write("charset: %s" % font.charset)
        self.write("unicode: %s" % font.unicode)
        self.write("stretchH: %d" % font.stretch_h)
        self.write("smooth: %s" % font.smooth)
        self.write("aa: %s" % font.anti_aliased)
        self.write("padding: %s" % ','.join(str(x) for x in font.padding))
        self.write("spacing: %s" % ','.join(str(x) for x in font.spacing))
        self.write("lineHeight: %d" % font.line_height)
        self.write("base: %d" % font.base)
        self.write("scale: %dx%d" % (font.scale_w, font.scale_h))
        self.write("packed: %s" % font.packed)
        self.write("glyphs: %d" % len(font.codes))
        self.write("kernings: %d" % len(font.kernings))
        for page_id in range(len(font.pages)):
            self.write("page %d: %s" % (page_id, font.page_path(page_id)))

    def glyphs(self):
        for g in self.font.glyphs:
            self.write("%d x=%d y=%d width=%d height=%d xoffset=%d "
                       "yoffset=%d xadvance=%d page=%d chnl=%d" % (
                           g.id, g.x, g.y, g.width, g.height, g.offset_x,
                           g.offset_y, g.advance, g.page, g.channel))

    def kernings(self):
        for k in self.font.kernings:
            self.write("%d %d %d" % (k.first, k.second, k.amount))


def main(command, filepath, encoding, out=None):
    dumper = FontDumper(load(filepath, encoding=encoding), out)
    getattr(dumper, command)()
