import pkgutil
import importlib


def import_module(modname, is_package):
    module = importlib.import_module(modname)

    parent_modname = "%s." % modname
    if is_package:
        for _, modname, is_package in pkgutil.iter_modules(module.__path__):
            if modname == 'tests':
                continue
            import_module(parent_modname + modname, is_package)


def test_import():
    """Try to import all modules and packages"""
    import_module("bmfont", True)


def test_public_names():
    import bmfont
    from bmfont import font, parser

    assert bmfont.parse is parser.parse
    assert bmfont.load is parser.load
    assert bmfont.assemble is parser.assemble
    assert bmfont.FontData is font.FontData
    assert bmfont.Glyph is font.Glyph
    assert bmfont.Kerning is font.Kerning
