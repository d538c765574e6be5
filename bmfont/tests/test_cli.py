from os import path

from bmfont import __version__
from bmfont.cli import main


SAMPLE = path.join(path.dirname(path.abspath(__file__)), 'data', 'sample.fnt')


def test_info(capsys):
    assert main(['info', SAMPLE]) == 0
    out = capsys.readouterr().out
    assert 'face: Times New Roman' in out
    assert 'padding: 1,2,3,4' in out
    assert 'glyphs: 3' in out
    assert 'sample_1.png' in out


def test_glyphs(capsys):
    assert main(['glyphs', SAMPLE]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[1].startswith('65 x=10 y=20 width=22')


def test_kernings(capsys):
    assert main(['kernings', SAMPLE]) == 0
    assert capsys.readouterr().out.splitlines() == ['65 86 -3', '86 65 -2']


def test_error(capsys, tmpdir):
    fnt = tmpdir.join('bad.fnt')
    fnt.write('char id=abc\n')
    assert main(['glyphs', str(fnt)]) == 1
    assert 'id' in capsys.readouterr().err


def test_version(capsys):
    try:
        main(['--version'])
    except SystemExit:
        pass
    assert __version__ in capsys.readouterr().out
