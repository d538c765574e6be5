"""BMFont CLI

Usage:
    bmfont info <file> [--encoding=<name> --debug]
    bmfont glyphs <file> [--encoding=<name> --debug]
    bmfont kernings <file> [--encoding=<name> --debug]
    bmfont -h | --help
    bmfont --version

Options:
    -h --help          Show this screen
    --version          Show version
    --encoding=<name>  Encoding of the BMFont file [default: utf-8-sig]
    --debug            Show debug messages
"""

import logging
import sys

import docopt

import bmfont
from bmfont.cli import dump
from bmfont.exception import BmfontError


logger = logging.getLogger()


def init_logger(debug):
    if debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)

    # Already configured by the host application
    if logger.handlers:
        return

    formatter = logging.Formatter('%(asctime)s :: %(levelname)s '
                                  ':: %(message)s')
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(logging.DEBUG)
    logger.addHandler(stream_handler)


def main(argv=None):
    args = docopt.docopt(__doc__, argv=argv, version=bmfont.__version__)
    init_logger(args['--debug'])

    for command in ('info', 'glyphs', 'kernings'):
        if args[command]:
            break

    try:
        dump.main(command, args['<file>'], args['--encoding'])
    except BmfontError as e:
        print("bmfont: %s" % e, file=sys.stderr)
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
