import argparse
import os
import sys

from witc.compiler import codegen, create_environment
from witc.errors import CompileError, FileError
from witc.log import get_logger, setup_logging
from witc.parser.parser import Parser

logger = get_logger(__name__)


def existing_file(path):
    if not os.path.isfile(path):
        raise argparse.ArgumentTypeError('file does not exist: %s' % path)
    return path


def build_argument_parser():
    parser = argparse.ArgumentParser(
        prog='witc',
        description='Generate Go wasm host bindings from .wit function signatures.',
    )
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument('--dump', action='store_true', help='Dump the AST.')
    action.add_argument('-o', '--dest', help='Destination directory.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    parser.add_argument('files', nargs='+', type=existing_file, metavar='FILE', help='Files to generate from.')
    return parser


def read_source(filename):
    try:
        with open(filename, encoding='utf-8') as fp:
            return fp.read()
    except OSError as e:
        raise FileError('read', filename, e) from e
    except UnicodeDecodeError as e:
        raise FileError('decode', filename, e) from e


def process_file(filename, *, dest=None, dump=False, parser=None, env=None, out=None):
    if parser is None:
        parser = Parser()

    module_ast = parser.parse(read_source(filename), filename=filename)
    if dump:
        print(module_ast, file=out or sys.stdout)
        return None

    return codegen(dest, filename, module_ast, env)


def main(argv=None):
    args = build_argument_parser().parse_args(argv)
    setup_logging('DEBUG' if args.verbose else None)

    parser = Parser(debug=args.verbose)
    env = create_environment()
    for filename in args.files:
        logger.debug('Processing %s', filename)
        try:
            process_file(filename, dest=args.dest, dump=args.dump, parser=parser, env=env)
        except CompileError as e:
            print('witc: error: %s' % e, file=sys.stderr)
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
