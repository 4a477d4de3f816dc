import sys
import argparse

from .errors import SourceError, TranslationError
from .translator import DEFAULT_MAX_DEPTH, convert_stream

PROG = 'yaml-to-json'


class _ArgumentParser(argparse.ArgumentParser):
    # Unrecognized options exit with 1, like every other failure
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _handle_error(error_msg):
    print(f"{PROG}: {error_msg}", file=sys.stderr)
    sys.exit(1)


def convert_command(args):
    """Translate the YAML input into JSON on stdout."""
    options = dict(
        escape=not args.raw,
        ensure_ascii=not args.unicode,
        compact=args.canonical,
        allow_empty=not args.strict_empty,
        max_depth=args.max_depth,
    )
    try:
        if args.input_file == '-':
            convert_stream(sys.stdin.buffer, sys.stdout, **options)
        else:
            with open(args.input_file, 'rb') as f:
                convert_stream(f, sys.stdout, **options)
        sys.stdout.flush()
    except FileNotFoundError:
        _handle_error(f"File not found: {args.input_file}")
    except SourceError as e:
        _handle_error(f"YAML error: {e}")
    except TranslationError as e:
        _handle_error(str(e))
    except UnicodeEncodeError as e:
        _handle_error(f"Output encoding error: {e}")
    except OSError as e:
        _handle_error(f"I/O error: {e}")


def build_parser():
    parser = _ArgumentParser(
        prog=PROG,
        description='Translate a YAML stream into JSON, one line per document'
    )
    parser.add_argument(
        'input_file',
        nargs='?',
        default='-',
        help='Path to the YAML file to read (default: stdin)'
    )
    parser.add_argument(
        '-c', '--canonical',
        action='store_true',
        help='Compact output without spaces around brackets and separators'
    )
    parser.add_argument(
        '-u', '--unicode',
        action='store_true',
        help='Output unescaped non-ASCII characters in quoted strings (plain scalars are always copied as-is)'
    )
    parser.add_argument(
        '--raw',
        action='store_true',
        help='Copy quoted scalars without JSON escaping (legacy output)'
    )
    parser.add_argument(
        '--strict-empty',
        action='store_true',
        help='Fail on empty keys and scalars instead of writing ""'
    )
    parser.add_argument(
        '--max-depth',
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f'Maximum nesting of sequences and mappings (default: {DEFAULT_MAX_DEPTH})'
    )
    parser.set_defaults(func=convert_command)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
