import sys
import logging
import argparse
from pathlib import Path
from typing import Iterator, List, Optional


FIELD_NAMES = ['scheme', 'user_info', 'host', 'port', 'path', 'query', 'fragment']


def main(argv: Optional[List[str]] = None):
    from uriv import URI, scan

    ap = argparse.ArgumentParser(prog='uriv', description='Split URIs into their components')
    ap.add_argument('uri', nargs='*', help='URIs to scan')
    ap.add_argument('-i', '--input', help='file with one URI per line', type=Path)
    ap.add_argument('-f', '--fields', help='print components one per line', action='store_true')
    ap.add_argument('-s', '--show', help='print segment offsets', action='store_true')
    ap.add_argument('-v', '--verbose', help='log debug messages', action='store_true')
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    input_file_path: Path = args.input
    if input_file_path is not None and not input_file_path.is_file():
        print('File does not exist')
        sys.exit(2)

    for text in iter_uris(args.uri, input_file_path):
        if args.fields:
            uri = URI.from_string(text)
            for name in FIELD_NAMES:
                print('{}: {}'.format(name, format_field(getattr(uri, name))))
            print()
        elif args.show:
            scan(text).show()
        else:
            scan(text).pp()


def iter_uris(uris: List[str], input_file_path: Optional[Path] = None) -> Iterator[str]:
    for text in uris:
        yield text
    if input_file_path is not None:
        with open(input_file_path, 'r') as fo:
            for line in fo:
                line = line.strip()
                if line:
                    yield line


def format_field(value) -> str:
    if value is None:
        return '-'
    if isinstance(value, str):
        return repr(value)
    if hasattr(value, 'items'):
        if not value:
            return '-'
        return ', '.join('{}={}'.format(repr(k), repr(v)) for k, v in sorted(value.items()))
    return str(value)


if __name__ == '__main__':
    main()
