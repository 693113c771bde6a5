import re
from typing import Dict, Mapping, Tuple
from urllib.parse import unquote_to_bytes

from .exceptions import DecodeError


__all__ = [
    'url_decode',
    'parse_query_string',
    'parse_user_info_string',
    'format_query',
]


_BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def url_decode(encoded: str) -> str:
    """Percent-decode <encoded>

    Unlike urllib.parse.unquote, malformed input is an error: a "%" must be
    followed by two hex digits, and both the input and the decoded bytes must
    be valid UTF-8.
    """
    m = _BAD_ESCAPE.search(encoded)
    if m:
        raise DecodeError('Bad escape at {} in {}'.format(m.start(), repr(encoded)))
    try:
        return unquote_to_bytes(encoded.encode('utf-8')).decode('utf-8')
    except (UnicodeEncodeError, UnicodeDecodeError) as e:
        raise DecodeError('Not UTF-8: {}'.format(repr(encoded))) from e


def parse_query_string(query_string: str) -> Dict[str, str]:
    query: Dict[str, str] = {}
    for tup in query_string.split('&'):
        if not tup:
            continue
        elements = tup.split('=')
        if len(elements) == 1:
            query[elements[0]] = ''
        elif len(elements) == 2:
            query[elements[0]] = elements[1]
        # a tuple with more than one "=" is dropped
    return query


def parse_user_info_string(user_info_string: str) -> Tuple[str, str]:
    """Split user info into (username, password); password is '' without a ":" """
    username, _, password = user_info_string.partition(':')
    return username, password


def format_query(query: Mapping[str, str]) -> str:
    return '&'.join('{}={}'.format(k, query[k]) for k in sorted(query))
