"""Scan a URI string into field segments

The scanner follows the generic URI grammar loosely: it never rejects input,
it only reports which fields it could locate. Offsets are half-open
[start, end) pairs into the original string.
"""

import logging
import string
from typing import List, Optional, Tuple

from .parse_tree import Segment, ScanResult


__all__ = [
    'scan',
    'Scanner',
    'MAX_PORT',
]


logger = logging.getLogger(__name__)


MAX_PORT = 65535

SCHEME_FIRST = string.ascii_letters
SCHEME_CHARS = string.ascii_letters + string.digits + '+-.'
DIGITS = string.digits


def scan(text: str) -> ScanResult:
    return Scanner(text).scan()


def is_scheme(text: str, start: int, end: int) -> bool:
    if end <= start or text[start] not in SCHEME_FIRST:
        return False
    for i in range(start + 1, end):
        if text[i] not in SCHEME_CHARS:
            return False
    return True


def parse_port(text: str, start: int, end: int) -> Optional[int]:
    """Return the port number in text[start: end], or None if it is not one"""
    if end <= start:
        return None
    for i in range(start, end):
        if text[i] not in DIGITS:
            return None
    port = int(text[start: end])
    if port > MAX_PORT:
        return None
    return port


class Scanner(object):
    def __init__(self, text: str):
        self.text: str = text
        self.segments: List[Segment] = []

    def find(self, char: str, start: int, end: int) -> int:
        return self.text.find(char, start, end)

    def mark(self, start: int, end: int, tag: str) -> None:
        self.segments.append(Segment(self.text, start, end, tag=tag))

    def scan(self) -> ScanResult:
        text = self.text
        end = len(text)

        idx_frg = self.find('#', 0, end)
        if idx_frg >= 0:
            self.mark(idx_frg + 1, end, 'fragment')
            end = idx_frg

        idx_qry = self.find('?', 0, end)
        if idx_qry >= 0:
            self.mark(idx_qry + 1, end, 'query')
            end = idx_qry

        self.scan_hier(0, end)
        return ScanResult(text, self.segments)

    def scan_hier(self, start: int, end: int) -> None:
        """scheme, authority and path, everything before "?" and "#" """
        text = self.text
        auth = None

        idx_sep = text.find('://', start, end)
        if idx_sep >= 0 and is_scheme(text, start, idx_sep):
            self.mark(start, idx_sep, 'scheme')
            auth = idx_sep + 3
        elif text.startswith('//', start, end):
            auth = start + 2
        elif start < end and text[start] != '/':
            auth = start

        if auth is None:
            if start < end:
                self.mark(start, end, 'path')
            return

        idx_pth = self.find('/', auth, end)
        if idx_pth >= 0:
            self.mark(idx_pth, end, 'path')
            end = idx_pth

        self.scan_authority(auth, end)

    def scan_authority(self, start: int, end: int) -> None:
        """user-info, host and port"""
        text = self.text

        idx_at = text.rfind('@', start, end)
        if idx_at >= 0:
            self.mark(start, idx_at, 'user_info')
            start = idx_at + 1

        host_end, port_bounds = self.split_port(start, end)
        self.mark(start, host_end, 'host')

        if port_bounds is not None:
            port = parse_port(text, *port_bounds)
            if port is None:
                logger.debug('Ignored invalid port %r in %r', text[port_bounds[0]: port_bounds[1]], text)
            else:
                self.mark(port_bounds[0], port_bounds[1], 'port')

    def split_port(self, start: int, end: int) -> Tuple[int, Optional[Tuple[int, int]]]:
        """Find the host end, and the bounds of the text after ":" if any"""
        text = self.text
        search_from = start

        # colons inside an IPv6 literal do not start a port
        if text.startswith('[', start, end):
            idx_brk = text.find(']', start, end)
            if idx_brk >= 0:
                search_from = idx_brk + 1

        idx_col = text.rfind(':', search_from, end)
        if idx_col < 0:
            return end, None
        return idx_col, (idx_col + 1, end)
