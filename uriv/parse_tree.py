from typing import Dict, Iterator, List, Optional, Sequence

from termcolor import colored


__all__ = [
    'Segment', 'ScanResult',
    'SCHEME', 'HOST', 'PORT', 'PATH', 'QUERY', 'FRAGMENT', 'USER_INFO',
    'FIELDS',
]


# field-set bits
SCHEME = 1
HOST = 2
PORT = 4
PATH = 8
QUERY = 16
FRAGMENT = 32
USER_INFO = 64

FIELDS: Dict[str, int] = {
    'scheme': SCHEME,
    'host': HOST,
    'port': PORT,
    'path': PATH,
    'query': QUERY,
    'fragment': FRAGMENT,
    'user_info': USER_INFO,
}


class Segment(object):
    """A tagged [start, end) slice of the scanned text"""

    def __init__(self, text: str, start: int, end: int, tag: str):
        self.text: str = text
        assert end >= start >= 0
        self.index0: int = start
        self.index1: int = end
        self.tag: str = tag

    @property
    def content(self) -> str:
        return self.text[self.index0: self.index1]

    # start(), end() as methods, simulating re MatchObject behaviour
    def start(self) -> int:
        return self.index0

    def end(self) -> int:
        return self.index1

    def __len__(self):
        return self.index1 - self.index0

    def __repr__(self):
        return '{}({}, {}, content={}, tag={})'.format(
            self.__class__.__name__, self.index0, self.index1, repr(self.content), repr(self.tag))

    def __eq__(self, o):
        if isinstance(o, Segment):
            return self.text == o.text \
                and self.index0 == o.index0 \
                and self.index1 == o.index1 \
                and self.tag == o.tag
        return False

    def __hash__(self):
        return hash((self.text, self.index0, self.index1, self.tag))


class ScanResult(object):
    """Segments found in a URI string, at most one per field

    A field missing from the result is absent from the text, which is not the
    same as a field whose segment is empty.
    """

    def __init__(self, text: str, segments: Sequence[Segment] = ()):
        self.text: str = text
        self._segments: Dict[str, Segment] = {}
        for seg in segments:
            assert seg.tag in FIELDS
            assert seg.text is text
            self._segments[seg.tag] = seg

    @property
    def field_set(self) -> int:
        fs = 0
        for tag in self._segments:
            fs |= FIELDS[tag]
        return fs

    def has(self, tag: str) -> bool:
        return tag in self._segments

    def get(self, tag: str) -> Optional[Segment]:
        return self._segments.get(tag)

    def content(self, tag: str) -> Optional[str]:
        seg = self._segments.get(tag)
        if seg is None:
            return None
        return seg.content

    @property
    def segments(self) -> List[Segment]:
        """Segments in text order"""
        return sorted(self._segments.values(), key=lambda s: (s.index0, s.index1))

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __repr__(self):
        return '{}({}, segments=[{}])'.format(
            self.__class__.__name__, repr(self.text), ', '.join(repr(s) for s in self.segments))

    def __eq__(self, o):
        if isinstance(o, ScanResult):
            return self.text == o.text and self.segments == o.segments
        return False

    def pp(self):
        """Pretty Print in terminals, designed for terminal users"""
        print(pretty_format(self))

    def show(self):
        """Show segment offsets in detail, designed for pdb debugging"""
        print(show_segments(self))


def show_segments(result: ScanResult) -> str:
    lines = ['+ (0, {}) {}'.format(len(result.text), repr(result.text))]
    for seg in result.segments:
        lines.append('  + ({}, {}) {}={}'.format(seg.start(), seg.end(), seg.tag, repr(seg.content)))
    return '\n'.join(lines)


_COLORS = {
    'scheme': 'red',
    'user_info': 'magenta',
    'host': 'green',
    'port': 'yellow',
    'path': 'blue',
    'query': 'cyan',
    'fragment': 'red',
}


def pretty_format(result: ScanResult) -> str:
    text = result.text
    # for i in tag_lst, tag_lst[i] is the field covering char i
    tag_lst: List[Optional[str]] = [None] * len(text)
    for seg in result.segments:
        for i in range(seg.start(), seg.end()):
            tag_lst[i] = seg.tag

    # delimiters like "://", "@", "?" are not covered by any segment
    ws = ''
    cur = 0
    while cur < len(text):
        tag = tag_lst[cur]
        nxt = cur
        while nxt < len(text) and tag_lst[nxt] == tag:
            nxt += 1
        if tag is None:
            ws += colored(text[cur: nxt], attrs=['dark'])
        else:
            ws += colored(text[cur: nxt], _COLORS[tag])
        cur = nxt
    return ws
