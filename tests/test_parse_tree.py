from uriv.parse_tree import Segment, ScanResult, pretty_format, show_segments
from uriv.parse_tree import SCHEME, HOST, PATH, QUERY


def test_segment():
    text = 'http://h/p'

    seg = Segment(text, 0, 4, tag='scheme')
    assert seg.content == 'http'
    assert seg.start() == 0
    assert seg.end() == 4
    assert len(seg) == 4


def test_segment_empty():
    """An empty segment is still a segment"""
    text = 'http://h?'

    seg = Segment(text, 9, 9, tag='query')
    assert seg.content == ''
    assert len(seg) == 0
    assert seg == Segment(text, 9, 9, tag='query')
    assert seg != Segment(text, 9, 9, tag='fragment')


def test_scan_result_lookup():
    text = 'http://h/p'
    result = ScanResult(text, [
        Segment(text, 8, 10, tag='path'),
        Segment(text, 0, 4, tag='scheme'),
        Segment(text, 7, 8, tag='host'),
    ])

    assert result.content('scheme') == 'http'
    assert result.content('host') == 'h'
    assert result.content('path') == '/p'
    assert result.content('query') is None
    assert result.get('fragment') is None
    assert result.has('host')
    assert not result.has('port')
    assert [s.tag for s in result] == ['scheme', 'host', 'path']


def test_field_set():
    text = 'http://h/p?'
    result = ScanResult(text, [
        Segment(text, 0, 4, tag='scheme'),
        Segment(text, 7, 8, tag='host'),
        Segment(text, 8, 10, tag='path'),
        Segment(text, 11, 11, tag='query'),
    ])
    assert result.field_set == SCHEME | HOST | PATH | QUERY
    assert ScanResult('').field_set == 0


def test_show_segments():
    text = 'http://h'
    result = ScanResult(text, [
        Segment(text, 0, 4, tag='scheme'),
        Segment(text, 7, 8, tag='host'),
    ])
    assert show_segments(result) == '\n'.join([
        "+ (0, 8) 'http://h'",
        "  + (0, 4) scheme='http'",
        "  + (7, 8) host='h'",
    ])


def test_pretty_format_without_color(monkeypatch):
    monkeypatch.setenv('NO_COLOR', '1')
    text = 'http://h/p'
    result = ScanResult(text, [
        Segment(text, 0, 4, tag='scheme'),
        Segment(text, 7, 8, tag='host'),
        Segment(text, 8, 10, tag='path'),
    ])
    assert pretty_format(result) == text


def test_scan_result_default_segments():
    r1 = ScanResult('x')
    r2 = ScanResult('y')
    assert r1.segments == []
    assert r2.segments == []
    assert r1.field_set == 0
