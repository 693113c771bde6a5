import pytest

from uriv import DecodeError
from uriv.encoding import url_decode, parse_query_string, parse_user_info_string, format_query


def test_url_decode():
    assert url_decode('a%20b') == 'a b'
    assert url_decode('plain') == 'plain'
    assert url_decode('') == ''
    assert url_decode('%E2%82%AC') == '€'
    assert url_decode('%2f%2F') == '//'


@pytest.mark.parametrize('encoded', ['%', '%2', '%zz', 'a%g0', '100%'])
def test_url_decode_bad_escape(encoded):
    with pytest.raises(DecodeError):
        url_decode(encoded)


def test_url_decode_not_utf8():
    with pytest.raises(DecodeError):
        url_decode('%ff')


def test_parse_query_string():
    assert parse_query_string('a=1&b&c=3') == {'a': '1', 'b': '', 'c': '3'}
    assert parse_query_string('') == {}
    assert parse_query_string('a=') == {'a': ''}


def test_parse_query_string_skips_empty_tuples():
    assert parse_query_string('a=1&&b=2&') == {'a': '1', 'b': '2'}


def test_parse_query_string_drops_extra_equals():
    assert parse_query_string('a=1&b=2=3&c') == {'a': '1', 'c': ''}


def test_parse_query_string_last_wins():
    assert parse_query_string('a=1&a=2') == {'a': '2'}


def test_parse_query_string_keeps_escapes():
    assert parse_query_string('a%20b=c%2F') == {'a%20b': 'c%2F'}


def test_parse_user_info_string():
    assert parse_user_info_string('alice:secret') == ('alice', 'secret')
    assert parse_user_info_string('alice') == ('alice', '')
    assert parse_user_info_string('alice:') == ('alice', '')
    assert parse_user_info_string(':secret') == ('', 'secret')
    assert parse_user_info_string('a:b:c') == ('a', 'b:c')


def test_format_query():
    assert format_query({'b': '2', 'a': '1'}) == 'a=1&b=2'
    assert format_query({'k': ''}) == 'k='
    assert format_query({}) == ''


def test_url_decode_lone_surrogate():
    with pytest.raises(DecodeError):
        url_decode('\udc80')
