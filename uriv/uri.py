import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .encoding import format_query, parse_query_string, parse_user_info_string, url_decode
from .exceptions import DecodeError
from .scanner import scan


__all__ = [
    'URI', 'UserInfo'
]


logger = logging.getLogger(__name__)


class UserInfo(object):
    __slots__ = ('_username', '_password')

    def __init__(self, username: str, password: str):
        self._username = username
        self._password = password

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    def __str__(self):
        return '{}:{}'.format(self._username, self._password)

    def __repr__(self):
        return '{}(username={}, password={})'.format(
            self.__class__.__name__, repr(self._username), repr(self._password))

    def __eq__(self, o):
        if isinstance(o, UserInfo):
            return str(self) == str(o)
        return NotImplemented

    def __hash__(self):
        return hash(str(self))


class URI(object):
    """An immutable URI value

    Fields are None when absent from the source, which is distinct from an
    empty string. Equality and hashing go through the canonical string form.
    """

    __slots__ = ('_scheme', '_user_info', '_host', '_port', '_path', '_query', '_fragment', '_string')

    def __init__(self,
                 scheme: Optional[str] = None,
                 user_info: Optional[UserInfo] = None,
                 host: Optional[str] = None,
                 port: Optional[int] = None,
                 path: Optional[str] = None,
                 query: Optional[Mapping[str, str]] = None,
                 fragment: Optional[str] = None):
        parsed_query: Dict[str, str] = {}
        for key, value in (query or {}).items():
            try:
                parsed_query[url_decode(key)] = url_decode(value)
            except DecodeError as e:
                logger.debug('Dropped query pair %r=%r: %s', key, value, e)
        self._set(scheme, user_info, host, port, path, parsed_query, fragment)

    def _set(self, scheme, user_info, host, port, path, query: Dict[str, str], fragment) -> None:
        self._scheme: Optional[str] = scheme
        self._user_info: Optional[UserInfo] = user_info
        self._host: Optional[str] = host
        self._port: Optional[int] = port
        self._path: Optional[str] = path
        self._query: Mapping[str, str] = MappingProxyType(query)
        self._fragment: Optional[str] = fragment
        self._string: Optional[str] = None

    @classmethod
    def from_string(cls, text: str) -> 'URI':
        """Scan <text> into a URI; query pairs are kept as they appear, undecoded"""
        result = scan(text)

        port = result.content('port')
        query_string = result.content('query')
        user_info_string = result.content('user_info')

        user_info = None
        if user_info_string is not None:
            user_info = UserInfo(*parse_user_info_string(user_info_string))

        uri = cls.__new__(cls)
        uri._set(
            scheme=result.content('scheme'),
            user_info=user_info,
            host=result.content('host'),
            port=int(port) if port is not None else None,
            path=result.content('path'),
            query=parse_query_string(query_string) if query_string is not None else {},
            fragment=result.content('fragment'),
        )
        return uri

    parse = from_string

    @property
    def scheme(self) -> Optional[str]:
        return self._scheme

    @property
    def user_info(self) -> Optional[UserInfo]:
        return self._user_info

    @property
    def host(self) -> Optional[str]:
        return self._host

    @property
    def port(self) -> Optional[int]:
        return self._port

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def query(self) -> Mapping[str, str]:
        return self._query

    @property
    def fragment(self) -> Optional[str]:
        return self._fragment

    def __str__(self):
        if self._string is None:
            self._string = self._format()
        return self._string

    def _format(self) -> str:
        s = ''
        if self._scheme is not None:
            s += '{}://'.format(self._scheme)
        if self._user_info is not None:
            s += '{}@'.format(self._user_info)
        if self._host is not None:
            s += self._host
        if self._port is not None:
            s += ':{}'.format(self._port)
        if self._path is not None:
            s += self._path
        if self._query:
            s += '?' + format_query(self._query)
        if self._fragment is not None:
            s += '#{}'.format(self._fragment)
        return s

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, repr(str(self)))

    def __eq__(self, o):
        if isinstance(o, URI):
            return str(self) == str(o)
        return NotImplemented

    def __hash__(self):
        return hash(str(self))
