__version__ = '0.1.0'

from .exceptions import UriException, DecodeError
from .parse_tree import Segment, ScanResult
from .scanner import scan
from .encoding import url_decode
from .uri import URI, UserInfo
