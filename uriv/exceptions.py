class UriException(Exception):
    pass


class DecodeError(UriException):
    pass
