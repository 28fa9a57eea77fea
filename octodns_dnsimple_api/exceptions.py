#
#
#

from octodns.provider import ProviderException


class DnsimpleClientException(ProviderException):
    pass


class DnsimpleTransportError(DnsimpleClientException):
    """The HTTP exchange could not be completed."""


class DnsimpleParseError(DnsimpleClientException):
    """A 2xx response did not match the expected envelope."""


class DnsimpleApiError(DnsimpleClientException):
    """The API answered with a non-2xx status.

    `errors` maps field names to lists of violation messages when the
    server provided field-level detail, otherwise it is None.
    """

    def __init__(self, http_status, message, errors=None, response=None):
        super().__init__(message)
        self.http_status = http_status
        self.message = message
        self.errors = errors
        self.response = response

    def __repr__(self):
        return (
            f'{self.__class__.__name__}(http_status={self.http_status!r}, '
            f'message={self.message!r}, errors={self.errors!r})'
        )


class DnsimpleNotFound(DnsimpleApiError):
    pass


class DnsimpleUnauthorized(DnsimpleApiError):
    pass
