#
#
#

import logging

from .exceptions import (
    DnsimpleApiError,
    DnsimpleClientException,
    DnsimpleNotFound,
    DnsimpleParseError,
    DnsimpleTransportError,
    DnsimpleUnauthorized,
)

__version__ = '0.1.0'

# Imported after __version__, the client uses it for its User-Agent
from .client import DnsimpleClient  # noqa: E402
from .envelope import (  # noqa: E402
    CollectionResult,
    EntityResult,
    Pagination,
)
from .resources import RESOURCES  # noqa: E402
from .urls import RequestOptions, build_url  # noqa: E402

__all__ = [
    'CollectionResult',
    'Dnsimple',
    'DnsimpleApiError',
    'DnsimpleClient',
    'DnsimpleClientException',
    'DnsimpleNotFound',
    'DnsimpleParseError',
    'DnsimpleTransportError',
    'DnsimpleUnauthorized',
    'EntityResult',
    'Pagination',
    'RequestOptions',
    'build_url',
]


class Dnsimple(object):
    """Entry point exposing every resource family as an attribute.

        client = Dnsimple(token)
        client.templates.list_templates(1010, options={'page': 1})
    """

    def __init__(self, token, id='default', *args, **kwargs):
        self.log = logging.getLogger(f'Dnsimple[{id}]')
        self.log.debug('__init__: id=%s, token=***', id)
        self._client = self._create_client(token, id, *args, **kwargs)
        for name, resource in RESOURCES.items():
            setattr(self, name, resource(self._client))

    def _create_client(self, token, id, *args, **kwargs):
        """Factory method for client creation.

        Args:
            token: API access token
            id: Name used in log output

        Returns:
            DnsimpleClient instance
        """
        return DnsimpleClient(token, id, *args, **kwargs)

    @property
    def client(self):
        return self._client
