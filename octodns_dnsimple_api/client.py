#
#
#

import logging
from typing import Optional

from requests import RequestException, Session

from octodns import __VERSION__ as octodns_version

from . import __version__ as package_version
from .envelope import normalize_error, parse_response
from .exceptions import DnsimpleTransportError
from .transport import Transport
from .urls import build_url


class DnsimpleClient(object):
    BASE_URL = 'https://api.dnsimple.com'
    SANDBOX_URL = 'https://api.sandbox.dnsimple.com'
    METHODS = ('GET', 'POST', 'PATCH', 'PUT', 'DELETE')

    def __init__(
        self,
        token,
        id='default',
        sandbox=False,
        base_url=None,
        session: Optional[Transport] = None,
        timeout: Optional[float] = None,
        user_agent=None,
    ):
        self.log = logging.getLogger(f'DnsimpleClient[{id}]')
        if base_url is None:
            base_url = self.SANDBOX_URL if sandbox else self.BASE_URL
        self.log.debug(
            '__init__: id=%s, token=***, base_url=%s, timeout=%s',
            id,
            base_url,
            timeout,
        )
        self.base_url = base_url
        self.timeout = timeout

        agent = (
            f'octodns/{octodns_version} '
            f'octodns-dnsimple-api/{package_version}'
        )
        if user_agent:
            agent = f'{user_agent} {agent}'

        if session is None:
            session = Session()
        session.headers.update(
            {
                'Authorization': f'Bearer {token}',
                'Accept': 'application/json',
                'User-Agent': agent,
            }
        )
        self._session = session

    def url(self, account_id, path, resource_id=None, options=None):
        return build_url(
            self.base_url, account_id, path, resource_id, options
        )

    def _do(self, method, url, data=None):
        if method not in self.METHODS:
            raise ValueError(
                f"Invalid method '{method}'. Must be one of "
                f"{', '.join(self.METHODS)}"
            )
        if method in ('GET', 'DELETE'):
            data = None
        self.log.debug('_do: method=%s, url=%s', method, url)
        try:
            response = self._session.request(
                method, url, json=data, timeout=self.timeout
            )
        except RequestException as e:
            raise DnsimpleTransportError(
                f'{method} {url} failed: {e}'
            ) from e
        self.log.debug('_do:   status=%s', response.status_code)
        return response

    def request(self, method, url, shape, data=None):
        response = self._do(method, url, data)
        if not 200 <= response.status_code <= 299:
            raise normalize_error(response)
        return parse_response(response, shape)
