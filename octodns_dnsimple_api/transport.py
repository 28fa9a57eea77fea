#
#
#

"""Protocol definition for the HTTP transport.

This module defines structural typing (PEP 544) for the object that
performs the actual HTTP exchange, allowing a custom transport to be
injected without requiring explicit inheritance.
"""

from typing import Any, MutableMapping, Optional, Protocol


class TransportResponse(Protocol):
    """The subset of ``requests.Response`` the client relies on."""

    status_code: int
    reason: str

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is empty or not valid JSON
        """
        ...


class Transport(Protocol):
    """Protocol defining the expected interface for transports.

    ``requests.Session`` conforms to this interface and is the default.
    TLS, connection reuse and any socket-level retries are the
    transport's business.
    """

    headers: MutableMapping[str, str]

    def request(
        self,
        method: str,
        url: str,
        json: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        """Perform one HTTP exchange.

        Args:
            method: HTTP verb
            url: Fully built request URL, query string included
            json: Optional JSON-serializable request body
            timeout: Optional timeout in seconds

        Returns:
            Response with status code, reason and decodable body

        Raises:
            requests.RequestException: If the exchange cannot complete
        """
        ...
