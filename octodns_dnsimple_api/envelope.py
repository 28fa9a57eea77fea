#
#
#

"""Response envelope parsing and error normalization.

Successful responses are unwrapped by one of three shape strategies:

- single: ``{"data": {...}}``
- collection: ``{"data": [...], "pagination": {...}}``
- empty: no body, or ``{}``

Anything outside the 2xx range is turned into a DnsimpleApiError.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from .exceptions import (
    DnsimpleApiError,
    DnsimpleNotFound,
    DnsimpleParseError,
    DnsimpleUnauthorized,
)

SINGLE = 'single'
COLLECTION = 'collection'
EMPTY = 'empty'


@dataclass(frozen=True)
class Pagination:
    current_page: int
    per_page: int
    total_entries: int
    total_pages: int

    FIELDS = ('current_page', 'per_page', 'total_entries', 'total_pages')


@dataclass(frozen=True)
class EntityResult:
    data: Dict[str, Any]


@dataclass(frozen=True)
class CollectionResult:
    data: List[Dict[str, Any]]
    pagination: Pagination

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)


class ShapeStrategy(Protocol):
    """Turns a decoded 2xx body into a result value."""

    def parse(self, response) -> Any:
        ...


def _json_object(response):
    try:
        body = response.json()
    except ValueError as e:
        raise DnsimpleParseError(
            f'invalid JSON in {response.status_code} response'
        ) from e
    if not isinstance(body, dict):
        raise DnsimpleParseError(
            f'expected a JSON object, got {type(body).__name__}'
        )
    return body


def _data(body):
    if 'data' not in body:
        raise DnsimpleParseError('response envelope has no "data" key')
    return body['data']


class SingleShape:
    def parse(self, response) -> EntityResult:
        data = _data(_json_object(response))
        if not isinstance(data, dict):
            raise DnsimpleParseError(
                f'expected "data" to be an object, got {type(data).__name__}'
            )
        return EntityResult(data)


class CollectionShape:
    def parse(self, response) -> CollectionResult:
        body = _json_object(response)
        data = _data(body)
        if not isinstance(data, list):
            raise DnsimpleParseError(
                f'expected "data" to be a list, got {type(data).__name__}'
            )
        pagination = body.get('pagination')
        if not isinstance(pagination, dict):
            raise DnsimpleParseError(
                'collection response has no "pagination" object'
            )
        missing = [k for k in Pagination.FIELDS if k not in pagination]
        if missing:
            raise DnsimpleParseError(
                f'pagination is missing {", ".join(missing)}'
            )
        return CollectionResult(
            data, Pagination(**{k: pagination[k] for k in Pagination.FIELDS})
        )


class EmptyShape:
    def parse(self, response) -> Dict:
        # Body, if any, carries nothing for the caller
        return {}


SHAPES = {
    SINGLE: SingleShape(),
    COLLECTION: CollectionShape(),
    EMPTY: EmptyShape(),
}


def parse_response(response, shape: str):
    try:
        strategy = SHAPES[shape]
    except KeyError:
        raise ValueError(f"Invalid shape '{shape}'") from None
    return strategy.parse(response)


def _field_errors(errors) -> Optional[Dict[str, List[str]]]:
    if not isinstance(errors, dict) or not errors:
        return None
    ret = {}
    for name, violations in errors.items():
        if isinstance(violations, (list, tuple)):
            ret[str(name)] = [str(v) for v in violations]
        else:
            ret[str(name)] = [str(violations)]
    return ret


def normalize_error(response) -> DnsimpleApiError:
    """Build the error for a non-2xx response.

    The body may be empty, HTML or JSON of any shape. The result is always
    usable, with a message derived from the status when the body has none.
    """
    status = response.status_code
    try:
        body = response.json()
    except ValueError:
        body = None

    message = None
    errors = None
    if isinstance(body, dict):
        message = body.get('message')
        errors = _field_errors(body.get('errors'))
    if not isinstance(message, str) or not message:
        reason = getattr(response, 'reason', None) or 'Error'
        message = f'{status} {reason}'

    if status == 401:
        cls = DnsimpleUnauthorized
    elif status == 404:
        cls = DnsimpleNotFound
    else:
        cls = DnsimpleApiError
    return cls(status, message, errors=errors, response=response)
