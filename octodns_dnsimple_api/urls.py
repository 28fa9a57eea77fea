#
#
#

"""Request URL construction.

Every request path has the shape ``/v2/{account}{resource_path}[/{id}]``
followed by an optional query string derived from request options.
"""

from collections import abc
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote, urlencode

API_VERSION = 'v2'

_RECOGNIZED = ('page', 'per_page', 'sort', 'query', 'filter')


@dataclass(frozen=True)
class RequestOptions:
    """Optional pagination, sorting and filtering for a request.

    ``query`` and ``filter`` are merged verbatim into the query string,
    as is every entry of ``extra``.
    """

    page: Optional[int] = None
    per_page: Optional[int] = None
    sort: Optional[str] = None
    query: Mapping[str, Any] = field(default_factory=dict)
    filter: Mapping[str, Any] = field(default_factory=dict)
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        for name in ('query', 'filter', 'extra'):
            value = getattr(self, name)
            if not isinstance(value, abc.Mapping):
                raise TypeError(
                    f'{name} must be a mapping, got {type(value).__name__}'
                )

    @classmethod
    def coerce(
        cls, options: Union['RequestOptions', Mapping[str, Any], None]
    ) -> 'RequestOptions':
        """Accept None, a RequestOptions or a plain mapping.

        Keys of a mapping that are not recognized end up in ``extra`` in
        the order they were supplied.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, abc.Mapping):
            raise TypeError(
                f'options must be a mapping or RequestOptions, got '
                f'{type(options).__name__}'
            )
        extra = {k: v for k, v in options.items() if k not in _RECOGNIZED}
        return cls(
            page=options.get('page'),
            per_page=options.get('per_page'),
            sort=options.get('sort'),
            query=options.get('query') or {},
            filter=options.get('filter') or {},
            extra=extra,
        )

    def with_page(self, page: int) -> 'RequestOptions':
        return RequestOptions(
            page=page,
            per_page=self.per_page,
            sort=self.sort,
            query=self.query,
            filter=self.filter,
            extra=self.extra,
        )

    def params(self) -> List[Tuple[str, str]]:
        """Query parameters in their canonical order.

        page, per_page and sort come first, followed by query, filter and
        extra entries in insertion order. Pass-through keys keep the order
        they were supplied within each group, but query entries always
        precede filter entries, which precede extra keys. None values are
        dropped.
        """
        pairs = [
            ('page', self.page),
            ('per_page', self.per_page),
            ('sort', self.sort),
        ]
        for mapping in (self.query, self.filter, self.extra):
            pairs.extend(mapping.items())
        return [(str(k), _stringify(v)) for k, v in pairs if v is not None]


def _stringify(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def quote_segment(value):
    return quote(str(value), safe='')


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def build_url(
    base_url: str,
    account_id: Union[str, int],
    resource_path: str,
    resource_id: Union[str, int, None] = None,
    options: Union[RequestOptions, Dict[str, Any], None] = None,
) -> str:
    """Compose the full request URL.

    Raises ValueError when ``account_id`` is missing or blank. A
    ``resource_id`` of 0 is a valid identifier and is kept.
    """
    if _is_blank(account_id):
        raise ValueError('account_id is required')

    url = (
        f'{base_url.rstrip("/")}/{API_VERSION}/{quote_segment(account_id)}'
        f'{resource_path}'
    )
    if resource_id is not None:
        if _is_blank(resource_id):
            raise ValueError('resource_id must not be blank')
        url = f'{url}/{quote_segment(resource_id)}'

    params = RequestOptions.coerce(options).params()
    if params:
        url = f'{url}?{urlencode(params, quote_via=quote)}'
    return url
