#
#
#

"""Declarative bindings for the API's resource families.

Each resource declares a PATH, whose ``{}`` placeholders are filled with
parent identifiers, and the set of operations it SUPPORTS. All request
building, dispatching and parsing is shared in Resource.
"""

from .envelope import COLLECTION, EMPTY, SINGLE
from .urls import RequestOptions, quote_segment


class Resource(object):
    PATH = None
    SUPPORTS = set(('list', 'get', 'create', 'update', 'delete'))

    def __init__(self, client):
        self._client = client

    @property
    def parents(self):
        return self.PATH.count('{}')

    def _check(self, operation, ids, expected):
        if operation not in self.SUPPORTS:
            raise NotImplementedError(
                f'{self.__class__.__name__} does not support {operation}'
            )
        if len(ids) != expected:
            raise ValueError(
                f'{self.__class__.__name__}.{operation} expects {expected} '
                f'identifier(s), got {len(ids)}'
            )
        for _id in ids:
            if _id is None or (isinstance(_id, str) and not _id.strip()):
                raise ValueError(
                    f'{self.__class__.__name__}.{operation}: identifiers '
                    'must not be blank'
                )

    def _path(self, parent_ids):
        return self.PATH.format(*(quote_segment(p) for p in parent_ids))

    def _url(self, account_id, parent_ids, resource_id=None, options=None):
        return self._client.url(
            account_id, self._path(parent_ids), resource_id, options
        )

    def list(self, account_id, *parent_ids, options=None):
        self._check('list', parent_ids, self.parents)
        url = self._url(account_id, parent_ids, options=options)
        return self._client.request('GET', url, COLLECTION)

    def get(self, account_id, *ids):
        self._check('get', ids, self.parents + 1)
        url = self._url(account_id, ids[:-1], ids[-1])
        return self._client.request('GET', url, SINGLE)

    def create(self, account_id, *args):
        if not args:
            raise ValueError(
                f'{self.__class__.__name__}.create requires attributes'
            )
        *parent_ids, attributes = args
        self._check('create', parent_ids, self.parents)
        url = self._url(account_id, parent_ids)
        return self._client.request('POST', url, SINGLE, attributes)

    def update(self, account_id, *args):
        if not args:
            raise ValueError(
                f'{self.__class__.__name__}.update requires attributes'
            )
        *ids, attributes = args
        self._check('update', ids, self.parents + 1)
        url = self._url(account_id, ids[:-1], ids[-1])
        return self._client.request('PATCH', url, SINGLE, attributes)

    def delete(self, account_id, *ids):
        self._check('delete', ids, self.parents + 1)
        url = self._url(account_id, ids[:-1], ids[-1])
        return self._client.request('DELETE', url, EMPTY)

    def iterate(self, account_id, *parent_ids, options=None):
        """Yield every entity, one list request per page.

        Starts at the page given in options, or 1, and stops once the
        server reports no further pages or answers with an earlier page
        than the one requested.
        """
        options = RequestOptions.coerce(options)
        page = options.page or 1
        while True:
            result = self.list(
                account_id, *parent_ids, options=options.with_page(page)
            )
            pagination = result.pagination
            # server ignored the requested page
            if pagination.current_page < page:
                break
            yield from result.data
            if pagination.current_page >= pagination.total_pages:
                break
            page = pagination.current_page + 1

    def all(self, account_id, *parent_ids, options=None):
        return list(self.iterate(account_id, *parent_ids, options=options))


class Templates(Resource):
    PATH = '/templates'

    list_templates = Resource.list
    get_template = Resource.get
    create_template = Resource.create
    update_template = Resource.update
    delete_template = Resource.delete
    all_templates = Resource.all


class TemplateRecords(Resource):
    PATH = '/templates/{}/records'
    SUPPORTS = set(('list', 'get', 'create', 'delete'))

    list_template_records = Resource.list
    get_template_record = Resource.get
    create_template_record = Resource.create
    delete_template_record = Resource.delete
    all_template_records = Resource.all


class Domains(Resource):
    PATH = '/domains'
    SUPPORTS = set(('list', 'get', 'create', 'delete'))

    list_domains = Resource.list
    get_domain = Resource.get
    create_domain = Resource.create
    delete_domain = Resource.delete
    all_domains = Resource.all


class Zones(Resource):
    PATH = '/zones'
    SUPPORTS = set(('list', 'get'))

    list_zones = Resource.list
    get_zone = Resource.get
    all_zones = Resource.all


class ZoneRecords(Resource):
    PATH = '/zones/{}/records'

    list_zone_records = Resource.list
    get_zone_record = Resource.get
    create_zone_record = Resource.create
    update_zone_record = Resource.update
    delete_zone_record = Resource.delete
    all_zone_records = Resource.all


class Contacts(Resource):
    PATH = '/contacts'

    list_contacts = Resource.list
    get_contact = Resource.get
    create_contact = Resource.create
    update_contact = Resource.update
    delete_contact = Resource.delete
    all_contacts = Resource.all


RESOURCES = {
    'templates': Templates,
    'template_records': TemplateRecords,
    'domains': Domains,
    'zones': Zones,
    'zone_records': ZoneRecords,
    'contacts': Contacts,
}
