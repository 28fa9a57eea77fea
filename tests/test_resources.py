#
# Tests for the generic resource bindings, nested paths and paging helpers
#

from unittest import TestCase
from unittest.mock import Mock

import responses

from octodns_dnsimple_api import Dnsimple, DnsimpleClient
from octodns_dnsimple_api.envelope import (
    COLLECTION,
    EMPTY,
    SINGLE,
    CollectionResult,
    Pagination,
)
from octodns_dnsimple_api.resources import (
    RESOURCES,
    Contacts,
    Domains,
    Templates,
    TemplateRecords,
    ZoneRecords,
    Zones,
)

BASE = 'https://api.dnsimple.com/v2/1010'


def _page(data, current_page, total_pages):
    return {
        'data': data,
        'pagination': {
            'current_page': current_page,
            'per_page': len(data),
            'total_entries': 99,
            'total_pages': total_pages,
        },
    }


class TestResourceBinding(TestCase):
    def setUp(self):
        self.client = Mock(wraps=DnsimpleClient('token'))
        self.client.request = Mock(return_value='result')

    def test_list(self):
        ret = Templates(self.client).list('1010', options={'page': 2})
        self.assertEqual('result', ret)
        self.client.request.assert_called_once_with(
            'GET', f'{BASE}/templates?page=2', COLLECTION
        )

    def test_get(self):
        Templates(self.client).get('1010', 'alpha')
        self.client.request.assert_called_once_with(
            'GET', f'{BASE}/templates/alpha', SINGLE
        )

    def test_create(self):
        Templates(self.client).create('1010', {'name': 'Beta'})
        self.client.request.assert_called_once_with(
            'POST', f'{BASE}/templates', SINGLE, {'name': 'Beta'}
        )

    def test_update(self):
        Templates(self.client).update('1010', 1, {'name': 'Alpha'})
        self.client.request.assert_called_once_with(
            'PATCH', f'{BASE}/templates/1', SINGLE, {'name': 'Alpha'}
        )

    def test_delete(self):
        Templates(self.client).delete('1010', 1)
        self.client.request.assert_called_once_with(
            'DELETE', f'{BASE}/templates/1', EMPTY
        )

    def test_named_aliases(self):
        templates = Templates(self.client)
        templates.list_templates('1010')
        templates.get_template('1010', 1)
        templates.create_template('1010', {})
        templates.update_template('1010', 1, {})
        templates.delete_template('1010', 1)
        self.assertEqual(
            ['GET', 'GET', 'POST', 'PATCH', 'DELETE'],
            [c.args[0] for c in self.client.request.call_args_list],
        )

    def test_nested_paths(self):
        TemplateRecords(self.client).list('1010', 'alpha')
        TemplateRecords(self.client).get('1010', 'alpha', 301)
        TemplateRecords(self.client).create('1010', 'alpha', {'type': 'A'})
        TemplateRecords(self.client).delete('1010', 'alpha', 301)
        ZoneRecords(self.client).update('1010', 'example.com', 5, {'ttl': 60})
        self.assertEqual(
            [
                f'{BASE}/templates/alpha/records',
                f'{BASE}/templates/alpha/records/301',
                f'{BASE}/templates/alpha/records',
                f'{BASE}/templates/alpha/records/301',
                f'{BASE}/zones/example.com/records/5',
            ],
            [c.args[1] for c in self.client.request.call_args_list],
        )

    def test_parent_ids_are_escaped(self):
        TemplateRecords(self.client).list('1010', 'a/b')
        self.client.request.assert_called_once_with(
            'GET', f'{BASE}/templates/a%2Fb/records', COLLECTION
        )

    def test_identifier_count_is_checked(self):
        records = TemplateRecords(self.client)
        with self.assertRaises(ValueError) as ctx:
            records.list('1010')
        self.assertIn('expects 1 identifier(s), got 0', str(ctx.exception))
        with self.assertRaises(ValueError):
            records.get('1010', 'alpha')
        with self.assertRaises(ValueError):
            Templates(self.client).delete('1010')
        with self.assertRaises(ValueError):
            Templates(self.client).update('1010', {'name': 'x'})
        with self.assertRaises(ValueError):
            Templates(self.client).update('1010')
        self.client.request.assert_not_called()

    def test_blank_identifiers(self):
        with self.assertRaises(ValueError):
            Templates(self.client).get('1010', '')
        with self.assertRaises(ValueError):
            TemplateRecords(self.client).list('1010', None)
        self.client.request.assert_not_called()

    def test_zero_is_a_valid_identifier(self):
        Templates(self.client).get('1010', 0)
        self.client.request.assert_called_once_with(
            'GET', f'{BASE}/templates/0', SINGLE
        )

    def test_unsupported_operations(self):
        with self.assertRaises(NotImplementedError) as ctx:
            Zones(self.client).delete('1010', 'example.com')
        self.assertEqual('Zones does not support delete', str(ctx.exception))
        with self.assertRaises(NotImplementedError):
            Zones(self.client).create('1010', {'name': 'example.com'})
        with self.assertRaises(NotImplementedError):
            Domains(self.client).update('1010', 1, {})
        with self.assertRaises(NotImplementedError):
            TemplateRecords(self.client).update('1010', 'alpha', 1, {})
        self.client.request.assert_not_called()

    def test_supports(self):
        self.assertEqual(
            set(('list', 'get', 'create', 'update', 'delete')),
            Contacts.SUPPORTS,
        )
        self.assertEqual(set(('list', 'get')), Zones.SUPPORTS)


class TestIterate(TestCase):
    def _result(self, ids, current_page, total_pages):
        return CollectionResult(
            [{'id': i} for i in ids],
            Pagination(
                current_page=current_page,
                per_page=2,
                total_entries=5,
                total_pages=total_pages,
            ),
        )

    def test_follows_pages(self):
        client = Mock()
        client.url = DnsimpleClient('token').url
        client.request.side_effect = [
            self._result([1, 2], 1, 3),
            self._result([3, 4], 2, 3),
            self._result([5], 3, 3),
        ]
        domains = Domains(client)
        self.assertEqual(
            [1, 2, 3, 4, 5],
            [d['id'] for d in domains.iterate('1010', options={'per_page': 2})],
        )
        self.assertEqual(
            [
                f'{BASE}/domains?page=1&per_page=2',
                f'{BASE}/domains?page=2&per_page=2',
                f'{BASE}/domains?page=3&per_page=2',
            ],
            [c.args[1] for c in client.request.call_args_list],
        )

    def test_starts_at_requested_page(self):
        client = Mock()
        client.url = DnsimpleClient('token').url
        client.request.side_effect = [self._result([5], 3, 3)]
        self.assertEqual(
            [{'id': 5}], Domains(client).all('1010', options={'page': 3})
        )
        self.assertEqual(
            f'{BASE}/domains?page=3', client.request.call_args.args[1]
        )

    def test_empty_collection(self):
        client = Mock()
        client.url = DnsimpleClient('token').url
        client.request.side_effect = [self._result([], 1, 0)]
        self.assertEqual([], Domains(client).all_domains('1010'))
        self.assertEqual(1, client.request.call_count)

    def test_stops_when_server_ignores_page(self):
        client = Mock()
        client.url = DnsimpleClient('token').url
        # always answers with the first of two pages
        client.request.return_value = self._result([1], 1, 2)
        self.assertEqual([{'id': 1}], Domains(client).all('1010'))
        self.assertEqual(2, client.request.call_count)
        self.assertEqual(
            [f'{BASE}/domains?page=1', f'{BASE}/domains?page=2'],
            [c.args[1] for c in client.request.call_args_list],
        )

    def test_stale_start_page_yields_nothing(self):
        client = Mock()
        client.url = DnsimpleClient('token').url
        client.request.return_value = self._result([1], 1, 4)
        self.assertEqual(
            [], Domains(client).all('1010', options={'page': 3})
        )
        self.assertEqual(1, client.request.call_count)

    @responses.activate
    def test_over_http(self):
        url = f'{BASE}/zones/example.com/records'
        responses.add(
            responses.GET,
            f'{url}?page=1',
            json=_page([{'id': 1}, {'id': 2}], 1, 2),
        )
        responses.add(
            responses.GET, f'{url}?page=2', json=_page([{'id': 3}], 2, 2)
        )
        client = Dnsimple('token')
        records = client.zone_records.all_zone_records('1010', 'example.com')
        self.assertEqual([1, 2, 3], [r['id'] for r in records])
        self.assertEqual(2, len(responses.calls))


class TestDnsimple(TestCase):
    def test_exposes_resources(self):
        client = Dnsimple('token', 'test', sandbox=True)
        for name, cls in RESOURCES.items():
            self.assertIsInstance(getattr(client, name), cls)
            self.assertIs(client.client, getattr(client, name)._client)
        self.assertEqual(
            'https://api.sandbox.dnsimple.com', client.client.base_url
        )

    def test_passes_configuration(self):
        session = Mock()
        session.headers = {}
        client = Dnsimple('token', session=session, timeout=3)
        self.assertIs(session, client.client._session)
        self.assertEqual(3, client.client.timeout)
