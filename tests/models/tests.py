from brake.models import (
    ErrorEntry, KeyValuePair, Notice, RequestContext, ServerEnvironment,
    to_pairs)
from brake.utils.testutils import TestCase


class KeyValuePairTest(TestCase):
    def test_equality_is_by_value(self):
        assert KeyValuePair('key1', 'value1') == KeyValuePair('key1', 'value1')
        assert KeyValuePair('key1', 'value1') != KeyValuePair('key1', 'value2')


class ToPairsTest(TestCase):
    def test_mapping_keeps_order(self):
        pairs = to_pairs({'key1': 'value1', 'key2': 'value2'})
        self.assertEqual(pairs, [
            KeyValuePair('key1', 'value1'),
            KeyValuePair('key2', 'value2'),
        ])

    def test_pairs_keep_duplicate_keys(self):
        pairs = to_pairs([('Accept', 'text/xml'), ('Accept', 'text/html')])
        self.assertEqual(pairs, [
            KeyValuePair('Accept', 'text/xml'),
            KeyValuePair('Accept', 'text/html'),
        ])

    def test_values_are_coerced_to_text(self):
        pairs = to_pairs({'port': 8080, 'debug': None})
        self.assertEqual(pairs, [
            KeyValuePair('port', '8080'),
            KeyValuePair('debug', ''),
        ])

    def test_empty(self):
        assert to_pairs(None) == []
        assert to_pairs({}) == []


class NoticeTest(TestCase):
    def test_defaults(self):
        notice = Notice()
        assert notice.api_key == ''
        assert notice.errors == []
        assert notice.request == RequestContext()
        assert notice.server_environment == ServerEnvironment()

    def test_equality(self):
        error = ErrorEntry('ValueError', 'ValueError: foo')
        assert Notice(api_key='a', errors=[error]) == Notice(api_key='a', errors=[error])
        assert Notice(api_key='a') != Notice(api_key='b')
        assert Notice() != object()

    def test_repr_uses_first_error(self):
        notice = Notice(errors=[ErrorEntry('ValueError', 'ValueError: foo')])
        assert repr(notice) == '<Notice: ValueError: foo>'
