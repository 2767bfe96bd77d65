from rook.utils import get_auth_header, merge_dicts
from rook.utils.encoding import exception_message, to_unicode
from rook.utils.testutils import TestCase


class BrokenStr(object):
    def __str__(self):
        raise RuntimeError('nope')


class UtilsTest(TestCase):
    def test_merge_dicts(self):
        assert merge_dicts({'a': 1}, None, {'b': 2}, {'a': 3}) == {'a': 3, 'b': 2}

    def test_auth_header(self):
        header = get_auth_header(protocol=7, timestamp=1, client='c', api_key='key')
        assert header == 'Sentry sentry_timestamp=1, sentry_client=c, sentry_version=7, sentry_key=key'

    def test_auth_header_with_secret(self):
        header = get_auth_header(protocol=7, timestamp=1, client='c',
                                 api_key='key', api_secret='secret')
        assert header.endswith(', sentry_secret=secret')


class EncodingTest(TestCase):
    def test_to_unicode(self):
        assert to_unicode(b'caf\xc3\xa9') == u'caf\xe9'
        assert to_unicode(42) == '42'
        assert to_unicode(BrokenStr()) == repr(BrokenStr)

    def test_exception_message(self):
        assert exception_message(ValueError('foo')) == 'foo'
        assert exception_message(KeyError()) == 'KeyError'
