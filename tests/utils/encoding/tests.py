# -*- coding: utf-8 -*-
from brake.utils.encoding import to_string, to_unicode, to_xml_text
from brake.utils.testutils import TestCase


class Unprintable(object):
    def __str__(self):
        raise RuntimeError('nope')


class ToUnicodeTest(TestCase):
    def test_none_is_empty(self):
        assert to_unicode(None) == ''

    def test_bytes_are_decoded(self):
        assert to_unicode('Zoë'.encode('utf-8')) == 'Zoë'

    def test_invalid_bytes_are_replaced(self):
        assert to_unicode(b'\xff') == '\ufffd'

    def test_objects_use_str(self):
        assert to_unicode(42) == '42'
        assert to_unicode(ValueError('foo')) == 'foo'

    def test_broken_str_is_empty(self):
        assert to_unicode(Unprintable()) == ''


class ToStringTest(TestCase):
    def test_lone_surrogates_are_replaced(self):
        assert to_string('a\ud800b') == 'a?b'


class ToXmlTextTest(TestCase):
    def test_strips_control_characters(self):
        assert to_xml_text('bad\x00by\x1bte') == 'badbyte'

    def test_keeps_whitespace(self):
        assert to_xml_text('a\tb\nc\rd') == 'a\tb\nc\rd'

    def test_keeps_non_ascii(self):
        assert to_xml_text('日本語') == '日本語'
