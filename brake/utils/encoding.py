"""
brake.utils.encoding
~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import re

# Characters XML 1.0 does not allow, even escaped
_invalid_xml_re = re.compile(
    '[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]')


def to_unicode(value):
    """
    Coerces ``value`` to text. ``None`` and values whose ``__str__`` blows up
    become an empty string.
    """
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode('utf-8', 'replace')
    try:
        return str(value)
    except Exception:
        return ''


def to_string(value):
    try:
        return to_unicode(value).encode('utf-8', 'replace').decode('utf-8')
    except Exception:
        return '(Error decoding value)'


def to_xml_text(value):
    return _invalid_xml_re.sub('', to_unicode(value))
