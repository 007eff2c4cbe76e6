"""
brake.serializer
~~~~~~~~~~~~~~~~

Renders notices into the notifier API's XML document and reads them back.

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
from xml.etree import ElementTree
from xml.etree.ElementTree import Element, ParseError, SubElement

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as SafeElementTree

from brake.conf import defaults
from brake.models import (
    BacktraceLine, ErrorEntry, KeyValuePair, Notice, Notifier,
    RequestContext, ServerEnvironment)
from brake.utils.encoding import to_xml_text

__all__ = ('to_xml', 'from_xml', 'parse_response', 'clean')

logger = logging.getLogger('brake.errors.serializer')

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _text(parent, tag, value):
    element = SubElement(parent, tag)
    element.text = to_xml_text(value)
    return element


def _vars(parent, tag, pairs):
    element = SubElement(parent, tag)
    for pair in pairs:
        var = SubElement(element, 'var', key=to_xml_text(pair.key))
        var.text = to_xml_text(pair.value)
    return element


def clean(element):
    """
    Removes blank attributes, and then every descendant of ``element`` left
    with no text, no attributes and no children.
    """
    for key in [k for k, v in element.attrib.items() if not v]:
        del element.attrib[key]
    if element.text == '':
        element.text = None

    for child in list(element):
        clean(child)
        if child.text is None and not child.attrib and len(child) == 0:
            element.remove(child)
    return element


def build_document(notice):
    """
    Returns the ``<notice>`` element for ``notice``, children in schema
    order.
    """
    root = Element('notice', version=defaults.NOTICE_VERSION)
    _text(root, 'api-key', notice.api_key)

    notifier = SubElement(root, 'notifier')
    _text(notifier, 'name', notice.notifier.name)
    _text(notifier, 'version', notice.notifier.version)
    _text(notifier, 'url', notice.notifier.url)

    for error in notice.errors:
        element = SubElement(root, 'error')
        _text(element, 'class', error.type)
        _text(element, 'message', error.message)
        backtrace = SubElement(element, 'backtrace')
        for line in error.backtrace:
            SubElement(backtrace, 'line', {
                'file': to_xml_text(line.file),
                'number': to_xml_text(line.number),
                'method': to_xml_text(line.method),
            })

    request = SubElement(root, 'request')
    _text(request, 'url', notice.request.url)
    _text(request, 'component', notice.request.component)
    _text(request, 'action', notice.request.action)
    _vars(request, 'params', notice.request.params)
    _vars(request, 'session', notice.request.session)
    _vars(request, 'cgi-data', notice.request.cgi_data)

    environment = SubElement(root, 'server-environment')
    _text(environment, 'project-root', notice.server_environment.project_root)
    _text(environment, 'environment-name',
          notice.server_environment.environment_name)
    _text(environment, 'app-version', notice.server_environment.app_version)
    _text(environment, 'hostname', notice.server_environment.hostname)

    return clean(root)


def to_xml(notice):
    """
    Serializes ``notice`` into an XML document (text). Empty fields are left
    out.
    """
    return XML_DECLARATION + ElementTree.tostring(
        build_document(notice), encoding='unicode')


def _findtext(element, path):
    if element is None:
        return ''
    return element.findtext(path) or ''


def _read_vars(element):
    if element is None:
        return []
    return [KeyValuePair(var.get('key', ''), var.text or '')
            for var in element.findall('var')]


def from_xml(document):
    """
    Parses a notice document back into a :class:`~brake.models.Notice`.
    Missing elements come back as empty strings or empty lists.
    """
    if isinstance(document, str):
        document = document.encode('utf-8')
    root = SafeElementTree.fromstring(document)

    notifier = root.find('notifier')
    request = root.find('request')
    environment = root.find('server-environment')

    errors = []
    for error in root.findall('error'):
        errors.append(ErrorEntry(
            type=_findtext(error, 'class'),
            message=_findtext(error, 'message'),
            backtrace=[
                BacktraceLine(line.get('file', ''), line.get('number', ''),
                              line.get('method', ''))
                for line in error.findall('backtrace/line')],
        ))

    return Notice(
        api_key=_findtext(root, 'api-key'),
        notifier=Notifier(
            name=_findtext(notifier, 'name'),
            version=_findtext(notifier, 'version'),
            url=_findtext(notifier, 'url'),
        ),
        errors=errors,
        request=RequestContext(
            url=_findtext(request, 'url'),
            component=_findtext(request, 'component'),
            action=_findtext(request, 'action'),
            params=_read_vars(None if request is None else request.find('params')),
            session=_read_vars(None if request is None else request.find('session')),
            cgi_data=_read_vars(None if request is None else request.find('cgi-data')),
        ),
        server_environment=ServerEnvironment(
            project_root=_findtext(environment, 'project-root'),
            environment_name=_findtext(environment, 'environment-name'),
            app_version=_findtext(environment, 'app-version'),
            hostname=_findtext(environment, 'hostname'),
        ),
    )


def parse_response(body):
    """
    Reads the service's reply, e.g. ``<notice><id>1</id><url>...</url></notice>``,
    into a dict of its top-level fields. Anything unreadable gives ``{}``.
    """
    if not body:
        return {}
    if isinstance(body, str):
        body = body.encode('utf-8')
    try:
        root = SafeElementTree.fromstring(body)
    except (ParseError, DefusedXmlException, ValueError) as e:
        logger.debug('Unable to parse response body: %s', e)
        return {}
    return dict((child.tag, (child.text or '').strip()) for child in root)
