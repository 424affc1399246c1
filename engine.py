"""
Document engine: XML parsing, serialization and XPath evaluation on top of
lxml, with lxml's XPath results translated into `results` nodes.
"""
from io import BytesIO

from lxml import etree as lxml_etree
from ordered_set import OrderedSet as oSet

import util
from errors import InputError, NamespaceRegistrationError, EvaluationError
from results import Element, Text, NamespaceDeclaration, Value


def parse_file(path):
    try:
        return lxml_etree.parse(path)

    except lxml_etree.XMLSyntaxError as e:
        raise InputError('unable to parse file "%s"' % path, detail=str(e))

    except (IOError, OSError) as e:
        raise InputError('unable to read file "%s"' % path, detail=str(e))


def parse_bytes(buf):
    try:
        return lxml_etree.parse(BytesIO(bytes(buf)))

    except lxml_etree.XMLSyntaxError as e:
        raise InputError("unable to parse input", detail=str(e))


def serialize(doc):
    return lxml_etree.tostring(doc, encoding='utf-8', xml_declaration=True, pretty_print=True).decode('utf-8')


def new_eval_context(doc):
    return EvalContext(doc)


class EvalContext:
    """
    XPath evaluation context bound to one parsed document.

    Namespaces must be registered before `evaluate` is called; use it as a
    context manager so the evaluator is dropped on every exit path.
    """

    def __init__(self, doc):
        self.doc = doc
        self.prefixes = oSet()
        self._evaluator = lxml_etree.XPathEvaluator(doc)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        self._evaluator = None
        self.doc = None

    def register_namespace(self, prefix, uri):
        if prefix == '' or uri == '':
            raise NamespaceRegistrationError('unable to register NS with prefix="%s" and href="%s"' % (prefix, uri),
                                             detail="empty prefix or namespace URL")
        if prefix in self.prefixes:
            raise NamespaceRegistrationError('unable to register NS with prefix="%s" and href="%s"' % (prefix, uri),
                                             detail="prefix '%s' is already registered" % prefix)
        try:
            self._evaluator.register_namespace(prefix, uri)
        except (TypeError, ValueError) as e:
            raise NamespaceRegistrationError('unable to register NS with prefix="%s" and href="%s"' % (prefix, uri),
                                             detail=str(e))
        self.prefixes.add(prefix)
        util.diag(2, 'DEBUG: registered namespace %s=%s' % (prefix, uri))

    def evaluate(self, expression):
        try:
            result = self._evaluator(expression)
            if not isinstance(result, list):
                return [Value(str(self._evaluator('string(%s)' % expression)))]

            # lxml leaves the document node out of node-set results
            offset = 1 if self._evaluator('boolean((%s)[not(..)])' % expression) else 0

            owners = {}
            for i, item in enumerate(result):
                if isinstance(item, tuple):
                    owners[i] = self._evaluator('(%s)[%d]/..' % (expression, i + 1 + offset))[0]

        except lxml_etree.XPathError as e:
            raise EvaluationError('unable to evaluate xpath expression "%s"' % expression, detail=str(e))

        util.diag(2, 'DEBUG: expression selected %d node(s)' % (len(result) + offset))
        if offset:
            result = [self.doc.getroot()] + result
            owners = {i + 1: owner for i, owner in owners.items()}
        return list(translate(result, owners))


def translate(items, owners=None):
    """
    translate lxml XPath result items into result nodes

    lxml returns namespace nodes as bare (prefix, href) tuples, `owners` maps
    the index of each of them to its element
    """
    owners = owners or {}

    for i, item in enumerate(items):
        if isinstance(item, tuple):
            prefix, href = item
            if i in owners:
                owner_href, owner_name = util.split_clark(owners[i].tag)
            else:
                owner_href, owner_name = None, ''
            yield NamespaceDeclaration(prefix or '', href, owner_name, owner_href)

        elif lxml_etree.iselement(item):
            if isinstance(item.tag, str):
                href, name = util.split_clark(item.tag)
                yield Element(name, href, [(util.split_clark(k)[1], v) for k, v in item.attrib.items()])
            else:
                # comment, processing instruction or entity reference
                yield Text(item.text or '')

        elif isinstance(item, str):
            yield Text(str(item))

        else:
            yield Value(str(item))
