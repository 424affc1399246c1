"""
Result nodes produced by an XPath evaluation and their display format.

One display line per node, in the order the engine returned them:

    namespace node   = namespace "p"="urn:p" for node urn:owner:name
    element in ns    = element node "urn:ns:name"
    plain element    <name a="1" b="2"/>
    text/attribute   the content, verbatim
    value            the XPath string value of a number, boolean or string

Attributes of namespaced elements are not shown, and nothing is escaped in
the single-tag serialization, so `<a t="x&quot;y"/>` prints as `<a t="x"y"/>`.
Selecting the document node itself, as `/` does, yields the root element.
"""


class ResultNode(object):
    kind = None

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, ', '.join('%s=%r' % it for it in sorted(self.__dict__.items())))


class Element(ResultNode):
    kind = 'element'

    def __init__(self, name, namespace_href=None, attributes=None):
        self.name = name
        self.namespace_href = namespace_href
        self.attributes = list(attributes) if attributes is not None else []


class Text(ResultNode):
    kind = 'text'

    def __init__(self, content):
        self.content = content


class NamespaceDeclaration(ResultNode):
    kind = 'namespace'

    def __init__(self, prefix, href, owner_name, owner_namespace_href=None):
        self.prefix = prefix
        self.href = href
        self.owner_name = owner_name
        self.owner_namespace_href = owner_namespace_href


class Value(ResultNode):
    kind = 'value'

    def __init__(self, value):
        self.value = value


def serialize_element(name, attributes):
    out = ['<', name]
    for attr_name, attr_value in attributes:
        out.append(' %s="%s"' % (attr_name, attr_value))
    out.append('/>')
    return ''.join(out)


def format_node(node):
    if node.kind == 'namespace':
        if node.owner_namespace_href:
            return '= namespace "%s"="%s" for node %s:%s' % (node.prefix, node.href, node.owner_namespace_href, node.owner_name)
        return '= namespace "%s"="%s" for node %s' % (node.prefix, node.href, node.owner_name)
    elif node.kind == 'element':
        if node.namespace_href:
            return '= element node "%s:%s"' % (node.namespace_href, node.name)
        return serialize_element(node.name, node.attributes)
    elif node.kind == 'text':
        return node.content
    elif node.kind == 'value':
        return node.value
    raise TypeError("unknown result node kind '%s'" % node.kind)


def format_nodes(nodes):
    return [format_node(node) for node in nodes]
