"""
Parser for the flat namespace list given with -n, e.g. "a=urn:a b=urn:b".

Entries are separated by runs of the space character only. Each entry is
prefix=href, the prefix ends at the first '=' and the href at the next space
or the end of the string. Nothing is validated beyond the presence of '=',
so empty prefixes or hrefs pass through to registration.
"""
from collections import namedtuple

from errors import NamespaceFormatError

NamespaceBinding = namedtuple('NamespaceBinding', ['prefix', 'uri'])


def parse(ns_list):
    bindings = []
    pos = 0
    end = len(ns_list)

    while True:
        while pos < end and ns_list[pos] == ' ':
            pos += 1
        if pos == end:
            break

        eq = ns_list.find('=', pos)
        if eq < 0:
            raise NamespaceFormatError("invalid namespaces list format", detail=ns_list[pos:])
        prefix = ns_list[pos:eq]

        space = ns_list.find(' ', eq + 1)
        if space < 0:
            bindings.append(NamespaceBinding(prefix, ns_list[eq + 1:]))
            break
        bindings.append(NamespaceBinding(prefix, ns_list[eq + 1:space]))
        pos = space + 1

    return bindings
