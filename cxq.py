#!/usr/bin/env python

import sys
import argparse

from attrdict import AttrDict

import util
import engine
import nslist
from errors import CXQError, ArgumentError, NamespaceFormatError, NamespaceRegistrationError, EvaluationError
from results import format_nodes

STRING_BUFFER_SIZE = 256

usage_text = """cxq - commandline tool for running XPath queries on XML data

Usage: cxq [-h] [-f <xml file path>] [-x <xpath expression>] [-n <namespace list>] [-v]

If xml file path arg (-f) is missing, then XML data is expected on stdin.
If xpath expression arg (-x) is missing, the whole document is pretty printed.

Example:

$ echo '<apn user="test"/>' | cxq -x /apn/@user
test

Command options:
    -h          Show this help
    -f          XML file path
    -x          XPath expression
    -n          Namespaces to register, e.g. "a=urn:a b=urn:b"
    -v          Verbose diagnostics on stderr, repeat for more"""

defaults = AttrDict({
    'file': None,
    'xpath': None,
    'namespaces': None,
    'verbose': 0,
    'stdin': None,
    'out_xml': None,
    'out_diag': None,
})


class UsageParser(argparse.ArgumentParser):

    def error(self, message):
        raise ArgumentError(message)


def build_parser():
    parser = UsageParser(prog='cxq', add_help=False)
    parser.add_argument('-h', dest='help', action='store_true')
    parser.add_argument('-f', dest='file', metavar='<file>')
    parser.add_argument('-x', dest='xpath', metavar='<xpath-expr>')
    parser.add_argument('-n', dest='namespaces', metavar='<ns-list>')
    parser.add_argument('-v', dest='verbose', action='count', default=0)
    return parser


def read_stream(stream):
    """
    drain a stream into a single buffer, reading it in bounded chunks
    :rtype : bytes
    """
    buf = bytearray()
    while True:
        chunk = stream.read(STRING_BUFFER_SIZE)
        if not chunk:
            break
        buf.extend(chunk.encode('utf-8') if isinstance(chunk, str) else chunk)
    return bytes(buf)


def load_document(file_path=None, stream=None):
    if file_path is not None:
        util.diag(1, "PROGRESS: parsing file '%s'" % file_path)
        return engine.parse_file(file_path)

    if stream is None:
        stream = getattr(sys.stdin, 'buffer', sys.stdin)
    util.diag(1, "PROGRESS: reading XML data from stdin")
    buf = read_stream(stream)
    util.diag(2, "DEBUG: read %d byte(s) from stdin" % len(buf))
    return engine.parse_bytes(buf)


def query(doc, expression, ns_list=None):
    """
    evaluate `expression` against `doc` after registering the namespaces in `ns_list`
    :rtype : list of display lines
    """
    with engine.new_eval_context(doc) as ctx:
        if ns_list is not None:
            util.diag(1, "PROGRESS: registering namespaces '%s'" % ns_list)
            for binding in nslist.parse(ns_list):
                ctx.register_namespace(binding.prefix, binding.uri)

        util.diag(1, "PROGRESS: evaluating '%s'" % expression)
        return format_nodes(ctx.evaluate(expression))


def process(options):
    """
    run one invocation: pretty print the document, or print the lines of an XPath query
    errors are reported on out_diag and re-raised as CXQError
    :rtype : None
    """
    args = defaults + options
    util.set_verbosity(args.verbose)

    out_diag = sys.stderr if args.out_diag is None else args.out_diag
    out_xml = sys.stdout if args.out_xml is None else args.out_xml

    try:
        doc = load_document(args.file, args.stdin)

        if args.xpath is None:
            out_xml.write(engine.serialize(doc))
            return

        for line in query(doc, args.xpath, args.namespaces):
            print(line, file=out_xml)

    except CXQError as e:
        print("CXQ ERROR: %s" % e.message, file=out_diag)
        if e.detail:
            print("MESSAGE: %s" % e.detail, file=out_diag)
        if isinstance(e, (NamespaceFormatError, NamespaceRegistrationError)):
            print('CXQ ERROR: failed to register namespaces list "%s"' % args.namespaces, file=out_diag)
        if isinstance(e, (NamespaceFormatError, NamespaceRegistrationError, EvaluationError)):
            print(usage_text, file=out_diag)
        raise


def main(argv=None):
    try:
        options = build_parser().parse_args(argv)
    except ArgumentError as e:
        print("CXQ ERROR: %s" % e.message, file=sys.stderr)
        print(usage_text, file=sys.stderr)
        return 1

    if options.help:
        print(usage_text, file=sys.stderr)
        return 0

    try:
        process(vars(options))
    except CXQError:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
