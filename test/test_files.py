__author__ = 'mscalora'

import unittest

from utils4test import *

env = scratch_env()


class TestFromCommandLine(unittest.TestCase):

    def test_file_not_found(self):
        env.clear()
        result = run_cxq(env, '-f', 'test/test-data/does-not-exist.xml', expect_error=True)
        self.assertNotEqual(result.returncode, 0)
        self.assertRegex(result.stderr, r'^CXQ ERROR: unable to read file "test/test-data/does-not-exist.xml"')

    def test_parse_error(self):
        env.clear()
        result = run_cxq(env, '-f', data_file('broken.xml'), expect_error=True)
        self.assertNotEqual(result.returncode, 0)
        self.assertRegex(result.stderr, r'^CXQ ERROR: unable to parse file')
        self.assertEqual(result.stdout, '')

    def test_malformed_stdin(self):
        env.clear()
        result = run_cxq(env, stdin=b'<apn user="test">', expect_error=True)
        self.assertNotEqual(result.returncode, 0)
        self.assertRegex(result.stderr, r'^CXQ ERROR: unable to parse input')
        self.assertEqual(result.stdout, '')

    def test_empty_stdin(self):
        env.clear()
        result = run_cxq(env, '-x', '/', stdin=b'', expect_error=True)
        self.assertNotEqual(result.returncode, 0)
        self.assertIn('CXQ ERROR', result.stderr)

    def test_bad_namespace_list(self):
        env.clear()
        result = run_cxq(env, '-n', 'bogus', '-x', '/', stdin=APN_XML, expect_error=True)
        self.assertNotEqual(result.returncode, 0)
        self.assertIn('invalid namespaces list format', result.stderr)
        self.assertIn('failed to register namespaces list "bogus"', result.stderr)
        self.assertIn('Usage: cxq', result.stderr)

    def test_duplicate_prefix(self):
        env.clear()
        result = run_cxq(env, '-n', 'a=urn:a a=urn:b', '-x', '/', stdin=APN_XML, expect_error=True)
        self.assertNotEqual(result.returncode, 0)
        self.assertIn('unable to register NS with prefix="a" and href="urn:b"', result.stderr)

    def test_bad_expression(self):
        env.clear()
        result = run_cxq(env, '-x', '/apn[', stdin=APN_XML, expect_error=True)
        self.assertNotEqual(result.returncode, 0)
        self.assertIn('unable to evaluate xpath expression "/apn["', result.stderr)
        self.assertEqual(result.stdout, '')

    def test_unknown_option(self):
        env.clear()
        result = run_cxq(env, '-q', expect_error=True)
        self.assertNotEqual(result.returncode, 0)
        self.assertIn('Usage: cxq', result.stderr)

    def test_missing_option_value(self):
        env.clear()
        result = run_cxq(env, '-x', expect_error=True)
        self.assertNotEqual(result.returncode, 0)
        self.assertIn('Usage: cxq', result.stderr)


if __name__ == '__main__':
    unittest.main()
