"""
Test decoder.py.
"""
import unittest

from httpsprof.common import *
from httpsprof.decoder import *

RESPONSE = 'HTTP/1.1 200 OK\r\n'\
           'Content-Type: text/html\r\n'\
           'Connection: close\r\n'\
           '\r\n'\
           '<html>\r\n'\
           '<body>hi</body>\r\n'\
           '</html>'


class TestDecode(unittest.TestCase):
    def test_splits_header_and_body(self):
        response = decode(RESPONSE)
        self.assertEqual(response.header_lines, [
            'HTTP/1.1 200 OK',
            'Content-Type: text/html',
            'Connection: close',
        ])
        self.assertEqual(response.body,
                         '<html>\r\n<body>hi</body>\r\n</html>')

    def test_reconstructs_original(self):
        response = decode(RESPONSE)
        lines = response.header_lines + [''] + [response.body]
        self.assertEqual(LINE_TERMINATOR.join(lines), RESPONSE)

    def test_first_line_only(self):
        response = decode(RESPONSE, first_line_only=True)
        self.assertEqual(response.body, '<html>')
        lines = response.header_lines + [''] + [response.body]
        self.assertTrue(RESPONSE.startswith(LINE_TERMINATOR.join(lines)))

    def test_empty_body(self):
        response = decode('HTTP/1.0 204 No Content\r\n\r\n')
        self.assertEqual(response.header_lines, ['HTTP/1.0 204 No Content'])
        self.assertEqual(response.body, '')

    def test_first_blank_line_is_the_separator(self):
        response = decode('HTTP/1.0 200 OK\r\n\r\na\r\n\r\nb')
        self.assertEqual(response.header_lines, ['HTTP/1.0 200 OK'])
        self.assertEqual(response.body, 'a\r\n\r\nb')

    def test_no_header_lines(self):
        response = decode('\r\nbody')
        self.assertEqual(response.header_lines, [])
        self.assertEqual(response.body, 'body')

    def test_missing_separator(self):
        for raw in ['', 'HTTP/1.0 200 OK', 'HTTP/1.0 200 OK\r\n',
                    'HTTP/1.0 200 OK\r\nServer: x\r\n',
                    'HTTP/1.0 200 OK\n\nbody']:
            with self.assertRaises(ParseError) as cm:
                decode(raw)
            self.assertEqual(cm.exception.raw, raw)


class TestFindSeparator(unittest.TestCase):
    def test_find_separator(self):
        self.assertEqual(find_separator(['a', '', 'b']), 1)
        self.assertEqual(find_separator(['', '']), 0)
        self.assertEqual(find_separator(['a', 'b']), -1)
        self.assertEqual(find_separator(['a', '']), -1)
        self.assertEqual(find_separator(['']), -1)
