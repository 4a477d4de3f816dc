"""
Tests of the yaml-to-json command line
"""

import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from yaml_to_json.cli import build_parser, main


class CliTest(unittest.TestCase):

    def _stdin(self, data):
        if isinstance(data, str):
            data = data.encode("utf-8")
        return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")

    def _run(self, argv, stdin=""):
        stdout, stderr = io.StringIO(), io.StringIO()
        code = 0
        with mock.patch("sys.stdin", self._stdin(stdin)), redirect_stdout(stdout), redirect_stderr(stderr):
            try:
                main(argv)
            except SystemExit as e:
                code = e.code
        return code, stdout.getvalue(), stderr.getvalue()

    def test_stdin_to_stdout(self):
        code, out, err = self._run([], "a: 1\nb: [x, 'y']\n")
        self.assertEqual(0, code)
        self.assertEqual('{ "a": 1, "b": [ x, "y" ] }\n', out)
        self.assertEqual("", err)

    def test_empty_input(self):
        self.assertEqual((0, "", ""), self._run([], ""))

    def test_input_file(self):
        fd, path = tempfile.mkstemp(suffix=".yaml")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write("- 1\n- two: 2\n---\n- []\n")
            code, out, _err = self._run([path])
        finally:
            os.remove(path)
        self.assertEqual(0, code)
        self.assertEqual('[ 1, { "two": 2 } ]\n[ [ ] ]\n', out)

    def test_missing_file(self):
        code, out, err = self._run(["does-not-exist.yaml"])
        self.assertEqual(1, code)
        self.assertEqual("", out)
        self.assertIn("yaml-to-json: File not found: does-not-exist.yaml", err)

    def test_canonical_option(self):
        code, out, _err = self._run(["-c"], "a: [1, 2]\n")
        self.assertEqual(0, code)
        self.assertEqual('{"a":[1,2]}\n', out)

    def test_unicode_option(self):
        _code, out, _err = self._run([], 'k: "\u00e4"\n')
        self.assertEqual('{ "k": "\\u00e4" }\n', out)
        _code, out, _err = self._run(["--unicode"], 'k: "\u00e4"\n')
        self.assertEqual('{ "k": "\u00e4" }\n', out)

    def test_raw_option(self):
        _code, out, _err = self._run(["--raw"], "- 'a\"b'\n")
        self.assertEqual('[ "a"b" ]\n', out)

    def test_strict_empty_option(self):
        code, _out, err = self._run(["--strict-empty"], "a:\n")
        self.assertEqual(1, code)
        self.assertIn("yaml-to-json: Scalar value is empty", err)

    def test_max_depth_option(self):
        code, _out, err = self._run(["--max-depth", "1"], "[[1]]\n")
        self.assertEqual(1, code)
        self.assertIn("maximum nesting depth of 1", err)

    def test_alias_fails(self):
        code, out, err = self._run([], "a: &x [1]\nb: *x\n")
        self.assertEqual(1, code)
        self.assertEqual('{ "a": [ 1 ], "b": ', out)
        self.assertIn("Event error: ALIAS is not supported. Expected MAPPING_START, SEQUENCE_START or SCALAR.", err)

    def test_bare_scalar_fails(self):
        code, _out, err = self._run([], "hello\n")
        self.assertEqual(1, code)
        self.assertIn("Expected SEQUENCE_START or MAPPING_START", err)

    def test_yaml_error(self):
        code, _out, err = self._run([], 'a: "open\n')
        self.assertEqual(1, code)
        self.assertTrue(err.startswith("yaml-to-json: YAML error: Scanner error: "), err)

    def test_undecodable_stdin(self):
        code, out, err = self._run([], b"a: \xff\n")
        self.assertEqual(1, code)
        self.assertEqual("", out)
        self.assertIn("yaml-to-json: YAML error: Reader error: invalid start byte: #FF at 3", err)

    def test_utf16_stdin(self):
        code, out, _err = self._run([], "k: \"\u00e4\"\n".encode("utf-16"))
        self.assertEqual(0, code)
        self.assertEqual('{ "k": "\\u00e4" }\n', out)

    def test_unencodable_output(self):
        stdout = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
        stderr = io.StringIO()
        with mock.patch("sys.stdin", self._stdin('- "\u00e4"\n')), mock.patch("sys.stdout", stdout), \
                redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as ctx:
                main(["-u"])
        self.assertEqual(1, ctx.exception.code)
        self.assertIn("yaml-to-json: Output encoding error: ", stderr.getvalue())

    def test_unknown_option(self):
        code, out, err = self._run(["--bogus"])
        self.assertEqual(1, code)
        self.assertEqual("", out)
        self.assertIn("unrecognized arguments: --bogus", err)

    def test_help(self):
        code, out, _err = self._run(["--help"])
        self.assertEqual(0, code)
        self.assertIn("--canonical", out)
        self.assertIn("--unicode", out)

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        self.assertEqual("-", args.input_file)
        self.assertFalse(args.canonical)
        self.assertFalse(args.unicode)
        self.assertFalse(args.raw)
        self.assertFalse(args.strict_empty)


if __name__ == "__main__":
    unittest.main()
