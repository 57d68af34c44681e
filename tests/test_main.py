import unittest
import io, os, tempfile
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

from texpand import __main__ as cli, expander

class TestCommandLine(unittest.TestCase):
	def setUp(self) -> None:
		self.folder = tempfile.TemporaryDirectory()
		self.addCleanup(self.folder.cleanup)

	def tearDown(self) -> None:
		expander.VERBOSE = False

	def write(self, name, content):
		path = os.path.join(self.folder.name, name)
		with open(path, 'w') as fh: fh.write(content)
		return path

	def run_cli(self, *argv):
		out, err = io.StringIO(), io.StringIO()
		with redirect_stdout(out), redirect_stderr(err):
			status = cli.main(cli.parse_arguments(list(argv)))
		return status, out.getvalue(), err.getvalue()

	def test_success(self):
		path = self.write('hello.tex', '\\def{N}{World}% who to greet\nHello, \\N{}!\n')
		self.assertEqual((0, '\nHello, World!\n', ''), self.run_cli(path))

	def test_failure_is_all_or_nothing(self):
		path = self.write('bad.tex', 'plenty of fine text\n\\undef{Nope}\nand more')
		status, out, err = self.run_cli(path)
		self.assertEqual(1, status)
		self.assertEqual('', out)
		self.assertEqual(1, err.count('Error while'))
		self.assertTrue(err.startswith('Error while expanding: UnknownMacroError'))
		self.assertIn('Excerpt from '+path, err)

	def test_missing_source(self):
		status, out, err = self.run_cli(os.path.join(self.folder.name, 'absent.tex'))
		self.assertEqual(1, status)
		self.assertEqual('', out)
		self.assertTrue(err.startswith('Error while reading input: MissingFileError'))

	def test_sources_share_one_pass(self):
		first = self.write('a.tex', '\\def{A}{x}')
		second = self.write('b.tex', '[\\A{}]')
		self.assertEqual((0, '[x]', ''), self.run_cli(first, second))

	def test_standard_input(self):
		with mock.patch('sys.stdin', io.StringIO('\\if{}{no}{yes} % comment\n')):
			self.assertEqual((0, 'yes\n', ''), self.run_cli())

	def test_include_relative_to_working_directory(self):
		self.write('part.tex', 'part')
		main = self.write('main.tex', '<\\include{part.tex}>')
		previous = os.getcwd()
		os.chdir(self.folder.name)
		self.addCleanup(os.chdir, previous)
		self.assertEqual((0, '<part>', ''), self.run_cli(main))

	def test_max_depth(self):
		path = self.write('loop.tex', '\\def{loop}{\\loop{#}}\\loop{x}')
		status, out, err = self.run_cli('--max-depth', '5', path)
		self.assertEqual((1, ''), (status, out))
		self.assertIn('ResourceLimitError', err)
		self.assertIn('more level(s) of expansion', err)

	def test_verbose(self):
		path = self.write('v.tex', '\\def{A}{1}\\undef{A}done')
		status, out, err = self.run_cli('-v', path)
		self.assertEqual((0, 'done'), (status, out))
		self.assertEqual(['Defined \\A', 'Undefined \\A'], err.splitlines())


if __name__ == '__main__':
	unittest.main()
