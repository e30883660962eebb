import importlib.util
import tempfile
import unittest
from pathlib import Path
from unittest import mock

_SCRIPT = Path(__file__).resolve().parent.parent / 'scripts' / 'bump_version.py'
_spec = importlib.util.spec_from_file_location('bump_version', _SCRIPT)
bump_version = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(bump_version)


class TestBumpVersion(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        root = Path(self._tmp.name)
        self.pyproject = root / 'pyproject.toml'
        self.init = root / '__init__.py'
        self.pyproject.write_text('[project]\nname = "puresig"\nversion = "1.2.3"\n')
        self.init.write_text('__version__ = "1.2.3"\n')
        patcher = mock.patch.multiple(bump_version, PYPROJECT=self.pyproject, PACKAGE_INIT=self.init)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_bump_types(self) -> None:
        self.assertEqual(bump_version.bump_version('1.2.3', 'major'), '2.0.0')
        self.assertEqual(bump_version.bump_version('1.2.3', 'minor'), '1.3.0')
        self.assertEqual(bump_version.bump_version('1.2.3', 'patch'), '1.2.4')
        with self.assertRaises(ValueError):
            bump_version.bump_version('1.2.3', 'micro')

    @mock.patch.dict('os.environ', {}, clear=True)
    def test_updates_both_files(self) -> None:
        self.assertEqual(bump_version.main(['minor']), 0)
        self.assertIn('version = "1.3.0"', self.pyproject.read_text())
        self.assertEqual(self.init.read_text(), '__version__ = "1.3.0"\n')

    @mock.patch.dict('os.environ', {}, clear=True)
    def test_dry_run_writes_nothing(self) -> None:
        self.assertEqual(bump_version.main(['patch', '--dry-run']), 0)
        self.assertIn('version = "1.2.3"', self.pyproject.read_text())
        self.assertEqual(self.init.read_text(), '__version__ = "1.2.3"\n')

    @mock.patch.dict('os.environ', {}, clear=True)
    def test_missing_package_version_leaves_pyproject_untouched(self) -> None:
        self.init.write_text('"""no version here"""\n')
        self.assertEqual(bump_version.main(['major']), 1)
        self.assertIn('version = "1.2.3"', self.pyproject.read_text())
        self.assertEqual(self.init.read_text(), '"""no version here"""\n')


if __name__ == '__main__':
    unittest.main(verbosity=2)
