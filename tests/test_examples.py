import unittest
import os
import sys
import shutil
import tempfile
from pathlib import Path

# Add src to path to allow imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from config_generator import find_example_files


class TestFindExampleFiles(unittest.TestCase):

    def setUp(self):
        self.root = Path(tempfile.mkdtemp())
        check_dir = self.root / "annotationlocation"
        check_dir.mkdir()
        for name in ["Example1.java", "Example12.java", "ExampleA.java",
                     "MyExample2.java", "Example3.java.bak", "Example4.txt"]:
            (check_dir / name).write_text("class Example {}\n", encoding="utf-8")
        nested = check_dir / "nested"
        nested.mkdir()
        (nested / "Example2.java").write_text("class Example2 {}\n", encoding="utf-8")
        # A directory with a matching name is not a file
        (check_dir / "Example9.java").mkdir()

    def tearDown(self):
        shutil.rmtree(self.root, ignore_errors=True)

    def test_only_numbered_example_sources_match(self):
        found = find_example_files(self.root)

        self.assertEqual(
            [path.relative_to(self.root).as_posix() for path in found],
            [
                "annotationlocation/Example1.java",
                "annotationlocation/Example12.java",
                "annotationlocation/nested/Example2.java",
            ]
        )

    def test_missing_directory_returns_empty_list(self):
        with self.assertLogs('config_generator.examples', level='WARNING'):
            self.assertEqual(find_example_files(self.root / "missing"), [])


if __name__ == '__main__':
    unittest.main()
