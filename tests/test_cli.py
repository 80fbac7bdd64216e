import unittest
import sys
import os
import tempfile

# Add src to path
sys.path.append(os.path.join(os.path.dirname(__file__), '../src'))

from typer.testing import CliRunner

from checkdoc.cli import app

runner = CliRunner()

DOCUMENTED = """package controllers

// @summary Get a user
// @description Get a user by id
// @tags users
// @accept json
// @produce json
// @router /users/{id} [get]
func GetUser() {}

func Init() {}
"""

PARTIAL = """package controllers

// @summary Create a user
// @router /users [post]
func PostUser() {}
"""


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = self.tmp.name

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, rel_path, content):
        path = os.path.join(self.root, rel_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)

    def test_passing_project(self):
        self.write("api/controllers/main.go", DOCUMENTED)
        result = runner.invoke(app, ["--path", self.root])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("All functions passed the comment check.", result.output)

    def test_failing_project(self):
        self.write("api/controllers/main.go", DOCUMENTED)
        self.write("posts/controllers/main.go", PARTIAL)
        result = runner.invoke(app, ["-p", self.root])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("The following functions failed the comment check:", result.output)
        self.assertIn("Function PostUser", result.output)
        self.assertIn("missing @description, @tags, @accept, @produce", result.output)
        self.assertIn("some functions failed the comment check", result.output)

    def test_parse_error(self):
        self.write("api/controllers/main.go", "package controllers\n\nfunc Broken( {\n")
        result = runner.invoke(app, ["--path", self.root])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error:", result.output)
        self.assertNotIn("failed the comment check", result.output)

    def test_missing_root(self):
        result = runner.invoke(app, ["--path", os.path.join(self.root, "missing")])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error:", result.output)

    def test_twice_same_exit_code(self):
        self.write("posts/controllers/main.go", PARTIAL)
        first = runner.invoke(app, ["--path", self.root])
        second = runner.invoke(app, ["--path", self.root])
        self.assertEqual(first.exit_code, second.exit_code)
        self.assertEqual(first.output, second.output)

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("check-doc 0.0.1", result.output)


if __name__ == '__main__':
    unittest.main()
