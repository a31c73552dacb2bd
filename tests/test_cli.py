import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

import pytest

from viewengine.cli import main

REPO_ROOT = Path(__file__).resolve().parents[1]

TREE_YAML = """\
options:
  mode: html
  document: true
  newline: "\\n"
root:
  type: element
  tag: html
  children:
    - type: element
      tag: body
      children:
        - {type: element, tag: p, props: [{kind: text, text: "héllo"}]}
        - {type: void, tag: br}
"""

EXPECTED_HTML = "<!DOCTYPE html>\n<html><body><p>héllo</p><br></body></html>"


def _write_tree(path: Path, content: str = TREE_YAML) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_render_to_file_reports_bytes(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    tree = _write_tree(tmp_path / "page.yaml")
    out = tmp_path / "out" / "page.html"

    main(["render", str(tree), "--out", str(out), "--stats"])

    assert out.read_text(encoding="utf-8") == EXPECTED_HTML
    err = capsys.readouterr().err
    assert f"wrote {len(EXPECTED_HTML.encode('utf-8'))} bytes" in err
    assert "html document" in err


def test_flags_override_file_options(tmp_path: Path) -> None:
    tree = _write_tree(tmp_path / "page.yaml")
    out = tmp_path / "page.xml"

    main(["render", str(tree), "--mode", "xml", "--fragment", "--out", str(out)])

    assert out.read_text(encoding="utf-8") == "<html><body><p>héllo</p><br /></body></html>"


def test_crlf_newline_flag(tmp_path: Path) -> None:
    tree = _write_tree(tmp_path / "page.yaml")
    out = tmp_path / "page.html"

    main(["render", str(tree), "--newline", "crlf", "--out", str(out)])

    assert out.read_bytes().startswith(b"<!DOCTYPE html>\r\n<html>")


def test_invalid_tree_exits(tmp_path: Path) -> None:
    tree = _write_tree(tmp_path / "bad.yaml", "root: {type: element}\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["render", str(tree)])
    assert "Invalid tree" in str(excinfo.value)


def test_non_utf8_tree_exits(tmp_path: Path) -> None:
    tree = tmp_path / "latin1.yaml"
    tree.write_bytes("root: {type: text, text: caf\u00e9}\n".encode("latin-1"))
    with pytest.raises(SystemExit) as excinfo:
        main(["render", str(tree)])
    assert "Could not parse" in str(excinfo.value)


def test_missing_tree_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["render", str(tmp_path / "missing.yaml")])
    assert "Tree file not found" in str(excinfo.value)


class RenderStdoutTest(unittest.TestCase):
    def test_cli_writes_utf8_to_stdout(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tree = _write_tree(Path(tmp) / "page.yaml")
            result = subprocess.run(
                [sys.executable, "-m", "viewengine.cli", "render", str(tree)],
                capture_output=True,
                cwd=REPO_ROOT,
            )
            self.assertEqual(result.returncode, 0, result.stderr)
            self.assertEqual(result.stdout, EXPECTED_HTML.encode("utf-8"))

    def test_cli_reports_yaml_errors(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tree = _write_tree(Path(tmp) / "broken.yaml", "root: [unclosed\n")
            result = subprocess.run(
                [sys.executable, "-m", "viewengine.cli", "render", str(tree)],
                capture_output=True,
                text=True,
                cwd=REPO_ROOT,
            )
            self.assertNotEqual(result.returncode, 0)
            self.assertIn("Could not parse", result.stderr)


if __name__ == "__main__":
    unittest.main()
