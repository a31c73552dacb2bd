import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from viewengine.models import RenderOptions, TreeFile, load_tree_file
from viewengine.nodes import Children, Element, KeyValue, NodeList, TextProp, VoidElement
from viewengine.view_builder import serialize_nodes

TREE_YAML = """\
options:
  mode: xml
root:
  type: element
  tag: div
  props:
    - {kind: attr, name: class, value: main}
    - {kind: attr, name: tabindex, value: 3}
    - {kind: text, text: "a<b"}
  children:
    - {type: void, tag: br}
    - {type: raw, text: "<!-- note -->"}
"""


def test_yaml_tree_converts_to_nodes(tmp_path: Path) -> None:
    path = tmp_path / "tree.yaml"
    path.write_text(TREE_YAML, encoding="utf-8")

    tree = load_tree_file(path)
    (root,) = tree.nodes()

    assert tree.options.mode == "xml"
    assert not tree.options.is_html
    assert isinstance(root, Element)
    assert root.props[0] == KeyValue("class", "main")
    assert root.props[1] == KeyValue("tabindex", 3)
    assert root.props[2] == TextProp("a<b")
    assert isinstance(root.props[3], Children)
    assert serialize_nodes(False, tree.nodes()) == (
        '<div class="main" tabindex="3">a&lt;b<br /><!-- note --></div>'
    )


def test_json_tree_with_list_root(tmp_path: Path) -> None:
    payload = {
        "root": [
            {"type": "element", "tag": "p", "children": [{"type": "text", "text": "one"}]},
            {
                "type": "fragment",
                "children": [
                    {"type": "void", "tag": "hr", "props": [{"kind": "attr", "name": "id", "value": "x"}]}
                ],
            },
        ]
    }
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    tree = load_tree_file(path)
    nodes = tree.nodes()

    assert tree.options == RenderOptions()
    assert isinstance(nodes[1], NodeList)
    assert nodes[1].nodes == (VoidElement("hr", [KeyValue("id", "x")]),)
    assert serialize_nodes(True, nodes) == '<p>one</p><hr id="x">'


def test_children_property_spec() -> None:
    tree = TreeFile.model_validate(
        {
            "root": {
                "type": "element",
                "tag": "ul",
                "props": [
                    {"kind": "children", "nodes": [{"type": "element", "tag": "li"}]},
                ],
            }
        }
    )
    assert serialize_nodes(True, tree.nodes()) == "<ul><li></li></ul>"


def test_unknown_node_type_is_rejected() -> None:
    with pytest.raises(ValidationError):
        TreeFile.model_validate({"root": {"type": "comment", "text": "x"}})


def test_missing_root_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_tree_file(path)


def test_render_options_newline() -> None:
    assert RenderOptions(newline="\n").resolved_newline == "\n"
    assert RenderOptions(mode="html", document=True).is_html


@pytest.mark.parametrize(
    "root",
    [
        {"type": "element", "tag": "ul", "childern": [{"type": "text", "text": "x"}]},
        {"type": "element", "tag": "p", "props": [{"kind": "attr", "name": "id", "value": "a", "vaule": "b"}]},
        {"type": "fragment", "children": [{"type": "void", "tag": "br", "children": []}]},
    ],
)
def test_unknown_nested_keys_are_rejected(root: dict) -> None:
    with pytest.raises(ValidationError):
        TreeFile.model_validate({"root": root})


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(ValidationError):
        TreeFile.model_validate({"options": {"mdoe": "xml"}, "root": {"type": "text", "text": "x"}})
