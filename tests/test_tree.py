"""Tests for ddldoc.tree — decoding the parser's node shape."""

import json
from pathlib import Path

import pytest

from _trees import RESPONSE, class_decl, member, method, param, protocol, return_value, tree
from ddldoc.errors import TreeShapeError
from ddldoc.nodes import (
    ClassDeclaration,
    ClassMember,
    MethodDeclaration,
    Parameter,
    ParseTree,
    ProtocolDeclaration,
)
from ddldoc.tree import decode_tree, from_json, load_tree


class TestDecodeDeclarations:
    def test_empty_tree(self) -> None:
        assert decode_tree(tree()) == ParseTree(elements=())

    def test_class_declaration(self) -> None:
        decoded = decode_tree(
            tree(class_decl("Gathering", member("m_idMyself", "uint32"), parent="Data"))
        )
        assert decoded.elements == (
            ClassDeclaration(
                name="Gathering",
                parent_name="Data",
                members=(ClassMember(name="m_idMyself", raw_type="uint32"),),
            ),
        )

    def test_protocol_declaration(self) -> None:
        decoded = decode_tree(
            tree(
                protocol(
                    "SecureConnection",
                    method(
                        "Register",
                        param("vecMyURLs", "std_list<stationurl>"),
                        return_value("qresult"),
                        param("pidConnectionID", "uint32", RESPONSE),
                    ),
                )
            )
        )
        assert decoded.elements == (
            ProtocolDeclaration(
                name="SecureConnection",
                methods=(
                    MethodDeclaration(
                        name="Register",
                        parameters=(
                            Parameter("vecMyURLs", "std_list<stationurl>", 1, False),
                            Parameter("%retval%", "qresult", 3, True),
                            Parameter("pidConnectionID", "uint32", 2, False),
                        ),
                    ),
                ),
            ),
        )

    def test_source_order_is_kept(self) -> None:
        decoded = decode_tree(tree(class_decl("A"), protocol("P"), class_decl("B")))
        assert [type(e).__name__ for e in decoded.elements] == [
            "ClassDeclaration",
            "ProtocolDeclaration",
            "ClassDeclaration",
        ]

    @pytest.mark.parametrize("name", [None, ""])
    def test_missing_protocol_name_decodes_empty(self, name: str | None) -> None:
        decoded = decode_tree(tree(protocol(name)))
        assert decoded.elements == (ProtocolDeclaration(name=""),)

    def test_other_element_kinds_are_skipped(self) -> None:
        namespace = {"body": {"_type": "DDLNamespace", "elements": []}}
        decoded = decode_tree(tree(namespace, protocol("P")))
        assert decoded.elements == (ProtocolDeclaration(name="P"),)


class TestDecodeErrors:
    """Malformed trees fail fast with the path of the bad node."""

    def test_missing_root(self) -> None:
        with pytest.raises(TreeShapeError, match="rootNamespace"):
            decode_tree({})

    def test_elements_not_a_list(self) -> None:
        with pytest.raises(TreeShapeError) as exc_info:
            decode_tree({"rootNamespace": {"elements": {}}})
        assert exc_info.value.path == "rootNamespace.elements"

    def test_missing_type_discriminator(self) -> None:
        with pytest.raises(TreeShapeError, match="_type") as exc_info:
            decode_tree(tree({"body": {}}))
        assert exc_info.value.path == "rootNamespace.elements[0].body"

    def test_missing_member_type(self) -> None:
        broken = class_decl("A", member("x", "uint32"))
        del broken["body"]["classMembers"]["elements"][0]["body"]["declarationUse"]
        with pytest.raises(TreeShapeError, match="declarationUse") as exc_info:
            decode_tree(tree(broken))
        assert exc_info.value.path == "rootNamespace.elements[0].body.classMembers.elements[0].body"

    def test_missing_method_name(self) -> None:
        broken = method("Hello")
        del broken["body"]["methodDeclaration"]["declaration"]["nameSpaceItem"]["parseTreeItem1"]
        with pytest.raises(TreeShapeError, match="parseTreeItem1") as exc_info:
            decode_tree(tree(protocol("P", broken)))
        assert exc_info.value.path == (
            "rootNamespace.elements[0].body.methods.elements[0].body"
            ".methodDeclaration.declaration.nameSpaceItem"
        )

    def test_unexpected_parameter_node(self) -> None:
        bogus = {"body": {"_type": "DDLMethod"}}
        with pytest.raises(TreeShapeError, match="expected a parameter node"):
            decode_tree(tree(protocol("P", method("Hello", bogus))))

    def test_body_not_an_object(self) -> None:
        with pytest.raises(TreeShapeError, match="expected a node object"):
            decode_tree(tree({"body": "DDLClassDeclaration"}))


class TestJson:
    def test_from_json(self) -> None:
        data = json.dumps(tree(protocol("P", method("Hello"))))
        assert from_json(data).elements == (
            ProtocolDeclaration(name="P", methods=(MethodDeclaration(name="Hello"),)),
        )

    def test_invalid_json(self) -> None:
        with pytest.raises(TreeShapeError, match="invalid JSON"):
            from_json("{not json")

    def test_non_object_json(self) -> None:
        with pytest.raises(TreeShapeError, match="expected a JSON object"):
            from_json("[]")

    def test_load_tree(self, tmp_path: Path) -> None:
        path = tmp_path / "tree.json"
        path.write_text(json.dumps(tree(class_decl("A"), protocol("P"))), encoding="utf-8")
        assert len(load_tree(path).elements) == 2

    def test_load_missing_file_propagates_oserror(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_tree(tmp_path / "missing.json")
