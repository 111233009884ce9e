"""Tests for ddldoc.generator — whole runs and document handoff."""

import logging
from pathlib import Path

import pytest

from _trees import class_decl, method, param, protocol, tree
from ddldoc.config import GeneratorConfig
from ddldoc.errors import UnknownParameterDirectionError
from ddldoc.extractor import RunState
from ddldoc.generator import build_documents, generate_documentation
from ddldoc.tree import decode_tree
from ddldoc.writer import MemoryWriter


def _tree(*elements):  # type: ignore[no-untyped-def]
    return decode_tree(tree(*elements))


class TestGenerateDocumentation:
    def test_writes_one_file_per_protocol(self, tmp_path: Path) -> None:
        out = tmp_path / "docs" / "protocols"
        paths = generate_documentation(
            _tree(protocol("Auth", method("Login")), protocol("Secure", method("Register"))),
            out,
            run_state=RunState(),
        )
        assert paths == [out / "Auth.md", out / "Secure.md"]
        assert (out / "Auth.md").read_text(encoding="utf-8").startswith("## [NEX-Protocols](")
        assert "# (1) Register" in (out / "Secure.md").read_text(encoding="utf-8")

    def test_overwrites_existing_files(self, tmp_path: Path) -> None:
        (tmp_path / "Auth.md").write_text("stale", encoding="utf-8")
        generate_documentation(_tree(protocol("Auth")), tmp_path, run_state=RunState())
        assert (tmp_path / "Auth.md").read_text(encoding="utf-8") != "stale"

    def test_synthetic_names_become_file_names(self, tmp_path: Path) -> None:
        paths = generate_documentation(_tree(protocol(None)), tmp_path, run_state=RunState())
        assert paths == [tmp_path / "Unknown Protocol - 0.md"]

    def test_custom_extension(self, tmp_path: Path) -> None:
        config = GeneratorConfig(file_extension=".markdown")
        paths = generate_documentation(
            _tree(protocol("Auth")), tmp_path, config=config, run_state=RunState()
        )
        assert paths == [tmp_path / "Auth.markdown"]

    def test_custom_writer(self) -> None:
        writer = MemoryWriter()
        generate_documentation(
            _tree(class_decl("A"), protocol("Auth")), "out", writer=writer, run_state=RunState()
        )
        assert list(writer.documents) == [Path("out") / "Auth.md"]
        assert "# Types" in writer.documents[Path("out") / "Auth.md"]

    def test_success_is_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="ddldoc")
        generate_documentation(_tree(protocol("Auth")), tmp_path, run_state=RunState())
        assert f"Writing protocol documentation to {tmp_path / 'Auth.md'}" in caplog.text

    def test_repeated_name_is_logged(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger="ddldoc")
        paths = generate_documentation(
            _tree(protocol("Auth", method("Login")), protocol("Auth", method("Logout"))),
            tmp_path,
            run_state=RunState(),
        )
        assert paths == [tmp_path / "Auth.md", tmp_path / "Auth.md"]
        assert "Protocol Auth is declared more than once" in caplog.text
        assert "Logout" in (tmp_path / "Auth.md").read_text(encoding="utf-8")

    def test_distinct_names_do_not_warn(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger="ddldoc")
        generate_documentation(
            _tree(protocol("Auth"), protocol("Secure")), tmp_path, run_state=RunState()
        )
        assert "more than once" not in caplog.text

    def test_earlier_documents_written_before_error(self, tmp_path: Path) -> None:
        parsed = _tree(
            protocol("Good", method("A")),
            protocol("Bad", method("B", param("x", "uint32", 9))),
        )
        with pytest.raises(UnknownParameterDirectionError):
            generate_documentation(parsed, tmp_path, run_state=RunState())
        assert (tmp_path / "Good.md").exists()
        assert not (tmp_path / "Bad.md").exists()

    def test_write_errors_propagate(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(OSError):
            generate_documentation(_tree(protocol("Auth")), blocker / "docs", run_state=RunState())


class TestBuildDocuments:
    def test_returns_documents_by_name(self) -> None:
        docs = build_documents(
            _tree(protocol("Auth", method("Login")), protocol(None)), run_state=RunState()
        )
        assert list(docs) == ["Auth", "Unknown Protocol - 0"]
        assert "[Login](#1-login)" in docs["Auth"]

    def test_repeated_name_keeps_last_and_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="ddldoc")
        docs = build_documents(
            _tree(protocol("Auth", method("Login")), protocol("Auth", method("Logout"))),
            run_state=RunState(),
        )
        assert list(docs) == ["Auth"]
        assert "Logout" in docs["Auth"]
        assert "Protocol Auth is declared more than once" in caplog.text

    def test_same_tree_same_output(self) -> None:
        parsed = _tree(class_decl("A"), protocol("P", method("Get", param("a", "A"))))
        assert build_documents(parsed, run_state=RunState()) == build_documents(
            parsed, run_state=RunState()
        )
