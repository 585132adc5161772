"""Tests for the LSP server diagnostic generation."""

from __future__ import annotations

import pytest
from lsprotocol.types import (
    DiagnosticSeverity,
    PublishDiagnosticsParams,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from ember.lsp import _validate


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and captured diagnostics."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    published: list[PublishDiagnosticsParams] = []
    ls.text_document_publish_diagnostics = lambda params: published.append(params)

    def put(source: str, uri: str = "file:///test.em") -> None:
        ws.put_text_document(
            TextDocumentItem(uri=uri, language_id="ember", version=0, text=source)
        )

    return ls, published, put


# ---------------------------------------------------------------------------
# Lexical errors → Error severity
# ---------------------------------------------------------------------------


class TestLexErrors:
    def test_unexpected_character(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("var x = @;")
        _validate(ls, "file:///test.em")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Error
        assert "@" in d.message
        assert d.code == "unexpected-character"
        assert d.source == "ember"
        # @ is at column 9 (1-based) → character 8 (0-based)
        assert d.range.start.line == 0
        assert d.range.start.character == 8

    def test_every_error_published(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put('@ $\n"open')
        _validate(ls, "file:///test.em")

        codes = [d.code for d in published[0].diagnostics]
        assert codes == ["unexpected-character", "unexpected-character", "unterminated-string"]

    def test_unterminated_comment(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("1\n/* open")
        _validate(ls, "file:///test.em")

        d = published[0].diagnostics[0]
        assert d.code == "unterminated-block-comment"
        assert d.range.start.line == 1
        assert d.range.start.character == 0


# ---------------------------------------------------------------------------
# Line endings and UTF-16 positions
# ---------------------------------------------------------------------------


class TestLineEndings:
    def test_crlf_document_is_clean(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("var x = 1;\r\nvar y = 2;\r\n")
        _validate(ls, "file:///test.em")

        assert published[0].diagnostics == []

    def test_crlf_error_position(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("var x = 1;\r\nvar y = @;\r\n")
        _validate(ls, "file:///test.em")

        diags = published[0].diagnostics
        assert len(diags) == 1
        assert diags[0].range.start.line == 1
        assert diags[0].range.start.character == 8


class TestUtf16Positions:
    def test_character_after_astral_char(self, lsp_env) -> None:
        ls, published, put = lsp_env
        # the emoji is one code point but two UTF-16 code units
        put('"\U0001f600" @')
        _validate(ls, "file:///test.em")

        d = published[0].diagnostics[0]
        assert d.range.start.character == 5
        assert d.range.end.character == 6

    def test_astral_char_itself_spans_two_units(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("x \U0001f600")
        _validate(ls, "file:///test.em")

        d = published[0].diagnostics[0]
        assert d.range.start.character == 2
        assert d.range.end.character == 4


# ---------------------------------------------------------------------------
# Clean document → empty diagnostics
# ---------------------------------------------------------------------------


class TestCleanDocument:
    def test_valid_document(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("# ok\nvar total :: number = 5 + 5;\n")
        _validate(ls, "file:///test.em")

        assert len(published) == 1
        assert published[0].diagnostics == []
        assert published[0].uri == "file:///test.em"
