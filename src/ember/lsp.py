"""Minimal LSP server for Ember: lexical diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from ember import __version__
from ember.errors import LexError
from ember.lexer import scan

server = LanguageServer("ember-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def _to_diagnostic(exc: LexError) -> Diagnostic:
    """Convert a LexError to a Diagnostic; LSP characters count UTF-16 code units."""
    lines = exc.source.split("\n")
    line = exc.line - 1
    text = lines[line] if 0 <= line < len(lines) else ""
    prefix = text[: exc.column - 1]
    marked = text[exc.column - 1 : exc.column] or " "
    start = _utf16_len(prefix)
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=start),
            end=Position(line=line, character=start + _utf16_len(marked)),
        ),
        message=exc.message,
        severity=DiagnosticSeverity.Error,
        code=exc.kind,
        source="ember",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per lexical error."""
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    # Match the CLI, which reads files with universal newlines
    source = doc.source.replace("\r\n", "\n")
    result = scan(source, filename)
    diagnostics = [_to_diagnostic(exc) for exc in result.errors]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
