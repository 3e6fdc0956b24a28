"""
Nonde Language Server entry point.

This server provides basic language features for Nonde source files using
`pygls`. It reuses the Nonde lexer and parser to build a label index
supporting definition lookup, hover information, and document symbols.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    DefinitionParams,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from nondelang.exceptions import NondeError
from nondelang.operations import Op, SYNOPSIS
from nondelang.parser import load_program


@dataclass
class NondeSymbol:
    """Represents a label declared in a Nonde file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    column: int
    detail: str

    @property
    def range(self) -> Range:
        start = Position(self.line, self.column)
        end = Position(self.line, self.column + len(self.name))
        return Range(start, end)


def parse_symbols(uri: str, text: str) -> List[NondeSymbol]:
    """Parse ``text`` and return its labels as symbols.

    Raises:
        NondeError: If the text doesn't load as a Nonde program.
    """
    program = load_program(text, uri)
    source_lines = text.splitlines()
    symbols: List[NondeSymbol] = []
    for name, index in program.labels:
        line = (program.labels.line_of(name) or 1) - 1
        column = 0
        if line < len(source_lines):
            column = max(source_lines[line].find(f"{name}:"), 0)
        if index < len(program):
            detail = f"{name}: -> command {index} ({program.commands[index]})"
        else:
            detail = f"{name}: -> end of program"
        symbols.append(NondeSymbol(name, SymbolKind.Key, uri, line, column, detail))
    return symbols


def keyword_synopsis(word: str) -> Optional[str]:
    """Return the synopsis for a command keyword, or None."""
    try:
        return SYNOPSIS[Op(word)]
    except ValueError:
        return None


class NondeLanguageServer(LanguageServer):
    """Language server for Nonde source files."""

    def __init__(self) -> None:
        super().__init__("nonde-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[NondeSymbol]] = {}
        self.global_symbols: Dict[str, List[NondeSymbol]] = {}
        self.indexed_workspace = False

    def _index_workspace(self) -> None:
        """Parse all `.nonde` files under the current workspace."""
        root = self.workspace.root_path
        if not root:
            self.indexed_workspace = True
            return
        for path in Path(root).rglob("*.nonde"):
            uri = path.as_uri()
            if uri in self.symbols_by_uri:
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                continue
            self.update_index(uri, text)
        self.indexed_workspace = True

    def update_index(self, uri: str, text: str) -> None:
        """Parse ``text`` and update the symbol index for ``uri``.

        A document that fails to load keeps whatever was indexed for it
        last time, so a half-typed edit doesn't wipe out navigation.
        """
        try:
            symbols = parse_symbols(uri, text)
        except NondeError:
            return
        self.symbols_by_uri[uri] = symbols
        self._rebuild_global_index()

    def _rebuild_global_index(self) -> None:
        self.global_symbols.clear()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                self.global_symbols.setdefault(sym.name, []).append(sym)

    def lookup(self, uri: str, word: str) -> Optional[NondeSymbol]:
        """Find ``word``, preferring a label declared in ``uri`` itself."""
        for sym in self.symbols_by_uri.get(uri, []):
            if sym.name == word:
                return sym
        if not self.indexed_workspace:
            self._index_workspace()
        matches = self.global_symbols.get(word)
        return matches[0] if matches else None


lang_server = NondeLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: NondeLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document when it is opened."""
    ls.update_index(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: NondeLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.update_index(doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: NondeLanguageServer, params: DefinitionParams):
    """Return the declaration of the label under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.lookup(doc.uri, word)
    if sym is None:
        return None
    return Location(uri=sym.uri, range=sym.range)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: NondeLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Describe the command keyword or label under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    text = keyword_synopsis(word)
    if text is None:
        sym = ls.lookup(doc.uri, word)
        if sym is None:
            return None
        text = sym.detail
    contents = MarkupContent(kind=MarkupKind.PlainText, value=text)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: NondeLanguageServer, params: DocumentSymbolParams):
    """Return the labels declared in the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    result: List[DocumentSymbol] = []
    for sym in symbols:
        result.append(
            DocumentSymbol(
                name=sym.name,
                kind=sym.kind,
                range=sym.range,
                selection_range=sym.range,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
