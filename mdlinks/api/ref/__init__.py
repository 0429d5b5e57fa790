"""Ref API domain - find and follow path references in markdown text."""

from .._output_schemas.ref import RefAtOutput, RefDefinitionOutput, RefFollowOutput, RefScanOutput
from .DefinitionLocation import DefinitionLocation
from .DocumentLink import DocumentLink
from .LineIndex import LineIndex
from .RefHit import RefHit
from .RefPattern import RefPattern
from .SourceRange import SourceRange
from .dispatch_open import dispatch_open
from .document_links import document_links
from .find_definition import find_definition
from .find_hit_at import find_hit_at
from .is_markdown_document import is_markdown_document
from .resolve_token import resolve_token
from .scan_refs import scan_refs

__all__ = [
    "DefinitionLocation",
    "DocumentLink",
    "LineIndex",
    "RefAtOutput",
    "RefDefinitionOutput",
    "RefFollowOutput",
    "RefHit",
    "RefPattern",
    "RefScanOutput",
    "SourceRange",
    "dispatch_open",
    "document_links",
    "find_definition",
    "find_hit_at",
    "is_markdown_document",
    "resolve_token",
    "scan_refs",
]
