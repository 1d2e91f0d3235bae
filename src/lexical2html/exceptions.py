"""Custom exceptions for lexical2html."""


class Lexical2HtmlError(Exception):
    """Base exception for lexical2html operations."""


class DocumentShapeError(Lexical2HtmlError):
    """Editor payload is missing its root or cannot be read as a document tree."""
