"""Gist-backed remote document store"""

from gistfolio.infrastructure.external.gist.gist_store import GistDocumentStore

__all__ = ["GistDocumentStore"]
