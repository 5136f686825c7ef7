"""Helpers for generating C++ sources and build inputs, and for merging plists."""

__version__ = "0.1.0"

__all__ = ["codehelpers", "cpp_tokeniser", "filehelpers", "plist_merger", "project"]