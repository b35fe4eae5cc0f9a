"""Heuristics deciding which files are worth fingerprinting.

Generated, binary, markup and data files add noise to the knowledge base
without any matching value, so they are left out of the WFP document.
"""

from __future__ import annotations

from typing import Optional

MIN_FILE_SIZE = 256

BLACKLISTED_EXTENSIONS = frozenset(
    {
        "1", "2", "3", "4", "5", "6", "7", "8", "9",
        "ac", "am", "bmp", "build", "cfg", "chm", "changelog", "class", "cmake",
        "conf", "config", "contributors", "copying", "csproj", "css", "csv",
        "cvsignore", "dat", "data", "dtd", "dts", "dtsi", "eps", "geojson", "gif",
        "gitignore", "glif", "gmo", "guess", "hex", "html", "htm", "ico", "idx",
        "in", "inc", "info", "ini", "ipynb", "jpg", "jpeg", "json", "license",
        "log", "m4", "map", "markdown", "md", "md5", "mk", "makefile", "meta",
        "mxml", "notice", "out", "pack", "pdf", "pem", "phtml", "png", "po",
        "prefs", "properties", "readme", "result", "rst", "sample", "scss", "sha",
        "sha1", "sha2", "sha256", "sln", "spec", "sub", "svg", "svn-base", "tab",
        "template", "test", "tex", "todo", "txt", "utf-8", "version", "vim",
        "wav", "xht", "xhtml", "xml", "xpm", "xsd", "xul", "yaml", "yml",
    }
)

MARKUP_PREFIXES = (b"<?xml", b"<html", b"<ac3d")


def file_extension(file_name: str) -> str:
    """Text after the last dot of the base name, ``""`` when there is none.

    Unlike :attr:`pathlib.PurePath.suffix`, dot files keep their name as the
    extension (``.gitignore`` -> ``gitignore``).
    """
    base_name = file_name.replace("\\", "/").rsplit("/", 1)[-1]
    _, dot, extension = base_name.rpartition(".")
    return extension if dot else ""


def classify(file_name: str, content: bytes) -> Optional[str]:
    """Return why a file should be skipped, or ``None`` if it is eligible."""
    if len(content) < MIN_FILE_SIZE:
        return "too small"

    extension = file_extension(file_name)
    if not extension:
        return "no extension"
    if extension in BLACKLISTED_EXTENSIONS:
        return "extension"

    if content[:1] == b"{":
        return "json"
    if content[:5].lower() in MARKUP_PREFIXES:
        return "markup"
    return None


def is_blacklisted(file_name: str, content: bytes) -> bool:
    return classify(file_name, content) is not None
