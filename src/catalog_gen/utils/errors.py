"""Exceptions raised while generating the model catalog."""

from pathlib import Path


def _one_line(text: str) -> str:
    return " ".join(text.split())


class CatalogGenError(Exception):
    """Base exception for catalog generation errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CatalogListError(CatalogGenError):
    """The catalogs directory could not be listed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = _one_line(reason)
        super().__init__(f"list {self.path!r}: {self.reason}")


class CatalogParseError(CatalogGenError):
    """A catalog document could not be read or does not have the expected shape."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = _one_line(reason)
        super().__init__(f"parse {self.path!r}: {self.reason}")


class CatalogWriteError(CatalogGenError):
    """The output document could not be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = _one_line(reason)
        super().__init__(f"write {self.path!r}: {self.reason}")
