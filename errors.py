class LibraryCommandError(Exception):
    """Base class for errors raised while building or running library commands."""


class NullArgumentError(LibraryCommandError, TypeError):
    """A required argument was None."""


class InvalidArgumentError(LibraryCommandError, ValueError):
    """An argument was given but failed the command's validation."""


class CorruptCatalogueError(LibraryCommandError):
    """The library data, its book list, or one of its books is missing."""


class UnsupportedFieldError(LibraryCommandError, ValueError):
    """A book field has no grouping logic attached to it."""


class InvalidInputError(LibraryCommandError, ValueError):
    """Input to a grouping helper broke its precondition."""


class CatalogueFileError(OSError, LibraryCommandError):
    """A catalogue file exists but could not be decoded or parsed."""
