"""Error types raised by the recipe finder."""


class RecipeFinderError(Exception):
    """Base class for all recipe finder failures."""


class ValidationError(RecipeFinderError, ValueError):
    """Raised when a domain object is constructed from invalid values."""


class FileAccessError(RecipeFinderError):
    """Raised when an input file is missing or cannot be read."""


class ParseError(RecipeFinderError):
    """Raised when an input file has malformed content."""
