"""Exception types for ReactPrep."""


class ReactPrepError(Exception):
    """Base class for all ReactPrep errors."""


class CatalogError(ReactPrepError):
    """Question bank content is missing or malformed."""


class NotFoundError(ReactPrepError):
    """A requested catalog entry does not exist."""


class TopicNotFoundError(NotFoundError):
    """No topic matches the requested slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Topic not found: {slug}")


class RenderError(ReactPrepError):
    """Syntax highlighting failed for the given code or language."""


class ProgressParseError(ReactPrepError):
    """Persisted progress blob could not be parsed."""
