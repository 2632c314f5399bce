class Onto2DotError(Exception):
    """Base class for errors that abort a run."""


class SourceReadError(Onto2DotError):
    """The ontology file could not be opened, read or parsed."""

    def __init__(self, source_path: str, reason):
        self.source_path = source_path
        self.reason = reason
        super().__init__(f"cannot read {source_path}: {reason}")


class RenderError(Onto2DotError):
    """The DOT output could not be produced or written."""
