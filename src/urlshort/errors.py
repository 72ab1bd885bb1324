"""urlshort exception hierarchy.

Construction of a redirect handler either fully succeeds or raises one
of these. Once built, a handler never raises on its own.
"""


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class ConfigurationError(UrlshortError):
    """Raised when setup is invalid.

    Examples: a fallback that is not callable, a redirect file with an
    unsupported suffix, a redirect file that does not exist.
    """


class RecordDecodeError(UrlshortError):
    """The redirect record sequence is malformed.

    Raised by the decoders in ``urlshort.decoding`` for syntax errors,
    a non-list top-level value, or an entry lacking string ``path`` and
    ``url`` fields. ``index`` is the position of the offending entry
    when the failure is tied to one.
    """

    def __init__(self, detail: str, *, source: str = "<input>", index: int | None = None) -> None:
        self.detail = detail
        self.source = source
        self.index = index
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.index is not None:
            return f"{self.source}: entry {self.index}: {self.detail}"
        return f"{self.source}: {self.detail}"
