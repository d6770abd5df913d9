"""Custom exceptions for spread assembly."""


class SpreadError(Exception):
    """Base exception for all spread assembly errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class NoMatchError(SpreadError):
    """Raised when a file name does not follow the series naming scheme."""

    def __init__(self, file_name: str, message: str | None = None):
        self.file_name = file_name
        super().__init__(message or f"File name does not match the naming scheme: {file_name!r}")


class NoPdfMatchError(SpreadError):
    """Raised when no rendered document shares the article's page range."""

    def __init__(self, file_name: str, coverage: range, message: str | None = None):
        self.file_name = file_name
        self.coverage = coverage
        super().__init__(
            message
            or f"No rendered document covers pages {coverage.start}-{coverage.stop - 1} for {file_name!r}"
        )


class PageCollectionError(SpreadError):
    """Raised when pages cannot be collected from a rendered document."""

    pass


class InvalidCoverageError(PageCollectionError):
    """Raised when the requested page range is empty or starts below page 1."""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(f"Invalid page range {start}-{end}")


class MissingPagesError(PageCollectionError):
    """Raised when the rendered sheets run out before the range is covered."""

    def __init__(self, coverage: range, collected: list[int] | None = None):
        self.coverage = coverage
        self.collected = collected or []
        last = coverage.stop - 1
        super().__init__(
            f"Ran out of sheets for pages {coverage.start}-{last}: "
            f"collected {len(self.collected)} of {len(coverage)}"
        )
