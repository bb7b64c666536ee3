"""Pipeline error taxonomy."""


class PipelineError(Exception):
    """Base class for errors raised by the feed-to-ebook pipeline."""


class FetchError(PipelineError):
    """Network or HTTP failure while fetching a feed or an article."""


class ParseError(PipelineError):
    """Payload is not a recognizable feed, not text, or a selector is invalid."""


class SerializationError(PipelineError):
    """The final artifact could not be written."""
