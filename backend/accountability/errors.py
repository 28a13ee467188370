class InvalidArgument(ValueError):
	"""Raised when a caller passes a value outside an operation's contract."""


class UpstreamDataError(RuntimeError):
	"""Raised when the data-access layer cannot supply the records to aggregate."""
