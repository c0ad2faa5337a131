"""Exceptions raised at the store's call boundary"""


class InvalidArgumentError(ValueError):
    """A required argument or document field was None."""
