"""
Error types raised by the extraction pipeline and its collaborators.
"""


class RevelioError(Exception):
    pass


class FetchError(RevelioError):
    """The URL could not be retrieved: network error, timeout or non-2xx status."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(reason)


class DecodeError(FetchError):
    """The response body could not be read as text."""


class InputError(RevelioError):
    """Missing or invalid input; aborts the run before any request is made."""


class ListFileError(RevelioError):

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading from file: {path} ({reason})")
