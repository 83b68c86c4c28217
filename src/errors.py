"""Error types raised by the resolver and the workflow contributors.

Library code raises these; the CLI entry points log them and exit with the
attached ``exit_code``.
"""

from constants import ExitCodes


class PipelineBuilderError(Exception):
    """Base class for all fatal pipeline-builder errors."""

    exit_code = ExitCodes.FILE_ERROR


class InputError(PipelineBuilderError):
    """A required action input was not supplied."""

    exit_code = ExitCodes.INPUT_ERROR


class FetchError(PipelineBuilderError):
    """Transport failure, timeout or non-success HTTP status."""

    exit_code = ExitCodes.CONNECTION_ERROR

    def __init__(self, message: str, url: str, status_code=None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class PayloadError(PipelineBuilderError):
    """Response body could not be decoded into the expected shape."""

    exit_code = ExitCodes.CONNECTION_ERROR


class ResolutionError(PipelineBuilderError):
    """No version in the catalog satisfied the request."""

    exit_code = ExitCodes.RESOLUTION_ERROR


class DescriptorError(PipelineBuilderError):
    """A project descriptor or package.toml could not be read."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class CoordinateError(PipelineBuilderError):
    """A dependency image coordinate did not match ``name:tag``."""

    def __init__(self, message: str, image: str):
        super().__init__(message)
        self.image = image


class WriteError(PipelineBuilderError):
    """A generated file could not be written."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
