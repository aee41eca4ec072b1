"""
Exceptions raised by resource handlers to the request pipeline.

Each exception carries the HTTP status the pipeline should answer with.
Handlers raise them; only the pipeline turns them into responses.
"""

from typing import Optional


class ApplicationError(Exception):
    """
    Base class for errors a handler reports to the request pipeline.

    Attributes:
        status_code: HTTP status to return to the client.
    """

    status_code: int = 500

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message or self.__class__.__name__)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ResourceNotFoundError(ApplicationError):
    """
    The requested resource could not be served.

    Raised for every read failure alike: missing files, unreadable files,
    empty payloads and paths outside the serving root. The message is
    optional and never says which of these happened.
    """

    status_code = 404
