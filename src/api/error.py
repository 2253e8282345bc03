from fastapi import status
from libs.result import Error


class ClientError(Exception):
    """Error caused by the caller; rendered with its own code and message"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Unexpected failure; the message is hidden from the caller"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


ERROR_STATUS_CODES = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "BAD_REQUEST": status.HTTP_400_BAD_REQUEST,
}


def raise_for_error(error: Error):
    """Map a use case Error to the matching boundary exception"""
    status_code = ERROR_STATUS_CODES.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
