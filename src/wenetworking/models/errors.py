from typing import Optional

import httpx

REQUEST_NOT_CREATED = -1
DATA_NOT_RECEIVED = -2
RESPONSE_NOT_RECEIVED = -3
RESPONSE_NOT_DECODED = -4


class NetworkingError(Exception):
    """Failure reported to the caller of a request.

    Negative codes are local failures. Codes >= 0 are HTTP status codes, or
    the status accompanying a transport error when one is known.
    """

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"NetworkingError(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkingError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    @classmethod
    def request_not_created(cls) -> "NetworkingError":
        return cls(REQUEST_NOT_CREATED, "Request not created")

    @classmethod
    def data_not_received(cls) -> "NetworkingError":
        return cls(DATA_NOT_RECEIVED, "Data not received")

    @classmethod
    def response_not_received(cls) -> "NetworkingError":
        return cls(RESPONSE_NOT_RECEIVED, "Response not received")

    @classmethod
    def response_not_decoded(cls, detail: str) -> "NetworkingError":
        return cls(RESPONSE_NOT_DECODED, f"Response could not be decoded: {detail}")

    @classmethod
    def unexpected_status(cls, status_code: int) -> "NetworkingError":
        return cls(status_code, "Something went wrong with the request")

    @classmethod
    def from_transport_error(cls, error: httpx.HTTPError) -> "NetworkingError":
        """Build the failure for an error raised by the transport.

        Args:
            error: The httpx error raised while sending the request.

        Returns:
            NetworkingError: carrying the status of the error's response if
            the transport had one, ``-1`` otherwise.
        """
        status_code: Optional[int] = None
        if isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code

        message = str(error) or type(error).__name__
        return cls(
            status_code if status_code is not None else -1,
            message,
        )
