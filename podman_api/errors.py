"""Exceptions raised by podman_api.

Every error raised by this library derives from PodmanError, so callers can
catch the whole family at once or match on a specific kind.
"""

import http


class PodmanError(Exception):
    pass


class TransportError(PodmanError):
    """Raised when the socket, TCP or TLS connection fails."""
    pass


class SerializationError(PodmanError):
    """Raised when a request body cannot be encoded or a response decoded."""
    pass


class OptsSerializationError(SerializationError):
    """Raised when accumulated options cannot be rendered as JSON."""
    pass


class InvalidResponseError(SerializationError):
    """Raised when the daemon's response does not have the expected shape."""
    pass


class FaultError(PodmanError):
    """The daemon answered with a non-2xx status.

    The daemon returns a JSON body of the form
    {"message": ..., "cause": ..., "response": ...}. The formatted message is
    "message: cause", falling back to whichever half is present and finally
    to the canonical reason phrase for the status code.
    """

    def __init__(self, code, message=None, cause=None, response=None,
                 method=None, endpoint=None):
        self.code = code
        self.message = message or ''
        self.cause = cause or ''
        self.response = response
        self.method = method
        self.endpoint = endpoint
        super().__init__(code, self.detail)

    @property
    def detail(self):
        if self.message and self.cause:
            return '%s: %s' % (self.message, self.cause)
        if self.message or self.cause:
            return self.message or self.cause
        return reason_phrase(self.code)

    def __str__(self):
        return 'error %d - %s' % (self.code, self.detail)


class NotFoundError(FaultError):
    pass


class ConflictError(FaultError):
    pass


class MalformedVersionError(PodmanError):
    """Raised when an API version string is not MAJOR.MINOR.PATCH."""
    pass


class UnsupportedSchemeError(PodmanError):
    def __init__(self, scheme):
        self.scheme = scheme
        super().__init__('Provided scheme `%s` is not supported' % scheme)


class MissingAuthorityError(PodmanError):
    def __init__(self, uri=None):
        self.uri = uri
        super().__init__(
            'Provided URI is missing authority part after scheme')


class ConnectionNotUpgradedError(PodmanError):
    def __init__(self, code=None):
        self.code = code
        super().__init__(
            'The HTTP connection was not upgraded by the podman host')


class UncheckedExecError(PodmanError):
    """Raised when an exec session is started before its TTY mode is known.

    The decoding of exec output depends on whether a pseudo-terminal was
    allocated, so an Exec handle obtained by id alone must first learn its
    mode via Exec.resolve_tty() or be created with an explicit tty argument.
    """

    def __init__(self, exec_id):
        self.exec_id = exec_id
        super().__init__(
            'Exec session %s was started without a known TTY mode'
            % exec_id)


class FrameDecodeError(PodmanError):
    """Raised when a multiplexed stream frame is malformed or truncated."""
    pass


class EventDecodeError(SerializationError):
    """A single line of an event stream could not be parsed."""

    def __init__(self, line, reason):
        self.line = line
        self.reason = reason
        super().__init__('Failed to decode event: %s' % reason)


class StreamError(PodmanError):
    """An error object embedded in a JSON progress stream (pull, build)."""

    def __init__(self, error, detail=None):
        self.error = error or ''
        self.detail = detail or ''
        if self.error and self.detail:
            message = '%s-%s' % (self.error, self.detail)
        else:
            message = self.error or self.detail
        super().__init__(message)


STATUS_CODES_TO_ERRORS = {
    404: NotFoundError,
    409: ConflictError,
}


def reason_phrase(code):
    try:
        return http.HTTPStatus(code).phrase
    except ValueError:
        return 'unknown error code'


def fault_from_response(code, body, method=None, endpoint=None):
    """Build the FaultError for a non-2xx response.

    Args:
        code: The HTTP status code.
        body: The ErrorResponse decoded from a JSON body, the body text
            when it was not a JSON object, or None.
        method: The HTTP method of the failed request.
        endpoint: The endpoint of the failed request.

    Returns:
        A FaultError (or a subclass selected by status code).
    """
    message = cause = response = None
    if isinstance(body, str):
        message = body.strip()
    elif body is not None:
        message = body.message
        cause = body.cause
        response = body.response

    cls = STATUS_CODES_TO_ERRORS.get(code, FaultError)
    return cls(code, message=message, cause=cause, response=response,
               method=method, endpoint=endpoint)
