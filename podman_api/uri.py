"""Connection URI parsing.

URI formats:
    unix:///run/podman/podman.sock    - Unix domain socket (Unix only)
    tcp://host:port                   - plain HTTP over TCP
    http://host:port                  - alias for tcp
    https://host:port                 - HTTP over TLS
"""

from collections import namedtuple
import socket
from urllib.parse import quote

from podman_api import constants
from podman_api import errors


ConnectionSpec = namedtuple('ConnectionSpec', ['scheme', 'address'])


SCHEME_ALIASES = {
    constants.SCHEME_HTTP: constants.SCHEME_TCP,
}

SUPPORTED_SCHEMES = {
    constants.SCHEME_UNIX, constants.SCHEME_TCP, constants.SCHEME_HTTPS
}


def unix_supported():
    return hasattr(socket, 'AF_UNIX')


def parse_connection_uri(uri_string):
    """Parse a connection URI into a ConnectionSpec.

    Args:
        uri_string: A URI like 'unix:///run/podman/podman.sock'.

    Returns:
        ConnectionSpec(scheme, address) where address is the socket path
        for unix URIs and host[:port] otherwise.

    Raises:
        UnsupportedSchemeError: The scheme is unknown, missing, or is unix
            on a platform without Unix domain sockets.
        MissingAuthorityError: Nothing follows the scheme separator.
    """
    if '://' not in uri_string:
        raise errors.UnsupportedSchemeError(uri_string)

    scheme, address = uri_string.split('://', 1)
    scheme = SCHEME_ALIASES.get(scheme, scheme)

    if scheme not in SUPPORTED_SCHEMES:
        raise errors.UnsupportedSchemeError(scheme)
    if scheme == constants.SCHEME_UNIX and not unix_supported():
        raise errors.UnsupportedSchemeError(scheme)
    if not address:
        raise errors.MissingAuthorityError(uri_string)

    if scheme != constants.SCHEME_UNIX:
        # A trailing path on a TCP address carries no meaning for us
        address = address.split('/', 1)[0]
        if not address:
            raise errors.MissingAuthorityError(uri_string)

    return ConnectionSpec(scheme=scheme, address=address)


def socket_url(socket_path, endpoint):
    # requests_unixsocket uses http+unix:// scheme with URL-encoded path
    return 'http+unix://%s%s' % (quote(socket_path, safe=''), endpoint)


def host_url(scheme, host, endpoint):
    moniker = 'https' if scheme == constants.SCHEME_HTTPS else 'http'
    return '%s://%s%s' % (moniker, host, endpoint)
