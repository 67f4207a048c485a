# HTTP transport to the libpod REST API.
#
# The daemon listens on a Unix domain socket by default, or on TCP (optionally
# TLS protected) when started with 'podman system service tcp://...'. See:
# https://docs.podman.io/en/latest/markdown/podman-system-service.1.html
#
# Unix sockets are reached through requests_unixsocket, which understands the
# http+unix:// scheme with a URL-encoded socket path. TCP and TLS use a plain
# requests session.
#
# 'exec start' and 'attach' hijack the HTTP connection. For attach we ask for
# a protocol upgrade, and once the daemon answers '101 Switching Protocols'
# the socket underneath the response is a raw bidirectional byte pipe. The
# http.client response treats a 1xx answer as having no body, so the bytes
# are read directly from its buffered socket reader instead.

from collections import namedtuple
import logging
import os

import requests
import requests_unixsocket

from podman_api import constants
from podman_api import errors
from podman_api import models
from podman_api import uri
from podman_api import util


LOG = logging.getLogger(__name__)
LOG.setLevel(logging.INFO)


Payload = namedtuple('Payload', ['data', 'content_type'])

EMPTY_PAYLOAD = Payload(None, None)


def json_payload(body):
    return Payload(body, constants.CONTENT_TYPE_JSON)


def tar_payload(archive):
    return Payload(archive, constants.CONTENT_TYPE_TAR)


def _read1_chunks(reader):
    while True:
        data = reader.read1(constants.STREAM_CHUNK_SIZE)
        if not data:
            return
        yield data


def iter_body(response):
    """Yield body bytes as soon as they arrive.

    Chunked bodies are handed out per chunk by requests. A hijacked
    connection has no transfer framing at all, so reading a fixed amount
    would block until that many bytes are buffered; read1() returns
    whatever is available instead.
    """
    if getattr(response.raw, 'chunked', True):
        return response.iter_content(chunk_size=None)
    return _read1_chunks(response.raw._fp)


def _decode_error_body(r):
    try:
        data = r.json()
    except ValueError:
        return r.text
    if isinstance(data, dict):
        return models.ErrorResponse.from_dict(data)
    return r.text


class UpgradedConnection(object):
    """A raw byte pipe obtained from an upgraded HTTP connection."""

    def __init__(self, response):
        self._response = response
        # The buffered reader may already hold bytes sent right after the
        # response headers, so reads go through it rather than the socket.
        self._reader = response.raw._fp.fp
        self._sock = self._reader.raw._sock
        self.closed = False

    def chunks(self):
        """Yield bytes read from the connection until EOF."""
        try:
            yield from _read1_chunks(self._reader)
        except OSError as e:
            raise errors.TransportError(
                'Failed to read from upgraded connection: %s' % e) from e

    def write(self, data):
        try:
            self._sock.sendall(data)
        except OSError as e:
            raise errors.TransportError(
                'Failed to write to upgraded connection: %s' % e) from e

    def close(self):
        if self.closed:
            return
        self.closed = True
        self._response.close()
        try:
            self._sock.close()
        except OSError:
            LOG.debug('Socket already closed')

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class Transport(object):
    """Issues requests against one libpod daemon.

    All endpoints handed to a Transport are already version prefixed. The
    underlying session is created on first use and shared by every request
    made through this transport.
    """

    def __init__(self, spec, cert_path=None, verify=True, timeout=None):
        self.spec = spec
        self.cert_path = cert_path
        self.verify = verify
        self.timeout = timeout
        self._session = None

    @classmethod
    def unix(cls, socket_path, timeout=None):
        return cls(uri.ConnectionSpec(constants.SCHEME_UNIX, socket_path),
                   timeout=timeout)

    @classmethod
    def tcp(cls, host, timeout=None):
        return cls(uri.ConnectionSpec(constants.SCHEME_TCP, host),
                   timeout=timeout)

    @classmethod
    def tls(cls, host, cert_path, verify=True, timeout=None):
        return cls(uri.ConnectionSpec(constants.SCHEME_HTTPS, host),
                   cert_path=cert_path, verify=verify, timeout=timeout)

    @property
    def scheme(self):
        return self.spec.scheme

    @property
    def address(self):
        return self.spec.address

    def _get_session(self):
        if self._session is None:
            if self.scheme == constants.SCHEME_UNIX:
                self._session = requests_unixsocket.Session()
            else:
                self._session = requests.Session()

            if self.scheme == constants.SCHEME_HTTPS:
                self._configure_tls(self._session)

            self._session.headers.update({'User-Agent': util.get_user_agent()})
        return self._session

    def _configure_tls(self, session):
        if not self.cert_path:
            raise errors.TransportError(
                'A certificate path is required for TLS connections')
        session.cert = (os.path.join(self.cert_path, constants.TLS_CERT_FILE),
                        os.path.join(self.cert_path, constants.TLS_KEY_FILE))
        if self.verify:
            session.verify = os.path.join(self.cert_path,
                                          constants.TLS_CA_FILE)
        else:
            session.verify = False

    def url(self, endpoint):
        if self.scheme == constants.SCHEME_UNIX:
            return uri.socket_url(self.address, endpoint)
        return uri.host_url(self.scheme, self.address, endpoint)

    def request(self, method, endpoint, payload=EMPTY_PAYLOAD, headers=None,
                stream=False):
        """Perform one request and return the response.

        Raises:
            TransportError: The connection to the daemon failed.
            FaultError: The daemon answered with a non-2xx status.
        """
        if not headers:
            headers = {}
        if payload.content_type:
            headers['Content-Type'] = payload.content_type

        session = self._get_session()
        url = self.url(endpoint)
        util.log_request(method, endpoint, headers=headers,
                         data=payload.data, stream=stream)
        try:
            r = session.request(method, url, data=payload.data,
                                headers=headers, stream=stream,
                                timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise errors.TransportError(
                'Request %s %s failed: %s' % (method, endpoint, e)) from e
        util.log_response(r, stream=stream)

        if not 200 <= r.status_code < 300 and r.status_code != 101:
            body = _decode_error_body(r)
            r.close()
            raise errors.fault_from_response(
                r.status_code, body, method=method, endpoint=endpoint)
        return r

    def request_string(self, method, endpoint, payload=EMPTY_PAYLOAD,
                       headers=None):
        return self.request(method, endpoint, payload=payload,
                            headers=headers).text

    def request_json(self, method, endpoint, payload=EMPTY_PAYLOAD,
                     headers=None):
        r = self.request(method, endpoint, payload=payload, headers=headers)
        if not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise errors.SerializationError(
                'Failed to decode response from %s %s: %s'
                % (method, endpoint, e)) from e

    def stream_chunks(self, method, endpoint, payload=EMPTY_PAYLOAD,
                      headers=None):
        """Yield the response body as it arrives.

        The request is only sent once iteration starts. Closing the
        generator before it is exhausted closes the connection.
        """
        r = self.request(method, endpoint, payload=payload, headers=headers,
                         stream=True)
        try:
            for chunk in iter_body(r):
                yield chunk
        except (requests.exceptions.ChunkedEncodingError,
                requests.exceptions.ConnectionError, OSError) as e:
            raise errors.TransportError(
                'Stream %s %s failed: %s' % (method, endpoint, e)) from e
        finally:
            r.close()

    def stream_upgrade(self, method, endpoint, payload=EMPTY_PAYLOAD):
        """Request a protocol upgrade and return the raw connection.

        Raises:
            ConnectionNotUpgradedError: The daemon answered with a 2xx status
                other than 101 Switching Protocols.
        """
        headers = {'Connection': 'Upgrade', 'Upgrade': 'tcp'}
        r = self.request(method, endpoint, payload=payload, headers=headers,
                         stream=True)
        if r.status_code != 101:
            r.close()
            raise errors.ConnectionNotUpgradedError(r.status_code)
        return UpgradedConnection(r)

    def close(self):
        if self._session is not None:
            self._session.close()
            self._session = None
