import logging

from podman_api.api import base as api_base
from podman_api.api import containers
from podman_api.api import exec as exec_api
from podman_api.api import images
from podman_api.api import manifests
from podman_api.api import networks
from podman_api.api import pods
from podman_api.api import secrets
from podman_api.api import volumes
from podman_api import config
from podman_api import constants
from podman_api import errors
from podman_api import models
from podman_api import stream
from podman_api import transport
from podman_api import uri as uri_util
from podman_api import version as version_util


LOG = logging.getLogger(__name__)
LOG.setLevel(logging.INFO)

YAML_CONTENT_TYPE = 'application/x-yaml'


class Podman(object):
    """A client for one libpod daemon.

    Args:
        uri: Where the daemon listens, for example
            'unix:///run/podman/podman.sock', 'tcp://localhost:8080' or
            'https://host:8443'.
        version: The API version to address, as an ApiVersion, a tuple or a
            'MAJOR.MINOR.PATCH' string. Defaults to LATEST_API_VERSION.
        cert_path: Directory holding cert.pem, key.pem and ca.pem, needed
            for https URIs.
        tls_verify: Whether to verify the daemon's certificate against
            ca.pem.
        timeout: Optional requests timeout in seconds. Streaming calls are
            subject to it between chunks.

    Raises:
        UnsupportedSchemeError: The URI scheme is unknown or unavailable.
        MissingAuthorityError: The URI has nothing after the scheme.
    """

    def __init__(self, uri, version=version_util.LATEST_API_VERSION,
                 cert_path=None, tls_verify=True, timeout=None):
        spec = uri_util.parse_connection_uri(uri)
        self.transport = transport.Transport(
            spec, cert_path=cert_path, verify=tls_verify, timeout=timeout)
        self.api_version = version_util.ApiVersion.from_value(version)

    @classmethod
    def _with_transport(cls, conn, version):
        podman = cls.__new__(cls)
        podman.transport = conn
        podman.api_version = version_util.ApiVersion.from_value(version)
        return podman

    @classmethod
    def unix(cls, socket_path, version=version_util.LATEST_API_VERSION,
             timeout=None):
        if not uri_util.unix_supported():
            raise errors.UnsupportedSchemeError(constants.SCHEME_UNIX)
        return cls._with_transport(
            transport.Transport.unix(socket_path, timeout=timeout), version)

    @classmethod
    def tcp(cls, host, version=version_util.LATEST_API_VERSION,
            timeout=None):
        return cls._with_transport(
            transport.Transport.tcp(host, timeout=timeout), version)

    @classmethod
    def tls(cls, host, cert_path, verify=True,
            version=version_util.LATEST_API_VERSION, timeout=None):
        return cls._with_transport(
            transport.Transport.tls(host, cert_path, verify=verify,
                                    timeout=timeout),
            version)

    @classmethod
    def from_env(cls, uri=None, version=None, cert_path=None,
                 tls_verify=None, timeout=None):
        """Build a client from arguments, falling back to the environment."""
        return cls(config.resolve_uri(uri),
                   version=config.resolve_api_version(version),
                   cert_path=config.resolve_cert_path(cert_path),
                   tls_verify=config.resolve_tls_verify(tls_verify),
                   timeout=timeout)

    def __repr__(self):
        return 'Podman(%s://%s, v%s)' % (
            self.transport.scheme, self.transport.address, self.api_version)

    def close(self):
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def adjust_api_version(self):
        """Lower the API version used to the server's, if it is older."""
        reported = self.version().get('Version', '')
        # Development builds report versions like 4.0.0-dev
        server_version = version_util.ApiVersion.parse(
            reported.split('-', 1)[0])
        if server_version < self.api_version:
            LOG.info('Server API version %s is older than %s, adjusting'
                     % (server_version, self.api_version))
            self.api_version = server_version
        return self.api_version

    # Handles

    def containers(self):
        return containers.Containers(self)

    def execs(self):
        return exec_api.Execs(self)

    def images(self):
        return images.Images(self)

    def manifests(self):
        return manifests.Manifests(self)

    def networks(self):
        return networks.Networks(self)

    def pods(self):
        return pods.Pods(self)

    def secrets(self):
        return secrets.Secrets(self)

    def volumes(self):
        return volumes.Volumes(self)

    # System

    def info(self):
        return self.get_json('/libpod/info')

    def ping(self):
        r = self.get('/libpod/_ping')
        return models.LibpodPingInfo.from_headers(r.headers)

    def version(self):
        return self.get_json('/libpod/version')

    def data_usage(self):
        return self.get_json('/libpod/system/df')

    def prune(self):
        return self.post_json('/libpod/system/prune')

    def events(self, opts=None):
        """Yield events as the daemon reports them.

        Each item is an Event, or an EventDecodeError for a line which could
        not be decoded. Closing the generator closes the connection.
        """
        ep = api_base.with_opts('/libpod/events', opts)
        return stream.decode_events(self.get_stream(ep))

    def play_kubernetes_yaml(self, yaml, opts=None):
        ep = api_base.with_opts('/libpod/play/kube', opts)
        return self.post_json(ep, transport.Payload(yaml, YAML_CONTENT_TYPE))

    def resource_exists(self, resource, id):
        """Return True if /libpod/<resource>/<id>/exists answers 204."""
        try:
            self.get('/libpod/%s/%s/exists' % (resource.value, id))
        except errors.NotFoundError:
            return False
        return True

    # Requests against versioned endpoints

    def _ep(self, endpoint):
        return self.api_version.make_endpoint(endpoint)

    def get(self, endpoint, headers=None):
        return self.transport.request('GET', self._ep(endpoint),
                                      headers=headers)

    def get_json(self, endpoint, headers=None):
        return self.transport.request_json('GET', self._ep(endpoint),
                                           headers=headers)

    def get_string(self, endpoint, headers=None):
        return self.transport.request_string('GET', self._ep(endpoint),
                                             headers=headers)

    def get_stream(self, endpoint, headers=None):
        return self.transport.stream_chunks('GET', self._ep(endpoint),
                                            headers=headers)

    def head(self, endpoint, headers=None):
        return self.transport.request('HEAD', self._ep(endpoint),
                                      headers=headers)

    def post(self, endpoint, payload=transport.EMPTY_PAYLOAD, headers=None):
        return self.transport.request('POST', self._ep(endpoint),
                                      payload=payload, headers=headers)

    def post_json(self, endpoint, payload=transport.EMPTY_PAYLOAD,
                  headers=None):
        return self.transport.request_json('POST', self._ep(endpoint),
                                           payload=payload, headers=headers)

    def post_string(self, endpoint, payload=transport.EMPTY_PAYLOAD,
                    headers=None):
        return self.transport.request_string('POST', self._ep(endpoint),
                                             payload=payload, headers=headers)

    def post_stream(self, endpoint, payload=transport.EMPTY_PAYLOAD,
                    headers=None):
        return self.transport.stream_chunks('POST', self._ep(endpoint),
                                            payload=payload, headers=headers)

    def post_upgrade_stream(self, endpoint, payload=transport.EMPTY_PAYLOAD):
        return self.transport.stream_upgrade('POST', self._ep(endpoint),
                                             payload=payload)

    def put(self, endpoint, payload=transport.EMPTY_PAYLOAD, headers=None):
        return self.transport.request('PUT', self._ep(endpoint),
                                      payload=payload, headers=headers)

    def delete(self, endpoint, headers=None):
        return self.transport.request('DELETE', self._ep(endpoint),
                                      headers=headers)

    def delete_json(self, endpoint, headers=None):
        return self.transport.request_json('DELETE', self._ep(endpoint),
                                           headers=headers)
