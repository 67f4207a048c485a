"""Connection settings resolved from arguments and the environment.

Resolution order for the connection URI:
    1. an explicit uri argument
    2. PODMAN_API_URI
    3. CONTAINER_HOST (as used by the podman remote client)
    4. the first default socket that exists: $XDG_RUNTIME_DIR/podman,
       /run/user/<uid>/podman, then the rootful /run/podman socket
"""

import logging
import os

from podman_api import constants
from podman_api import version


LOG = logging.getLogger(__name__)
LOG.setLevel(logging.INFO)

ENV_URI = 'PODMAN_API_URI'
ENV_CONTAINER_HOST = 'CONTAINER_HOST'
ENV_API_VERSION = 'PODMAN_API_VERSION'
ENV_CERT_PATH = 'PODMAN_CERT_PATH'
ENV_TLS_VERIFY = 'PODMAN_TLS_VERIFY'

TRUE_VALUES = ('true', 'yes', '1', 'on')


def default_socket_paths():
    paths = []
    runtime_dir = os.environ.get('XDG_RUNTIME_DIR')
    if runtime_dir:
        paths.append(os.path.join(runtime_dir, 'podman', 'podman.sock'))
    if hasattr(os, 'getuid'):
        rootless = constants.ROOTLESS_SOCKET_TEMPLATE % os.getuid()
        if rootless not in paths:
            paths.append(rootless)
    paths.append(constants.ROOTFUL_SOCKET_PATH)
    return paths


def detect_socket():
    """Return the first default podman socket that exists, or None."""
    for path in default_socket_paths():
        if os.path.exists(path):
            LOG.debug('Found podman socket at %s' % path)
            return path
    return None


def resolve_uri(uri=None):
    if uri:
        return uri
    for env in (ENV_URI, ENV_CONTAINER_HOST):
        value = os.environ.get(env)
        if value:
            LOG.debug('Using connection URI from %s' % env)
            return value
    socket_path = detect_socket()
    if socket_path:
        return '%s://%s' % (constants.SCHEME_UNIX, socket_path)
    return '%s://%s' % (constants.SCHEME_UNIX,
                        constants.ROOTFUL_SOCKET_PATH)


def resolve_api_version(api_version=None):
    if api_version is None:
        api_version = os.environ.get(ENV_API_VERSION)
    if not api_version:
        return version.LATEST_API_VERSION
    return version.ApiVersion.from_value(api_version)


def resolve_cert_path(cert_path=None):
    return cert_path or os.environ.get(ENV_CERT_PATH)


def resolve_tls_verify(tls_verify=None):
    if tls_verify is not None:
        return tls_verify
    value = os.environ.get(ENV_TLS_VERIFY)
    if value is None:
        return True
    return value.lower() in TRUE_VALUES
