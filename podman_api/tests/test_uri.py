"""Tests for connection URI parsing, configuration and client setup."""

import os
import unittest
from unittest import mock

from podman_api import config
from podman_api import errors
from podman_api.podman import Podman
from podman_api import uri
from podman_api import version


class TestParseConnectionUri(unittest.TestCase):
    """Tests for parse_connection_uri()."""

    def test_unix_socket(self):
        """Test a unix URI yields the socket path."""
        spec = uri.parse_connection_uri('unix:///run/podman/podman.sock')
        self.assertEqual('unix', spec.scheme)
        self.assertEqual('/run/podman/podman.sock', spec.address)

    def test_tcp(self):
        spec = uri.parse_connection_uri('tcp://localhost:8080')
        self.assertEqual(('tcp', 'localhost:8080'), tuple(spec))

    def test_http_is_tcp(self):
        """Test http is accepted as an alias for tcp."""
        spec = uri.parse_connection_uri('http://10.0.0.1:8080')
        self.assertEqual(('tcp', '10.0.0.1:8080'), tuple(spec))

    def test_https(self):
        spec = uri.parse_connection_uri('https://podman.example.com:8443')
        self.assertEqual(('https', 'podman.example.com:8443'), tuple(spec))

    def test_tcp_path_is_dropped(self):
        """Test a trailing path on a TCP URI is ignored."""
        spec = uri.parse_connection_uri('tcp://localhost:8080/some/path')
        self.assertEqual('localhost:8080', spec.address)

    def test_empty_uri(self):
        """Test an empty string is rejected as an unsupported scheme."""
        with self.assertRaises(errors.UnsupportedSchemeError):
            uri.parse_connection_uri('')

    def test_uri_without_scheme(self):
        with self.assertRaises(errors.UnsupportedSchemeError):
            uri.parse_connection_uri('invalid_uri')

    def test_unknown_scheme(self):
        with self.assertRaises(errors.UnsupportedSchemeError) as ctx:
            uri.parse_connection_uri('ftp://example.com')
        self.assertEqual('ftp', ctx.exception.scheme)
        self.assertEqual('Provided scheme `ftp` is not supported',
                         str(ctx.exception))

    def test_missing_authority(self):
        """Test nothing after the scheme is a missing authority."""
        for value in ('unix://', 'tcp://', 'https:///path'):
            with self.assertRaises(errors.MissingAuthorityError):
                uri.parse_connection_uri(value)

    @mock.patch('podman_api.uri.unix_supported', return_value=False)
    def test_unix_unsupported_platform(self, mock_supported):
        """Test unix URIs are rejected where there are no unix sockets."""
        with self.assertRaises(errors.UnsupportedSchemeError) as ctx:
            uri.parse_connection_uri('unix:///run/podman/podman.sock')
        self.assertEqual('unix', ctx.exception.scheme)

    def test_socket_url(self):
        """Test the socket path is URL-encoded for requests_unixsocket."""
        url = uri.socket_url('/run/podman/podman.sock', '/v3.4/libpod/info')
        self.assertEqual(
            'http+unix://%2Frun%2Fpodman%2Fpodman.sock/v3.4/libpod/info', url)

    def test_host_url(self):
        self.assertEqual('http://h:1/v3.4/x',
                         uri.host_url('tcp', 'h:1', '/v3.4/x'))
        self.assertEqual('https://h:1/v3.4/x',
                         uri.host_url('https', 'h:1', '/v3.4/x'))


class TestPodmanConstruction(unittest.TestCase):
    """Tests for building a client from a URI."""

    def test_default_version(self):
        podman = Podman('unix:///run/podman/podman.sock')
        self.assertEqual(version.LATEST_API_VERSION, podman.api_version)
        self.assertEqual('unix', podman.transport.scheme)

    def test_version_string(self):
        podman = Podman('tcp://localhost:8080', version='3.2.1')
        self.assertEqual(version.ApiVersion(3, 2, 1), podman.api_version)
        self.assertEqual('http://localhost:8080/v3.2/libpod/info',
                         podman.transport.url('/v3.2/libpod/info'))

    def test_invalid_uris(self):
        """Test construction fails for unusable URIs."""
        for value in ('', 'invalid_uri'):
            with self.assertRaises(errors.UnsupportedSchemeError):
                Podman(value)
        with self.assertRaises(errors.MissingAuthorityError):
            Podman('tcp://')

    def test_malformed_version(self):
        with self.assertRaises(errors.MalformedVersionError):
            Podman('tcp://localhost:8080', version='3.4')

    def test_tls(self):
        podman = Podman.tls('host:8443', '/etc/podman/certs', verify=False)
        self.assertEqual('https', podman.transport.scheme)
        self.assertEqual('/etc/podman/certs', podman.transport.cert_path)
        self.assertFalse(podman.transport.verify)

    @mock.patch('podman_api.uri.unix_supported', return_value=True)
    def test_constructor_timeouts(self, mock_supported):
        """Test the explicit constructors pass their timeout on."""
        self.assertIsNone(Podman.tcp('localhost:8080').transport.timeout)
        self.assertEqual(
            5, Podman.tcp('localhost:8080', timeout=5).transport.timeout)
        self.assertEqual(
            10, Podman.unix('/run/podman/podman.sock',
                            timeout=10).transport.timeout)
        self.assertEqual(
            15, Podman.tls('host:8443', '/etc/podman/certs',
                           timeout=15).transport.timeout)

    @mock.patch('podman_api.uri.unix_supported', return_value=False)
    def test_unix_constructor_unsupported(self, mock_supported):
        with self.assertRaises(errors.UnsupportedSchemeError):
            Podman.unix('/run/podman/podman.sock')

    def test_repr(self):
        podman = Podman.tcp('localhost:8080')
        self.assertEqual('Podman(tcp://localhost:8080, v3.4)', repr(podman))


class TestConfig(unittest.TestCase):
    """Tests for settings resolved from the environment."""

    def test_explicit_uri_wins(self):
        with mock.patch.dict(os.environ, {'PODMAN_API_URI': 'tcp://env:1'}):
            self.assertEqual('tcp://arg:1', config.resolve_uri('tcp://arg:1'))

    def test_uri_from_environment(self):
        with mock.patch.dict(os.environ, {'PODMAN_API_URI': 'tcp://env:1',
                                          'CONTAINER_HOST': 'tcp://ch:1'}):
            self.assertEqual('tcp://env:1', config.resolve_uri())

    def test_uri_from_container_host(self):
        with mock.patch.dict(os.environ, {'CONTAINER_HOST': 'tcp://ch:1'},
                             clear=True):
            self.assertEqual('tcp://ch:1', config.resolve_uri())

    @mock.patch('podman_api.config.os.path.exists')
    def test_uri_from_runtime_dir(self, mock_exists):
        """Test the rootless socket under XDG_RUNTIME_DIR is found."""
        socket_path = '/run/user/1000/podman/podman.sock'
        mock_exists.side_effect = lambda p: p == socket_path
        with mock.patch.dict(os.environ, {'XDG_RUNTIME_DIR': '/run/user/1000'},
                             clear=True):
            self.assertEqual('unix:///run/user/1000/podman/podman.sock',
                             config.resolve_uri())

    @mock.patch('podman_api.config.os.path.exists', return_value=False)
    def test_uri_fallback(self, mock_exists):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual('unix:///run/podman/podman.sock',
                             config.resolve_uri())

    def test_api_version(self):
        with mock.patch.dict(os.environ, {'PODMAN_API_VERSION': '3.1.0'}):
            self.assertEqual(version.ApiVersion(3, 1, 0),
                             config.resolve_api_version())
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(version.LATEST_API_VERSION,
                             config.resolve_api_version())

    def test_tls_verify(self):
        with mock.patch.dict(os.environ, {'PODMAN_TLS_VERIFY': 'no'}):
            self.assertFalse(config.resolve_tls_verify())
            self.assertTrue(config.resolve_tls_verify(True))
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertTrue(config.resolve_tls_verify())

    def test_from_env(self):
        with mock.patch.dict(os.environ, {'PODMAN_API_URI': 'tcp://env:1',
                                          'PODMAN_API_VERSION': '3.0.0'},
                             clear=True):
            podman = Podman.from_env()
        self.assertEqual('env:1', podman.transport.address)
        self.assertEqual(version.ApiVersion(3, 0, 0), podman.api_version)


if __name__ == '__main__':
    unittest.main()
