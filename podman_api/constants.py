# Latest libpod API version this library has been written against.
LATEST_API_VERSION = (3, 4, 4)

API_DOCS_URL = 'https://docs.podman.io/en/v3.4.4/_static/api.html'

# Default socket locations, most specific first. The rootless socket lives
# under the user's runtime directory.
# See: https://docs.podman.io/en/latest/markdown/podman-system-service.1.html
ROOTLESS_SOCKET_TEMPLATE = '/run/user/%d/podman/podman.sock'
ROOTFUL_SOCKET_PATH = '/run/podman/podman.sock'

# Connection URI schemes
SCHEME_UNIX = 'unix'
SCHEME_TCP = 'tcp'
SCHEME_HTTP = 'http'
SCHEME_HTTPS = 'https'

# TLS material expected in a certificate directory
TLS_CERT_FILE = 'cert.pem'
TLS_KEY_FILE = 'key.pem'
TLS_CA_FILE = 'ca.pem'

# Multiplexed stream framing: 1 type byte, 3 reserved bytes, then a
# big-endian uint32 payload length.
STREAM_HEADER_SIZE = 8
STREAM_HEADER_FORMAT = '>BxxxI'

# Stream type selectors used in frame headers
STREAM_STDIN = 0
STREAM_STDOUT = 1
STREAM_STDERR = 2

# Headers
AUTH_HEADER = 'X-Registry-Auth'
CONTENT_TYPE_JSON = 'application/json'
CONTENT_TYPE_TAR = 'application/x-tar'

# Ping response headers
PING_API_VERSION = 'api-version'
PING_LIBPOD_API_VERSION = 'libpod-api-version'
PING_LIBPOD_BUILDAH_VERSION = 'libpod-buildah-version'
PING_BUILDKIT_VERSION = 'buildkit-version'
PING_DOCKER_EXPERIMENTAL = 'docker-experimental'
PING_CACHE_CONTROL = 'cache-control'
PING_PRAGMA = 'pragma'

# Read size for streamed response bodies
STREAM_CHUNK_SIZE = 8192
