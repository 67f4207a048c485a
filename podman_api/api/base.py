import enum

from podman_api import models
from podman_api import transport
from podman_api import util


def with_opts(ep, opts):
    """Append the query string of optional UrlOpts to an endpoint."""
    if opts is None:
        return ep
    return util.construct_ep(ep, opts.serialize())


def json_body(opts):
    if opts is None:
        return transport.json_payload('{}')
    return transport.json_payload(opts.serialize())


class ApiResource(enum.Enum):
    """Resource kinds addressed as /libpod/<kind>/... endpoints."""
    CONTAINERS = 'containers'
    EXEC = 'exec'
    IMAGES = 'images'
    MANIFESTS = 'manifests'
    NETWORKS = 'networks'
    PODS = 'pods'
    SECRETS = 'secrets'
    VOLUMES = 'volumes'
    SYSTEM = 'system'


class Handle(object):
    """Operations on one remote object, identified by name or id.

    A handle holds no state beyond the client and the identifier; creating
    one does not contact the daemon.
    """
    RESOURCE = None

    def __init__(self, podman, id):
        self.podman = podman
        self.id = models.Id(id)

    def _ep(self, suffix=''):
        return '/libpod/%s/%s%s' % (self.RESOURCE.value, self.id, suffix)

    def exists(self):
        return self.podman.resource_exists(self.RESOURCE, self.id)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash((type(self).__name__, self.id))

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, str(self.id))


class Collection(object):
    """Operations on all objects of one kind, and a factory for handles."""
    HANDLE = None

    def __init__(self, podman):
        self.podman = podman

    def get(self, id):
        return self.HANDLE(self.podman, id)

    def __repr__(self):
        return '%s()' % type(self).__name__
