from podman_api.api import base
from podman_api import util


class Network(base.Handle):
    """Operations on one network, identified by name."""
    RESOURCE = base.ApiResource.NETWORKS

    def inspect(self):
        return self.podman.get_json(self._ep('/json'))

    def _delete(self, force):
        ep = self._ep()
        if force is not None:
            ep = util.construct_ep(ep, util.encoded_pair('force', force))
        return self.podman.delete_json(ep)

    def delete(self):
        return self._delete(None)

    def remove(self):
        return self._delete(True)

    def connect(self, opts):
        self.podman.post(self._ep('/connect'), base.json_body(opts))

    def disconnect(self, opts):
        self.podman.post(self._ep('/disconnect'), base.json_body(opts))


class Networks(base.Collection):
    HANDLE = Network

    def create(self, opts):
        return self.podman.post_json('/libpod/networks/create',
                                     base.json_body(opts))

    def list(self, opts=None):
        return self.podman.get_json(base.with_opts('/libpod/networks/json',
                                                   opts))

    def prune(self, opts=None):
        return self.podman.post_json(base.with_opts('/libpod/networks/prune',
                                                    opts))
