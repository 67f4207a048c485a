from podman_api.api import base
from podman_api import util


class Volume(base.Handle):
    """Operations on one volume, identified by name."""
    RESOURCE = base.ApiResource.VOLUMES

    def inspect(self):
        return self.podman.get_json(self._ep('/json'))

    def _delete(self, force):
        ep = self._ep()
        if force is not None:
            ep = util.construct_ep(ep, util.encoded_pair('force', force))
        self.podman.delete(ep)

    def delete(self):
        self._delete(None)

    def remove(self):
        self._delete(True)


class Volumes(base.Collection):
    HANDLE = Volume

    def create(self, opts=None):
        return self.podman.post_json('/libpod/volumes/create',
                                     base.json_body(opts))

    def list(self, opts=None):
        return self.podman.get_json(base.with_opts('/libpod/volumes/json',
                                                   opts))

    def prune(self, opts=None):
        return self.podman.post_json(base.with_opts('/libpod/volumes/prune',
                                                    opts))
