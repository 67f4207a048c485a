from podman_api.api import base
from podman_api import models
from podman_api import util


class Manifest(base.Handle):
    """Operations on one manifest list, identified by name."""
    RESOURCE = base.ApiResource.MANIFESTS

    @property
    def name(self):
        return self.id

    def inspect(self):
        return self.podman.get_json(self._ep('/json'))

    def add_image(self, opts):
        return models.IdResponse.from_dict(self.podman.post_json(
            self._ep('/add'), base.json_body(opts)))

    def remove_image(self, digest):
        ep = util.construct_ep(self._ep(), util.encoded_pair('digest', digest))
        return self.podman.delete_json(ep)

    def push(self, opts):
        return self.podman.post_json(base.with_opts(self._ep('/push'), opts))

    def delete(self):
        self.podman.delete(self._ep())


class Manifests(base.Collection):
    HANDLE = Manifest

    def create(self, opts):
        """Create a manifest list named opts.name and return a handle."""
        created = models.IdResponse.from_dict(self.podman.post_json(
            base.with_opts('/libpod/manifests/%s' % opts.name, opts)))
        return self.get(created.id)
