import logging
import os
import tarfile
import tempfile

from podman_api.api import base
from podman_api import constants
from podman_api import opts as opts_mod
from podman_api import stream
from podman_api import transport


LOG = logging.getLogger(__name__)
LOG.setLevel(logging.INFO)


def _auth_headers(opts):
    if opts is None:
        return None
    auth = opts.auth_header()
    if auth is None:
        return None
    return {constants.AUTH_HEADER: auth}


class Image(base.Handle):
    RESOURCE = base.ApiResource.IMAGES

    def inspect(self):
        return self.podman.get_json(self._ep('/json'))

    def history(self):
        return self.podman.get_json(self._ep('/history'))

    def delete(self):
        return self.podman.delete_json(self._ep())

    def remove(self):
        return self.podman.delete_json(
            base.with_opts(self._ep(), opts_mod.ImagesRemoveOpts(force=True)))

    def tag(self, opts):
        self.podman.post(base.with_opts(self._ep('/tag'), opts))

    def untag(self, opts=None):
        """Remove a name from the image; without options remove them all."""
        self.podman.post(base.with_opts(self._ep('/untag'), opts))

    def export(self, opts=None):
        """Yield the image as archive bytes."""
        return self.podman.get_stream(base.with_opts(self._ep('/get'), opts))

    def changes(self, opts=None):
        return self.podman.get_json(base.with_opts(self._ep('/changes'), opts))

    def tree(self, opts=None):
        return self.podman.get_json(base.with_opts(self._ep('/tree'), opts))

    def push(self, opts=None):
        """Push the image to a registry, returning the daemon's report.

        Registry credentials given as opts auth are sent in the
        X-Registry-Auth header.
        """
        return self.podman.post_string(
            base.with_opts(self._ep('/push'), opts),
            headers=_auth_headers(opts))


class Images(base.Collection):
    HANDLE = Image

    def build(self, opts):
        """Build an image from the context directory opts.path.

        The directory is packed into a temporary tar archive which is sent
        as the request body. Yields the daemon's progress messages as dicts.
        Nothing is packed or sent until iteration starts.

        Raises:
            StreamError: The build failed.
        """
        ep = base.with_opts('/libpod/build', opts)
        with tempfile.TemporaryFile() as context:
            LOG.debug('Packing build context %s' % opts.path)
            with tarfile.open(fileobj=context, mode='w') as tar:
                for name in sorted(os.listdir(opts.path)):
                    tar.add(os.path.join(opts.path, name), arcname=name)
            context.seek(0)

            chunks = self.podman.post_stream(ep,
                                             transport.tar_payload(context))
            yield from stream.decode_json_stream(chunks)

    def list(self, opts=None):
        return self.podman.get_json(
            base.with_opts('/libpod/images/json', opts))

    def pull(self, opts):
        """Pull an image, yielding the daemon's progress messages as dicts.

        Raises:
            StreamError: The pull failed.
        """
        chunks = self.podman.post_stream(
            base.with_opts('/libpod/images/pull', opts),
            headers=_auth_headers(opts))
        return stream.decode_json_stream(chunks)

    def load(self, archive):
        """Load images from a tar archive given as bytes or a file object."""
        return self.podman.post_json('/libpod/images/load',
                                     transport.tar_payload(archive))

    def import_image(self, opts, archive):
        return self.podman.post_json(
            base.with_opts('/libpod/images/import', opts),
            transport.tar_payload(archive))

    def remove(self, opts=None):
        return self.podman.delete_json(
            base.with_opts('/libpod/images/remove', opts))

    def prune(self, opts=None):
        return self.podman.post_json(
            base.with_opts('/libpod/images/prune', opts))

    def search(self, opts=None):
        return self.podman.get_json(
            base.with_opts('/libpod/images/search', opts))
