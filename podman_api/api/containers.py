import logging

from podman_api.api import base
from podman_api.api import exec as exec_api
from podman_api import models
from podman_api import opts as opts_mod
from podman_api.opts.base import VEC
from podman_api import stream
from podman_api import util


LOG = logging.getLogger(__name__)
LOG.setLevel(logging.INFO)


class Container(base.Handle):
    """Operations on one container.

    See the libpod API reference for the details of each endpoint:
    https://docs.podman.io/en/v3.4.4/_static/api.html#tag/containers
    """
    RESOURCE = base.ApiResource.CONTAINERS

    def _query_ep(self, suffix, pairs):
        return util.construct_ep(self._ep(suffix), util.encoded_pairs(pairs))

    def start(self, detach_keys=None):
        ep = self._ep('/start')
        if detach_keys is not None:
            ep = util.construct_ep(ep, util.encoded_pair('detachKeys',
                                                         detach_keys))
        self.podman.post(ep)

    def stop(self, opts=None):
        self.podman.post(base.with_opts(self._ep('/stop'), opts))

    def inspect(self):
        return self.podman.get_json(
            self._query_ep('/json', [('size', 'true')]))

    def is_tty(self):
        config = self.inspect().get('Config') or {}
        return bool(config.get('Tty'))

    def send_signal(self, signal):
        self.podman.post(self._query_ep('/kill', [('signal', str(signal))]))

    def kill(self):
        self.send_signal('TERM')

    def pause(self):
        self.podman.post(self._ep('/pause'))

    def unpause(self):
        self.podman.post(self._ep('/unpause'))

    def restart(self):
        self.podman.post(self._ep('/restart'))

    def restart_with_timeout(self, t):
        self.podman.post(self._query_ep('/restart', [('t', str(t))]))

    def delete(self, opts=None):
        self.podman.delete(base.with_opts(self._ep(), opts))

    def remove(self):
        self.delete(opts_mod.ContainerDeleteOpts(force=True))

    def mount(self):
        """Mount the container's root filesystem, returning its path."""
        return self.podman.post_json(self._ep('/mount'))

    def unmount(self):
        self.podman.post(self._ep('/unmount'))

    def checkpoint(self, opts=None):
        """Checkpoint the container, yielding the exported archive bytes.

        The archive is only produced when the options ask for an export.
        """
        return self.podman.post_stream(
            base.with_opts(self._ep('/checkpoint'), opts))

    def checkpoint_export(self, opts=None):
        opts = opts or opts_mod.ContainerCheckpointOpts()
        return self.checkpoint(opts.for_export())

    def restore(self, opts=None):
        return self.podman.post_json(
            base.with_opts(self._ep('/restore'), opts))

    def commit(self, opts=None):
        opts = (opts or opts_mod.ContainerCommitOpts()).for_container(self.id)
        return self.podman.post_json(base.with_opts('/libpod/commit', opts))

    def create_exec(self, opts=None):
        """Create an exec session in this container.

        The returned Exec knows its TTY mode from the options given.
        """
        created = models.IdResponse.from_dict(self.podman.post_json(
            self._ep('/exec'), base.json_body(opts)))
        tty = bool(opts.get('tty')) if opts is not None else False
        return exec_api.Exec(self.podman, created.id, tty=tty)

    def rename(self, name):
        self.podman.post(self._query_ep('/rename', [('name', name)]))

    def init(self):
        self.podman.post(self._ep('/init'))

    def wait(self, opts=None):
        return self.podman.post_json(base.with_opts(self._ep('/wait'), opts))

    def attach(self, opts=None, tty=None):
        """Attach to the container's stdio.

        Returns a Multiplexer which yields output Frames and accepts writes
        to stdin. When tty is not given the container is inspected to find
        out whether it has a TTY.
        """
        if tty is None:
            tty = self.is_tty()
        opts = (opts or opts_mod.ContainerAttachOpts()).stream()
        conn = self.podman.post_upgrade_stream(
            base.with_opts(self._ep('/attach'), opts))
        return stream.Multiplexer(conn, tty=tty)

    def logs(self, opts=None, tty=None):
        """Return a generator of log Frames.

        Output of a container with a TTY is not multiplexed, so it all
        arrives as stdout.
        """
        if tty is None:
            tty = self.is_tty()
        chunks = self.podman.get_stream(base.with_opts(self._ep('/logs'),
                                                       opts))
        return stream.decode_output(chunks, tty)

    def _stats_opts(self, opts):
        opts = opts or opts_mod.ContainerStatsOpts()
        return opts.with_param('containers', [self.id], kind=VEC)

    def stats(self, opts=None):
        """Return a single resource usage sample."""
        opts = self._stats_opts(opts).oneshot()
        return self.podman.get_json(
            base.with_opts('/libpod/containers/stats', opts))

    def stats_stream(self, opts=None):
        """Yield resource usage samples until the generator is closed."""
        opts = self._stats_opts(opts).stream()
        return stream.decode_json_stream(self.podman.get_stream(
            base.with_opts('/libpod/containers/stats', opts)))

    def top(self, opts=None):
        opts = (opts or opts_mod.ContainerTopOpts()).oneshot()
        return self.podman.get_json(base.with_opts(self._ep('/top'), opts))

    def changes(self, opts=None):
        return self.podman.get_json(base.with_opts(self._ep('/changes'), opts))

    def export(self):
        """Yield the container's filesystem as tar archive bytes."""
        return self.podman.get_stream(self._ep('/export'))

    def healthcheck(self):
        return self.podman.get_json(self._ep('/healthcheck'))

    def resize(self, width, height):
        self.podman.post(self._query_ep('/resize', [('h', str(height)),
                                                    ('w', str(width))]))

    def generate_systemd_units(self, opts=None):
        return self.podman.get_json(base.with_opts(
            '/libpod/generate/%s/systemd' % self.id, opts))

    def generate_kube(self, service=False):
        """Return Kubernetes YAML describing this container."""
        ep = util.construct_ep('/libpod/generate/kube', util.encoded_pairs(
            [('names', self.id), ('service', 'true' if service else 'false')]))
        return self.podman.get_string(ep)


class Containers(base.Collection):
    HANDLE = Container

    def create(self, opts):
        """Create a container, returning an IdResponse."""
        created = models.IdResponse.from_dict(self.podman.post_json(
            '/libpod/containers/create', base.json_body(opts)))
        for warning in created.warnings:
            LOG.warning('Container %s created with warning: %s'
                        % (created.id, warning))
        return created

    def list(self, opts=None):
        return self.podman.get_json(
            base.with_opts('/libpod/containers/json', opts))

    def prune(self, opts=None):
        return self.podman.post_json(
            base.with_opts('/libpod/containers/prune', opts))
