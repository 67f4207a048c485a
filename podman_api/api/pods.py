from podman_api.api import base
from podman_api import models
from podman_api import opts as opts_mod
from podman_api import util


class Pod(base.Handle):
    """Operations on one pod.

    Most operations return the daemon's report for the pod, which lists
    the containers affected and any errors hit along the way.
    """
    RESOURCE = base.ApiResource.PODS

    def _query_ep(self, suffix, pairs):
        return util.construct_ep(self._ep(suffix), util.encoded_pairs(pairs))

    def start(self):
        return self.podman.post_json(self._ep('/start'))

    def stop(self):
        return self.podman.post_json(self._ep('/stop'))

    def stop_with_timeout(self, t):
        return self.podman.post_json(self._query_ep('/stop', [('t', str(t))]))

    def inspect(self):
        return self.podman.get_json(self._ep('/json'))

    def send_signal(self, signal):
        return self.podman.post_json(
            self._query_ep('/kill', [('signal', str(signal))]))

    def kill(self):
        return self.send_signal('SIGKILL')

    def pause(self):
        return self.podman.post_json(self._ep('/pause'))

    def unpause(self):
        return self.podman.post_json(self._ep('/unpause'))

    def restart(self):
        return self.podman.post_json(self._ep('/restart'))

    def _delete(self, force):
        ep = self._ep()
        if force is not None:
            ep = self._query_ep('', [('force', 'true' if force else 'false')])
        return self.podman.delete_json(ep)

    def delete(self):
        return self._delete(None)

    def remove(self):
        return self._delete(True)

    def top(self, opts=None):
        opts = (opts or opts_mod.PodTopOpts()).oneshot()
        return self.podman.get_json(base.with_opts(self._ep('/top'), opts))

    def generate_systemd_units(self, opts=None):
        return self.podman.get_json(base.with_opts(
            '/libpod/generate/%s/systemd' % self.id, opts))

    def generate_kube(self, service=False):
        """Return Kubernetes YAML describing this pod."""
        ep = util.construct_ep('/libpod/generate/kube', util.encoded_pairs(
            [('names', self.id), ('service', 'true' if service else 'false')]))
        return self.podman.get_string(ep)


class Pods(base.Collection):
    HANDLE = Pod

    def create(self, opts):
        """Create a pod and return a handle to it."""
        created = models.IdResponse.from_dict(self.podman.post_json(
            '/libpod/pods/create', base.json_body(opts)))
        return self.get(created.id)

    def list(self, opts=None):
        return self.podman.get_json(base.with_opts('/libpod/pods/json', opts))

    def prune(self, opts=None):
        return self.podman.post_json(base.with_opts('/libpod/pods/prune',
                                                    opts))

    def stats(self, opts=None):
        return self.podman.get_json(base.with_opts('/libpod/pods/stats', opts))
