import json
import logging
import os
from oslo_concurrency import processutils
import testtools
import uuid


from podman_api import errors
from podman_api import models
from podman_api import opts
from podman_api.podman import Podman
from podman_api import stream


logging.basicConfig(level=logging.INFO, format='%(message)s')
LOG = logging.getLogger()

IMAGE = 'docker.io/library/busybox:latest'


class LiveContainersTestCase(testtools.TestCase):
    def setUp(self):
        super().setUp()
        if not os.environ.get('PODMAN_API_URI'):
            self.skipTest('PODMAN_API_URI is not set')
        self.podman = Podman.from_env()
        self.addCleanup(self.podman.close)

        for progress in self.podman.images().pull(
                opts.PullOpts(reference=IMAGE, quiet=True)):
            LOG.info('Pull: %s' % progress)

    def _list_podman_containers(self):
        stdout, stderr = processutils.execute(
            'podman ps --all --format json', shell=True)
        return json.loads(stdout or '[]')

    def assertContainerPresent(self, name):
        names = []
        for entry in self._list_podman_containers():
            names.extend(entry.get('Names') or [])
        if name not in names:
            self.fail('%s not found in %s' % (name, ', '.join(names)))

    def _create(self, command, tty=False):
        name = 'podman-api-ci-%s' % uuid.uuid4().hex[:8]
        created = self.podman.containers().create(opts.ContainerCreateOpts(
            image=IMAGE, name=name, command=command, terminal=tty))
        container = self.podman.containers().get(created.id)
        self.addCleanup(container.remove)
        return name, container

    def test_logs_are_demultiplexed(self):
        name, container = self._create(
            ['sh', '-c', 'echo hello; echo oops >&2'])
        self.assertContainerPresent(name)

        container.start()
        container.wait(opts.ContainerWaitOpts(
            conditions=[models.ContainerStatus.EXITED]))

        stdout, stderr = stream.demux(container.logs(
            opts.ContainerLogsOpts(stdout=True, stderr=True)))
        self.assertEqual(b'hello\n', stdout)
        self.assertEqual(b'oops\n', stderr)

    def test_exec(self):
        name, container = self._create(['sleep', '300'])
        container.start()
        self.addCleanup(container.kill)

        session = container.create_exec(opts.ExecCreateOpts(
            command=['sh', '-c', 'echo out; echo err >&2'],
            attach_stdout=True, attach_stderr=True))
        stdout, stderr = stream.demux(session.start())
        self.assertEqual(b'out\n', stdout)
        self.assertEqual(b'err\n', stderr)

        unchecked = self.podman.execs().get(session.id)
        self.assertRaises(errors.UncheckedExecError, unchecked.start)

    def test_inspect_missing(self):
        self.assertFalse(
            self.podman.containers().get('podman-api-ci-missing').exists())
        self.assertRaises(
            errors.NotFoundError,
            self.podman.containers().get('podman-api-ci-missing').inspect)
