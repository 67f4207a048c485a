from podman_api.api import base
from podman_api import errors
from podman_api import stream
from podman_api import util


class Exec(base.Handle):
    """An exec session: a process started inside a running container.

    How the output of start() is decoded depends on whether the session
    has a TTY. Sessions made by Container.create_exec() know this already.
    For a session obtained by id alone pass tty explicitly or call
    resolve_tty() first, otherwise start() raises UncheckedExecError.
    """
    RESOURCE = base.ApiResource.EXEC

    def __init__(self, podman, id, tty=None):
        super().__init__(podman, id)
        self.tty = tty

    def exists(self):
        try:
            self.inspect()
        except errors.NotFoundError:
            return False
        return True

    def inspect(self):
        return self.podman.get_json(self._ep('/json'))

    def resolve_tty(self):
        """Learn the TTY mode of this session from the daemon."""
        process_config = self.inspect().get('ProcessConfig') or {}
        self.tty = bool(process_config.get('tty'))
        return self.tty

    def start(self, opts=None):
        """Start the session and return a generator of output Frames.

        Without a TTY each Frame carries the stream it was written to. With
        a TTY all output arrives as stdout.

        Raises:
            UncheckedExecError: The TTY mode of the session is unknown.
        """
        if self.tty is None:
            raise errors.UncheckedExecError(self.id)
        chunks = self.podman.post_stream(self._ep('/start'),
                                         base.json_body(opts))
        return stream.decode_output(chunks, self.tty)

    def resize(self, width, height):
        ep = util.construct_ep(self._ep('/resize'), util.encoded_pairs(
            [('h', str(height)), ('w', str(width))]))
        self.podman.post(ep)


class Execs(base.Collection):
    HANDLE = Exec

    def get(self, id, tty=None):
        return Exec(self.podman, id, tty=tty)
