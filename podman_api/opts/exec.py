from collections import namedtuple

from podman_api.opts.base import BOOL, ENV, Field, INT, JsonOpts, STR, VEC


class UserOpt(namedtuple('UserOpt', ['user', 'group'])):
    """The user (and optionally group) to run an exec session as.

    Either half may be a name or a numeric id.
    """
    __slots__ = ()

    def __new__(cls, user, group=None):
        return super().__new__(cls, user, group)

    def __str__(self):
        if self.group is None:
            return '%s' % self.user
        return '%s:%s' % (self.user, self.group)


class ExecCreateOpts(JsonOpts):
    """Body of /libpod/containers/{id}/exec.

    env takes a mapping, sent as a list of KEY=value strings.
    """
    FIELDS = {
        'attach_stderr': Field('AttachStderr', BOOL),
        'attach_stdin': Field('AttachStdin', BOOL),
        'attach_stdout': Field('AttachStdout', BOOL),
        'command': Field('Cmd', VEC),
        'detach_keys': Field('DetachKeys', STR),
        'env': Field('Env', ENV),
        'privileged': Field('Privileged', BOOL),
        'tty': Field('Tty', BOOL),
        'user': Field('User', STR),
        'working_dir': Field('WorkingDir', STR),
    }


class ExecStartOpts(JsonOpts):
    FIELDS = {
        'detach': Field('Detach', BOOL),
        'height': Field('h', INT),
        'tty': Field('Tty', BOOL),
        'width': Field('w', INT),
    }
