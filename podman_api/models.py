"""Typed records for the handful of libpod payloads we interpret ourselves.

Every other response is handed back as decoded JSON. Records are namedtuples
whose attribute names may differ from the names used on the wire; WIRE_NAMES
maps the former to the latter.
"""

from collections import namedtuple
import enum

from podman_api import constants
from podman_api import errors
from podman_api import util


class Record(object):
    WIRE_NAMES = {}
    REQUIRED = ()

    @classmethod
    def wire_name(cls, field):
        return cls.WIRE_NAMES.get(field, field)

    @classmethod
    def from_dict(cls, data):
        for field in cls.REQUIRED:
            if cls.wire_name(field) not in data:
                raise errors.InvalidResponseError(
                    'expected `%s` field in %s'
                    % (cls.wire_name(field), cls.__name__))
        return cls(**{field: data.get(cls.wire_name(field))
                      for field in cls._fields})

    def to_dict(self):
        out = {}
        for field, value in zip(self._fields, self):
            if value is None:
                continue
            if isinstance(value, Record):
                value = value.to_dict()
            elif isinstance(value, enum.Enum):
                value = value.value
            out[self.wire_name(field)] = value
        return out


class Id(str):
    """Identifier libpod assigns to an object when it is created."""
    pass


class IdResponse(Record, namedtuple('IdResponse', ['id', 'warnings'])):
    __slots__ = ()
    WIRE_NAMES = {'id': 'Id', 'warnings': 'Warnings'}
    REQUIRED = ('id',)

    @classmethod
    def from_dict(cls, data):
        rec = super().from_dict(data)
        return rec._replace(id=Id(rec.id), warnings=rec.warnings or [])


class Actor(Record, namedtuple('Actor', ['id', 'attributes'])):
    __slots__ = ()
    WIRE_NAMES = {'id': 'ID', 'attributes': 'Attributes'}
    REQUIRED = ('id',)

    @classmethod
    def from_dict(cls, data):
        rec = super().from_dict(data)
        return rec._replace(attributes=rec.attributes or {})


class Event(Record, namedtuple('Event', ['type', 'action', 'actor', 'status',
                                         'id', 'from_', 'time',
                                         'time_nano'])):
    """One entry of the /events stream.

    time is in unix seconds and time_nano in unix nanoseconds, as sent by
    the daemon. timestamp gives the most precise of the two as a datetime.
    """
    __slots__ = ()
    WIRE_NAMES = {'type': 'Type', 'action': 'Action', 'actor': 'Actor',
                  'from_': 'from', 'time_nano': 'timeNano'}
    REQUIRED = ('type', 'action', 'actor', 'time', 'time_nano')

    @classmethod
    def from_dict(cls, data):
        rec = super().from_dict(data)
        if not isinstance(rec.actor, dict):
            raise errors.InvalidResponseError('event actor is not an object')
        for field in ('time', 'time_nano'):
            value = getattr(rec, field)
            if not isinstance(value, int) or isinstance(value, bool):
                raise errors.InvalidResponseError(
                    'event %s is not an integer' % cls.wire_name(field))
        return rec._replace(actor=Actor.from_dict(rec.actor))

    @property
    def timestamp(self):
        if self.time_nano:
            return util.datetime_from_nano_timestamp(self.time_nano)
        return util.datetime_from_unix_timestamp(self.time)


LibpodPingInfoBase = namedtuple(
    'LibpodPingInfo', ['api_version', 'libpod_api_version',
                       'libpod_buildah_version', 'buildkit_version',
                       'docker_experimental', 'cache_control', 'pragma'])


class LibpodPingInfo(LibpodPingInfoBase):
    """Server details reported in the headers of a /_ping response."""
    __slots__ = ()

    @classmethod
    def from_headers(cls, headers):
        def required(name):
            value = headers.get(name)
            if value is None:
                raise errors.InvalidResponseError(
                    'expected `%s` field in headers' % name)
            return value

        experimental = required(constants.PING_DOCKER_EXPERIMENTAL).lower()
        if experimental not in ('true', 'false'):
            raise errors.InvalidResponseError(
                'expected header value of `%s` to be a bool, got %r'
                % (constants.PING_DOCKER_EXPERIMENTAL, experimental))

        return cls(
            api_version=required(constants.PING_API_VERSION),
            libpod_api_version=required(constants.PING_LIBPOD_API_VERSION),
            libpod_buildah_version=required(
                constants.PING_LIBPOD_BUILDAH_VERSION),
            buildkit_version=headers.get(constants.PING_BUILDKIT_VERSION),
            docker_experimental=experimental == 'true',
            cache_control=required(constants.PING_CACHE_CONTROL),
            pragma=required(constants.PING_PRAGMA))


class ContainerStatus(enum.Enum):
    CREATED = 'created'
    CONFIGURED = 'configured'
    RESTARTING = 'restarting'
    RUNNING = 'running'
    REMOVING = 'removing'
    PAUSED = 'paused'
    EXITED = 'exited'
    DEAD = 'dead'


class ContainerHealth(enum.Enum):
    STARTING = 'starting'
    HEALTHY = 'healthy'
    UNHEALTHY = 'unhealthy'
    NONE = 'none'


class PodStatus(enum.Enum):
    CREATED = 'created'
    DEAD = 'dead'
    DEGRADED = 'degraded'
    EXITED = 'exited'
    PAUSED = 'paused'
    RUNNING = 'running'
    STOPPED = 'stopped'


class ContainerMount(Record, namedtuple('ContainerMount',
                                        ['destination', 'options', 'source',
                                         'type', 'uid_mappings',
                                         'gid_mappings'])):
    """A mount as accepted by the container create 'mounts' parameter."""
    __slots__ = ()
    WIRE_NAMES = {'uid_mappings': 'UIDMappings',
                  'gid_mappings': 'GIDMappings'}

    def __new__(cls, destination=None, options=None, source=None, type=None,
                uid_mappings=None, gid_mappings=None):
        return super().__new__(cls, destination, options, source, type,
                               uid_mappings, gid_mappings)


class JsonError(Record, namedtuple('JsonError', ['error', 'error_detail'])):
    """An error object embedded in a JSON progress stream."""
    __slots__ = ()
    WIRE_NAMES = {'error_detail': 'errorDetail'}

    @property
    def detail_message(self):
        if isinstance(self.error_detail, dict):
            return self.error_detail.get('message')
        return None

    def to_exception(self):
        return errors.StreamError(self.error, self.detail_message)


class ErrorResponse(Record, namedtuple('ErrorResponse',
                                       ['message', 'cause', 'response'])):
    """The body libpod sends with a non-2xx status."""
    __slots__ = ()
