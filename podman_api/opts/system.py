import enum

from podman_api.opts.base import (
    BOOL, ENUM, Field, Filter, INT, JSON, STR, UrlOpts, VEC)


class EventsFilter(Filter):
    __slots__ = ()

    @classmethod
    def container(cls, name_or_id):
        return cls.make('container', name_or_id)

    @classmethod
    def event(cls, action):
        return cls.make('event', action)

    @classmethod
    def image(cls, name_or_id):
        return cls.make('image', name_or_id)

    @classmethod
    def pod(cls, name_or_id):
        return cls.make('pod', name_or_id)

    @classmethod
    def volume(cls, name):
        return cls.make('volume', name)

    @classmethod
    def event_type(cls, event_type):
        return cls.make('type', event_type)


class EventsOpts(UrlOpts):
    """Select which events /events returns.

    Unless stream=False is given the daemon keeps the connection open and
    sends events as they happen.
    """
    FIELDS = {
        'since': Field('since', STR),
        'until': Field('until', STR),
        'stream': Field('stream', BOOL),
    }
    FILTER = EventsFilter


class DiffType(enum.Enum):
    ALL = 'all'
    CONTAINER = 'container'
    IMAGE = 'image'


class ChangesOpts(UrlOpts):
    FIELDS = {
        'diff_type': Field('diffType', ENUM),
        'parent': Field('parent', STR),
    }


class RestartPolicy(enum.Enum):
    NO = 'no'
    ON_SUCCESS = 'on-success'
    ON_FAILURE = 'on-failure'
    ON_ABNORMAL = 'on-abnormal'
    ON_WATCHDOG = 'on-watchdog'
    ON_ABORT = 'on-abort'
    ALWAYS = 'always'


class SystemdUnitsOpts(UrlOpts):
    FIELDS = {
        'container_prefix': Field('containerPrefix', STR),
        'new': Field('new', BOOL),
        'no_header': Field('noHeader', BOOL),
        'pod_prefix': Field('podPrefix', STR),
        'restart_policy': Field('restartPolicy', ENUM),
        'restart_sec': Field('restartSec', INT),
        'separator': Field('separator', STR),
        'start_timeout': Field('startTimeout', INT),
        'stop_timeout': Field('stopTimeout', INT),
        'use_name': Field('useName', BOOL),
    }


class PlayKubernetesYamlOpts(UrlOpts):
    FIELDS = {
        'log_driver': Field('logDriver', STR),
        'network': Field('network', VEC),
        'start': Field('start', BOOL),
        'static_ips': Field('staticIPs', VEC),
        'static_macs': Field('staticMACs', VEC),
        'tls_verify': Field('tlsVerify', BOOL),
    }


class SecretCreateOpts(UrlOpts):
    FIELDS = {
        'name': Field('name', STR),
        'driver': Field('driver', STR),
        'driver_opts': Field('driveropts', JSON),
    }
    REQUIRED = ('name',)
