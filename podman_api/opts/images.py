import base64
from collections import namedtuple
import enum
import json

from podman_api.opts.base import (
    BOOL, ENUM, Field, Filter, INT, JSON, STR, UrlOpts, VEC)


class RegistryAuth(object):
    """Credentials for a registry, sent in the X-Registry-Auth header.

    Use RegistryAuth.password() for a username and password, or
    RegistryAuth.token() for an identity token.
    """

    def __init__(self, values):
        self.values = values

    @classmethod
    def password(cls, username, password, email=None, server_address=None):
        values = {'username': username, 'password': password}
        if email is not None:
            values['email'] = email
        if server_address is not None:
            values['serveraddress'] = server_address
        return cls(values)

    @classmethod
    def token(cls, identity_token):
        return cls({'identitytoken': identity_token})

    def serialize(self):
        return base64.urlsafe_b64encode(
            json.dumps(self.values).encode('utf-8')).decode('ascii')

    def __repr__(self):
        return 'RegistryAuth(%s)' % ', '.join(sorted(self.values))


class AuthUrlOpts(UrlOpts):
    """Query options which may also carry registry credentials."""
    auth = None

    def set(self, name, value):
        if name == 'auth':
            self.auth = value
            return self
        return super().set(name, value)

    def auth_header(self):
        if self.auth is None:
            return None
        return self.auth.serialize()


class NetworkMode(enum.Enum):
    BRIDGE = 'bridge'
    HOST = 'host'
    NONE = 'none'
    CONTAINER = 'container'


class Platform(namedtuple('Platform', ['os', 'arch', 'version'])):
    __slots__ = ()

    def __new__(cls, os, arch=None, version=None):
        return super().__new__(cls, os, arch, version)

    def __str__(self):
        if not self.arch:
            return self.os
        if not self.version:
            return '%s/%s' % (self.os, self.arch)
        return '%s/%s/%s' % (self.os, self.arch, self.version)


class ImageBuildOpts(UrlOpts):
    """Options for /libpod/build.

    path is the local directory holding the build context. It is packed into
    a tar archive and sent as the request body. network_mode takes a
    NetworkMode or the name of a custom network.
    """
    FIELDS = {
        'all_platforms': Field('allplatforms', BOOL),
        'build_args': Field('buildargs', JSON),
        'cache_from': Field('cachefrom', JSON),
        'cpu_period': Field('cpuperiod', INT),
        'cpu_quota': Field('cpuquota', INT),
        'cpu_set_cpus': Field('cpusetcpus', STR),
        'cpu_shares': Field('cpushares', INT),
        'dockerfile': Field('dockerfile', STR),
        'extra_hosts': Field('extrahosts', STR),
        'force_rm': Field('forcerm', BOOL),
        'http_proxy': Field('httpproxy', BOOL),
        'labels': Field('labels', JSON),
        'layers': Field('layers', BOOL),
        'memory': Field('memory', INT),
        'memswap': Field('memswap', INT),
        'network_mode': Field('networkmode', ENUM),
        'no_cache': Field('nocache', BOOL),
        'outputs': Field('outputs', STR),
        'platform': Field('platform', STR),
        'pull': Field('pull', BOOL),
        'quiet': Field('q', BOOL),
        'remote': Field('remote', STR),
        'remove': Field('rm', BOOL),
        'shared_mem_size': Field('shmsize', INT),
        'squash': Field('squash', BOOL),
        'tag': Field('t', STR),
        'target': Field('target', STR),
        'unset_env': Field('unsetenv', VEC),
    }
    REQUIRED = ('path',)


class ImageOpt(namedtuple('ImageOpt', ['name', 'tag', 'digest'])):
    """An image reference by name, name:tag or name@digest."""
    __slots__ = ()

    def __new__(cls, name, tag=None, digest=None):
        return super().__new__(cls, name, tag, digest)

    def __str__(self):
        if self.digest:
            return '%s@%s' % (self.name, self.digest)
        if self.tag:
            return '%s:%s' % (self.name, self.tag)
        return '%s' % self.name


class ImageListFilter(Filter):
    __slots__ = ()

    @classmethod
    def before(cls, image):
        return cls.make('before', image)

    @classmethod
    def dangling(cls, dangling):
        return cls.make('dangling', dangling)

    @classmethod
    def reference(cls, image, tag=None):
        return cls.make('reference', ImageOpt(image, tag=tag))

    @classmethod
    def id(cls, image_id):
        return cls.make('id', image_id)

    @classmethod
    def since(cls, image):
        return cls.make('since', image)


class ImageListOpts(UrlOpts):
    FIELDS = {
        'all': Field('all', BOOL),
    }
    FILTER = ImageListFilter


class ImageTagOpts(UrlOpts):
    FIELDS = {
        'repo': Field('repo', STR),
        'tag': Field('tag', STR),
    }


class PullPolicy(enum.Enum):
    ALWAYS = 'always'
    MISSING = 'missing'
    NEWER = 'newer'
    NEVER = 'never'


class PullOpts(AuthUrlOpts):
    FIELDS = {
        'all_tags': Field('allTags', BOOL),
        'arch': Field('Arch', STR),
        'credentials': Field('credentials', STR),
        'os': Field('OS', STR),
        'policy': Field('policy', ENUM),
        'quiet': Field('quiet', BOOL),
        'reference': Field('reference', STR),
        'tls_verify': Field('tlsVerify', BOOL),
        'variant': Field('Variant', STR),
    }


class ImagePushOpts(AuthUrlOpts):
    FIELDS = {
        'destination': Field('destination', STR),
        'quiet': Field('quiet', BOOL),
        'tls_verify': Field('tlsVerify', BOOL),
    }


class ImageExportOpts(UrlOpts):
    FIELDS = {
        'compress': Field('compress', BOOL),
        'format': Field('format', STR),
    }


class ImageImportOpts(UrlOpts):
    FIELDS = {
        'changes': Field('changes', VEC),
        'message': Field('message', STR),
        'reference': Field('reference', STR),
        'url': Field('url', STR),
    }


class ImageTreeOpts(UrlOpts):
    FIELDS = {
        'what_requires': Field('whatrequires', BOOL),
    }


class ImagesRemoveOpts(UrlOpts):
    FIELDS = {
        'all': Field('all', BOOL),
        'force': Field('force', BOOL),
        'ignore': Field('ignore', BOOL),
        'images': Field('images', VEC),
        'lookup_manifest': Field('lookupManifest', BOOL),
    }


class ImagePruneFilter(Filter):
    __slots__ = ()

    @classmethod
    def dangling(cls, dangling):
        return cls.make('dangling', dangling)

    @classmethod
    def until(cls, until):
        return cls.make('until', until)


class ImagePruneOpts(UrlOpts):
    FIELDS = {
        'all': Field('all', BOOL),
        'external': Field('external', BOOL),
    }
    FILTER = ImagePruneFilter


class ImageSearchFilter(Filter):
    __slots__ = ()

    @classmethod
    def is_automated(cls, is_automated):
        return cls.make('is-automated', is_automated)

    @classmethod
    def is_official(cls, is_official):
        return cls.make('is-official', is_official)

    @classmethod
    def stars(cls, stars):
        return cls.make('stars', stars)


class ImageSearchOpts(UrlOpts):
    FIELDS = {
        'limit': Field('limit', INT),
        'list_tags': Field('listTags', BOOL),
        'term': Field('term', STR),
        'tls_verify': Field('tlsVerify', BOOL),
    }
    FILTER = ImageSearchFilter
