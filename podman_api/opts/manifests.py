from podman_api.opts.base import (
    BOOL, Field, JSON, JsonOpts, STR, UrlOpts, VEC)


class ManifestCreateOpts(UrlOpts):
    """Create a manifest list called name, optionally seeded from image."""
    FIELDS = {
        'all': Field('all', BOOL),
        'image': Field('image', STR),
    }
    REQUIRED = ('name',)


class ManifestPushOpts(UrlOpts):
    FIELDS = {
        'destination': Field('destination', STR),
        'all': Field('all', BOOL),
        'tls_verify': Field('tlsVerify', BOOL),
    }
    REQUIRED = ('destination',)


class ManifestImageAddOpts(JsonOpts):
    FIELDS = {
        'all': Field('all', BOOL),
        'annotation': Field('annotation', VEC),
        'arch': Field('arch', STR),
        'features': Field('features', VEC),
        'images': Field('images', VEC),
        'os': Field('os', STR),
        'os_version': Field('os_version', STR),
        'variant': Field('variant', STR),
        'annotations': Field('annotations', JSON),
    }
