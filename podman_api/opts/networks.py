from podman_api.opts.base import (
    ANY, BOOL, Field, Filter, JSON, JsonOpts, STR, UrlOpts, VEC)


class NetworkListFilter(Filter):
    __slots__ = ()

    @classmethod
    def driver(cls, driver):
        return cls.make('driver', driver)

    @classmethod
    def id(cls, network_id):
        return cls.make('id', network_id)

    @classmethod
    def name(cls, name):
        return cls.make('name', name)

    @classmethod
    def until(cls, until):
        return cls.make('until', until)


class NetworkListOpts(UrlOpts):
    FILTER = NetworkListFilter


class NetworkPruneFilter(Filter):
    __slots__ = ()

    @classmethod
    def until(cls, until):
        return cls.make('until', until)


class NetworkPruneOpts(UrlOpts):
    FILTER = NetworkPruneFilter


class NetworkCreateOpts(JsonOpts):
    """Body of /libpod/networks/create.

    subnets is a list of dicts with 'subnet' and optionally 'gateway' and
    'lease_range' keys.
    """
    FIELDS = {
        'dns_enabled': Field('dns_enabled', BOOL),
        'driver': Field('driver', STR),
        'id': Field('id', STR),
        'internal': Field('internal', BOOL),
        'ipam_options': Field('ipam_options', JSON),
        'ipv6_enabled': Field('ipv6_enabled', BOOL),
        'labels': Field('labels', JSON),
        'name': Field('name', STR),
        'network_interface': Field('network_interface', STR),
        'options': Field('options', JSON),
        'subnets': Field('subnets', ANY),
    }


class NetworkConnectOpts(JsonOpts):
    FIELDS = {
        'container': Field('container', STR),
        'aliases': Field('aliases', VEC),
        'interface_name': Field('interface_name', STR),
        'static_ips': Field('static_ips', VEC),
        'static_mac': Field('static_mac', STR),
    }
    REQUIRED = ('container',)


class NetworkDisconnectOpts(JsonOpts):
    FIELDS = {
        'container': Field('Container', STR),
        'force': Field('Force', BOOL),
    }
    REQUIRED = ('container',)
