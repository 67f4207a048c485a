from podman_api.opts.base import (
    ANY, BOOL, Field, Filter, INT, JSON, JsonOpts, STR, UrlOpts, VEC)


class PodListFilter(Filter):
    __slots__ = ()

    @classmethod
    def id(cls, pod_id):
        return cls.make('id', pod_id)

    @classmethod
    def name(cls, name):
        return cls.make('name', name)

    @classmethod
    def until(cls, until):
        return cls.make('until', until)

    @classmethod
    def network(cls, network):
        return cls.make('network', network)

    @classmethod
    def status(cls, status):
        return cls.make('status', status)

    @classmethod
    def container_name(cls, name):
        return cls.make('ctr-names', name)

    @classmethod
    def container_id(cls, container_id):
        return cls.make('ctr-ids', container_id)

    @classmethod
    def container_status(cls, status):
        return cls.make('ctr-status', status)

    @classmethod
    def container_number(cls, count):
        return cls.make('ctr-number', count)


class PodListOpts(UrlOpts):
    FILTER = PodListFilter


class PodTopOpts(UrlOpts):
    FIELDS = {
        'delay': Field('delay', INT),
        'ps_args': Field('ps_args', STR),
    }

    def oneshot(self):
        return self.with_param('stream', False)

    def stream(self):
        return self.with_param('stream', True)


class PodStatsOpts(UrlOpts):
    FIELDS = {
        'all': Field('all', BOOL),
        'names_or_ids': Field('namesOrIDs', VEC),
    }


class PodPruneOpts(UrlOpts):
    pass


class PodCreateOpts(JsonOpts):
    FIELDS = {
        'cgroup_parent': Field('cgroup_parent', STR),
        'cni_networks': Field('cni_networks', VEC),
        'cpu_period': Field('cpu_period', INT),
        'cpu_quota': Field('cpu_quota', INT),
        'dns_option': Field('dns_option', VEC),
        'dns_search': Field('dns_search', VEC),
        'dns_server': Field('dns_server', VEC),
        'add_hosts': Field('hostadd', VEC),
        'hostname': Field('hostname', STR),
        'infra_command': Field('infra_command', VEC),
        'infra_common_pid_file': Field('infra_common_pid_file', STR),
        'infra_image': Field('infra_image', STR),
        'infra_name': Field('infra_name', STR),
        'labels': Field('labels', JSON),
        'name': Field('name', STR),
        'netns': Field('netns', ANY),
        'network_options': Field('network_options', JSON),
        'no_infra': Field('no_infra', BOOL),
        'no_manage_hosts': Field('no_manage_hosts', BOOL),
        'no_manage_resolv_conf': Field('no_manage_resolv_conf', BOOL),
        'pidns': Field('pidns', ANY),
        'pod_create_command': Field('pod_create_command', VEC),
        'pod_devices': Field('pod_devices', VEC),
        'portmappings': Field('portmappings', ANY),
        'resource_limits': Field('resource_limits', ANY),
        'shared_namespaces': Field('shared_namespaces', VEC),
        'userns': Field('userns', ANY),
        'volumes_from': Field('volumes_from', VEC),
    }
