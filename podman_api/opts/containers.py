import enum

from podman_api import models
from podman_api.opts.base import (
    ANY, BOOL, ENUM, Field, Filter, INT, JSON, JsonOpts, STR, UrlOpts, VEC)


class ContainerListFilter(Filter):
    __slots__ = ()

    @classmethod
    def ancestor(cls, image):
        return cls.make('ancestor', image)

    @classmethod
    def before(cls, container):
        return cls.make('before', container)

    @classmethod
    def expose(cls, port):
        return cls.make('expose', port)

    @classmethod
    def exited(cls, code):
        return cls.make('exited', code)

    @classmethod
    def health(cls, health):
        return cls.make('health', health)

    @classmethod
    def id(cls, container_id):
        return cls.make('id', container_id)

    @classmethod
    def is_task(cls, is_task):
        return cls.make('is-task', is_task)

    @classmethod
    def name(cls, name):
        return cls.make('name', name)

    @classmethod
    def network(cls, network):
        return cls.make('network', network)

    @classmethod
    def pod(cls, pod):
        return cls.make('pod', pod)

    @classmethod
    def publish(cls, port):
        return cls.make('publish', port)

    @classmethod
    def since(cls, container):
        return cls.make('since', container)

    @classmethod
    def status(cls, status):
        return cls.make('status', status)

    @classmethod
    def volume(cls, volume):
        return cls.make('volume', volume)


class ContainerListOpts(UrlOpts):
    FIELDS = {
        'all': Field('all', BOOL),
        'limit': Field('limit', INT),
        'size': Field('size', BOOL),
        'sync': Field('sync', BOOL),
    }
    FILTER = ContainerListFilter


class ContainerStopOpts(UrlOpts):
    FIELDS = {
        'all': Field('all', BOOL),
        'ignore': Field('Ignore', BOOL),
        'timeout': Field('Timeout', INT),
    }


class ContainerDeleteOpts(UrlOpts):
    FIELDS = {
        'force': Field('force', BOOL),
        'volumes': Field('v', BOOL),
        'timeout': Field('timeout', INT),
    }


class ContainerCheckpointOpts(UrlOpts):
    FIELDS = {
        'export': Field('export', BOOL),
        'file_locks': Field('fileLocks', BOOL),
        'ignore_root_fs': Field('ignoreRootFS', BOOL),
        'ignore_volumes': Field('ignoreVolumes', BOOL),
        'keep': Field('keep', BOOL),
        'leave_running': Field('leaveRunning', BOOL),
        'pre_checkpoint': Field('preCheckpoint', BOOL),
        'print_stats': Field('printStats', BOOL),
        'tcp_established': Field('tcpEstablished', BOOL),
        'with_previous': Field('withPrevious', BOOL),
    }

    def for_export(self):
        return self.with_param('export', True)


class ContainerRestoreOpts(UrlOpts):
    FIELDS = {
        'ignore_root_fs': Field('ignoreRootFS', BOOL),
        'ignore_static_ip': Field('ignoreStaticIP', BOOL),
        'ignore_static_mac': Field('ignoreStaticMac', BOOL),
        'import_': Field('import', BOOL),
        'keep': Field('keep', BOOL),
        'leave_running': Field('leaveRunning', BOOL),
        'name': Field('name', STR),
        'pod': Field('pod', STR),
        'print_stats': Field('printStats', BOOL),
        'tcp_established': Field('tcpEstablished', BOOL),
    }


class ContainerCommitOpts(UrlOpts):
    FIELDS = {
        'author': Field('author', STR),
        'changes': Field('changes', VEC),
        'comment': Field('comment', STR),
        'format': Field('format', STR),
        'pause': Field('pause', BOOL),
        'repo': Field('repo', STR),
        'tag': Field('tag', STR),
    }

    def for_container(self, container_id):
        return self.with_param('container', container_id, kind=STR)


class ContainerWaitOpts(UrlOpts):
    """Wait for a container to reach one of the given conditions.

    conditions is a list of ContainerStatus values (or their names).
    """
    FIELDS = {
        'conditions': Field('condition', VEC),
        'interval': Field('interval', STR),
    }

    def set(self, name, value):
        if name == 'conditions' and value is not None:
            value = [c.value if isinstance(c, models.ContainerStatus) else c
                     for c in value]
        return super().set(name, value)


class ContainerAttachOpts(UrlOpts):
    FIELDS = {
        'detach_keys': Field('detachKeys', STR),
        'logs': Field('logs', BOOL),
        'stderr': Field('stderr', BOOL),
        'stdin': Field('stdin', BOOL),
        'stdout': Field('stdout', BOOL),
    }

    def stream(self):
        return self.with_param('stream', True)


class ContainerLogsOpts(UrlOpts):
    FIELDS = {
        'follow': Field('follow', BOOL),
        'since': Field('since', STR),
        'stderr': Field('stderr', BOOL),
        'stdout': Field('stdout', BOOL),
        'tail': Field('tail', STR),
        'timestamps': Field('timestamps', BOOL),
        'until': Field('until', STR),
    }


class ContainerStatsOpts(UrlOpts):
    FIELDS = {
        'containers': Field('containers', VEC),
        'interval': Field('interval', INT),
    }

    def oneshot(self):
        return self.with_param('stream', False)

    def stream(self):
        return self.with_param('stream', True)


class ContainerTopOpts(UrlOpts):
    FIELDS = {
        'delay': Field('delay', INT),
        'ps_args': Field('ps_args', STR),
    }

    def oneshot(self):
        return self.with_param('stream', False)

    def stream(self):
        return self.with_param('stream', True)


class ContainerPruneFilter(Filter):
    __slots__ = ()

    @classmethod
    def until(cls, until):
        return cls.make('until', until)


class ContainerPruneOpts(UrlOpts):
    FILTER = ContainerPruneFilter


class ImageVolumeMode(enum.Enum):
    IGNORE = 'ignore'
    TMPFS = 'tmpfs'
    ANONYMOUS = 'anonymous'


class SocketNotifyMode(enum.Enum):
    CONTAINER = 'container'
    CONMON = 'conmon'
    IGNORE = 'ignore'


class SeccompPolicy(enum.Enum):
    EMPTY = 'empty'
    DEFAULT = 'default'
    IMAGE = 'image'


class SystemdEnabled(enum.Enum):
    TRUE = 'true'
    FALSE = 'false'
    ALWAYS = 'always'


class ContainerRestartPolicy(enum.Enum):
    ALWAYS = 'always'
    NO = 'no'
    ON_FAILURE = 'on-failure'
    UNLESS_STOPPED = 'unless-stopped'


class ContainerCreateOpts(JsonOpts):
    """The container spec posted to /libpod/containers/create.

    Structured values such as namespaces, port mappings or resource limits
    are passed through as plain dicts in the shape libpod documents. mounts
    also accepts ContainerMount records.
    """
    FIELDS = {
        'annotations': Field('annotations', JSON),
        'apparmor_profile': Field('apparmor_profile', STR),
        'add_capabilities': Field('cap_add', VEC),
        'drop_capabilities': Field('cap_drop', VEC),
        'cgroup_parent': Field('cgroup_parent', STR),
        'cgroup_namespace': Field('cgroupns', ANY),
        'cgroup_mode': Field('cgroups_mode', STR),
        'chroot_directories': Field('chroot_directories', VEC),
        'command': Field('command', VEC),
        'common_pid_file': Field('common_pid_file', STR),
        'create_command': Field('containerCreateCommand', VEC),
        'cpu_period': Field('cpu_period', INT),
        'cpu_quota': Field('cpu_quota', INT),
        'create_working_dir': Field('create_working_dir', BOOL),
        'dependency_containers': Field('dependencyContainers', VEC),
        'devices': Field('devices', ANY),
        'dns_option': Field('dns_option', VEC),
        'dns_search': Field('dns_search', VEC),
        'dns_server': Field('dns_server', VEC),
        'entrypoint': Field('entrypoint', VEC),
        'env': Field('env', JSON),
        'env_host': Field('env_host', BOOL),
        'groups': Field('groups', VEC),
        'health_config': Field('healthconfig', ANY),
        'hosts_add': Field('hostadd', VEC),
        'hostname': Field('hostname', STR),
        'http_proxy': Field('httpproxy', BOOL),
        'id_mappings': Field('idmappings', ANY),
        'image': Field('image', STR),
        'image_arch': Field('image_arch', STR),
        'image_os': Field('image_os', STR),
        'image_variant': Field('image_variant', STR),
        'image_volume_mode': Field('image_volume_mode', ENUM),
        'image_volumes': Field('image_volumes', ANY),
        'init': Field('init', BOOL),
        'init_container_type': Field('init_container_type', STR),
        'init_path': Field('init_path', STR),
        'ipc_namespace': Field('ipcns', ANY),
        'labels': Field('labels', JSON),
        'log_configuration': Field('log_configuration', ANY),
        'manage_password': Field('manage_password', BOOL),
        'mask': Field('mask', VEC),
        'mounts': Field('mounts', VEC),
        'name': Field('name', STR),
        'namespace': Field('namespace', STR),
        'net_namespace': Field('netns', ANY),
        'network_options': Field('network_options', JSON),
        'networks': Field('Networks', JSON),
        'no_new_privileges': Field('no_new_privileges', BOOL),
        'oci_runtime': Field('oci_runtime', STR),
        'oom_score_adj': Field('oom_score_adj', INT),
        'overlay_volumes': Field('overlay_volumes', ANY),
        'passwd_entry': Field('passwd_entry', STR),
        'personality': Field('personality', ANY),
        'pid_namespace': Field('pidns', ANY),
        'pod': Field('pod', STR),
        'portmappings': Field('portmappings', ANY),
        'privileged': Field('privileged', BOOL),
        'procfs_opts': Field('procfs_opts', VEC),
        'publish_image_ports': Field('publish_image_ports', BOOL),
        'r_limits': Field('r_limits', ANY),
        'raw_image_name': Field('raw_image_name', STR),
        'read_only_fs': Field('read_only_filesystem', BOOL),
        'remove': Field('remove', BOOL),
        'resource_limits': Field('resource_limits', ANY),
        'restart_policy': Field('restart_policy', ENUM),
        'restart_tries': Field('restart_tries', INT),
        'rootfs': Field('rootfs', STR),
        'rootfs_overlay': Field('rootfs_overlay', BOOL),
        'rootfs_propagation': Field('rootfs_propagation', STR),
        'sdnotify_mode': Field('sdnotifyMode', ENUM),
        'seccomp_policy': Field('seccomp_policy', ENUM),
        'seccomp_profile_path': Field('seccomp_profile_path', STR),
        'secret_env': Field('secret_env', JSON),
        'secrets': Field('secrets', ANY),
        'selinux_opts': Field('selinux_opts', VEC),
        'shm_size': Field('shm_size', INT),
        'stdin': Field('stdin', BOOL),
        'stop_signal': Field('stop_signal', INT),
        'stop_timeout': Field('stop_timeout', INT),
        'storage_opts': Field('storage_opts', JSON),
        'sysctl': Field('sysctl', JSON),
        'systemd': Field('systemd', ENUM),
        'terminal': Field('terminal', BOOL),
        'timeout': Field('timeout', INT),
        'timezone': Field('timezone', STR),
        'umask': Field('umask', STR),
        'unified': Field('unified', JSON),
        'unmask': Field('unmask', VEC),
        'unset_env': Field('unsetenv', VEC),
        'unset_env_all': Field('unsetenvall', BOOL),
        'use_image_hosts': Field('use_image_hosts', BOOL),
        'use_image_resolv_conf': Field('use_image_resolve_conf', BOOL),
        'user': Field('user', STR),
        'user_namespace': Field('userns', ANY),
        'uts_namespace': Field('utsns', ANY),
        'volatile': Field('volatile', BOOL),
        'volumes': Field('volumes', ANY),
        'volumes_from': Field('volumes_from', VEC),
        'work_dir': Field('work_dir', STR),
    }
