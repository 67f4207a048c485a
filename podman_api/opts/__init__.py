from podman_api.opts.base import Filter, JsonOpts, UrlOpts
from podman_api.opts.containers import (
    ContainerAttachOpts, ContainerCheckpointOpts, ContainerCommitOpts,
    ContainerCreateOpts, ContainerDeleteOpts, ContainerListFilter,
    ContainerListOpts, ContainerLogsOpts, ContainerPruneFilter,
    ContainerPruneOpts, ContainerRestartPolicy, ContainerRestoreOpts,
    ContainerStatsOpts, ContainerStopOpts, ContainerTopOpts,
    ContainerWaitOpts, ImageVolumeMode, SeccompPolicy, SocketNotifyMode,
    SystemdEnabled)
from podman_api.opts.exec import ExecCreateOpts, ExecStartOpts, UserOpt
from podman_api.opts.images import (
    ImageBuildOpts, ImageExportOpts, ImageImportOpts, ImageListFilter,
    ImageListOpts, ImageOpt, ImagePruneFilter, ImagePruneOpts, ImagePushOpts,
    ImageSearchFilter, ImageSearchOpts, ImagesRemoveOpts, ImageTagOpts,
    ImageTreeOpts, NetworkMode, Platform, PullOpts, PullPolicy, RegistryAuth)
from podman_api.opts.manifests import (
    ManifestCreateOpts, ManifestImageAddOpts, ManifestPushOpts)
from podman_api.opts.networks import (
    NetworkConnectOpts, NetworkCreateOpts, NetworkDisconnectOpts,
    NetworkListFilter, NetworkListOpts, NetworkPruneFilter, NetworkPruneOpts)
from podman_api.opts.pods import (
    PodCreateOpts, PodListFilter, PodListOpts, PodPruneOpts, PodStatsOpts,
    PodTopOpts)
from podman_api.opts.system import (
    ChangesOpts, DiffType, EventsFilter, EventsOpts, PlayKubernetesYamlOpts,
    RestartPolicy, SecretCreateOpts, SystemdUnitsOpts)
from podman_api.opts.volumes import (
    VolumeCreateOpts, VolumeListFilter, VolumeListOpts, VolumePruneFilter,
    VolumePruneOpts)

__all__ = [
    'Filter', 'JsonOpts', 'UrlOpts',
    'ContainerAttachOpts', 'ContainerCheckpointOpts', 'ContainerCommitOpts',
    'ContainerCreateOpts', 'ContainerDeleteOpts', 'ContainerListFilter',
    'ContainerListOpts', 'ContainerLogsOpts', 'ContainerPruneFilter',
    'ContainerPruneOpts', 'ContainerRestartPolicy', 'ContainerRestoreOpts',
    'ContainerStatsOpts', 'ContainerStopOpts', 'ContainerTopOpts',
    'ContainerWaitOpts', 'ImageVolumeMode', 'SeccompPolicy',
    'SocketNotifyMode', 'SystemdEnabled',
    'ExecCreateOpts', 'ExecStartOpts', 'UserOpt',
    'ImageBuildOpts', 'ImageExportOpts', 'ImageImportOpts', 'ImageListFilter',
    'ImageListOpts', 'ImageOpt', 'ImagePruneFilter', 'ImagePruneOpts',
    'ImagePushOpts', 'ImageSearchFilter', 'ImageSearchOpts',
    'ImagesRemoveOpts', 'ImageTagOpts', 'ImageTreeOpts', 'NetworkMode',
    'Platform', 'PullOpts', 'PullPolicy', 'RegistryAuth',
    'ManifestCreateOpts', 'ManifestImageAddOpts', 'ManifestPushOpts',
    'NetworkConnectOpts', 'NetworkCreateOpts', 'NetworkDisconnectOpts',
    'NetworkListFilter', 'NetworkListOpts', 'NetworkPruneFilter',
    'NetworkPruneOpts',
    'PodCreateOpts', 'PodListFilter', 'PodListOpts', 'PodPruneOpts',
    'PodStatsOpts', 'PodTopOpts',
    'ChangesOpts', 'DiffType', 'EventsFilter', 'EventsOpts',
    'PlayKubernetesYamlOpts', 'RestartPolicy', 'SecretCreateOpts',
    'SystemdUnitsOpts',
    'VolumeCreateOpts', 'VolumeListFilter', 'VolumeListOpts',
    'VolumePruneFilter', 'VolumePruneOpts',
]
