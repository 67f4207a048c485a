from podman_api.api.base import ApiResource
from podman_api.api.containers import Container, Containers
from podman_api.api.exec import Exec, Execs
from podman_api.api.images import Image, Images
from podman_api.api.manifests import Manifest, Manifests
from podman_api.api.networks import Network, Networks
from podman_api.api.pods import Pod, Pods
from podman_api.api.secrets import Secret, Secrets
from podman_api.api.volumes import Volume, Volumes

__all__ = ['ApiResource', 'Container', 'Containers', 'Exec', 'Execs',
           'Image', 'Images', 'Manifest', 'Manifests', 'Network', 'Networks',
           'Pod', 'Pods', 'Secret', 'Secrets', 'Volume', 'Volumes']
