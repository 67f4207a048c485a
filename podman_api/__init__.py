from podman_api.errors import PodmanError
from podman_api.podman import Podman
from podman_api.stream import Frame, StreamType
from podman_api.version import ApiVersion, LATEST_API_VERSION

__all__ = ['Podman', 'PodmanError', 'ApiVersion', 'LATEST_API_VERSION',
           'Frame', 'StreamType']
