import json

from podman_api.api import base
from podman_api import errors
from podman_api import transport


class Secret(base.Handle):
    RESOURCE = base.ApiResource.SECRETS

    def inspect(self):
        return self.podman.get_json(self._ep('/json'))

    def delete(self):
        self.podman.delete(self._ep())


class Secrets(base.Collection):
    HANDLE = Secret

    def list(self):
        return self.podman.get_json('/libpod/secrets/json')

    def create(self, opts, data):
        """Store data as a secret named by opts and return a handle to it."""
        created = self.podman.post_json(
            base.with_opts('/libpod/secrets/create', opts),
            transport.json_payload(json.dumps(data)))
        if not isinstance(created, dict) or 'ID' not in created:
            raise errors.InvalidResponseError(
                'expected `ID` field in secret create response')
        return self.get(created['ID'])
