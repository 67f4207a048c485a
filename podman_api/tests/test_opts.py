"""Tests for endpoint option builders."""

import base64
import json
import unittest
from urllib.parse import parse_qs

from podman_api import errors
from podman_api import models
from podman_api import opts
from podman_api import util


class TestUrlOpts(unittest.TestCase):
    """Tests for options rendered as query strings."""

    def test_empty(self):
        """Test options with nothing set serialize to None."""
        self.assertIsNone(opts.ContainerListOpts().serialize())
        self.assertTrue(opts.ContainerListOpts().is_empty())

    def test_serialize_is_repeatable(self):
        """Test serializing twice gives identical output."""
        o = opts.ContainerListOpts(all=True, limit=5)
        first = o.serialize()
        self.assertEqual('all=true&limit=5', first)
        self.assertEqual(first, o.serialize())

    def test_set_chains_and_clears(self):
        o = opts.ContainerLogsOpts().set('stdout', True).set('tail', '10')
        self.assertEqual('stdout=true&tail=10', o.serialize())
        o.set('tail', None)
        self.assertEqual('stdout=true', o.serialize())

    def test_unknown_option(self):
        with self.assertRaises(TypeError):
            opts.ContainerListOpts(colour='blue')

    def test_filters(self):
        """Test filters accumulate per key and are sent as JSON."""
        o = opts.ContainerListOpts(all=True)
        o.add_filters(
            opts.ContainerListFilter.status(models.ContainerStatus.RUNNING),
            opts.ContainerListFilter.label('app', 'web'),
            opts.ContainerListFilter.label('tier'))
        query = parse_qs(o.serialize())
        self.assertEqual(['true'], query['all'])
        self.assertEqual({'status': ['running'],
                          'label': ['app=web', 'tier']},
                         json.loads(query['filters'][0]))

    def test_filters_keyword(self):
        o = opts.EventsOpts(stream=False, filters=[
            opts.EventsFilter.event_type('container'),
            opts.EventsFilter.event('start')])
        query = parse_qs(o.serialize())
        self.assertEqual(['false'], query['stream'])
        self.assertEqual({'type': ['container'], 'event': ['start']},
                         json.loads(query['filters'][0]))

    def test_vector_repeats_key(self):
        """Test list options are sent as repeated keys in order."""
        o = opts.ContainerCommitOpts(changes=['CMD ["sh"]', 'ENV A=1'])
        self.assertEqual([('changes', 'CMD ["sh"]'), ('changes', 'ENV A=1')],
                         o.pairs())

    def test_enum_value(self):
        o = opts.PullOpts(reference='alpine', policy=opts.PullPolicy.NEWER)
        self.assertEqual('reference=alpine&policy=newer', o.serialize())

    def test_wait_conditions(self):
        o = opts.ContainerWaitOpts(
            conditions=[models.ContainerStatus.RUNNING, 'exited'])
        self.assertEqual('condition=running&condition=exited', o.serialize())

    def test_with_param_copies(self):
        """Test with_param leaves the original options untouched."""
        o = opts.ContainerAttachOpts(stdout=True)
        streamed = o.stream()
        self.assertEqual('stdout=true&stream=true', streamed.serialize())
        self.assertEqual('stdout=true', o.serialize())

    def test_oneshot(self):
        self.assertEqual('stream=false',
                         opts.ContainerStatsOpts().oneshot().serialize())

    def test_json_query_value(self):
        o = opts.ImageBuildOpts('/src', build_args={'VERSION': '1.0'})
        self.assertEqual({'buildargs': ['{"VERSION": "1.0"}']},
                         parse_qs(o.serialize()))

    def test_equality(self):
        self.assertEqual(opts.ContainerListOpts(all=True),
                         opts.ContainerListOpts().set('all', True))
        self.assertNotEqual(opts.ContainerListOpts(all=True),
                            opts.ContainerListOpts(all=False))

    def test_bare_key(self):
        """Test a pair with an empty value is rendered as a bare key."""
        self.assertEqual('a&b=1', util.encoded_pairs([('a', ''), ('b', '1')]))


class TestRequiredOpts(unittest.TestCase):
    """Tests for options with required positional values."""

    def test_missing_required(self):
        with self.assertRaises(TypeError):
            opts.SecretCreateOpts()

    def test_required_field_is_serialized(self):
        self.assertEqual('name=db-password',
                         opts.SecretCreateOpts('db-password').serialize())

    def test_required_attribute_is_not_serialized(self):
        """Test a required value without a wire name is only kept."""
        o = opts.ImageBuildOpts('/src/app', tag='app:latest')
        self.assertEqual('/src/app', o.path)
        self.assertEqual('t=app%3Alatest', o.serialize())

        m = opts.ManifestCreateOpts(name='list', all=True)
        self.assertEqual('list', m.name)
        self.assertEqual('all=true', m.serialize())

    def test_too_many_positional(self):
        with self.assertRaises(TypeError):
            opts.ManifestCreateOpts('a', 'b')


class TestJsonOpts(unittest.TestCase):
    """Tests for options rendered as JSON bodies."""

    def test_exec_create(self):
        """Test environment mappings become KEY=value strings."""
        o = opts.ExecCreateOpts(command=['ls', '-l'], env={'A': '1'},
                                tty=True, user=opts.UserOpt(1000, 'wheel'))
        self.assertEqual({'Cmd': ['ls', '-l'], 'Env': ['A=1'], 'Tty': True,
                          'User': '1000:wheel'},
                         json.loads(o.serialize()))

    def test_empty_body(self):
        self.assertEqual('{}', opts.ExecStartOpts().serialize())

    def test_records_become_objects(self):
        """Test nested records are sent as objects with wire names."""
        mount = models.ContainerMount(destination='/data', source='/srv',
                                      type='bind', options=['ro'])
        o = opts.ContainerCreateOpts(image='alpine', mounts=[mount])
        body = json.loads(o.serialize())
        self.assertEqual('alpine', body['image'])
        self.assertEqual([{'destination': '/data', 'options': ['ro'],
                           'source': '/srv', 'type': 'bind'}],
                         body['mounts'])

    def test_unserializable_value(self):
        o = opts.ContainerCreateOpts(devices=object())
        with self.assertRaises(errors.OptsSerializationError):
            o.serialize()


class TestRegistryAuth(unittest.TestCase):
    """Tests for registry credentials."""

    def _decode(self, value):
        return json.loads(base64.urlsafe_b64decode(value.encode('ascii')))

    def test_password(self):
        auth = opts.RegistryAuth.password('user', 'secret',
                                          server_address='quay.io')
        self.assertEqual({'username': 'user', 'password': 'secret',
                          'serveraddress': 'quay.io'},
                         self._decode(auth.serialize()))

    def test_token(self):
        auth = opts.RegistryAuth.token('tkn')
        self.assertEqual({'identitytoken': 'tkn'},
                         self._decode(auth.serialize()))

    def test_auth_is_not_in_query(self):
        """Test credentials go to the header, never the query string."""
        auth = opts.RegistryAuth.password('user', 'secret')
        o = opts.PullOpts(reference='quay.io/org/app', auth=auth)
        self.assertEqual('reference=quay.io%2Forg%2Fapp', o.serialize())
        self.assertEqual(auth.serialize(), o.auth_header())
        self.assertIsNone(opts.PullOpts(reference='alpine').auth_header())


class TestValueTypes(unittest.TestCase):
    """Tests for small option value types."""

    def test_user(self):
        self.assertEqual('root', str(opts.UserOpt('root')))
        self.assertEqual('1000:1000', str(opts.UserOpt(1000, 1000)))

    def test_platform(self):
        self.assertEqual('linux', str(opts.Platform('linux')))
        self.assertEqual('linux/arm64/v8',
                         str(opts.Platform('linux', 'arm64', 'v8')))

    def test_image(self):
        self.assertEqual('alpine:3.18', str(opts.ImageOpt('alpine', '3.18')))
        self.assertEqual('alpine@sha256:abc',
                         str(opts.ImageOpt('alpine', digest='sha256:abc')))


if __name__ == '__main__':
    unittest.main()
