import functools

from podman_api import constants
from podman_api import errors


@functools.total_ordering
class ApiVersion(object):
    """A libpod API version, used to build versioned endpoint paths.

    Only major and minor take part in the endpoint prefix, but all three
    components are compared when ordering versions.
    """

    def __init__(self, major, minor=0, patch=0):
        self.major = major
        self.minor = minor
        self.patch = patch

    @classmethod
    def parse(cls, value):
        """Parse a MAJOR.MINOR.PATCH string.

        Raises:
            MalformedVersionError: If the string does not hold exactly three
                dot-separated unsigned integers.
        """
        elems = value.split('.')
        names = ('major', 'minor', 'patch')
        if len(elems) > len(names):
            raise errors.MalformedVersionError('unexpected extra tokens')

        parsed = []
        for name, elem in zip(names, elems):
            if not (elem.isascii() and elem.isdigit()):
                raise errors.MalformedVersionError(
                    'invalid %s version %r' % (name, elem))
            parsed.append(int(elem))

        if len(parsed) < len(names):
            raise errors.MalformedVersionError(
                'expected %s version' % names[len(parsed)])
        return cls(*parsed)

    @classmethod
    def from_value(cls, value):
        """Coerce an int, tuple, string or ApiVersion to an ApiVersion."""
        if isinstance(value, ApiVersion):
            return value
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, (tuple, list)):
            if not 1 <= len(value) <= 3:
                raise errors.MalformedVersionError(
                    'expected 1 to 3 version components, got %d'
                    % len(value))
            return cls(*value)
        if isinstance(value, str):
            return cls.parse(value.lstrip('v'))
        raise errors.MalformedVersionError(
            'cannot build a version from %r' % (value,))

    def as_tuple(self):
        return (self.major, self.minor, self.patch)

    def make_endpoint(self, ep):
        if not ep.startswith('/'):
            ep = '/' + ep
        return '/v%s%s' % (self, ep)

    def __eq__(self, other):
        if not isinstance(other, ApiVersion):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other):
        if not isinstance(other, ApiVersion):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __str__(self):
        return '%d.%d' % (self.major, self.minor)

    def __repr__(self):
        return 'ApiVersion(%d, %d, %d)' % self.as_tuple()


LATEST_API_VERSION = ApiVersion(*constants.LATEST_API_VERSION)
