"""Base classes for endpoint options.

Every options class declares the options it accepts in a FIELDS table
mapping the Python keyword to a Field holding the name used on the wire and
a kind which controls how the value is rendered. Options are given as
keyword arguments, or set later with set(), which returns the options object
so calls can be chained.

UrlOpts render to a query string and JsonOpts to a JSON request body.
Serializing never changes the options, so the same options can be serialized
any number of times with identical results.
"""

from collections import namedtuple
import copy
import enum
import json

from podman_api import errors
from podman_api import models
from podman_api import util


BOOL = 'bool'
INT = 'int'
STR = 'str'
ENUM = 'enum'
VEC = 'vec'
JSON = 'json'
ENV = 'env'
ANY = 'any'

Field = namedtuple('Field', ['wire', 'kind'])


class Filter(namedtuple('Filter', ['key', 'value'])):
    """One filter constraint.

    Subclasses provide a constructor per constraint an endpoint supports, so
    ContainerListFilter.status(ContainerStatus.RUNNING) renders as
    status=running.
    """
    __slots__ = ()

    @classmethod
    def make(cls, key, value):
        if isinstance(value, enum.Enum):
            value = value.value
        elif isinstance(value, bool):
            value = 'true' if value else 'false'
        return cls(key, str(value))

    @classmethod
    def label(cls, key, value=None):
        if value is None:
            return cls.make('label', key)
        return cls.make('label', '%s=%s' % (key, value))

    @classmethod
    def no_label(cls, key, value=None):
        if value is None:
            return cls.make('label!', key)
        return cls.make('label!', '%s=%s' % (key, value))


def _url_value(kind, value):
    if kind == BOOL:
        return 'true' if value else 'false'
    if kind == INT:
        return str(int(value))
    if kind == ENUM and isinstance(value, enum.Enum):
        return value.value
    if kind == JSON:
        return json.dumps(_jsonable(value), default=_json_default)
    return str(value)


def _json_default(obj):
    if isinstance(obj, models.Record):
        return obj.to_dict()
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    raise TypeError('Object of type %s is not JSON serializable'
                    % type(obj).__name__)


def _jsonable(value):
    # Records are namedtuples, which json would otherwise render as arrays
    if isinstance(value, models.Record):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    return value


def _json_value(kind, value):
    if kind == ENV and isinstance(value, dict):
        return ['%s=%s' % (k, v) for k, v in value.items()]
    if kind == VEC and not isinstance(value, (str, bytes)):
        return _jsonable(list(value))
    if kind == ENUM and isinstance(value, enum.Enum):
        return value.value
    if kind == STR and not isinstance(value, str):
        return str(value)
    return _jsonable(value)


class Opts(object):
    FIELDS = {}
    # Positional options which must always be given. A required name which
    # is not in FIELDS is kept as an attribute and never serialized.
    REQUIRED = ()
    FILTER = None

    def __init__(self, *args, **kwargs):
        if len(args) > len(self.REQUIRED):
            raise TypeError('%s takes at most %d positional options'
                            % (type(self).__name__, len(self.REQUIRED)))
        self.params = {}
        self.filters = {}

        for name, value in zip(self.REQUIRED, args):
            self._set_required(name, value)
        for name in self.REQUIRED[len(args):]:
            if name not in kwargs:
                raise TypeError('%s requires the %r option'
                                % (type(self).__name__, name))
            self._set_required(name, kwargs.pop(name))

        for name, value in kwargs.items():
            self.set(name, value)

    def _set_required(self, name, value):
        if name in self.FIELDS:
            self.set(name, value)
        else:
            setattr(self, name, value)

    def set(self, name, value):
        if name == 'filters' and self.FILTER is not None:
            return self.add_filters(*value)

        field = self.FIELDS.get(name)
        if field is None:
            raise TypeError(
                '%s has no option %r' % (type(self).__name__, name))
        if value is None:
            self.params.pop(field.wire, None)
        else:
            self.params[field.wire] = (field.kind, value)
        return self

    def get(self, name):
        field = self.FIELDS[name]
        return self.params.get(field.wire, (None, None))[1]

    def add_filters(self, *filters):
        """Add filter constraints. Values for the same key accumulate."""
        for f in filters:
            key, value = f
            if isinstance(value, enum.Enum):
                value = value.value
            self.filters.setdefault(key, []).append(str(value))
        return self

    def with_param(self, wire, value, kind=BOOL):
        """Return a copy with an extra wire parameter set."""
        new = copy.copy(self)
        new.params = dict(self.params)
        new.filters = {k: list(v) for k, v in self.filters.items()}
        new.params[wire] = (kind, value)
        return new

    def is_empty(self):
        return not self.params and not self.filters

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, self.serialize())


class UrlOpts(Opts):
    """Options rendered as a URL query string."""

    def pairs(self):
        pairs = []
        for wire, (kind, value) in self.params.items():
            if kind == VEC and not isinstance(value, str):
                for item in value:
                    pairs.append((wire, _url_value(STR, item)))
            else:
                pairs.append((wire, _url_value(kind, value)))
        if self.filters:
            pairs.append(('filters', json.dumps(self.filters)))
        return pairs

    def serialize(self):
        """Return the encoded query string, or None when nothing is set."""
        try:
            pairs = self.pairs()
        except (TypeError, ValueError) as e:
            raise errors.OptsSerializationError(
                'Failed to serialize %s: %s' % (type(self).__name__, e)) from e
        if not pairs:
            return None
        return util.encoded_pairs(pairs)


class JsonOpts(Opts):
    """Options rendered as a JSON object request body."""

    def body(self):
        return {wire: _json_value(kind, value)
                for wire, (kind, value) in self.params.items()}

    def serialize(self):
        try:
            return json.dumps(self.body(), default=_json_default)
        except (TypeError, ValueError) as e:
            raise errors.OptsSerializationError(
                'Failed to serialize %s: %s' % (type(self).__name__, e)) from e
