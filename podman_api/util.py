import datetime
import json
import logging
from urllib.parse import urlencode, quote_plus

from pbr.version import VersionInfo


LOG = logging.getLogger(__name__)


def get_user_agent():
    try:
        version = VersionInfo('podman-api').version_string()
    except Exception:
        version = '0.0.0'
    return 'podman-api/%s' % version


def construct_ep(ep, query=None):
    """Append an already encoded query string to an endpoint, if any."""
    if query:
        return '%s?%s' % (ep, query)
    return ep


def encoded_pair(key, value):
    if isinstance(value, bool):
        value = 'true' if value else 'false'
    return urlencode([(key, str(value))])


def encoded_pairs(pairs):
    """Form-encode (key, value) pairs, preserving their order.

    Pairs with an empty value are rendered as a bare key.
    """
    out = []
    for key, value in pairs:
        if value == '':
            out.append(quote_plus(key))
        else:
            out.append(urlencode([(key, value)]))
    return '&'.join(out)


def datetime_from_unix_timestamp(ts):
    return datetime.datetime.fromtimestamp(ts, tz=datetime.timezone.utc)


def datetime_from_nano_timestamp(ts_nano):
    seconds, nanos = divmod(ts_nano, 1000000000)
    return (datetime.datetime.fromtimestamp(seconds,
                                            tz=datetime.timezone.utc)
            + datetime.timedelta(microseconds=nanos // 1000))


def _indented_json(data):
    return '\n    '.join(json.dumps(data, indent=4,
                                    sort_keys=True).split('\n'))


def log_request(method, url, headers=None, data=None, stream=False):
    LOG.debug('-------------------------------------------------------')
    LOG.debug('API client requested: %s %s (stream=%s)'
              % (method, url, stream))
    for h in (headers or {}):
        LOG.debug('Header: %s = %s' % (h, headers[h]))
    if data is not None and not isinstance(data, (bytes, bytearray)):
        try:
            LOG.debug('Data:\n    %s' % _indented_json(json.loads(data)))
        except (TypeError, ValueError):
            LOG.debug('Data: <%s>' % type(data).__name__)


def log_response(r, stream=False):
    LOG.debug('API client response: code = %s' % r.status_code)
    for h in r.headers:
        LOG.debug('Header: %s = %s' % (h, r.headers[h]))
    if not stream:
        if r.text:
            try:
                LOG.debug('Data:\n    %s' % _indented_json(json.loads(r.text)))
            except ValueError:
                LOG.debug('Text:\n    %s'
                          % ('\n    '.join(r.text.split('\n'))))
    else:
        LOG.debug('Result content not logged for streaming requests')
    LOG.debug('-------------------------------------------------------')
