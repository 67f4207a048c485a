import click
import json
import logging
from shakenfist_utilities import logs
import sys

from podman_api import config
from podman_api import errors
from podman_api import opts
from podman_api.podman import Podman
from podman_api import stream


LOG = logs.setup_console(__name__)


@click.group()
@click.option('--verbose', is_flag=True)
@click.option('--uri', default=None, envvar=config.ENV_URI,
              help='Connection URI, for example '
                   'unix:///run/podman/podman.sock')
@click.option('--api-version', default=None, envvar=config.ENV_API_VERSION,
              help='libpod API version to use (MAJOR.MINOR.PATCH)')
@click.option('--cert-path', default=None, envvar=config.ENV_CERT_PATH,
              help='Directory holding cert.pem, key.pem and ca.pem')
@click.option('--tls-verify/--no-tls-verify', default=None,
              help='Verify the daemon certificate for https connections')
@click.pass_context
def cli(ctx, verbose=None, uri=None, api_version=None, cert_path=None,
        tls_verify=None):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        LOG.setLevel(logging.DEBUG)

    if not ctx.obj:
        ctx.obj = {}
    ctx.obj['URI'] = uri
    ctx.obj['API_VERSION'] = api_version
    ctx.obj['CERT_PATH'] = cert_path
    ctx.obj['TLS_VERIFY'] = tls_verify


def _client(ctx):
    if 'CLIENT' not in ctx.obj:
        ctx.obj['CLIENT'] = Podman.from_env(
            uri=ctx.obj['URI'], version=ctx.obj['API_VERSION'],
            cert_path=ctx.obj['CERT_PATH'], tls_verify=ctx.obj['TLS_VERIFY'])
        LOG.debug('Using %s' % ctx.obj['CLIENT'])
    return ctx.obj['CLIENT']


def _fail(e):
    click.echo('Error: %s' % e, err=True)
    sys.exit(1)


def _echo_json(data):
    click.echo(json.dumps(data, indent=4, sort_keys=True))


def _write_frames(frames):
    for frame in frames:
        if frame.stream_type == stream.StreamType.STDERR:
            out = sys.stderr.buffer
        else:
            out = sys.stdout.buffer
        out.write(frame.payload)
        out.flush()


@click.command()
@click.pass_context
def ping(ctx):
    """Check the daemon answers and show its versions."""
    try:
        info = _client(ctx).ping()
    except errors.PodmanError as e:
        _fail(e)

    for field, value in info._asdict().items():
        if value is not None:
            click.echo('%s: %s' % (field, value))


cli.add_command(ping)


@click.command()
@click.pass_context
def info(ctx):
    """Show information about the daemon host."""
    try:
        _echo_json(_client(ctx).info())
    except errors.PodmanError as e:
        _fail(e)


cli.add_command(info)


@click.command()
@click.pass_context
def version(ctx):
    """Show the daemon's version details."""
    try:
        _echo_json(_client(ctx).version())
    except errors.PodmanError as e:
        _fail(e)


cli.add_command(version)


@click.command()
@click.pass_context
def df(ctx):
    """Show disk usage by images, containers and volumes."""
    try:
        _echo_json(_client(ctx).data_usage())
    except errors.PodmanError as e:
        _fail(e)


cli.add_command(df)


def _parse_filters(filters):
    parsed = []
    for f in filters:
        if '=' not in f:
            raise click.BadParameter('filters must be of the form key=value',
                                     param_hint='--filter')
        parsed.append(tuple(f.split('=', 1)))
    return parsed


@click.command()
@click.option('--since', default=None, help='Show events created since then')
@click.option('--until', default=None, help='Show events created until then')
@click.option('--no-stream', is_flag=True, default=False,
              help='Exit once the existing events have been shown')
@click.option('--filter', '-f', 'filters', multiple=True,
              help='Filter as key=value (can be specified multiple times)')
@click.pass_context
def events(ctx, since, until, no_stream, filters):
    """Show daemon events as they happen."""
    events_opts = opts.EventsOpts(since=since, until=until)
    if no_stream:
        events_opts.set('stream', False)
    events_opts.add_filters(*_parse_filters(filters))

    try:
        for event in _client(ctx).events(events_opts):
            if isinstance(event, errors.EventDecodeError):
                click.echo('Warning: %s' % event, err=True)
                continue
            click.echo('%s %s %s %s'
                       % (event.timestamp.isoformat(), event.type,
                          event.action, event.actor.id))
    except errors.PodmanError as e:
        _fail(e)


cli.add_command(events)


@click.command()
@click.option('--all', '-a', 'show_all', is_flag=True, default=False,
              help='Show stopped containers too')
@click.pass_context
def ps(ctx, show_all):
    """List containers."""
    try:
        containers = _client(ctx).containers().list(
            opts.ContainerListOpts(all=show_all))
    except errors.PodmanError as e:
        _fail(e)

    for c in containers or []:
        click.echo('%-12s  %-30s  %-10s  %s'
                   % (c.get('Id', '')[:12], c.get('Image', ''),
                      c.get('State', ''), ','.join(c.get('Names') or [])))


cli.add_command(ps)


@click.command()
@click.pass_context
def images(ctx):
    """List images."""
    try:
        found = _client(ctx).images().list()
    except errors.PodmanError as e:
        _fail(e)

    for img in found or []:
        names = img.get('Names') or img.get('RepoTags') or ['<none>']
        click.echo('%-12s  %s' % (img.get('Id', '')[:12], ','.join(names)))


cli.add_command(images)


@click.command()
@click.argument('container')
@click.option('--follow', is_flag=True, default=False)
@click.option('--tail', default=None, help='Number of lines to show')
@click.pass_context
def logs_cmd(ctx, container, follow, tail):
    """Show the logs of a container."""
    logs_opts = opts.ContainerLogsOpts(stdout=True, stderr=True,
                                       follow=follow, tail=tail)
    try:
        _write_frames(_client(ctx).containers().get(container).logs(logs_opts))
    except errors.PodmanError as e:
        _fail(e)


cli.add_command(logs_cmd, name='logs')


@click.command()
@click.argument('container')
@click.argument('command', nargs=-1, required=True)
@click.option('--tty', '-t', is_flag=True, default=False,
              help='Allocate a pseudo-TTY')
@click.pass_context
def exec_cmd(ctx, container, command, tty):
    """Run a command in a running container."""
    create_opts = opts.ExecCreateOpts(
        command=list(command), attach_stdout=True, attach_stderr=True,
        tty=tty)
    try:
        session = _client(ctx).containers().get(container).create_exec(
            create_opts)
        LOG.debug('Created exec session %s' % session.id)
        _write_frames(session.start(opts.ExecStartOpts(tty=tty)))
    except errors.PodmanError as e:
        _fail(e)


cli.add_command(exec_cmd, name='exec')


INSPECTABLE = {
    'container': lambda client: client.containers(),
    'image': lambda client: client.images(),
    'pod': lambda client: client.pods(),
    'network': lambda client: client.networks(),
    'volume': lambda client: client.volumes(),
}


@click.command()
@click.argument('kind', type=click.Choice(sorted(INSPECTABLE)))
@click.argument('name')
@click.pass_context
def inspect(ctx, kind, name):
    """Show the details of a container, image, pod, network or volume."""
    try:
        collection = INSPECTABLE[kind](_client(ctx))
        _echo_json(collection.get(name).inspect())
    except errors.PodmanError as e:
        _fail(e)


cli.add_command(inspect)
