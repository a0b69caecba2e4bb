#!/usr/bin/env python3
"""
Telldus Live CLI
List and dim Telldus devices and read sensor values through the Telldus Live API.
"""

import logging
from pathlib import Path

import click

from core.config import AUTH_FILE
from commands.setup import TelldusGroup, authorize_command
from commands.devices import devices_command, dim_command
from commands.sensors import sensors_command, sensor_command


@click.group(
    cls=TelldusGroup,
    invoke_without_command=True,
    context_settings={'help_option_names': ['-h', '--help']}
)
@click.option('--auth-file', type=click.Path(dir_okay=False, path_type=Path),
              default=AUTH_FILE, envvar='TELLDUS_AUTH_FILE', show_default=True,
              help='YAML file holding consumer_key, consumer_secret, token and token_secret')
@click.option('--debug', is_flag=True, help='Log API requests and responses')
@click.version_option(version='0.1.0', prog_name='Telldus Live')
@click.pass_context
def cli(ctx, auth_file: Path, debug: bool):
    """Telldus Live CLI - control dimmers and read sensors on your Telldus Live account.

Authentication: OAuth 1.0a credentials in auth.yml (next to this script by default).
Run 'authorize' once to create it."""
    ctx.ensure_object(dict)
    ctx.obj['auth_file'] = auth_file

    if debug:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    if ctx.invoked_subcommand is None:
        ctx.command.exit_with_usage(ctx)


cli.add_command(devices_command)
cli.add_command(dim_command)
cli.add_command(sensors_command)
cli.add_command(sensor_command)
cli.add_command(authorize_command)


if __name__ == '__main__':
    cli()
