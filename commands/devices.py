"""
Device commands: list devices and change their dim level.
"""

import click

from commands.helpers import get_client
from core.errors import ArgumentError
from models.utils import ID_PATTERN, parse_level_change


@click.command(name='devices')
def devices_command():
    """List devices as '<id> <name>'."""
    client = get_client()
    for device in client.devices():
        click.echo(str(device))


@click.command(name='dim', context_settings={'ignore_unknown_options': True})
@click.argument('args', nargs=-1)
def dim_command(args: tuple[str, ...]):
    """Set, raise or lower a device's dim level (0-100).

    \b
    Usage: dim DEVICE_ID [+|-]AMOUNT

    \b
    Examples:
      dim 42 60     Set device 42 to 60%
      dim 42 +5     Raise device 42 by 5 points
      dim 42 -10    Lower device 42 by 10 points
    """
    if len(args) != 2:
        raise ArgumentError(f"Expected 2 arguments, got {len(args)}.")

    device_id = _parse_device_id(args[0])
    sign, amount = parse_level_change(args[1])

    device = get_client().device(device_id)

    if sign == '+':
        device.level += amount
    elif sign == '-':
        device.level -= amount
    else:
        device.level = amount


def _parse_device_id(text: str) -> int:
    if not ID_PATTERN.fullmatch(text):
        raise ArgumentError(f"Could not parse device id: {text}")
    return int(text)
