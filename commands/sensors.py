"""
Sensor commands: list sensors and show their latest readings.
"""

import click

from commands.helpers import get_client
from core.errors import ArgumentError
from models.utils import ID_PATTERN


@click.command(name='sensors')
def sensors_command():
    """List sensors as '<id> <name>'."""
    client = get_client()
    for sensor in client.sensors():
        click.echo(f"{sensor.id} {sensor.name}")


@click.command(name='sensor')
@click.argument('args', nargs=-1)
def sensor_command(args: tuple[str, ...]):
    """Show a sensor's readings.

    \b
    Usage: sensor SENSOR_ID

    \b
    Output:
      <id> <name>
        <reading>: <value>
    """
    if len(args) < 1:
        raise ArgumentError("Not enough arguments. Expected 1 argument.")

    if not ID_PATTERN.fullmatch(args[0]):
        raise ArgumentError(f"Could not parse sensor id: {args[0]}")
    sensor_id = int(args[0])

    sensor = get_client().sensor(sensor_id)
    click.echo(str(sensor), nl=False)
