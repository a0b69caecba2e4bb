"""
Setup commands for the Telldus Live CLI.

Contains the custom Click group class (usage on unknown commands, typo
suggestions, coloured help) and the OAuth authorisation command.
"""

import click

from commands.helpers import get_auth_file
from core.auth import AuthorizationFlow
from core.config import save_credentials
from models.utils import similarity_score


class TelldusGroup(click.Group):
    """Group that prints a short usage and exits 1 when no valid command is given."""

    def usage_lines(self, ctx) -> list[str]:
        return [
            "Usage:",
            f"  {ctx.command_path} command [argument]...",
        ]

    def exit_with_usage(self, ctx):
        for line in self.usage_lines(ctx):
            click.echo(line)
        ctx.exit(1)

    def resolve_command(self, ctx, args):
        """Resolve command, falling back to usage (and suggestions) for unknown names."""
        cmd_name = args[0] if args else ''
        if cmd_name and not cmd_name.startswith('-') and self.get_command(ctx, cmd_name) is None:
            suggestions = self._get_suggestions(ctx, cmd_name)
            if suggestions:
                click.echo(click.style(f"No such command '{cmd_name}'. Did you mean one of these?", fg='yellow'),
                           err=True)
                for suggestion in suggestions:
                    click.echo(click.style(f"  • {suggestion}", fg='green'), err=True)
            self.exit_with_usage(ctx)
        return super().resolve_command(ctx, args)

    def _get_suggestions(self, ctx, cmd_name, max_suggestions=3):
        """Get command suggestions based on similarity."""
        suggestions = []
        for command in self.list_commands(ctx):
            cmd_obj = self.get_command(ctx, command)
            if cmd_obj and not cmd_obj.hidden:
                score = similarity_score(cmd_name, command)
                if score > 0:
                    suggestions.append((score, command))

        suggestions.sort(reverse=True, key=lambda x: x[0])
        return [cmd for score, cmd in suggestions[:max_suggestions]]

    def format_usage(self, ctx, formatter):
        """Format the usage line with colour."""
        formatter.write_paragraph()
        formatter.write_text(
            click.style('Usage: ', fg='cyan', bold=True) +
            click.style(f'{ctx.command_path} [OPTIONS] COMMAND [ARGS]...', fg='white')
        )

    def format_commands(self, ctx, formatter):
        """Format commands with colour."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd.get_short_help_str(limit=200)))

        if commands:
            formatter.write_paragraph()
            formatter.write_text(click.style('Commands:', fg='yellow', bold=True))

            max_len = max(len(cmd[0]) for cmd in commands)
            with formatter.indentation():
                for subcommand, help_text in commands:
                    formatter.write_text(
                        click.style(subcommand.ljust(max_len), fg='green') + '  ' +
                        click.style(help_text, fg='white', dim=True)
                    )


@click.command(name='authorize')
@click.option('--consumer-key', prompt='Consumer key', envvar='TELLDUS_CONSUMER_KEY',
              help='Public key of your Telldus Live application')
@click.option('--consumer-secret', prompt='Consumer secret', hide_input=True,
              envvar='TELLDUS_CONSUMER_SECRET', help='Private key of your Telldus Live application')
@click.option('--yes', '-y', is_flag=True, help='Overwrite an existing credentials file without asking')
def authorize_command(consumer_key: str, consumer_secret: str, yes: bool):
    """Authorise this client with Telldus Live and save auth.yml.

    Runs the OAuth 1.0a flow: fetches a request token, sends you to the
    Telldus Live authorisation page, then exchanges the verified token for
    an access token.

    \b
    Examples:
      telldus-live authorize
      telldus-live --auth-file ~/telldus.yml authorize --consumer-key KEY
    """
    auth_file = get_auth_file()
    if auth_file.exists() and not yes:
        if not click.confirm(f"Overwrite existing credentials in {auth_file}?", default=False):
            click.echo("Cancelled.")
            return

    flow = AuthorizationFlow(consumer_key, consumer_secret)

    click.echo("Requesting token from Telldus Live...")
    url = flow.start()

    click.echo()
    click.secho("Open this URL in a browser and grant access:", fg='cyan', bold=True)
    click.echo(f"  {url}")
    click.echo()

    verifier = click.prompt("Verification code (or the URL you were redirected to)")
    credentials = flow.finish(verifier)

    save_credentials(credentials, auth_file)
    click.secho(f"✓ Credentials saved to {auth_file}", fg='green')
