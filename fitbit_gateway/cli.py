import json
from datetime import datetime
from getpass import getpass
from xml.etree import ElementTree

import click
import requests

from fitbit_gateway.clients.activity import (
    ActivityGateway,
    DISTANCE_UNITS,
    RESOURCE_PATHS,
)
from fitbit_gateway.clients.executor import HttpRequestExecutor, RESPONSE_FORMATS
from fitbit_gateway.config import Config
from fitbit_gateway.logger import get_logger
from fitbit_gateway.token_store import TokenStore


def _parse_date(value, option_name):
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        click.echo(f"Error: Invalid {option_name} date. Use YYYY-MM-DD", err=True)
        raise click.Abort()


def _echo_result(result):
    if isinstance(result, ElementTree.Element):
        click.echo(ElementTree.tostring(result, encoding='unicode'))
    else:
        click.echo(json.dumps(result, indent=2, ensure_ascii=False))


def _run(ctx, operation, *args, **kwargs):
    """Call a gateway method and print its result, aborting on failure."""
    try:
        gateway = ctx.obj['gateway_factory']()
        result = getattr(gateway, operation)(*args, **kwargs)
    except ValueError as e:
        # InvalidArgumentError and undecryptable stored tokens
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()
    except requests.RequestException as e:
        click.echo(f"Request failed: {e}", err=True)
        raise click.Abort()
    _echo_result(result)


@click.group()
@click.option('--token', envvar='FITBIT_ACCESS_TOKEN', help='OAuth 2 access token')
@click.option('--user-id', default=None, help="User ID (default: '-', the token owner)")
@click.option('--format', 'response_format', default=None,
              type=click.Choice(RESPONSE_FORMATS), help='Response format')
@click.pass_context
def cli(ctx, token, user_id, response_format):
    """Command line access to the Fitbit activity API."""
    ctx.ensure_object(dict)
    get_logger('fitbit_gateway')

    def gateway_factory():
        access_token = token or Config.ACCESS_TOKEN or TokenStore().load()
        if not access_token:
            click.echo("Error: No access token. Use --token or 'token set'.", err=True)
            raise click.Abort()
        executor = HttpRequestExecutor(access_token=access_token, response_format=response_format)
        return ActivityGateway(executor, user_id or Config.USER_ID)

    ctx.obj.setdefault('gateway_factory', gateway_factory)


@cli.group()
def token():
    """Manage the stored access token."""
    pass


@token.command('set')
def set_token():
    """Store an access token (encrypted)."""
    value = getpass("Access token: ")
    try:
        TokenStore().save(value)
        click.echo("✓ Access token saved")
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


@token.command('clear')
def clear_token():
    """Remove the stored access token."""
    if TokenStore().clear():
        click.echo("✓ Access token removed")
    else:
        click.echo("No stored access token found")


@cli.command()
@click.pass_context
def stats(ctx):
    """Lifetime activity statistics."""
    _run(ctx, 'get_activity_stats')


@cli.command()
@click.argument('resource', type=click.Choice(RESOURCE_PATHS))
@click.option('--start', required=True, help='Start date (YYYY-MM-DD)')
@click.option('--end', help='End date (YYYY-MM-DD)')
@click.option('--period', help='Period instead of end date (1d, 7d, 30d, 1w, 1m, 3m, 6m, 1y, max)')
@click.option('--tracker', is_flag=True, help='Only data measured by the tracker')
@click.pass_context
def series(ctx, resource, start, end, period, tracker):
    """Time series of an activity metric."""
    start_date = _parse_date(start, 'start')
    end_date = _parse_date(end, 'end') if end else None
    resource_path = f"tracker/{resource}" if tracker else resource
    _run(ctx, 'get_time_series', resource_path, start_date, end_date, period)


@cli.command()
@click.argument('day')
@click.pass_context
def day(ctx, day):
    """Activities for one day (YYYY-MM-DD or 'today')."""
    if day == 'today':
        _run(ctx, 'get_activities', None, day)
    else:
        _run(ctx, 'get_activities', _parse_date(day, 'activity'))


@cli.command()
@click.pass_context
def recent(ctx):
    """Recently logged activities."""
    _run(ctx, 'get_recent_activities')


@cli.command()
@click.pass_context
def frequent(ctx):
    """Frequently logged activities."""
    _run(ctx, 'get_frequent_activities')


@cli.command()
@click.pass_context
def favorites(ctx):
    """Favorite activities."""
    _run(ctx, 'get_favorite_activities')


@cli.command()
@click.argument('period', type=click.Choice(['daily', 'weekly']))
@click.pass_context
def goals(ctx, period):
    """Daily or weekly activity goals."""
    _run(ctx, 'get_daily_goals' if period == 'daily' else 'get_weekly_goals')


@cli.command('log')
@click.option('--date', 'day', required=True, help='Activity date (YYYY-MM-DD)')
@click.option('--time', 'start_time', required=True, help='Start time (HH:MM)')
@click.option('--activity-id', help='Activity ID from the catalog')
@click.option('--activity-name', help='Free-text activity name')
@click.option('--duration', required=True, type=int, help='Duration in milliseconds')
@click.option('--calories', type=int, help='Manual calories')
@click.option('--distance', type=float, help='Distance')
@click.option('--distance-unit', type=click.Choice(sorted(DISTANCE_UNITS)), help='Distance unit')
@click.pass_context
def log_activity(ctx, day, start_time, activity_id, activity_name, duration,
                 calories, distance, distance_unit):
    """Log an activity."""
    if not activity_id and not activity_name:
        click.echo("Error: --activity-id or --activity-name is required", err=True)
        raise click.Abort()

    try:
        start = datetime.strptime(f"{day} {start_time}", '%Y-%m-%d %H:%M')
    except ValueError:
        click.echo("Error: Invalid date or time. Use YYYY-MM-DD and HH:MM", err=True)
        raise click.Abort()

    _run(ctx, 'log_activity', start, activity_id, duration,
         calories=calories, distance=distance, distance_unit=distance_unit,
         activity_name=activity_name)


@cli.command()
@click.argument('activity_log_id')
@click.pass_context
def delete(ctx, activity_log_id):
    """Delete a logged activity."""
    _run(ctx, 'delete_activity', activity_log_id)


@cli.group()
def favorite():
    """Manage favorite activities."""
    pass


@favorite.command('add')
@click.argument('activity_id')
@click.pass_context
def add_favorite(ctx, activity_id):
    """Add an activity to the favorites."""
    _run(ctx, 'add_favorite_activity', activity_id)


@favorite.command('remove')
@click.argument('activity_id')
@click.pass_context
def remove_favorite(ctx, activity_id):
    """Remove an activity from the favorites."""
    _run(ctx, 'delete_favorite_activity', activity_id)


@cli.command()
@click.argument('activity_id')
@click.pass_context
def activity(ctx, activity_id):
    """Catalog entry of one activity."""
    _run(ctx, 'get_activity', activity_id)


@cli.command()
@click.pass_context
def browse(ctx):
    """Browse the whole activity catalog."""
    _run(ctx, 'browse_activities')


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
