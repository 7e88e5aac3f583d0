"""
Data source CLI

Inspects a pre-simulated outcome data source and draws outcomes from it.

Usage:
    gamedata --source games.db paytables
    gamedata --source games.db bets --paytable 0
    gamedata --source games.db --seed 42 draw --paytable 0 --total-bet 50 --lines 25 --bet-per-line 2
    gamedata create games.db --property GameName=Example
"""

import json
import sys

import click
from marshmallow import ValidationError

from gamedata.app import configure_logging, create_data_sources
from gamedata.config import Config
from gamedata.database import create_data_source_file, create_session_factory
from gamedata.domain import WinData
from gamedata.exceptions import AppException
from gamedata.models import GameDataProperty
from gamedata.schemas import (
    BetSchema, EvaluationDataSchema, GameConfigurationSchema, GameDataSchema,
    PaytableConfigurationSchema, WinDataSchema
)
from gamedata.utils import custom_bet_encoding, progressive_win_groups


def _fail(message):
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _echo_json(data):
    click.echo(json.dumps(data, sort_keys=True))


def _data_sources(ctx):
    """Opens the data source on first use and closes it when the command finishes."""
    root = ctx.find_root()
    if 'data_sources' not in root.obj:
        sources = create_data_sources(Config, source_path=root.obj['source'], seed=root.obj['seed'])
        root.obj['data_sources'] = sources
        root.call_on_close(sources.dispose)
    return root.obj['data_sources']


def _load_paytable(paytable_id):
    return PaytableConfigurationSchema().load({'paytable_id': paytable_id})


def _load_bet(total_bet, lines, bet_per_line, extra_bet, side_bet, persistence_id, custom):
    return BetSchema().load({
        'total_bet': total_bet,
        'sub_bet': lines,
        'bet_per_sub_bet': bet_per_line,
        'extra_bet': extra_bet,
        'side_bet': side_bet,
        'persistence_id': persistence_id,
        'custom_bet_data': custom_bet_encoding.decode(custom),
    })


def bet_options(command):
    """Options describing the paytable and bet a command resolves."""
    options = [
        click.option('--paytable', 'paytable_id', type=int, required=True, help='Paytable index'),
        click.option('--total-bet', type=int, required=True, help='Total wager'),
        click.option('--lines', type=int, required=True, help='Number of sub bets (lines)'),
        click.option('--bet-per-line', type=int, required=True, help='Wager per sub bet'),
        click.option('--extra-bet', type=int, default=0, show_default=True),
        click.option('--side-bet', type=int, default=0, show_default=True),
        click.option('--persistence-id', type=int, default=0, show_default=True),
        click.option('--custom', default='', help='Custom sub bets, e.g. "{bonus:1,free:2}"'),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _paytable_and_bet(paytable_id, total_bet, lines, bet_per_line, extra_bet, side_bet, persistence_id, custom):
    paytable = _load_paytable(paytable_id)
    bet = _load_bet(total_bet, lines, bet_per_line, extra_bet, side_bet, persistence_id, custom)
    return paytable, bet


@click.group()
@click.option('--source', type=click.Path(dir_okay=False), help='Data source file (defaults to GAMEDATA_SOURCE_PATH)')
@click.option('--seed', type=int, help='Seed for reproducible draws (defaults to GAMEDATA_RNG_SEED)')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, source, seed, verbose):
    """Pre-simulated outcome data source tools."""
    ctx.ensure_object(dict)
    ctx.obj['source'] = source
    ctx.obj['seed'] = seed
    ctx.obj['verbose'] = verbose
    configure_logging(level='DEBUG' if verbose else Config.LOG_LEVEL, json_format=Config.LOG_JSON)


@cli.command()
@click.pass_context
def paytables(ctx):
    """List the paytable configurations in the data source."""
    try:
        configurations = _data_sources(ctx).game_data_source.get_all_paytable_configurations()
        _echo_json(PaytableConfigurationSchema(many=True).dump(configurations))
    except AppException as e:
        _fail(e)


@cli.command()
@click.pass_context
def configs(ctx):
    """List every stored game configuration."""
    try:
        game_configs = _data_sources(ctx).store.list_game_configurations()
        _echo_json(GameConfigurationSchema(many=True).dump(game_configs))
    except AppException as e:
        _fail(e)


@cli.command()
@click.option('--paytable', 'paytable_id', type=int, required=True, help='Paytable index')
@click.pass_context
def bets(ctx, paytable_id):
    """List the bets available on a paytable."""
    try:
        available = _data_sources(ctx).game_data_source.get_all_bets(_load_paytable(paytable_id))
        _echo_json(BetSchema(many=True).dump(available))
    except (AppException, ValidationError) as e:
        _fail(e)


@cli.command()
@bet_options
@click.pass_context
def count(ctx, **bet_args):
    """Number of stored games for a paytable and bet."""
    try:
        paytable, bet = _paytable_and_bet(**bet_args)
        click.echo(_data_sources(ctx).game_data_source.get_number_of_games(paytable, bet))
    except (AppException, ValidationError) as e:
        _fail(e)


@cli.command()
@bet_options
@click.option('--count', 'draws', type=click.IntRange(min=1), default=1, show_default=True, help='Number of draws')
@click.option('--sequential', is_flag=True, help='Walk outcomes in stored order instead of drawing at random')
@click.pass_context
def draw(ctx, draws, sequential, **bet_args):
    """Draw evaluation data (win and random numbers), one JSON object per line."""
    try:
        paytable, bet = _paytable_and_bet(**bet_args)
        source = _data_sources(ctx).game_data_source
        schema = EvaluationDataSchema()
        for _ in range(draws):
            if sequential:
                evaluation = source.get_incremental_evaluation_data(paytable, bet)
                if evaluation is None:
                    click.echo("All outcomes have been drawn.", err=True)
                    break
            else:
                evaluation = source.get_random_evaluation_data(paytable, bet)
            _echo_json(schema.dump(evaluation))
    except (AppException, ValidationError) as e:
        _fail(e)


@cli.command()
@bet_options
@click.option('--count', 'draws', type=click.IntRange(min=1), default=1, show_default=True, help='Number of draws')
@click.pass_context
def win(ctx, draws, **bet_args):
    """Draw win results without random numbers."""
    try:
        paytable, bet = _paytable_and_bet(**bet_args)
        source = _data_sources(ctx).win_data_source
        schema = WinDataSchema()
        for _ in range(draws):
            _echo_json(schema.dump(source.get_random_win_data(paytable, bet)))
    except (AppException, ValidationError) as e:
        _fail(e)


@cli.command()
@bet_options
@click.option('--total-win', type=int, required=True, help='Win to reproduce, at the requested bet')
@click.option('--section-mask', type=int, default=0, show_default=True)
@click.option('--progressives', default='', help='Progressive wins as "level:count,..."')
@click.pass_context
def replay(ctx, total_win, section_mask, progressives, **bet_args):
    """Find random numbers that reproduce a win."""
    try:
        paytable, bet = _paytable_and_bet(**bet_args)
        win_data = WinData(
            total_win=total_win,
            game_section_mask=section_mask,
            progressives=progressive_win_groups.decode(progressives),
        )
        game_data = _data_sources(ctx).game_data_source.get_random_game_data(paytable, bet, win_data)
        _echo_json(GameDataSchema().dump(game_data))
    except (AppException, ValidationError) as e:
        _fail(e)


@cli.command()
@click.argument('key', required=False)
@click.pass_context
def properties(ctx, key):
    """Show one custom data property, or all of them."""
    try:
        source = _data_sources(ctx).game_data_source
        if key:
            click.echo(source.get_custom_property(key))
        else:
            _echo_json(source.get_custom_properties())
    except AppException as e:
        _fail(e)


@cli.command()
@click.argument('path', type=click.Path(dir_okay=False))
@click.option('--property', 'custom_properties', multiple=True, help='Custom data property as KEY=VALUE')
def create(path, custom_properties):
    """Create an empty data source file with the outcome schema."""
    pairs = []
    for item in custom_properties:
        key, separator, value = item.partition('=')
        if not separator or not key:
            _fail(f"Property '{item}' must be given as KEY=VALUE")
        pairs.append((key, value))

    try:
        engine = create_data_source_file(path, cache_size=Config.CACHE_SIZE, page_size=Config.PAGE_SIZE)
    except AppException as e:
        _fail(e)

    try:
        session_factory = create_session_factory(engine)
        with session_factory() as session:
            for key, value in pairs:
                session.merge(GameDataProperty(key=key, value=value))
            session.commit()
    finally:
        engine.dispose()

    click.echo(f"Created data source {path}")


if __name__ == '__main__':
    cli()
