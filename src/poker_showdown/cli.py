"""Command-line interface for evaluating poker hands."""

import json

import click

from .config import EvaluatorConfig, LOG_LEVELS
from .core.hand import Hand
from .evaluation.evaluator import HandEvaluator
from .evaluation.types import Evaluation
from .exceptions import PokerShowdownError
from .logging_utils import configure_logging

DEMO_HANDS = ["As 2c 3d 7h Tc", "7c 7d 3h 2s 8c"]


def _parse_hands(hand_strs: tuple[str, ...]) -> list[Hand]:
    try:
        return [Hand.from_string(s) for s in hand_strs]
    except ValueError as e:
        raise click.ClickException(str(e))


def _echo_evaluation(evaluation: Evaluation) -> None:
    click.echo(str(evaluation))
    click.echo(f"Description: {evaluation.describe()}")
    click.echo(f"Score: {evaluation.score:.4f}")


@click.group()
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help='Logging level (defaults to POKER_SHOWDOWN_LOG_LEVEL)')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              default=None, help='JSON evaluator configuration file')
@click.option('--parallel', is_flag=True, help='Evaluate hands on a thread pool')
@click.pass_context
def cli(ctx, log_level, config_path, parallel):
    """Five-card poker hand evaluator."""
    try:
        config = EvaluatorConfig.from_file(config_path) if config_path else EvaluatorConfig.from_env()
    except ValueError as e:
        raise click.ClickException(str(e))
    if parallel:
        config.parallel = True
    if log_level:
        config.log_level = log_level.upper()
    configure_logging(config.log_level)
    ctx.obj = HandEvaluator(config)


@cli.command()
@click.argument('hands', nargs=-1, required=True)
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
@click.option('--all', 'show_all', is_flag=True, help='Print every hand, strongest first')
@click.pass_obj
def evaluate(evaluator, hands, as_json, show_all):
    """Find the winning hand(s) among two or more HANDS, e.g. "As Kd 7c 7h 2s"."""
    parsed = _parse_hands(hands)
    try:
        results = evaluator.rank_hands(parsed) if show_all else evaluator.evaluate(parsed)
    except PokerShowdownError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps([r.to_json() for r in results], indent=2))
        return

    if not show_all:
        label = "Winning hand" if len(results) == 1 else f"Split pot between {len(results)} hands"
        click.echo(f"{label}:")
    for i, result in enumerate(results, 1):
        if show_all:
            click.echo(f"#{i}")
        _echo_evaluation(result)
        click.echo()


@cli.command()
@click.argument('hand')
@click.pass_obj
def describe(evaluator, hand):
    """Classify and describe a single HAND."""
    parsed = _parse_hands((hand,))[0]
    try:
        result = evaluator.evaluate_hand(parsed)
    except PokerShowdownError as e:
        raise click.ClickException(str(e))
    _echo_evaluation(result)


@cli.command()
@click.pass_context
def demo(ctx):
    """Evaluate a sample ace-high hand against a pair of sevens."""
    ctx.invoke(evaluate, hands=tuple(DEMO_HANDS), as_json=False, show_all=False)


if __name__ == '__main__':
    cli()
