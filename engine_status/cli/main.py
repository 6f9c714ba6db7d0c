"""Command-line interface for the engine status classifier."""

import sys
from typing import Optional
import click
import structlog

from engine_status.core.poller import StatusPoller, StatusTimeoutError
from engine_status.core.recording import RecordedEngineClient, RecordingError
from engine_status.core.status_classifier import classify
from engine_status.core.unlock_check import is_engine_unlocked
from engine_status.models.config import EngineConfig
from engine_status.models.status import EngineContext, ProbeError
from engine_status.utils.logging import setup_logging

logger = structlog.get_logger(__name__)


@click.group()
@click.option('--config-file', '-c', type=click.Path(exists=True),
              help='Path to configuration file')
@click.option('--log-level', '-l', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
              help='Logging level')
@click.option('--chain-name', default=None, help='Expected chain (overrides config)')
@click.option('--min-version', default=None, help='Minimum engine version (overrides config)')
@click.pass_context
def cli(ctx, config_file: Optional[str], log_level: str,
        chain_name: Optional[str], min_version: Optional[str]):
    """Engine Status Classifier CLI."""
    ctx.ensure_object(dict)

    overrides = {'log_level': log_level}
    if chain_name:
        overrides['chain_name'] = chain_name
    if min_version:
        overrides['min_version'] = min_version

    # Load configuration
    try:
        if config_file:
            config = EngineConfig(_env_file=config_file, **overrides)
        else:
            config = EngineConfig(**overrides)
    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    setup_logging(config)
    ctx.obj['config'] = config


def _load_context(config: EngineConfig, recording: str) -> EngineContext:
    try:
        client = RecordedEngineClient.from_file(recording)
    except RecordingError as e:
        click.echo(f"❌ Invalid recording: {e}", err=True)
        sys.exit(1)

    return EngineContext.from_client(config, client)


@cli.command(name='classify')
@click.argument('recording', type=click.Path(exists=True, dir_okay=False))
@click.option('--wait', '-w', is_flag=True,
              help='Keep classifying until the engine is VALIDATED')
@click.pass_context
def classify_command(ctx, recording: str, wait: bool):
    """Classify an engine from a recording of its RPC responses.

    The recording must contain a get_info entry; gen_seed defaults to
    success when it is not recorded.
    """
    config = ctx.obj['config']
    engine = _load_context(config, recording)

    try:
        if wait:
            status = StatusPoller.from_config(engine, config).wait_for()
        else:
            status = classify(engine)
    except StatusTimeoutError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger.error("Engine classification failed", error=str(e))
        click.echo(f"❌ Classification failed: {e}", err=True)
        sys.exit(1)

    click.echo(status.value)


@cli.command(name='is-unlocked')
@click.argument('recording', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def is_unlocked_command(ctx, recording: str):
    """Report whether the engine's wallet is unlocked."""
    config = ctx.obj['config']
    engine = _load_context(config, recording)

    try:
        unlocked = is_engine_unlocked(engine)
    except ProbeError as e:
        click.echo(f"❌ Engine needs troubleshooting: {e}", err=True)
        sys.exit(1)

    click.echo("unlocked" if unlocked else "locked")


@cli.command()
@click.pass_context
def version(ctx):
    """Show version information."""
    from engine_status import __version__, __description__

    click.echo(f"Engine Status Classifier v{__version__}")
    click.echo(__description__)


if __name__ == '__main__':
    cli()
