"""CLI entry point for faq-relay."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import click

from faq_relay import __version__


async def _drain(stream: AsyncIterator[bytes]) -> int:
    """Write every fragment to stdout as it arrives. Returns the fragment count."""
    count = 0
    async for fragment in stream:
        click.echo(fragment.decode('utf-8'), nl=False)
        count += 1
    click.echo()
    return count


@click.command()
@click.argument('question', required=False)
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option(
    '-k',
    '--knowledge-base',
    default=None,
    help='Knowledge base name or path to a YAML file (overrides config).',
)
@click.option(
    '--no-direct',
    is_flag=True,
    default=False,
    help='Always ask the model, even when the question matches an FAQ entry.',
)
@click.option(
    '--log-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Write a debug log into this directory.',
)
@click.option(
    '--list-knowledge-bases',
    'list_kbs',
    is_flag=True,
    default=False,
    help='List available knowledge bases (built-in and user) and exit.',
)
@click.version_option(version=__version__)
def cli(question, config_path, knowledge_base, no_direct, log_dir, list_kbs):
    """faq-relay -- answer a caregiver question from the FAQ or an OpenAI-compatible model."""
    from faq_relay.l1_entities.chat_message import ChatMessage  # noqa: PLC0415 -- deferred: not needed for --help
    from faq_relay.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )
    from faq_relay.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: openai stack not loaded on --help
        DependencyContainer,
    )

    if log_dir:
        from faq_relay.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only with --log-dir
            setup_file_logging,
        )

        setup_file_logging(Path(log_dir))

    if list_kbs:
        for meta in DependencyContainer.knowledge_base_loader().list_knowledge_bases():
            click.echo(f'{meta.key}\t{meta.name}' if meta.name else meta.key)
        return

    if not question:
        raise click.UsageError("Missing argument 'QUESTION'.")

    overrides: dict = {}
    if knowledge_base:
        overrides.setdefault('faq', {})['knowledge_base'] = knowledge_base
    if no_direct:
        overrides.setdefault('faq', {})['direct_reply'] = False

    try:
        raw = DependencyContainer.config_loader().load_raw(config_path, overrides=overrides or None)
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw)
        container = DependencyContainer(config, infra)
        kb = container.faq_loader.load(config.faq.knowledge_base)
    except (FileNotFoundError, ValueError) as e:  # pydantic ValidationError is a ValueError
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    stream = container.answerer.execute([ChatMessage(role='user', content=question)], kb)
    try:
        asyncio.run(_drain(stream))
    except Exception as e:
        click.echo(f'\nError: {type(e).__name__}: {e}', err=True)
        sys.exit(1)
