"""CLI entry point for wordnik-client."""

import json
import logging
from pathlib import Path

import click
import yaml

from wordnik_client.client import WordnikClient
from wordnik_client.config import load_config
from wordnik_client.errors import WordnikError
from wordnik_client.models import PartOfSpeech, RelationType


def _emit(data, fmt: str) -> None:
    if fmt == "yaml":
        click.echo(yaml.safe_dump(data, allow_unicode=True, sort_keys=False), nl=False)
    else:
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _call(ctx: click.Context, method: str, *args, **kwargs) -> None:
    """Build the client, call one facade method and print the result."""
    opts = ctx.obj
    try:
        config = load_config(opts["config"], api_key=opts["api_key"], base_url=opts["base_url"])
        with WordnikClient(config=config) as client:
            result = getattr(client, method)(*args, **kwargs)
    except WordnikError as e:
        raise click.ClickException(str(e)) from e
    _emit(result, opts["output"])


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML config file.")
@click.option("--api-key", envvar="WORDNIK_API_KEY", default=None, help="Wordnik API key.")
@click.option("--base-url", default=None, help="API host, e.g. http://api.wordnik.com")
@click.option("-o", "--output", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, api_key: str | None, base_url: str | None, output: str, verbose: bool):
    """Query the Wordnik dictionary API."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {
        "config": config_path,
        "api_key": api_key,
        "base_url": base_url,
        "output": output,
    }


@main.command()
@click.argument("word")
@click.pass_context
def suggest(ctx, word: str):
    """Spelling suggestions for WORD."""
    _call(ctx, "get_spelling_suggestions", word)


@main.command()
@click.argument("word")
@click.pass_context
def fix(ctx, word: str):
    """Spelling correction for WORD (non-literal lookup)."""
    _call(ctx, "fix_spelling", word)


@main.command()
@click.argument("word")
@click.pass_context
def phrases(ctx, word: str):
    """Bigram phrases containing WORD."""
    _call(ctx, "get_bigram_phrases", word)


@main.command()
@click.argument("word")
@click.option("--count", type=click.IntRange(min=1), default=None, help="Maximum number of definitions.")
@click.option("--pos", "parts_of_speech", multiple=True, type=click.Choice([p.value for p in PartOfSpeech]), help="Part of speech filter; repeatable.")
@click.pass_context
def define(ctx, word: str, count: int | None, parts_of_speech: tuple[str, ...]):
    """Definitions of WORD."""
    _call(ctx, "get_definitions", word, count, *parts_of_speech)


@main.command()
@click.argument("word")
@click.pass_context
def examples(ctx, word: str):
    """Usage examples for WORD."""
    _call(ctx, "get_examples", word)


@main.command()
@click.argument("word")
@click.option("--count", type=click.IntRange(min=1), default=None, help="Maximum number of words per relation.")
@click.option("--type", "relation_types", multiple=True, type=click.Choice([r.value for r in RelationType]), help="Relation type filter, e.g. synonym; repeatable.")
@click.pass_context
def related(ctx, word: str, count: int | None, relation_types: tuple[str, ...]):
    """Words related to WORD."""
    _call(ctx, "get_related_words", word, count, *relation_types)


@main.command()
@click.argument("word")
@click.pass_context
def frequency(ctx, word: str):
    """Usage frequency of WORD."""
    _call(ctx, "get_frequency", word)


@main.command()
@click.argument("word")
@click.pass_context
def punctuation(ctx, word: str):
    """Punctuation factor of WORD."""
    _call(ctx, "get_punctuation_factor", word)


@main.command()
@click.argument("fragment")
@click.option("--count", type=click.IntRange(min=1), default=None, help="Maximum number of completions.")
@click.option("--start-at", type=click.IntRange(min=0), default=None, help="Offset into the completion list.")
@click.pass_context
def complete(ctx, fragment: str, count: int | None, start_at: int | None):
    """Autocompletions for FRAGMENT."""
    _call(ctx, "get_autocompletions", fragment, count, start_at)


@main.command()
@click.pass_context
def wotd(ctx):
    """Word of the day."""
    _call(ctx, "get_word_of_the_day")


@main.command("random")
@click.option("--has-dictionary-ref", is_flag=True, help="Only words with a dictionary entry.")
@click.pass_context
def random_word(ctx, has_dictionary_ref: bool):
    """A random word."""
    _call(ctx, "get_random_word", has_dictionary_ref or None)


@main.command()
@click.argument("word")
@click.pass_context
def pronounce(ctx, word: str):
    """Pronunciations of WORD."""
    _call(ctx, "get_pronunciations", word)
