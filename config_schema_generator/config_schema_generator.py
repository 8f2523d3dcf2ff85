import json
import logging
from pathlib import Path

import click

from .config import DEFAULT_SCHEMA_FILENAMES, GeneratorConfig, SchemaMode
from .generator import SchemaGenerator


def resolve_paths(input_path: Path | None, output_path: Path | None, mode: SchemaMode) -> tuple[Path, Path]:
    """Fill in default input and output paths, announcing the defaults used."""
    if input_path is None:
        input_path = Path.cwd() / DEFAULT_SCHEMA_FILENAMES[mode]
        click.echo(f"Using default input schema path: {input_path}")

    if output_path is None:
        click.echo(f"Output schema path would be the same with input schema path: {input_path}")
        output_path = input_path

    return input_path, output_path


@click.command()
@click.option("--input", "-i", "input_path", default=None, type=click.Path(dir_okay=False, resolve_path=True, path_type=Path))
@click.option("--output", "-o", "output_path", default=None, type=click.Path(dir_okay=False, resolve_path=True, path_type=Path))
@click.option(
    "--standard-schema",
    "-s",
    is_flag=True,
    default=False,
    help="Generate the nested standard schema instead of merging the extension schema",
)
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log merge details")
def config_schema_generator(input_path, output_path, standard_schema, config, verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    mode = SchemaMode.STANDARD if standard_schema else SchemaMode.EXTENSION
    input_path, output_path = resolve_paths(input_path, output_path, mode)

    generator = SchemaGenerator(config)
    generator.generate(mode, input_path, output_path)

    if mode is SchemaMode.STANDARD:
        click.echo(f"Done! Standard schema file was generated at {output_path}")
    else:
        click.echo(f"Done! Schema file was generated at {output_path}")
