"""
Command-line interface for minotaur.

Generates perfect mazes and writes them as ASCII art, PNG images or ``.mz``
files, re-renders saved ``.mz`` files, and verifies them.

The output format follows the output file's extension: ``.png`` for an
image, ``.mz`` to store the maze itself for later loading, anything else
(including stdout) for ASCII art.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
import yaml
from click.core import ParameterSource

from minotaur import __version__
from minotaur.algorithms import MazeAlgorithm, list_algorithms
from minotaur.config import MazeConfig, RenderConfig, load_maze_config
from minotaur.exceptions import ColorParseError, MazeError
from minotaur.generator import PerfectMazeGenerator, verify_perfect_maze
from minotaur.utils.io import load_maze, save_maze
from minotaur.utils.maze_logging import configure_logging, get_logger
from minotaur.visualization import parse_hex_color, save_png, to_ascii

logger = get_logger(__name__)

_TOP_LEVEL_OPTIONS = ("algorithm", "width", "height", "seed")
_RENDER_OPTIONS = ("cell_size", "wall_size", "background_color", "wall_color")


def _validate_color(ctx, param, value):
    if value is None:
        return value
    try:
        parse_hex_color(value)
    except ColorParseError as e:
        raise click.BadParameter(e.message, ctx=ctx, param=param) from e
    return value


def render_options(f):
    """Options shared by every command that writes a maze."""
    f = click.option(
        "--wall-color",
        default="#000000",
        show_default=True,
        callback=_validate_color,
        help="Wall color when saving to an image file",
    )(f)
    f = click.option(
        "--background-color",
        default="#FFFFFF",
        show_default=True,
        callback=_validate_color,
        help="Background color when saving to an image file",
    )(f)
    f = click.option(
        "--wall-size", type=click.IntRange(min=1), default=1, show_default=True, help="Wall size in pixels"
    )(f)
    f = click.option(
        "--cell-size", type=click.IntRange(min=1), default=10, show_default=True, help="Cell size in pixels"
    )(f)
    f = click.option(
        "--output",
        "-o",
        type=click.Path(dir_okay=False, allow_dash=True),
        default="-",
        show_default=True,
        help='Output file: ".png" for an image, ".mz" to store the maze itself, otherwise ASCII art',
    )(f)
    return f


@click.group()
@click.version_option(version=__version__, prog_name="minotaur")
def main():
    """
    minotaur: perfect maze generation

    Six classic algorithms (BinaryTree, Sidewinder, AldousBroder, Wilsons,
    HuntAndKill, RecursiveBacktracker) producing mazes with exactly one path
    between any two cells.
    """


@main.command()
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(MazeAlgorithm.names(), case_sensitive=False),
    default=MazeAlgorithm.ALDOUS_BRODER.value,
    show_default=True,
    help="Maze generating algorithm",
)
@click.option("--width", "-x", type=click.IntRange(min=1), default=5, show_default=True, help="Maze width in cells")
@click.option("--height", "-y", type=click.IntRange(min=1), default=5, show_default=True, help="Maze height in cells")
@click.option("--seed", "-s", type=click.IntRange(min=0), default=None, help="Seed for random number generator")
@click.option(
    "--input",
    "-i",
    "input_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help='Input ".mz" file stored from a previous run; skips generation',
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML maze configuration; options given on the command line take precedence",
)
@render_options
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def generate(ctx, algorithm, width, height, seed, input_path, config_path, output, verbose, **render_settings):
    """
    Generate a perfect maze.

    Examples:
        minotaur generate
        minotaur generate -a Wilsons -x 20 -y 10 -s 42
        minotaur generate -a HuntAndKill -x 40 -y 40 -o maze.png --cell-size 12
        minotaur generate -x 30 -y 30 -o maze.mz
        minotaur generate -i maze.mz -o maze.png
    """
    try:
        config = _build_config(
            ctx,
            config_path,
            {"algorithm": algorithm, "width": width, "height": height, "seed": seed},
            render_settings,
        )
        _configure_cli_logging(config, verbose)

        if input_path is not None:
            grid = load_maze(input_path)
        else:
            generator = PerfectMazeGenerator(config.width, config.height, config.algorithm)
            grid = generator.generate(seed=config.seed)
            logger.debug(f"Seed used: {generator.last_seed}")

        _write_output(grid, output, config.render)

    except (MazeError, ValueError, OSError, yaml.YAMLError) as e:
        _fail(e, verbose)


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@render_options
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def render(input_path, output, verbose, **render_settings):
    """
    Re-render a ".mz" file as ASCII art or a PNG image.

    Examples:
        minotaur render maze.mz
        minotaur render maze.mz -o maze.png --wall-size 2
    """
    if verbose:
        configure_logging(level="DEBUG")
    try:
        grid = load_maze(input_path)
        _write_output(grid, output, RenderConfig(**render_settings))
    except (MazeError, ValueError, OSError) as e:
        _fail(e, verbose)


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
def verify(input_path):
    """
    Check that a ".mz" file holds a perfect maze.

    Exits with status 1 if the maze has loops, unreachable cells or
    inconsistent walls.
    """
    try:
        grid = load_maze(input_path)
    except (MazeError, OSError) as e:
        _fail(e, verbose=False)

    report = verify_perfect_maze(grid)
    click.echo(f"Maze: {grid.width}x{grid.height} ({report['total_cells']} cells)")
    click.echo(f"Connected: {report['is_connected']} ({report['visited_cells']}/{report['total_cells']} reachable)")
    click.echo(f"No loops: {report['is_no_loops']} ({report['passage_count']}/{report['expected_passages']} passages)")
    click.echo(f"Symmetric walls: {report['is_symmetric']}")

    if report["is_perfect"]:
        click.echo("✓ Perfect maze")
    else:
        click.echo("✗ Not a perfect maze")
        sys.exit(1)


@main.command(name="algorithms")
def algorithms_command():
    """List the available maze generation algorithms."""
    entries = list_algorithms()
    name_width = max(len(name) for name, _ in entries)
    for name, description in entries:
        click.echo(f"{name:<{name_width}}  {description}")


def _build_config(ctx, config_path, generation: dict, render: dict) -> MazeConfig:
    """
    Merge a YAML config with command-line options.

    Without a config file every option value (defaults included) is used.
    With one, only options actually given on the command line override it.
    """
    if config_path is None:
        base = MazeConfig()
    else:
        base = load_maze_config(config_path)

    def explicit(name):
        return config_path is None or ctx.get_parameter_source(name) is not ParameterSource.DEFAULT

    data = base.model_dump()
    for name in _TOP_LEVEL_OPTIONS:
        if explicit(name):
            data[name] = generation[name]
    for name in _RENDER_OPTIONS:
        if explicit(name):
            data["render"][name] = render[name]

    return MazeConfig.model_validate(data)


def _configure_cli_logging(config: MazeConfig, verbose: bool) -> None:
    log_file = config.logging.log_file
    configure_logging(
        level="DEBUG" if verbose else config.logging.level,
        use_colors=config.logging.use_colors,
        log_to_file=log_file is not None,
        log_file_path=log_file,
    )


def _write_output(grid, output: str, render_config: RenderConfig) -> None:
    suffix = Path(output).suffix.lower() if output != "-" else ""

    if suffix == ".png":
        save_png(grid, output, **render_config.image_kwargs())
        click.echo(f"Saved maze image to: {output}")
    elif suffix == ".mz":
        save_maze(grid, output)
        click.echo(f"Saved maze to: {output}")
    else:
        with click.open_file(output, "w") as f:
            f.write(to_ascii(grid))


def _fail(error: Exception, verbose: bool):
    click.echo(f"Error: {error}", err=True)
    if verbose:
        import traceback

        traceback.print_exc()
    sys.exit(1)


if __name__ == "__main__":
    main()
