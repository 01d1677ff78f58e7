"""Check-ignore command - report which paths are ignored."""

import click
from pathlib import Path
from pathignore.core.errors import PathIgnoreError
from pathignore.core.pattern_set import PatternSet, compile_from_sources
from pathignore.utils.defaults import COMMON_IGNORE_PATTERNS, load_ignore_patterns
from pathignore.cli.output import error

# Exit status for usage errors and unreadable pattern sources, as git uses
EXIT_FATAL = 128


def build_pattern_set(files, patterns, use_defaults=False):
    """
    Compile the patterns selected on the command line.

    With no files and no patterns given, the configured ignore files
    of the current directory are used instead.
    """
    pattern_set = PatternSet()
    if use_defaults:
        pattern_set += PatternSet.from_lines(COMMON_IGNORE_PATTERNS, source='<defaults>')

    if files or patterns:
        pattern_set += compile_from_sources(*files)
        pattern_set += PatternSet.from_lines(patterns, source='<command line>')
    else:
        pattern_set += load_ignore_patterns(Path.cwd())

    return pattern_set


def read_stdin_paths():
    """Read one path per line from standard input."""
    stream = click.get_text_stream('stdin')
    return [line.rstrip('\r\n') for line in stream if line.strip()]


@click.command('check-ignore')
@click.argument('paths', nargs=-1)
@click.option('-f', '--file', 'files', multiple=True, type=click.Path(dir_okay=False),
              help='Ignore file to load (repeatable, evaluated in order)')
@click.option('-p', '--pattern', 'patterns', multiple=True,
              help='Extra pattern, evaluated after all files (repeatable)')
@click.option('--defaults', 'use_defaults', is_flag=True,
              help='Evaluate the common ignore patterns first')
@click.option('-v', '--verbose', is_flag=True, help='Show the pattern that decided each path')
@click.option('-n', '--non-matching', is_flag=True,
              help='Also show paths no pattern matched (requires --verbose)')
@click.option('--stdin', 'from_stdin', is_flag=True, help='Read paths from standard input')
@click.pass_context
def check_ignore_cmd(ctx, paths, files, patterns, use_defaults, verbose, non_matching, from_stdin):
    """
    Print the given paths that are ignored.

    Exits with 0 when at least one path is ignored, 1 when none is,
    and 128 on errors.

    Examples:
        pathignore check-ignore build/out.o src/main.py
        pathignore check-ignore -v -f .gitignore -p '!keep.log' debug.log
        find . -type f | pathignore check-ignore --stdin
    """
    if non_matching and not verbose:
        click.echo(error("--non-matching is only valid with --verbose"), err=True)
        ctx.exit(EXIT_FATAL)

    if from_stdin:
        paths = tuple(paths) + tuple(read_stdin_paths())
    if not paths:
        click.echo(error("No path specified"), err=True)
        ctx.exit(EXIT_FATAL)

    try:
        pattern_set = build_pattern_set(files, patterns, use_defaults)
    except PathIgnoreError as exc:
        click.echo(error(str(exc)), err=True)
        ctx.exit(EXIT_FATAL)

    any_ignored = False
    for path in paths:
        pattern = pattern_set.match(path)
        if pattern is None:
            if non_matching:
                click.echo(f"::\t{path}")
            continue

        ignored = not pattern.negated
        any_ignored = any_ignored or ignored

        if verbose:
            click.echo(f"{pattern.location}:{pattern.original}\t{path}")
        elif ignored:
            click.echo(path)

    ctx.exit(0 if any_ignored else 1)
