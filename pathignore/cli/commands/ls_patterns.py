"""Ls-patterns command - list compiled patterns."""

import click
from pathignore.core.errors import PathIgnoreError
from pathignore.cli.commands.check_ignore import EXIT_FATAL, build_pattern_set
from pathignore.cli.output import error, info, format_flags
from colorama import Fore, Style


@click.command('ls-patterns')
@click.option('-f', '--file', 'files', multiple=True, type=click.Path(dir_okay=False),
              help='Ignore file to load (repeatable, evaluated in order)')
@click.option('-p', '--pattern', 'patterns', multiple=True,
              help='Extra pattern, evaluated after all files (repeatable)')
@click.option('--defaults', 'use_defaults', is_flag=True,
              help='Include the common ignore patterns first')
@click.option('-r', '--regex', 'show_regex', is_flag=True,
              help='Show the translated regular expression')
@click.pass_context
def ls_patterns_cmd(ctx, files, patterns, use_defaults, show_regex):
    """
    List compiled patterns in evaluation order.

    Flags column: ! negated, d directory-only, a anchored.

    Examples:
        pathignore ls-patterns
        pathignore ls-patterns -f .gitignore -r
    """
    try:
        pattern_set = build_pattern_set(files, patterns, use_defaults)
    except PathIgnoreError as exc:
        click.echo(error(str(exc)), err=True)
        ctx.exit(EXIT_FATAL)

    if not pattern_set:
        click.echo(info("No patterns"))
        return

    for index, pattern in enumerate(pattern_set, start=1):
        line = f"{index:>4}  {format_flags(pattern)}  {pattern.location:<24} {pattern.original}"
        if show_regex:
            line += f"  {Fore.CYAN}{pattern.regex.pattern}{Style.RESET_ALL}"
        click.echo(line)
