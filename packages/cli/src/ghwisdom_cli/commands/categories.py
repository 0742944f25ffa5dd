"""categories command — show the topic rules in evaluation order."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ghwisdom_core.categorize import UNCATEGORIZED, compile_rules
from ghwisdom_core.config import ConfigError

console = Console()


@click.command("categories")
@click.pass_context
def categories_cmd(ctx):
    """Show the topic rules comments are classified with.

    Rules are tried top to bottom against the comment body plus the issue
    title; the first match wins. Override them with a `categories:` list of
    label/pattern entries in the config file.
    """
    from ghwisdom_core.config import load_config

    config_path = ctx.obj.get("config_path", ".ghwisdom.yml") if ctx.obj else ".ghwisdom.yml"
    try:
        config = load_config(config_path)
        rules = compile_rules(config.get("categories"))
    except ConfigError as e:
        raise click.ClickException(str(e))

    source = "built-in" if config.get("categories") is None else config_path
    table = Table(title=f"Topic Rules ({source})", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", width=3)
    table.add_column("Topic", style="bold")
    table.add_column("Pattern (case-insensitive)", overflow="fold")

    for idx, rule in enumerate(rules, 1):
        table.add_row(str(idx), escape(rule.label), escape(rule.pattern.pattern))
    table.add_row("", f"[dim]{UNCATEGORIZED}[/dim]", "[dim]no rule matched[/dim]")

    console.print(table)
