"""fetch command — build the wisdom document for one contributor and repository."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from ghwisdom_core.config import ConfigError
from ghwisdom_core.models import WisdomReport
from ghwisdom_core.pipeline import run_pipeline
from ghwisdom_core.render import write_report
from ghwisdom_sources.base import SourceError

console = Console()


def _print_bucket_table(report: WisdomReport, limit: int) -> None:
    table = Table(title="Comments by Topic", show_header=True, header_style="bold cyan")
    table.add_column("Topic", style="bold")
    table.add_column("Comments", justify="right")
    table.add_column("Rendered", justify="right")
    for bucket in report.buckets:
        table.add_row(escape(bucket.label), str(len(bucket.comments)), str(min(len(bucket.comments), limit)))
    console.print(table)


@click.command("fetch")
@click.option("--repo", default=None, help="GitHub repository in owner/name format.")
@click.option("--user", default=None, help="GitHub login whose comments are collected.")
@click.option("--max", "max_issues", type=click.IntRange(min=1), default=None, help="Maximum issues/PRs to scan.")
@click.option(
    "--min-length",
    "min_comment_length",
    type=click.IntRange(min=0),
    default=None,
    help="Minimum comment length in characters (inclusive).",
)
@click.option("--output", "output_file", default=None, help="Markdown file to write (overwritten).")
@click.option(
    "--per-category",
    "per_category_limit",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum comments rendered per topic.",
)
@click.option("--title", default=None, help="Document title prefix.")
@click.option(
    "--source",
    type=click.Choice(["gh", "api", "fixture"]),
    default=None,
    help="Where comments come from. Overrides config file.",
)
@click.option("--fixture", "fixture_path", default=None, help="JSON fixture to replay with --source fixture.")
@click.option(
    "--shadow",
    "-s",
    is_flag=True,
    help="Dry-run mode: print the document to the terminal instead of writing it.",
)
@click.pass_context
def fetch_cmd(
    ctx,
    repo: str | None,
    user: str | None,
    max_issues: int | None,
    min_comment_length: int | None,
    output_file: str | None,
    per_category_limit: int | None,
    title: str | None,
    source: str | None,
    fixture_path: str | None,
    shadow: bool,
):
    """Collect, score and categorize a contributor's comments into Markdown.

    Every flag falls back to the config file, then to the built-in defaults.

    \b
    Sources:
      gh       GitHub CLI (default) — run `gh auth login` first
      api      GitHub REST API via PyGithub — needs GITHUB_TOKEN or a gh login
      fixture  Replay a saved JSON fixture, no network
    """
    from ghwisdom_cli.auth import resolve_github_token
    from ghwisdom_cli.cli import _build_source
    from ghwisdom_core.config import load_config

    config_path = ctx.obj.get("config_path", ".ghwisdom.yml") if ctx.obj else ".ghwisdom.yml"
    overrides = {
        "repo": repo,
        "user": user,
        "max_issues": max_issues,
        "min_comment_length": min_comment_length,
        "output_file": output_file,
        "per_category_limit": per_category_limit,
        "title": title,
        "source": source,
        "fixture_path": fixture_path,
    }
    try:
        config = load_config(config_path, cli_overrides=overrides)
    except ConfigError as e:
        raise click.ClickException(str(e))

    if config.get("source") == "api" and not config.get("github_token"):
        config["github_token"] = resolve_github_token()

    try:
        wisdom_source = _build_source(config)
    except SourceError as e:
        raise click.ClickException(str(e))

    try:
        report = run_pipeline(wisdom_source, config)
    except (SourceError, ConfigError) as e:
        raise click.ClickException(str(e))
    finally:
        wisdom_source.close()

    if shadow:
        console.print(Markdown(report.markdown))
        console.print(f"[bold]Shadow run complete. {report.comments_kept} comment(s) would be written.[/bold]")
        return

    output = config["output_file"]
    console.print(f"💾 Writing to {output}...", markup=False)
    try:
        write_report(report.markdown, output)
    except OSError as e:
        raise click.ClickException(str(e))

    if report.buckets:
        _print_bucket_table(report, config["per_category_limit"])
    console.print(f"✅ Done! Check {output}", markup=False)
