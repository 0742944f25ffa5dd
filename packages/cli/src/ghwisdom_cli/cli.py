"""CLI entry point for ghwisdom.

Commands:
  fetch       — distill a contributor's GitHub comments into a Markdown document
  categories  — show the topic rules comments are classified with
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from ghwisdom_cli.commands.categories import categories_cmd
from ghwisdom_cli.commands.fetch import fetch_cmd


def _build_source(config: dict):
    """Instantiate the configured comment source.

    Source selection:
      source: gh      → GhCliSource     (default; gh handles auth)
      source: api     → GithubApiSource (requires a GitHub token)
      source: fixture → FixtureSource   (requires fixture_path)

    Raises click.UsageError when the selected source is missing its settings.
    """
    source_type = config.get("source", "gh")

    if source_type == "api":
        from ghwisdom_sources.api import GithubApiSource

        token = config.get("github_token")
        if not token:
            raise click.UsageError("No GitHub token found. Set GITHUB_TOKEN or run `gh auth login` first.")
        return GithubApiSource(token=token)

    if source_type == "fixture":
        from ghwisdom_sources.fixture import FixtureSource

        fixture_path = config.get("fixture_path")
        if not fixture_path:
            raise click.UsageError("--source fixture needs --fixture PATH (or fixture_path in the config file).")
        return FixtureSource(fixture_path)

    if source_type == "gh":
        from ghwisdom_sources.gh_cli import GhCliSource

        return GhCliSource(timeout=config.get("gh_timeout", 120))

    raise click.UsageError(f"Unknown source: {source_type!r}. Choose 'gh', 'api' or 'fixture'.")


@click.group()
@click.version_option(
    version=importlib.metadata.version("ghwisdom"),
    prog_name="ghwisdom",
)
@click.option(
    "--config",
    "config_path",
    default=".ghwisdom.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="GHWISDOM_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Distill substantive GitHub comments from a core contributor."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(fetch_cmd)
main.add_command(categories_cmd)
