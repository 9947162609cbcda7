"""CLI entry point for Showcase."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.tree import Tree

from showcase.config import (
    ShowcaseConfig,
    get_config,
    get_status_folder_classes,
    get_tag_color_map,
    resolve_github_user,
)
from showcase.config.loader import DEFAULT_CONFIG_TEMPLATE
from showcase.errors import ConfigError, RemoteError
from showcase.extractor import MetadataExtractor
from showcase.gallery import (
    ALL_STATUSES,
    GalleryRenderer,
    ProjectCard,
    TagFilterGroup,
    build_gallery,
    build_tag_filter_groups,
    filter_projects,
    status_options,
)
from showcase.logging_config import configure_logging
from showcase.vcs import ProjectCrawler, ProjectMetadata, RepoInfo, create_source

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="showcase",
    help="Project gallery built from a GitHub projects repository.",
)

config_app = typer.Typer(help="Manage Showcase configuration.")
app.add_typer(config_app, name="config")

# Global state
_config_path: str | None = None


def _get_config() -> ShowcaseConfig:
    try:
        cfg = get_config(_config_path)
    except ConfigError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(cfg.log_level, cfg.log_format)
    return cfg


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to showcase.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config_path
    _config_path = config


async def _load_gallery(cfg: ShowcaseConfig, *, with_repo: bool = False) -> tuple[list[ProjectCard], RepoInfo | None]:
    source = create_source(cfg)
    try:
        extractor = MetadataExtractor(ProjectCrawler(source))
        cards = await build_gallery(
            extractor,
            tag_color_map=get_tag_color_map(_config_path),
            folder_classes=get_status_folder_classes(_config_path),
        )
        repo: RepoInfo | None = None
        if with_repo:
            try:
                repo = await source.describe_repo()
            except RemoteError as e:
                logger.warning("Could not describe repository: %s", e)
        return cards, repo
    finally:
        await source.aclose()


def _tag_groups(cfg: ShowcaseConfig, cards: list[ProjectCard]) -> list[TagFilterGroup]:
    return build_tag_filter_groups(cards, cfg.tag_categories, get_tag_color_map(_config_path))


def _display_cards(cards: list[ProjectCard], total: int) -> None:
    """Display gallery cards as a Rich table."""
    table = Table(title=f"Projects ({len(cards)} of {total})")
    table.add_column("Name", style="cyan")
    table.add_column("Status", style="magenta")
    table.add_column("Tags", style="green")
    table.add_column("Description")
    table.add_column("Link", style="dim")
    for card in cards:
        table.add_row(
            escape(card.name),
            escape(card.status),
            escape(", ".join(card.tags)) if card.tags else "-",
            escape(card.description) or "-",
            card.href,
        )
    rprint(table)


@app.command()
def projects(
    search: Annotated[str, typer.Option("--search", "-s", help="Substring of the project name")] = "",
    status: Annotated[str, typer.Option("--status", help="Status bucket, or 'all'")] = ALL_STATUSES,
    tag: Annotated[
        list[str] | None, typer.Option("--tag", "-t", help="Required tag (repeatable)")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table")] = False,
) -> None:
    """List projects, optionally filtered by name, status and tags."""
    cfg = _get_config()
    cards, _ = asyncio.run(_load_gallery(cfg))
    visible = filter_projects(cards, search, status, tag or [])

    if as_json:
        typer.echo(json.dumps([c.model_dump() for c in visible], indent=2))
        return
    if not visible:
        rprint("[yellow]No projects match your filters.[/yellow]")
        raise typer.Exit(0)
    _display_cards(visible, len(cards))


async def _show_project(cfg: ShowcaseConfig, name: str) -> tuple[str | None, ProjectMetadata | None]:
    source = create_source(cfg)
    try:
        crawler = ProjectCrawler(source)
        path = await crawler.resolve_project_path(name)
        if path is None:
            return None, None
        metadata = await MetadataExtractor(crawler).extract(path)
        return path, metadata
    finally:
        await source.aclose()


@app.command()
def show(
    name: str = typer.Argument(..., help="Project name or status/name path"),
) -> None:
    """Show the extracted metadata for one project."""
    cfg = _get_config()
    path, metadata = asyncio.run(_show_project(cfg, name))
    if path is None:
        rprint(f"[red]Error:[/red] Project '{escape(name)}' not found")
        raise typer.Exit(1)

    tags_str = ", ".join(metadata.tags) if metadata.tags else "none"
    panel_text = (
        f"[bold]{escape(name)}[/bold]\n"
        f"{escape(metadata.description) or '(no description)'}\n\n"
        f"[dim]Path:[/dim]     {escape(path)}\n"
        f"[dim]Tags:[/dim]     {escape(tags_str)}\n"
        f"[dim]Redirect:[/dim] {escape(metadata.redirect_url or '-')}"
    )
    rprint(Panel(panel_text, title="Project Metadata", border_style="blue"))


@app.command()
def tags() -> None:
    """Show the tag filter options grouped by category."""
    cfg = _get_config()
    cards, _ = asyncio.run(_load_gallery(cfg))
    groups = _tag_groups(cfg, cards)
    if not groups:
        rprint("[yellow]No tags found.[/yellow]")
        raise typer.Exit(0)

    tree = Tree(f"[bold]Tags[/bold] ({sum(len(g.tags) for g in groups)})")
    for group in groups:
        branch = tree.add(f"[cyan]{escape(group.label)}[/cyan]")
        for option in group.tags:
            branch.add(escape(option.label))
    rprint(tree)


@app.command()
def render(
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Override output directory")
    ] = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview without writing"),
) -> None:
    """Render the gallery to a static HTML page."""
    cfg = _get_config()
    rprint(f"[bold]Rendering[/bold] gallery for {resolve_github_user(cfg)}/{cfg.github_repo}...")
    cards, repo = asyncio.run(_load_gallery(cfg, with_repo=True))

    out_cfg = cfg.output
    if output:
        out_cfg = out_cfg.model_copy(update={"base_dir": output})
    renderer = GalleryRenderer(out_cfg)
    dest = renderer.write(
        cards,
        _tag_groups(cfg, cards),
        status_options(cards),
        repo,
        dry_run=dry_run,
    )
    if dry_run:
        rprint(f"[yellow](dry run)[/yellow] would write {dest}")
        return
    rprint(Panel(
        f"[dim]File:[/dim]      {dest}\n"
        f"[dim]Projects:[/dim]  {len(cards)}",
        title="Render Complete",
        border_style="green",
    ))


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(by_alias=True), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default showcase.yaml in current directory."""
    target = Path("showcase.yaml")
    if target.exists() and not force:
        rprint("[yellow]showcase.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
