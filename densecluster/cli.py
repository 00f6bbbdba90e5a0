"""densecluster command-line interface."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from click.core import ParameterSource


@click.group()
@click.option("--config", "-c", default="config.yaml", help="Path to config YAML.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config: str, verbose: bool) -> None:
    """densecluster: density and periphery based graph clustering."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # a missing default config means built-in defaults; an explicit -c must exist
    if ctx.get_parameter_source("config") == ParameterSource.DEFAULT and not Path(config).exists():
        config = None
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


def _load_and_cluster(
    ctx: click.Context,
    graph_file: str | None,
    density_threshold: float | None,
    cp_threshold: float | None,
):
    from densecluster.config import build_orchestrator

    try:
        orch = build_orchestrator(
            ctx.obj["config"],
            graph_file=graph_file,
            density_threshold=density_threshold,
            cp_threshold=cp_threshold,
        )
        orch.load_from_source()
        clusters = orch.perform_clustering()
    except (FileNotFoundError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    return orch, clusters


@main.command()
@click.argument("graph_file", required=False, type=click.Path(dir_okay=False))
@click.option("--density-threshold", "-d", type=float, default=None,
              help="Minimum cluster density, 0 to 1.")
@click.option("--cp-threshold", "-p", type=float, default=None,
              help="Minimum periphery ratio for a candidate, 0 to 1.")
@click.option("--show", default="all",
              type=click.Choice(["stats", "nodes", "all"]),
              help="What to print for the accepted clusters.")
@click.pass_context
def cluster(
    ctx: click.Context,
    graph_file: str | None,
    density_threshold: float | None,
    cp_threshold: float | None,
    show: str,
) -> None:
    """Cluster the edges in GRAPH_FILE (or the configured edge source)."""
    orch, clusters = _load_and_cluster(ctx, graph_file, density_threshold, cp_threshold)

    if not clusters:
        click.echo("No clusters found.")
        return

    if show in ("stats", "all"):
        click.echo(orch.report.format_statistics(clusters))
    if show in ("nodes", "all"):
        click.echo(orch.report.format_nodes(clusters))


@main.command()
@click.argument("graph_file", required=False, type=click.Path(dir_okay=False))
@click.option("--density-threshold", "-d", type=float, default=None)
@click.option("--cp-threshold", "-p", type=float, default=None)
@click.pass_context
def interactive(
    ctx: click.Context,
    graph_file: str | None,
    density_threshold: float | None,
    cp_threshold: float | None,
) -> None:
    """Prompt for input, cluster once, then browse the results from a menu."""
    if graph_file is None:
        graph_file = click.prompt("Enter the filename for the graph data")
    if density_threshold is None:
        density_threshold = click.prompt("Input Density Threshold (0 to 1)", type=float)
    if cp_threshold is None:
        cp_threshold = click.prompt("Input CP Threshold (0 to 1)", type=float)

    orch, clusters = _load_and_cluster(ctx, graph_file, density_threshold, cp_threshold)

    if not clusters:
        click.echo("No clusters found.")
        return

    while True:
        click.echo("\nSelect an option:")
        click.echo("1. Display Cluster Statistics")
        click.echo("2. Display Cluster Nodes")
        click.echo("3. Exit")
        choice = click.prompt("Enter your choice", default="", show_default=False).strip()

        if choice == "1":
            click.echo(orch.report.format_statistics(clusters))
        elif choice == "2":
            click.echo(orch.report.format_nodes(clusters))
        elif choice == "3":
            click.echo("Exiting program.")
            return
        else:
            click.echo("Invalid choice. Please try again.")


@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show the effective configuration."""
    from densecluster.config import build_orchestrator, load_config

    import yaml as _yaml

    config_path = ctx.obj["config"]
    try:
        cfg = load_config(config_path) if config_path else {}
        orch = build_orchestrator(config_path)
    except (FileNotFoundError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    st = orch.stats()

    click.echo("=== Clustering ===")
    click.echo(f"  Density threshold: {st['density_threshold']}")
    click.echo(f"  CP threshold:      {st['cp_threshold']}")
    click.echo(f"  Edge source:       {st['edge_source'] or 'none'}")
    click.echo("\n=== Config ===")
    click.echo(_yaml.dump(cfg, default_flow_style=False) if cfg else "  (defaults)")


if __name__ == "__main__":
    main()
