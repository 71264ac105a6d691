"""Main CLI entry point for Instagram Downloader."""

import asyncio

import hydra
from omegaconf import DictConfig
from rich.console import Console
from rich.table import Table

from .config import setup_logging
from .errors import DownloaderError
from .scraper import resolve_url
from .api import run_server

console = Console()


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entry point."""
    if cfg.serve:
        run_server(cfg)
        return

    setup_logging(cfg.logging.level)
    console.print("[bold blue]Instagram Downloader[/bold blue]")
    console.print()

    if not cfg.url:
        console.print("[red]No URL given.[/red] Usage: insta-downloader url=<post url>")
        console.print("       or: insta-downloader serve=true")
        return

    asyncio.run(resolve(cfg))


async def resolve(cfg: DictConfig) -> None:
    """Resolve cfg.url and print the result."""
    console.print(f"[cyan]URL:[/cyan] {cfg.url}")

    try:
        descriptor = await resolve_url(
            cfg.url,
            timeout=cfg.fetcher.timeout,
            max_redirects=cfg.fetcher.max_redirects,
        )
    except DownloaderError as e:
        console.print(f"[red]Error ({e.status_code}):[/red] {e.detail}")
        return

    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Type", descriptor.type.value)
    table.add_row("Download URL", descriptor.download_url)
    table.add_row("Thumbnail URL", descriptor.thumbnail_url)
    console.print(table)


if __name__ == "__main__":
    main()
