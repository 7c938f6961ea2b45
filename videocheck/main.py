"""CLI interface for video checking"""

import logging
from typing import Optional

import requests
import typer
from openai import OpenAIError
from rich.console import Console

from .config import Config, TranscriptProviderName
from .errors import VideoCheckError
from .processors.video_checker import VideoChecker

app = typer.Typer(
    name="videocheck",
    help="Fetch YouTube transcripts and rate their content for parental review",
)
console = Console()


def _load_config(provider: Optional[TranscriptProviderName]) -> Config:
    """Load configuration, applying a command-line provider override"""
    try:
        config = Config()
        if provider is not None:
            config.transcript_provider = provider
        config.validate()
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {str(e)}", style="bold")
        raise typer.Exit(1)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return config


@app.command()
def transcript(
    url: str = typer.Argument(..., help="YouTube video URL"),
    provider: Optional[TranscriptProviderName] = typer.Option(
        None, "--provider", "-p", help="Transcript provider (default: TRANSCRIPT_PROVIDER)"
    ),
):
    """Print the normalized, clipped transcript of a video

    Example:
        python -m videocheck.main transcript https://youtu.be/dQw4w9WgXcQ
    """
    config = _load_config(provider)
    checker = VideoChecker(config)

    try:
        result = checker.get_transcript(url)
    except (VideoCheckError, requests.RequestException) as e:
        console.print(f"[red]Error:[/red] {str(e)}", style="bold")
        raise typer.Exit(1)

    console.print(f"[green]Video ID:[/green] {result.video_id}")
    console.print(f"[green]Provider:[/green] {result.provider.value}")
    console.print(
        f"[green]Length:[/green] {result.character_count} of {result.original_length} characters"
    )
    if result.clipped:
        console.print(f"[yellow]Clipped to {result.max_length} characters[/yellow]")
    console.print("")
    console.print(result.text, markup=False)


@app.command()
def check(
    url: str = typer.Argument(..., help="YouTube video URL"),
    provider: Optional[TranscriptProviderName] = typer.Option(
        None, "--provider", "-p", help="Transcript provider (default: TRANSCRIPT_PROVIDER)"
    ),
):
    """Rate a video's transcript and print the classifier's JSON

    Example:
        python -m videocheck.main check "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    """
    config = _load_config(provider)
    checker = VideoChecker(config)

    try:
        content = checker.check(url)
    except (VideoCheckError, requests.RequestException, OpenAIError) as e:
        console.print(f"[red]Error:[/red] {str(e)}", style="bold")
        raise typer.Exit(1)

    console.print(content, markup=False)


@app.command()
def serve(
    port: int = typer.Option(8080, "--port", help="Port to listen on"),
    host: str = typer.Option("0.0.0.0", "--host", help="Interface to bind"),
):
    """Run the HTTP service"""
    from server import create_app

    config = _load_config(None)
    console.print(f"[bold cyan]Serving on {host}:{port}[/bold cyan]")
    create_app(config).run(host=host, port=port, debug=False)


if __name__ == "__main__":
    app()
