from pathlib import Path

import click
import toml
from loguru import logger

from nasatui.config import ALLOWED_THEMES, CONFIG_FILE_PATH, GalleryConfig, load_config, merge_config_with_cli_args
from nasatui.ui.app import NasaTUI
from nasatui.ui.routes import GALLERY_ROUTE, build_image_route


@click.group(invoke_without_command=True)
@click.pass_context
@click.option(
    "--default-query",
    type=str,
    help="Query shown on startup and whenever the search box is empty",
    default=None,
)
@click.option(
    "--theme",
    type=click.Choice(ALLOWED_THEMES, case_sensitive=False),
    help="Theme to use for the UI",
    default=None,
)
@click.option(
    "--page-size",
    type=click.IntRange(min=1),
    help="Results per API page; a shorter page ends infinite scroll",
    default=None,
)
@click.option(
    "--debounce-ms",
    type=click.IntRange(min=0),
    help="Milliseconds to wait after the last keystroke before searching",
    default=None,
)
@click.option(
    "--config",
    type=click.Path(exists=True, readable=True, path_type=str),
    help="Path to configuration file (default: ~/.nasatui.config)",
    default=None,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=str),
    help="Write logs to this file (the UI owns the terminal, so nothing is logged otherwise)",
    default=None,
    envvar="NASATUI_LOG_FILE",
)
def cli(
    ctx,
    default_query: str | None = None,
    theme: str | None = None,
    page_size: int | None = None,
    debounce_ms: int | None = None,
    config: str | None = None,
    log_file: str | None = None,
):
    """NASA TUI - Search and browse the NASA image library."""
    ctx.ensure_object(dict)
    ctx.obj.update(
        default_query=default_query,
        theme=theme,
        page_size=page_size,
        debounce_ms=debounce_ms,
        config=config,
        log_file=log_file,
    )
    if ctx.invoked_subcommand is None:
        main(**ctx.obj)


@cli.command(name="open")
@click.argument("url", type=str)
@click.pass_context
def open_image(ctx, url: str):
    """Start directly on the detail view of an image URL."""
    main(initial_route=build_image_route(url), **ctx.obj)


@cli.command()
@click.option(
    "--config",
    type=click.Path(path_type=str),
    help="Path to configuration file (default: ~/.nasatui.config)",
    default=None,
)
def configure(config: str | None = None):
    """Interactive configuration setup for NASA TUI"""
    config_path = CONFIG_FILE_PATH
    if config:
        config_path = Path(config)

    click.echo("NASA TUI Configuration Setup")
    click.echo("=" * 28)
    click.echo("Leave fields empty to keep the current value or use defaults.")
    click.echo()

    existing_config = {}
    if config_path.exists():
        try:
            with open(config_path, "r") as f:
                existing_config = toml.load(f)
            click.echo(f"Found existing configuration at {config_path}")
            click.echo()
        except (OSError, toml.TomlDecodeError) as e:
            click.echo(f"Ignoring unreadable configuration at {config_path}: {e}")

    defaults = GalleryConfig()
    new_config = {}

    # Search Configuration
    click.echo("Search Configuration:")
    click.echo("-" * 21)

    new_config["default_query"] = click.prompt(
        "Default query", default=existing_config.get("default_query", defaults.default_query), type=str
    ).strip()
    new_config["page_size"] = click.prompt(
        "API page size", default=existing_config.get("page_size", defaults.page_size), type=click.IntRange(min=1)
    )
    new_config["debounce_ms"] = click.prompt(
        "Search debounce (ms)",
        default=existing_config.get("debounce_ms", defaults.debounce_ms),
        type=click.IntRange(min=0),
    )

    current_api_url = existing_config.get("api_url", defaults.api_url)
    api_url = click.prompt("Search API URL", default=current_api_url, type=str).strip()
    if api_url != defaults.api_url:
        new_config["api_url"] = api_url

    # Theme Configuration
    click.echo()
    click.echo("Theme Configuration:")
    click.echo("-" * 20)

    current_theme = existing_config.get("theme", defaults.theme)
    click.echo("Available themes:")
    for i, theme in enumerate(ALLOWED_THEMES, 1):
        marker = " (current)" if theme == current_theme else ""
        click.echo(f"  {i}. {theme}{marker}")

    theme_choice = click.prompt(
        f"Select theme (1-{len(ALLOWED_THEMES)})",
        default=ALLOWED_THEMES.index(current_theme) + 1 if current_theme in ALLOWED_THEMES else 1,
        type=click.IntRange(1, len(ALLOWED_THEMES)),
    )
    new_config["theme"] = ALLOWED_THEMES[theme_choice - 1]

    # Validate configuration
    click.echo()
    try:
        GalleryConfig(**new_config)
        click.echo("✓ Configuration validated successfully!")
    except ValueError as e:
        click.echo(f"✗ Configuration validation failed: {e}")
        if not click.confirm("Save configuration anyway?"):
            click.echo("Configuration cancelled.")
            return

    # Save configuration
    click.echo()
    try:
        with open(config_path, "w") as f:
            toml.dump(new_config, f)
        click.echo(f"✓ Configuration saved to {config_path}")
    except OSError as e:
        raise click.ClickException(f"Failed to save configuration: {e}")


def setup_logging(log_file: str | None = None) -> None:
    """Route loguru output away from the terminal the UI draws on."""
    logger.remove()
    if log_file:
        logger.add(log_file, level="DEBUG", rotation="10 MB", enqueue=True)


def main(
    default_query: str | None = None,
    theme: str | None = None,
    page_size: int | None = None,
    debounce_ms: int | None = None,
    config: str | None = None,
    log_file: str | None = None,
    initial_route: str = GALLERY_ROUTE,
):
    """NASA TUI - Search and browse the NASA image library."""
    setup_logging(log_file)

    try:
        config_obj = load_config(config)

        # CLI takes priority over the config file
        config_obj = merge_config_with_cli_args(
            config_obj,
            default_query=default_query,
            theme=theme,
            page_size=page_size,
            debounce_ms=debounce_ms,
        )
    except ValueError as e:
        raise click.ClickException(str(e))

    logger.info(f"Starting NASA TUI with default query '{config_obj.default_query}'")
    app = NasaTUI(config=config_obj, initial_route=initial_route)
    app.run()


if __name__ == "__main__":
    cli()
