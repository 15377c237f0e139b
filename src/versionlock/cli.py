"""CLI entry point for versionlock."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

import typer

from versionlock.config import Settings, get_settings
from versionlock.core import (
    CONFIG_FILE_VERSION,
    VersionlockCondition,
    VersionlockConfig,
    VersionlockPackage,
)

app = typer.Typer(help="Inspect and edit versionlock configuration.", no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Versionlock TOML file"),
    config: Path = typer.Option(Path("versionlock.yaml"), "--config", help="YAML settings file"),
) -> None:
    """Inspect and edit versionlock configuration."""
    settings = get_settings(config)
    if file is not None:
        settings.versionlock_path = file
    
    if not isinstance(logging.getLevelName(settings.log_level), int):
        print(f"❌ Unknown log level: {settings.log_level}")
        raise typer.Exit(code=2)
    
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = settings


def _load(settings: Settings) -> VersionlockConfig:
    """Load versionlock file, exiting with code 2 on unparsable content."""
    try:
        return VersionlockConfig(settings.versionlock_path)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        print(f"❌ Cannot parse {settings.versionlock_path}: {e}")
        raise typer.Exit(code=2)


@app.command("list")
def list_entries(ctx: typer.Context) -> None:
    """List configured packages and their conditions."""
    config = _load(ctx.obj)
    packages = config.get_packages()
    
    if not packages:
        print(f"No versionlock entries in {config.path}")
        return
    
    for package in packages:
        print(package.name or "<missing name>")
        for error in package.errors:
            print(f"  ✗ {error}")
        
        for condition in package.conditions:
            mark = "✓" if condition.is_valid else "✗"
            print(f"  {mark} {condition}")
            for error in condition.errors:
                print(f"      {error}")


@app.command()
def check(ctx: typer.Context) -> None:
    """Validate all entries; exit code 1 if any is invalid."""
    config = _load(ctx.obj)
    packages = config.get_packages()
    
    problems = 0
    for index, package in enumerate(packages, start=1):
        label = package.name or f"entry #{index}"
        for error in package.all_errors():
            print(f"✗ {label}: {error}")
            problems += 1
    
    if problems:
        print(f"\n❌ {problems} problem(s) in {config.path}")
        raise typer.Exit(code=1)
    
    print(f"✓ {len(packages)} entries OK in {config.path}")


@app.command()
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Package name"),
    conditions: Optional[list[str]] = typer.Option(
        None, "--condition", "-c", help='Condition such as "version >= 2.0"; repeatable'
    ),
) -> None:
    """Append a package entry and save the file.
    
    Other top-level keys of an existing file are kept.
    """
    package = VersionlockPackage(name)
    package.set_conditions(VersionlockCondition.parse(text) for text in conditions or [])
    
    errors = package.all_errors()
    if errors:
        for error in errors:
            print(f"✗ {error}")
        raise typer.Exit(code=1)
    
    config = _load(ctx.obj)
    if config.path.exists() and config.version != CONFIG_FILE_VERSION:
        print(f"❌ Refusing to overwrite {config.path}: unsupported or missing version")
        raise typer.Exit(code=1)
    
    config.save(config.get_packages() + [package])
    print(f"✓ Added {name} to {config.path}")


if __name__ == "__main__":
    app()
