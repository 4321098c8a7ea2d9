"""shopappstore CLI entrypoint."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import typer
import yaml

from shopappstore.core.errors import ShopAppstoreError
from shopappstore.core.models import Resource, ResourceList
from shopappstore.core.utils.io import load_structured, save_json
from shopappstore.core.utils.logging import set_verbosity
from shopappstore.sdk.client import ShopClient
from shopappstore.sdk.config import DEFAULT_CONFIG_PATH, load_config, merge_cli_overrides
from shopappstore.sdk.errors import ConfigError

app = typer.Typer(add_completion=False, help="Shop platform API CLI")


class Context:
    def __init__(self) -> None:
        self.config = load_config()
        self.verbose = False


# --- utility helpers ---

def _handle_exc(err: Exception) -> None:
    """Print a concise error and exit non-zero."""
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


def _load_resources(path: Path) -> Dict[str, Resource]:
    data = load_structured(path)
    if not isinstance(data, dict):
        raise ConfigError("Bulk file must contain a mapping of key -> resource")
    resources: Dict[str, Resource] = {}
    for key, spec in data.items():
        if isinstance(spec, str):
            spec = {"name": spec}
        if not isinstance(spec, dict) or not spec.get("name"):
            raise ConfigError(f"Resource '{key}' needs a name")
        criteria = spec.get("criteria") or spec.get("params") or {}
        if not isinstance(criteria, dict):
            raise ConfigError(f"Criteria for '{key}' must be a mapping")
        resources[str(key)] = Resource(
            name=spec["name"],
            external_id_name=spec.get("external_id_name", ""),
            criteria=criteria,
        )
    return resources


def _toml_string(value: str) -> str:
    # JSON string escapes are valid TOML basic-string escapes
    return json.dumps(value)


def _results_to_obj(results: Dict[Any, ResourceList]) -> Dict[str, Any]:
    return {str(key): value.to_dict() for key, value in results.items()}


# --- CLI commands ---


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
) -> None:
    if ctx.obj is None:
        try:
            ctx.obj = Context()
        except ConfigError as exc:
            _handle_exc(exc)
    ctx.obj.verbose = verbose
    if verbose:
        set_verbosity(True)


@app.command()
def init(
    entrypoint: str = typer.Option(..., "--entrypoint", help="Shop API entrypoint, e.g. https://shop.example.com"),
    token: str = typer.Option("", "--token", help="Access token"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds"),
) -> None:
    cfg_dir = DEFAULT_CONFIG_PATH.parent
    cfg_dir.mkdir(parents=True, exist_ok=True)
    lines = ["[shopappstore]"]
    lines.append(f"entrypoint = {_toml_string(entrypoint)}")
    if token:
        lines.append(f"token = {_toml_string(token)}")
    if timeout is not None:
        lines.append(f"timeout = {timeout}")
    DEFAULT_CONFIG_PATH.write_text("\n".join(lines) + "\n", encoding="utf-8")
    typer.echo(f"Wrote TOML config to {DEFAULT_CONFIG_PATH}")


@app.command()
def bulk(
    ctx: typer.Context,
    resources_file: Path = typer.Argument(..., help="YAML/JSON mapping of key -> {name, criteria}"),
    entrypoint: str = typer.Option("", "--entrypoint", help="Shop API entrypoint"),
    token: str = typer.Option("", "--token", help="Access token"),
    output_path: Optional[Path] = typer.Option(None, "--output-path", help="Write JSON output to file"),
) -> None:
    context: Context = ctx.obj
    try:
        resources = _load_resources(resources_file)
        cfg = merge_cli_overrides(context.config, entrypoint=entrypoint or None, token=token or None)
        client = ShopClient(config=cfg)
        results = client.get_many(resources)
    except (ShopAppstoreError, OSError, ValueError, yaml.YAMLError) as exc:
        _handle_exc(exc)

    payload = _results_to_obj(results)
    if output_path:
        save_json(output_path, payload)
        if context.verbose:
            typer.echo(f"Wrote {len(payload)} result(s) to {output_path}")
    else:
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    app()
