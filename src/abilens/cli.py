import json
from pathlib import Path

import click
from eth_abi.exceptions import DecodingError
from rich.console import Console
from rich.markup import escape

from abilens.abi_items import load_abi, parse_abi_items
from abilens.decoding.registry import AbiRegistry
from abilens.decoding.signatures import canonical_signature, selector
from abilens.errors import InvalidInputError

console = Console()

_CLI_KEY = "cli"


def _registry_from_file(abi_path: str) -> AbiRegistry:
    registry = AbiRegistry()
    try:
        registry.add_abi(_CLI_KEY, load_abi(Path(abi_path)))
    except (InvalidInputError, json.JSONDecodeError) as e:
        raise click.ClickException(f"{abi_path}: {e}") from e
    return registry


@click.group()
def cli() -> None:
    """abilens — decode EVM calldata and event logs against JSON ABIs."""


@cli.command("selectors")
@click.option("--abi", "abi_path", required=True, type=click.Path(exists=True, dir_okay=False), help="JSON ABI file")
def selectors_cmd(abi_path: str) -> None:
    """List the selector of every named ABI item."""
    try:
        items = parse_abi_items(load_abi(Path(abi_path)))
    except (ValueError, TypeError) as e:
        raise click.ClickException(f"{abi_path}: {e}") from e

    for item in items:
        sel = selector(item)
        if sel is None:
            continue
        console.print(f"[cyan]0x{sel}[/] {item.kind.value:<11} [bold]{escape(canonical_signature(item))}[/]", soft_wrap=True)


@cli.command("decode-method")
@click.option("--abi", "abi_path", required=True, type=click.Path(exists=True, dir_okay=False), help="JSON ABI file")
@click.option("--data", required=True, help="Calldata hex (0x + selector + args)")
def decode_method_cmd(abi_path: str, data: str) -> None:
    """Decode transaction input data."""
    registry = _registry_from_file(abi_path)
    try:
        decoded = registry.decode_method(_CLI_KEY, data)
    except (ValueError, DecodingError) as e:
        raise click.ClickException(f"could not decode calldata: {e}") from e
    if decoded is None:
        raise click.ClickException("no matching method")
    console.print_json(data=decoded.to_dict())


@cli.command("decode-logs")
@click.option("--abi", "abi_path", required=True, type=click.Path(exists=True, dir_okay=False), help="JSON ABI file")
@click.option(
    "--logs",
    "logs_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file holding a list of log objects (address, topics, data)",
)
def decode_logs_cmd(abi_path: str, logs_path: str) -> None:
    """Decode event logs; unmatched logs are skipped."""
    registry = _registry_from_file(abi_path)
    try:
        logs = json.loads(Path(logs_path).read_text())
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{logs_path}: {e}") from e
    if not isinstance(logs, list):
        raise click.ClickException(f"{logs_path}: expected a JSON list of logs")
    for i, log in enumerate(logs):
        if not isinstance(log, dict):
            raise click.ClickException(f"{logs_path}: log #{i} is a {type(log).__name__}, expected an object")

    try:
        decoded = registry.decode_logs(_CLI_KEY, logs)
    except (ValueError, DecodingError) as e:
        raise click.ClickException(f"could not decode logs: {e}") from e
    if decoded is None:
        raise click.ClickException("no matching events")
    console.print_json(data=[d.to_dict() for d in decoded])


if __name__ == "__main__":
    cli()
