import enum

import typer

from .registry import REGISTRY, UnknownChainKey
from .rpc_urls import render_rpc_urls
from .runlib import init_all
from .settings import Settings
from .utils import DumpFormat, dumps


class ChainGroup(enum.StrEnum):
    all = "all"
    default = "default"
    l2 = "l2"
    development = "development"


def _init() -> Settings:
    settings = Settings()
    init_all(settings)
    return settings


def list_cli(group: ChainGroup = ChainGroup.all) -> None:
    """List the known chains, optionally only one group of them"""
    _init()
    for chain in REGISTRY.group(group.value):
        key = REGISTRY.key_of(chain)
        marker = "  (testnet)" if chain.is_testnet else ""
        typer.echo(f"{key:<22} {chain.id:>7}  {chain.name}{marker}")


def show_cli(key: str, fmt: DumpFormat = typer.Option(DumpFormat.json, "--format")) -> None:
    """Dump a single chain descriptor"""
    _init()
    try:
        chain = REGISTRY.lookup(key)
    except UnknownChainKey as exc:
        typer.echo(f"Error: {exc.args[0]}", err=True)
        raise typer.Exit(code=2) from None
    typer.echo(dumps(chain.dump(), fmt))


def dump_cli(fmt: DumpFormat = typer.Option(DumpFormat.json, "--format")) -> None:
    """Dump the whole registry in the stored form"""
    _init()
    data = {str(key): chain.dump() for key, chain in REGISTRY.chains.items()}
    typer.echo(dumps(data, fmt))


def urls_cli(key: str) -> None:
    """
    Print the RPC URLs of a chain in the preference order, with the provider tokens filled in.
    Tokens are taken from the settings (`CHR_RPC_SECRETS`).
    """
    settings = _init()
    try:
        chain = REGISTRY.lookup(key)
    except UnknownChainKey as exc:
        typer.echo(f"Error: {exc.args[0]}", err=True)
        raise typer.Exit(code=2) from None
    for url in render_rpc_urls(chain, settings.opts.rpc_secrets):
        typer.echo(url)


CLI_APP = typer.Typer()
CLI_APP.command("list")(list_cli)
CLI_APP.command("show")(show_cli)
CLI_APP.command("dump")(dump_cli)
CLI_APP.command("urls")(urls_cli)


def main() -> None:
    CLI_APP()


if __name__ == "__main__":
    main()
