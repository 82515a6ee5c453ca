import urllib.parse
from typing import Annotated, Any, Literal, Self

import pydantic
from pydantic.alias_generators import to_camel

TExplorerPathKind = Literal["tx", "address", "block", "token"]


def check_http_url(value: str) -> str:
    """
    Accept only absolute http(s) URLs, keeping the value verbatim.

    >>> check_http_url("https://polygon-rpc.com")
    'https://polygon-rpc.com'
    >>> check_http_url("ws://127.0.0.1:8545")
    Traceback (most recent call last):
    ...
    ValueError: Not an http(s) URL: 'ws://127.0.0.1:8545'
    """
    parsed = urllib.parse.urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise ValueError(f"Not an http(s) URL: {value!r}")
    return value


THttpURL = Annotated[str, pydantic.AfterValidator(check_http_url)]


class ChainModelBase(pydantic.BaseModel):
    # Stored data uses the camelCase names (`rpcUrls`, `nativeCurrency`, ...).
    model_config = pydantic.ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def dump(self) -> dict[str, Any]:
        """Serializable form with the stored (camelCase) keys and without unset optionals"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def replace(self, **kwargs: Any) -> Self:
        return self.model_copy(update=kwargs)


class NativeCurrency(ChainModelBase):
    name: str
    symbol: str
    decimals: pydantic.NonNegativeInt


class BlockExplorer(ChainModelBase):
    name: str
    url: THttpURL


class ChainDescriptor(ChainModelBase):
    id: pydantic.PositiveInt
    name: str
    native_currency: NativeCurrency | None = None
    # Ordered by preference, the first one is the primary endpoint.
    rpc_urls: Annotated[tuple[THttpURL, ...], pydantic.Field(min_length=1)]
    block_explorers: tuple[BlockExplorer, ...] | None = None
    # `None` is "not specified", which is not the same as an explicit `False`.
    testnet: bool | None = None

    @property
    def is_testnet(self) -> bool:
        return self.testnet is True

    @property
    def primary_rpc_url(self) -> str:
        return self.rpc_urls[0]

    @property
    def primary_explorer(self) -> BlockExplorer | None:
        if not self.block_explorers:
            return None
        return self.block_explorers[0]

    def explorer_url(self, kind: TExplorerPathKind, value: str | int) -> str | None:
        """
        Human-facing link on the primary block explorer, e.g. for a transaction hash.
        Returns `None` for chains without a known explorer.
        """
        explorer = self.primary_explorer
        if explorer is None:
            return None
        return f"{explorer.url.rstrip('/')}/{kind}/{value}"
