import logging
import urllib.parse

import pydantic

from .chain_models import ChainDescriptor

LOGGER = logging.getLogger(__name__)


class RPCSecrets(pydantic.BaseModel, frozen=True):
    infura_token: str = ""


def _is_infura_url(url: str) -> bool:
    hostname = urllib.parse.urlparse(url).hostname or ""
    return hostname.endswith(".infura.io") and url.rstrip("/").endswith("/v3")


def render_rpc_url(url: str, secrets: RPCSecrets) -> str | None:
    """
    Fill in the provider token for the endpoints that need one.
    Returns `None` when the required token is not configured.

    >>> render_rpc_url("https://mainnet.infura.io/v3", RPCSecrets(infura_token="qwe"))
    'https://mainnet.infura.io/v3/qwe'
    >>> render_rpc_url("https://mainnet.infura.io/v3", RPCSecrets()) is None
    True
    >>> render_rpc_url("https://polygon-rpc.com", RPCSecrets())
    'https://polygon-rpc.com'
    """
    if not _is_infura_url(url):
        return url
    if not secrets.infura_token:
        return None
    return f"{url.rstrip('/')}/{secrets.infura_token}"


def render_rpc_urls(chain: ChainDescriptor, secrets: RPCSecrets) -> list[str]:
    """
    Usable RPC URLs in the preference order.

    Endpoints with missing tokens are skipped; if nothing is left,
    the stored URLs are returned as they are.
    """
    rendered = [url for url in (render_rpc_url(url, secrets) for url in chain.rpc_urls) if url is not None]
    if not rendered:
        LOGGER.warning("No RPC tokens configured for %r, falling back to the bare URLs", chain.name)
        return list(chain.rpc_urls)
    return rendered


def rpc_nodes_by_host(chain: ChainDescriptor) -> dict[str, str]:
    """`hostname -> url`, in the preference order; a repeated hostname keeps its first URL"""
    result: dict[str, str] = {}
    for url in chain.rpc_urls:
        hostname = urllib.parse.urlparse(url).hostname
        assert hostname, url
        result.setdefault(hostname, url)
    return result
