import pydantic
import pytest

from chainregistry import registry
from chainregistry.chain_models import ChainDescriptor

SAMPLE_CHAIN_RAW = {
    "id": 42161,
    "name": "Arbitrum One",
    "nativeCurrency": {"name": "Ether", "symbol": "AETH", "decimals": 18},
    "rpcUrls": ["https://arb1.arbitrum.io/rpc"],
    "blockExplorers": [
        {"name": "Arbiscan", "url": "https://arbiscan.io"},
        {"name": "Arbitrum Explorer", "url": "https://explorer.arbitrum.io"},
    ],
}


def test_load_stored_form() -> None:
    chain = ChainDescriptor.model_validate(SAMPLE_CHAIN_RAW)
    assert chain.rpc_urls == ("https://arb1.arbitrum.io/rpc",)
    assert chain.primary_explorer is not None
    assert chain.primary_explorer.name == "Arbiscan"
    assert chain.testnet is None
    assert chain.dump() == SAMPLE_CHAIN_RAW


def test_load_python_names() -> None:
    chain = ChainDescriptor(id=31337, name="hardhat", rpc_urls=["http://127.0.0.1:8545"])
    assert chain.native_currency is None
    assert chain.block_explorers is None
    assert chain.dump() == {"id": 31337, "name": "hardhat", "rpcUrls": ["http://127.0.0.1:8545"]}


def test_explicit_false_testnet_is_kept() -> None:
    assert registry.lookup("avalanche").dump()["testnet"] is False
    assert "testnet" not in registry.lookup("mainnet").dump()


@pytest.mark.parametrize(
    "override",
    [
        {"rpcUrls": []},
        {"rpcUrls": ["wss://arb1.arbitrum.io/ws"]},
        {"rpcUrls": ["arb1.arbitrum.io/rpc"]},
        {"id": 0},
        {"id": -1},
        {"nativeCurrency": {"name": "Ether", "symbol": "ETH", "decimals": -1}},
        {"blockExplorers": [{"name": "Arbiscan", "url": "not a url"}]},
        {"unexpected": True},
    ],
)
def test_invalid_descriptors(override: dict) -> None:
    with pytest.raises(pydantic.ValidationError):
        ChainDescriptor.model_validate({**SAMPLE_CHAIN_RAW, **override})


def test_descriptor_frozen() -> None:
    chain = registry.lookup("mainnet")
    with pytest.raises(pydantic.ValidationError):
        chain.id = 2  # type: ignore[misc]


def test_explorer_url() -> None:
    assert registry.lookup("mainnet").explorer_url("tx", "0xabc") == "https://etherscan.io/tx/0xabc"
    # Stored with a trailing slash.
    assert registry.lookup("avalanche").explorer_url("block", 1) == "https://snowtrace.io/block/1"
    assert registry.lookup("hardhat").explorer_url("address", "0x00") is None
