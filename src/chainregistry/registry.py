import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any, Self

import orjson

from .chain_keys import ChainKey
from .chain_models import ChainDescriptor

LOGGER = logging.getLogger(__name__)
HERE = Path(__file__).parent


class UnknownChainKey(KeyError):
    """Raised when a chain is requested by a key outside of the supported set"""


class UnknownChainId(KeyError):
    """Raised when a chain is requested by an id that is not in the registry"""


class RegistryError(ValueError):
    """Inconsistent registry data: missing or extra keys, duplicate ids, dangling group references"""


# Curated lists: not derived from the `testnet` flag or the id ranges.
CHAIN_GROUP_KEYS: Mapping[str, tuple[ChainKey, ...]] = MappingProxyType(
    {
        # Ethereum L1 and its (legacy) testnets.
        "default": (
            ChainKey.MAINNET,
            ChainKey.ROPSTEN,
            ChainKey.RINKEBY,
            ChainKey.GOERLI,
            ChainKey.KOVAN,
        ),
        # Rollups and sidechains.
        "l2": (
            ChainKey.OPTIMISTIC_ETHEREUM,
            ChainKey.OPTIMISTIC_KOVAN,
            ChainKey.POLYGON_MAINNET,
            ChainKey.POLYGON_TESTNET_MUMBAI,
            ChainKey.ARBITRUM_ONE,
            ChainKey.ARBITRUM_RINKEBY,
        ),
        "development": (
            ChainKey.LOCALHOST,
            ChainKey.HARDHAT,
        ),
    }
)


class ChainRegistry:
    """
    Read-only `ChainKey -> ChainDescriptor` mapping with named groups of the same descriptors.

    All the consistency checks happen in the constructor;
    a successfully built registry is never modified afterwards.
    """

    def __init__(
        self,
        chains: Mapping[ChainKey, ChainDescriptor],
        group_keys: Mapping[str, Sequence[ChainKey]] = CHAIN_GROUP_KEYS,
    ) -> None:
        self._chains: Mapping[ChainKey, ChainDescriptor] = MappingProxyType(dict(chains))

        key_by_id: dict[int, ChainKey] = {}
        for key, chain in self._chains.items():
            prev_key = key_by_id.setdefault(chain.id, key)
            if prev_key != key:
                raise RegistryError(f"Duplicate chain id {chain.id!r}: {prev_key.value!r} and {key.value!r}")
        self._key_by_id: Mapping[int, ChainKey] = MappingProxyType(key_by_id)
        self._chains_by_id: Mapping[int, ChainDescriptor] = MappingProxyType(
            {chain_id: self._chains[key] for chain_id, key in key_by_id.items()}
        )

        groups: dict[str, tuple[ChainDescriptor, ...]] = {}
        for group_name, keys in group_keys.items():
            missing = [str(key) for key in keys if key not in self._chains]
            if missing:
                raise RegistryError(f"Group {group_name!r} references missing chains: {missing!r}")
            groups[group_name] = tuple(self._chains[key] for key in keys)
        self._groups: Mapping[str, tuple[ChainDescriptor, ...]] = MappingProxyType(groups)
        self._all_chains = tuple(self._chains.values())

    @classmethod
    def from_raw(
        cls,
        raw: Mapping[str, Any],
        group_keys: Mapping[str, Sequence[ChainKey]] = CHAIN_GROUP_KEYS,
        *,
        require_all_keys: bool = True,
    ) -> Self:
        """Build from the stored form: `{"mainnet": {"id": 1, "rpcUrls": [...], ...}, ...}`"""
        known_keys = {key.value for key in ChainKey}
        extra = [key for key in raw if key not in known_keys]
        if extra:
            raise RegistryError(f"Unsupported chain keys in the data: {extra!r}")
        if require_all_keys:
            missing = [key.value for key in ChainKey if key.value not in raw]
            if missing:
                raise RegistryError(f"Chain keys missing from the data: {missing!r}")

        chains = {ChainKey(key): ChainDescriptor.model_validate(chain_raw) for key, chain_raw in raw.items()}
        return cls(chains, group_keys)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(chains={len(self._chains)}, groups={list(self._groups)!r})"

    def __len__(self) -> int:
        return len(self._chains)

    def __contains__(self, key: object) -> bool:
        return key in self._chains

    @property
    def chains(self) -> Mapping[ChainKey, ChainDescriptor]:
        return self._chains

    @property
    def chains_by_id(self) -> Mapping[int, ChainDescriptor]:
        return self._chains_by_id

    @property
    def group_names(self) -> tuple[str, ...]:
        return tuple(self._groups)

    def lookup(self, key: ChainKey | str) -> ChainDescriptor:
        try:
            return self._chains[ChainKey(key)]
        except (ValueError, KeyError):
            known = ", ".join(str(known_key) for known_key in self._chains)
            raise UnknownChainKey(f"Unknown chain key {key!r}; known keys: {known}") from None

    get = lookup

    def lookup_by_id(self, chain_id: int) -> ChainDescriptor:
        try:
            return self._chains_by_id[chain_id]
        except KeyError:
            raise UnknownChainId(f"Unknown chain id {chain_id!r}") from None

    def key_of(self, chain: ChainDescriptor) -> ChainKey:
        key = self._key_by_id.get(chain.id)
        if key is None or self._chains[key] != chain:
            raise UnknownChainId(f"Chain {chain.name!r} (id={chain.id!r}) is not in the registry")
        return key

    def all_chains(self) -> tuple[ChainDescriptor, ...]:
        return self._all_chains

    def group(self, name: str) -> tuple[ChainDescriptor, ...]:
        if name == "all":
            return self._all_chains
        try:
            return self._groups[name]
        except KeyError:
            raise KeyError(f"Unknown chain group {name!r}; known groups: all, {', '.join(self._groups)}") from None

    def default_chains(self) -> tuple[ChainDescriptor, ...]:
        return self.group("default")

    def default_l2_chains(self) -> tuple[ChainDescriptor, ...]:
        return self.group("l2")

    def development_chains(self) -> tuple[ChainDescriptor, ...]:
        return self.group("development")


def load_registry(path: Path = HERE / "blockchains.json") -> ChainRegistry:
    registry = ChainRegistry.from_raw(orjson.loads(path.read_bytes()))
    LOGGER.debug("Loaded chain registry from %s: %r", path, registry)
    return registry


REGISTRY = load_registry()
CHAINS: Mapping[ChainKey, ChainDescriptor] = REGISTRY.chains
CHAIN_BY_ID: Mapping[int, ChainDescriptor] = REGISTRY.chains_by_id
ALL_CHAINS = REGISTRY.all_chains()
DEFAULT_CHAINS = REGISTRY.default_chains()
DEFAULT_L2_CHAINS = REGISTRY.default_l2_chains()
DEVELOPMENT_CHAINS = REGISTRY.development_chains()


def lookup(key: ChainKey | str) -> ChainDescriptor:
    return REGISTRY.lookup(key)


get = lookup


def lookup_by_id(chain_id: int) -> ChainDescriptor:
    return REGISTRY.lookup_by_id(chain_id)


def key_of(chain: ChainDescriptor) -> ChainKey:
    return REGISTRY.key_of(chain)


def all_chains() -> tuple[ChainDescriptor, ...]:
    return ALL_CHAINS


def default_chains() -> tuple[ChainDescriptor, ...]:
    return DEFAULT_CHAINS


def default_l2_chains() -> tuple[ChainDescriptor, ...]:
    return DEFAULT_L2_CHAINS


def development_chains() -> tuple[ChainDescriptor, ...]:
    return DEVELOPMENT_CHAINS
