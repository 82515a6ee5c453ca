import enum


class ChainKey(enum.StrEnum):
    """Symbolic keys of the supported networks, in the registry order"""

    MAINNET = "mainnet"
    ROPSTEN = "ropsten"
    RINKEBY = "rinkeby"
    GOERLI = "goerli"
    KOVAN = "kovan"
    OPTIMISTIC_ETHEREUM = "optimisticEthereum"
    OPTIMISTIC_KOVAN = "optimisticKovan"
    POLYGON_MAINNET = "polygonMainnet"
    POLYGON_TESTNET_MUMBAI = "polygonTestnetMumbai"
    ARBITRUM_ONE = "arbitrumOne"
    ARBITRUM_RINKEBY = "arbitrumRinkeby"
    AVALANCHE = "avalanche"
    AVALANCHE_FUJI = "avalancheFuji"
    LOCALHOST = "localhost"
    HARDHAT = "hardhat"
