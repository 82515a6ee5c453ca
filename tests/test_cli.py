import orjson
import pytest
import yaml
from typer.testing import CliRunner

from chainregistry import runlib
from chainregistry.__main__ import CLI_APP
from chainregistry.registry import CHAINS

RUNNER = CliRunner()


@pytest.fixture(autouse=True)
def _fresh_init_state(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(runlib, "INIT_STATE", {})
    monkeypatch.setenv("CHR_ENV", "tests")


def test_list_all() -> None:
    result = RUNNER.invoke(CLI_APP, ["list"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == len(CHAINS)
    assert lines[0].split()[:3] == ["mainnet", "1", "Mainnet"]
    assert lines[1].endswith("(testnet)")


def test_list_group() -> None:
    result = RUNNER.invoke(CLI_APP, ["list", "--group", "development"])
    assert result.exit_code == 0, result.output
    assert [line.split()[:2] for line in result.output.splitlines()] == [["localhost", "1337"], ["hardhat", "31337"]]


def test_show_json() -> None:
    result = RUNNER.invoke(CLI_APP, ["show", "polygonMainnet"])
    assert result.exit_code == 0, result.output
    data = orjson.loads(result.output)
    assert data["id"] == 137
    assert len(data["rpcUrls"]) == 6


def test_show_yaml() -> None:
    result = RUNNER.invoke(CLI_APP, ["show", "hardhat", "--format", "yaml"])
    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output) == {"id": 31337, "name": "hardhat", "rpcUrls": ["http://127.0.0.1:8545"]}


def test_show_unknown() -> None:
    result = RUNNER.invoke(CLI_APP, ["show", "doesNotExist"])
    assert result.exit_code == 2
    assert "doesNotExist" in result.output


def test_dump() -> None:
    result = RUNNER.invoke(CLI_APP, ["dump"])
    assert result.exit_code == 0, result.output
    data = orjson.loads(result.output)
    assert list(data) == [str(key) for key in CHAINS]
    assert data["avalanche"]["testnet"] is False


def test_urls(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHR_RPC_SECRETS", '{"infura_token": "qwe"}')
    result = RUNNER.invoke(CLI_APP, ["urls", "kovan"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["https://kovan.infura.io/v3/qwe"]
