import enum
from typing import Any

import orjson
import yaml


class DumpFormat(enum.StrEnum):
    json = "json"
    yaml = "yaml"


def json_dumps(value: Any, *, indent: bool = False) -> str:
    # On bytes/str dumps output:
    # https://github.com/ijl/orjson/issues/66
    option = orjson.OPT_INDENT_2 if indent else None
    return orjson.dumps(value, option=option).decode()


def dumps(value: Any, fmt: DumpFormat = DumpFormat.json) -> str:
    """
    >>> print(dumps({"id": 1, "rpcUrls": ["https://mainnet.infura.io/v3"]}, DumpFormat.yaml), end="")
    id: 1
    rpcUrls:
    - https://mainnet.infura.io/v3
    """
    if fmt == DumpFormat.yaml:
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True)
    return json_dumps(value, indent=True)
