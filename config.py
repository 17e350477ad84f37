import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class CodecConfig:
    __slots__ = ("clock_policy",)

    def __init__(self, clock_policy="raise"):
        self.clock_policy = clock_policy


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("codec", "logging")

    def __init__(self, codec=None, logging=None):
        self.codec = codec or CodecConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            CodecConfig(**d.get("codec", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
