# tictactoe/config.py
from dataclasses import dataclass, field
import os
import tomllib


@dataclass
class SearchConfig:
    alpha_beta: bool = True   # False runs the same traversal without cutoffs
    log_stats: bool = True    # one debug line per search


@dataclass
class GameConfig:
    human_first: bool = True  # human (B) opens, engine (A) replies


@dataclass
class UIConfig:
    engine_name: str = "TicTacToe Engine"
    engine_symbol: str = "X"
    human_symbol: str = "O"
    engine_delay_ms: int = 500  # CLI pacing before showing the engine reply
    api_port: int = 8000


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    game: GameConfig = field(default_factory=GameConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "game", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("TICTACTOE_CONFIG_TOML", "config.toml"))
# allow env override of the log level for quick debugging
if os.environ.get("TICTACTOE_LOG_LEVEL"):
    CONFIG.log_level = os.environ["TICTACTOE_LOG_LEVEL"]
