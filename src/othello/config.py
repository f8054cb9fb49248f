"""
Configuration parameters for the Othello engine.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json


@dataclass
class EngineConfig:
    """Configuration for rule handling in the board engine."""
    strict_cell_values: bool = True  # Reject seeded cells outside EMPTY/BLACK/WHITE
    end_on_double_pass: bool = False  # Finish the game when neither player can move


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: Optional[str] = None  # No file handler when unset
    log_level: str = "INFO"
    log_file: str = "othello.log"


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "othello-engine"
    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'othello-engine'),
            engine=EngineConfig(**config_dict.get('engine', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
