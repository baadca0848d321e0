"""
Session configuration for Gomoku front ends.
"""
import json
from pathlib import Path
from typing import Dict, Union


class SessionConfig:
    """Initial display and input flags of a session."""

    def __init__(self,
                 reviewing: bool = False,
                 show_win_hint: bool = True,
                 show_ordinals: bool = False,
                 stone_locked: bool = False):
        self.reviewing = reviewing
        self.show_win_hint = show_win_hint
        self.show_ordinals = show_ordinals
        self.stone_locked = stone_locked

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'SessionConfig':
        """
        Create config from dictionary.

        Raises:
            ValueError: If the dictionary has unknown keys or non-bool values
        """
        unknown = set(config_dict) - set(cls().to_dict())
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        for key, value in config_dict.items():
            if not isinstance(value, bool):
                raise ValueError(f"Config key {key!r} must be true or false, got {value!r}")
        return cls(**config_dict)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'SessionConfig':
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, 'r') as f:
            return cls.from_dict(json.load(f))

    def save(self, path: Union[str, Path]) -> None:
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def __eq__(self, other):
        if not isinstance(other, SessionConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()
