import yaml
from typing import Dict, Any

from retro_chip8.common.types import NUM_KEYS, Quirks
from retro_chip8.host.keymap import is_key_name
from .models import Chip8Config, DEFAULT_FPS, DEFAULT_SCALE, DEFAULT_TICKS_PER_FRAME


class ConfigLoader:
    def load_from_file(self, path: str) -> Chip8Config:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> Chip8Config:
        if not isinstance(data, dict):
            raise ValueError(f"Configuration root must be a mapping, got {type(data).__name__}")

        ticks = self._parse_positive(data.get("ticks_per_frame", DEFAULT_TICKS_PER_FRAME), "ticks_per_frame")
        fps = self._parse_positive(data.get("fps", DEFAULT_FPS), "fps")
        scale = self._parse_positive(data.get("scale", DEFAULT_SCALE), "scale")

        seed = data.get("seed")
        if seed is not None:
            seed = self._parse_int(seed)

        # Parse Quirks
        quirks_data = data.get("quirks") or {}
        if not isinstance(quirks_data, dict):
            raise ValueError(f"'quirks' must be a mapping, got {type(quirks_data).__name__}")
        quirks = Quirks(
            legacy_skip_equal_9xy0=self._parse_bool(
                quirks_data.get("legacy_skip_equal_9xy0", False), "legacy_skip_equal_9xy0")
        )

        # Parse Keymap
        keymap_data = data.get("keymap") or {}
        if not isinstance(keymap_data, dict):
            raise ValueError(f"'keymap' must be a mapping, got {type(keymap_data).__name__}")
        keymap = {}
        for name, value in keymap_data.items():
            if not is_key_name(str(name)):
                raise ValueError(f"Unsupported key name '{name}': use a single printable character")
            index = self._parse_int(value)
            if not 0 <= index < NUM_KEYS:
                raise ValueError(f"Key index for '{name}' out of range (0-15): {value}")
            keymap[str(name).upper()] = index

        return Chip8Config(
            ticks_per_frame=ticks,
            fps=fps,
            scale=scale,
            seed=seed,
            quirks=quirks,
            keymap=keymap,
        )

    def _parse_positive(self, value: Any, name: str) -> int:
        result = self._parse_int(value)
        if result <= 0:
            raise ValueError(f"'{name}' must be a positive integer: {value}")
        return result

    def _parse_bool(self, value: Any, name: str) -> bool:
        if not isinstance(value, bool):
            raise ValueError(f"'{name}' must be true or false: {value}")
        return value

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
