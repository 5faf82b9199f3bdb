"""
Game settings.

Settings are plain dataclasses grouped by concern. They can be built from a
nested dictionary (``Settings.from_dict``) so that yaml or cli based
configuration can feed the same structure.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any

from invaders.constants import CANVAS_SIZE, FPS, TITLE


class SettingsError(ValueError):
    """Raised when a settings dictionary does not match the settings tree."""


@dataclass
class WindowSettings:
    width: int = CANVAS_SIZE[0]
    height: int = CANVAS_SIZE[1]
    title: str = TITLE
    fps: int = FPS


@dataclass
class PlayerSettings:
    w: int = 40
    h: int = 20
    speed: int = 10
    bottom_offset: int = 50  # distance from the top of the player to the bottom edge
    cooldown_between_shots: int = 50
    projectile_speed: int = -10


@dataclass
class ProjectileSettings:
    r: int = 5


@dataclass
class EnemySettings:
    """
    Enemy formation settings
    """

    w: int = 30
    h: int = 30
    gap_x: int = 30
    gap_y: int = 20
    offset_x: int = 90
    offset_y: int = 50
    rows: int = 5
    cols: int = 11
    cooldown_between_shots: int = 50
    fire_every: int = 50  # frames
    fire_chance: float = 0.015
    projectile_speed: int = 10
    speed_x: float = 1.0
    speed_y: float = 1.0
    drop: float = 20.0


@dataclass
class ShieldSettings:
    count: int = 3
    spacing: int = 175
    bottom_offset: int = 150
    parts_x: int = 6
    parts_y: int = 6
    part_size: int = 10


# Fields that must be positive numbers for the frame loop to make progress
POSITIVE_FIELDS = {
    WindowSettings: ("width", "height", "fps"),
    PlayerSettings: ("w", "h"),
    ProjectileSettings: ("r",),
    EnemySettings: ("w", "h", "rows", "cols", "fire_every", "speed_x", "speed_y"),
    ShieldSettings: ("part_size",),
}


def _section(cls, data: dict[str, Any] | None, name: str):
    """
    Build one settings section, rejecting unknown keys.

    :param cls: Settings dataclass to build
    :param data: Section dictionary, may be None
    :type data: dict[str, Any] | None

    :param name: Section name, used in error messages
    :type name: str

    :raise SettingsError: If the section has keys the dataclass does not know
        or a value that has to be positive is not
    """
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise SettingsError(f"Section '{name}' must be a mapping")

    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise SettingsError(f"Unknown keys in '{name}': {', '.join(unknown)}")

    section = cls(**data)
    for key in POSITIVE_FIELDS.get(cls, ()):
        value = getattr(section, key)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise SettingsError(f"'{name}.{key}' must be a positive number, got {value!r}")
    return section


@dataclass
class Settings:
    """
    Settings tree for a game session
    """

    window: WindowSettings = field(default_factory=WindowSettings)
    player: PlayerSettings = field(default_factory=PlayerSettings)
    projectile: ProjectileSettings = field(default_factory=ProjectileSettings)
    enemy: EnemySettings = field(default_factory=EnemySettings)
    shield: ShieldSettings = field(default_factory=ShieldSettings)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """
        Build settings from a nested dictionary. Missing sections and keys
        keep their defaults.

        :param data: Nested settings dictionary
        :type data: dict[str, Any]

        :return: Settings
        :rtype: Settings

        :raise SettingsError: If a section or key is unknown, or a value is out
            of range
        """
        if not isinstance(data, dict):
            raise SettingsError("Settings must be a mapping of sections")

        sections = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(sections))
        if unknown:
            raise SettingsError(f"Unknown sections: {', '.join(unknown)}")

        section_types = {
            "window": WindowSettings,
            "player": PlayerSettings,
            "projectile": ProjectileSettings,
            "enemy": EnemySettings,
            "shield": ShieldSettings,
        }
        return cls(
            **{
                name: _section(section_types[name], data.get(name), name)
                for name in sections
            }
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
