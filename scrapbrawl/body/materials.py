"""Material catalog shared by every body part."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

Color = Tuple[float, float, float]


def rgb_u8(red: int, green: int, blue: int) -> Color:
    """Return a normalised colour from 0-255 channel values."""

    return (red / 255.0, green / 255.0, blue / 255.0)


@dataclass(frozen=True)
class MaterialProfile:
    """Base values a material lends to the parts made from it."""

    base_health: float
    base_energy: float
    density: float
    color: Color


class Material(str, Enum):
    """Substances parts can be built from."""

    WOOD = "wood"
    STONE = "stone"
    PLASTIC = "plastic"
    BRONZE = "bronze"
    ALUMINUM = "aluminum"
    STEEL = "steel"
    CARBON = "carbon"
    RUST = "rust"

    @property
    def profile(self) -> MaterialProfile:
        return MATERIAL_PROFILES[self]

    @property
    def base_health(self) -> float:
        return self.profile.base_health

    @property
    def base_energy(self) -> float:
        return self.profile.base_energy

    @property
    def density(self) -> float:
        return self.profile.density

    @property
    def color(self) -> Color:
        return self.profile.color

    @classmethod
    def choose(cls, rng: random.Random) -> "Material":
        """Draw one of the randomisable materials; rust is never drawn."""

        return rng.choice(RANDOMIZABLE_MATERIALS)


MATERIAL_PROFILES: Dict[Material, MaterialProfile] = {
    Material.WOOD: MaterialProfile(10.0, -10.0, 100.0, rgb_u8(202, 164, 114)),
    Material.STONE: MaterialProfile(13.0, -15.0, 350.0, rgb_u8(136, 140, 141)),
    Material.PLASTIC: MaterialProfile(5.0, 0.0, 30.0, rgb_u8(228, 200, 98)),
    Material.BRONZE: MaterialProfile(24.0, 10.0, 100.0, rgb_u8(205, 127, 50)),
    Material.ALUMINUM: MaterialProfile(22.0, 2.0, 60.0, rgb_u8(208, 213, 219)),
    Material.STEEL: MaterialProfile(30.0, 2.0, 70.0, rgb_u8(122, 127, 128)),
    Material.CARBON: MaterialProfile(30.0, -1.0, 25.0, rgb_u8(13, 17, 21)),
    Material.RUST: MaterialProfile(10.0, 0.0, 70.0, rgb_u8(183, 65, 14)),
}

DEFAULT_MATERIAL = Material.RUST

RANDOMIZABLE_MATERIALS: Tuple[Material, ...] = tuple(
    material for material in Material if material is not DEFAULT_MATERIAL
)


__all__ = [
    "Color",
    "DEFAULT_MATERIAL",
    "MATERIAL_PROFILES",
    "Material",
    "MaterialProfile",
    "RANDOMIZABLE_MATERIALS",
    "rgb_u8",
]
