# directory tile_state.py
from typing import Dict, Any, Tuple, Optional, List


class AdventureOption:
    """A direction the player can travel from a tile, with its risk."""

    def __init__(self, direction: str, text: str, result: str, danger_level: int):
        self.direction = direction
        self.text = text
        self.result = result
        self.danger_level = danger_level

    def to_dict(self) -> Dict[str, Any]:
        return {
            "direction": self.direction,
            "text": self.text,
            "result": self.result,
            "danger_level": int(self.danger_level),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            direction=data["direction"],
            text=data.get("text", ""),
            result=data.get("result", ""),
            danger_level=data.get("danger_level", 1),
        )

    def __repr__(self):
        return f"<AdventureOption {self.direction} danger={self.danger_level}>"


class TileState:
    """
    One generated map cell.
    Elevation, temperature and moisture are stored on a 0-100 integer scale.
    Hydrology flags always follow the biome: use set_biome() to change it.
    """

    def __init__(
        self,
        x: int,
        y: int,
        world_id: str,
        elevation: int,
        temperature: int,
        moisture: int,
        biome: str,
        weather: str = "clear",
        difficulty: int = 1,
        has_town: bool = False,
        has_river: bool = False,
        is_lake: bool = False,
        has_path: bool = False,
        path_type: Optional[str] = None,
        has_portal: bool = False,
        description: str = "",
        options: Optional[List[AdventureOption]] = None,
    ):
        self.x = x
        self.y = y
        self.world_id = world_id
        self.elevation = elevation
        self.temperature = temperature
        self.moisture = moisture
        self.biome = biome
        self.weather = weather
        self.difficulty = difficulty
        self.has_town = has_town
        self.has_river = has_river
        self.is_lake = is_lake
        self.has_path = has_path
        self.path_type = path_type
        self.has_portal = has_portal
        self.description = description
        self.options = options or []

        # set during classification, consumed by the river pass
        self.river_candidate = False

    # --- Core utilities ----------------------------------------------------
    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_water(self) -> bool:
        return self.biome in ("ocean", "river", "lake")

    def set_biome(self, biome: str):
        self.biome = biome
        self.has_river = biome == "river"
        self.is_lake = biome == "lake"

    def mark_path(self, path_type: str):
        self.has_path = True
        self.path_type = path_type

    # --- Export compatibility ---------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "world_id": self.world_id,
            "elevation": int(self.elevation),
            "temperature": int(self.temperature),
            "moisture": int(self.moisture),
            "biome": self.biome,
            "weather": self.weather,
            "difficulty": int(self.difficulty),
            "has_town": self.has_town,
            "has_river": self.has_river,
            "is_lake": self.is_lake,
            "has_path": self.has_path,
            "path_type": self.path_type,
            "has_portal": self.has_portal,
            "description": self.description,
            "options": [o.to_dict() for o in self.options],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TileState":
        return cls(
            x=data["x"],
            y=data["y"],
            world_id=data.get("world_id", ""),
            elevation=data.get("elevation", 0),
            temperature=data.get("temperature", 50),
            moisture=data.get("moisture", 50),
            biome=data.get("biome", "plains"),
            weather=data.get("weather", "clear"),
            difficulty=data.get("difficulty", 1),
            has_town=data.get("has_town", False),
            has_river=data.get("has_river", False),
            is_lake=data.get("is_lake", False),
            has_path=data.get("has_path", False),
            path_type=data.get("path_type"),
            has_portal=data.get("has_portal", False),
            description=data.get("description", ""),
            options=[AdventureOption.from_dict(o) for o in data.get("options", [])],
        )

    def __repr__(self):
        flags = []
        if self.has_town:
            flags.append("town")
        if self.has_path:
            flags.append(self.path_type or "path")
        if self.has_portal:
            flags.append("portal")
        flag_str = f" [{', '.join(flags)}]" if flags else ""
        return f"<Tile ({self.x},{self.y}) {self.biome} e={self.elevation} d={self.difficulty}{flag_str}>"
