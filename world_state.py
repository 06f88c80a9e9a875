# directory world_state.py
from typing import Dict, Any, Optional, List, Tuple


class WorldState:
    """
    World-level parameters derived from the seed.
    Immutable after GenerateWorld(); the tiles and towns live elsewhere.
    """

    def __init__(
        self,
        id: str,
        name: str,
        seed: str,
        map_size: int,
        difficulty_bias: float,
        climate_bias: float,
        moisture_bias: float,
        num_towns: int,
    ):
        self.id = id
        self.name = name
        self.seed = seed
        self.map_size = map_size
        self.difficulty_bias = difficulty_bias
        self.climate_bias = climate_bias
        self.moisture_bias = moisture_bias
        self.num_towns = num_towns

    @property
    def center(self) -> Tuple[int, int]:
        return (self.map_size // 2, self.map_size // 2)

    def in_bounds(self, x, y) -> bool:
        return 0 <= x < self.map_size and 0 <= y < self.map_size

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "seed": self.seed,
            "map_size": self.map_size,
            "difficulty_bias": self.difficulty_bias,
            "climate_bias": self.climate_bias,
            "moisture_bias": self.moisture_bias,
            "num_towns": self.num_towns,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(**{k: data[k] for k in (
            "id", "name", "seed", "map_size", "difficulty_bias",
            "climate_bias", "moisture_bias", "num_towns",
        )})

    def __repr__(self):
        return f"<World {self.id} '{self.name}' size={self.map_size} towns={self.num_towns}>"


class TownService:
    def __init__(self, id, name, description, type, cost=0, level=1):
        self.id = id
        self.name = name
        self.description = description
        self.type = type
        self.cost = cost
        self.level = level

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "type": self.type,
            "cost": self.cost,
            "level": self.level,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            type=data["type"],
            cost=data.get("cost", 0),
            level=data.get("level", 1),
        )


class Building:
    def __init__(self, id, name, description, type, services: Optional[List[TownService]] = None):
        self.id = id
        self.name = name
        self.description = description
        self.type = type
        self.services = services or []

    def get_service(self, service_type):
        for service in self.services:
            if service.type == service_type:
                return service
        return None

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "type": self.type,
            "services": [s.to_dict() for s in self.services],
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            type=data["type"],
            services=[TownService.from_dict(s) for s in data.get("services", [])],
        )

    def __repr__(self):
        return f"<Building {self.type} '{self.name}'>"


class Town:
    """
    A settlement node in the world's town tree.
    The root town has depth 0 and no parent; every other parent_id names an
    earlier town of equal or lower depth.
    """

    def __init__(
        self,
        id: str,
        name: str,
        description: str,
        region: str,
        population: int,
        position: Tuple[int, int],
        world_id: str,
        depth: int,
        parent_id: Optional[str],
        buildings: Optional[List[Building]] = None,
        influence_radius: int = 1,
        last_visited: Optional[float] = None,
    ):
        self.id = id
        self.name = name
        self.description = description
        self.region = region
        self.population = population
        self.position = tuple(position)
        self.world_id = world_id
        self.depth = depth
        self.parent_id = parent_id
        self.buildings = buildings or []
        self.influence_radius = influence_radius
        self.last_visited = last_visited

    @property
    def x(self):
        return self.position[0]

    @property
    def y(self):
        return self.position[1]

    def get_building(self, building_type):
        for building in self.buildings:
            if building.type == building_type:
                return building
        return None

    def record_visit(self, timestamp):
        self.last_visited = timestamp

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "region": self.region,
            "population": self.population,
            "position": list(self.position),
            "world_id": self.world_id,
            "depth": self.depth,
            "parent_id": self.parent_id,
            "buildings": [b.to_dict() for b in self.buildings],
            "influence_radius": self.influence_radius,
            "last_visited": self.last_visited,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            region=data.get("region", "Frontier"),
            population=data.get("population", 100),
            position=tuple(data["position"]),
            world_id=data.get("world_id", ""),
            depth=data.get("depth", 0),
            parent_id=data.get("parent_id"),
            buildings=[Building.from_dict(b) for b in data.get("buildings", [])],
            influence_radius=data.get("influence_radius", 1),
            last_visited=data.get("last_visited"),
        )

    def __repr__(self):
        return f"<Town {self.name} ({self.x},{self.y}) depth={self.depth} pop={self.population}>"
