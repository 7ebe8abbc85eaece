import json
from pathlib import Path

TEAMS = [
    {"id": 1, "name": "McLaren", "base": "Woking, United Kingdom"},
    {"id": 2, "name": "Mercedes", "base": "Brackley, United Kingdom"},
    {"id": 3, "name": "Red Bull Racing", "base": "Milton Keynes, United Kingdom"},
    {"id": 4, "name": "Ferrari", "base": "Maranello, Italy"},
    {"id": 5, "name": "Alpine", "base": "Enstone, United Kingdom"},
    {"id": 6, "name": "Aston Martin", "base": "Silverstone, United Kingdom"},
    {"id": 7, "name": "Alfa Romeo Racing", "base": "Hinwil, Switzerland"},
    {"id": 8, "name": "AlphaTauri", "base": "Faenza, Italy"},
    {"id": 9, "name": "Williams", "base": "Grove, United Kingdom"},
    {"id": 10, "name": "Haas", "base": "Kannapolis, United States"},
]

DRIVERS = [
    {"id": 1, "name": "Max Verstappen", "team": "Red Bull Racing"},
    {"id": 2, "name": "Lewis Hamilton", "team": "Ferrari"},
    {"id": 3, "name": "Lando Norris", "team": "McLaren"},
]


def default_seed() -> dict[str, list[dict]]:
    """Built-in data, copied so callers cannot alter the module lists."""
    return {
        "teams": [dict(row) for row in TEAMS],
        "drivers": [dict(row) for row in DRIVERS],
    }


def load_seed_file(path: str | Path) -> dict[str, list[dict]]:
    """Read a JSON seed of the form ``{"teams": [...], "drivers": [...]}``."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Seed file {path} must contain a JSON object")
    for name, rows in data.items():
        if not isinstance(rows, list):
            raise ValueError(f"Seed collection '{name}' must be a list")
        if not all(isinstance(row, dict) for row in rows):
            raise ValueError(f"Seed collection '{name}' must contain only objects")
    return data
