"""Collection declarations.

Each entry is the single place a collection is described: the store loads
records through ``model``, the router factory registers the list and
get-by-id routes from it, and the OpenAPI schema is generated from those
routes.
"""

from dataclasses import dataclass

from pydantic import BaseModel

from .models.common import (
    Driver,
    DriverResponse,
    DriversResponse,
    Team,
    TeamResponse,
    TeamsResponse,
)


@dataclass(frozen=True)
class Resource:
    name: str
    singular: str
    model: type[BaseModel]
    list_response: type[BaseModel]
    item_response: type[BaseModel]
    list_summary: str
    list_description: str
    item_summary: str
    item_description: str

    @property
    def fields(self) -> dict[str, type]:
        return {name: info.annotation for name, info in self.model.model_fields.items()}


TEAMS = Resource(
    name="teams",
    singular="team",
    model=Team,
    list_response=TeamsResponse,
    item_response=TeamResponse,
    list_summary="Retrieve a list of F1 teams",
    list_description="Get a list of all Formula 1 teams and their base locations.",
    item_summary="Retrieve a team by ID",
    item_description="Get details of a Formula 1 team by its ID.",
)

DRIVERS = Resource(
    name="drivers",
    singular="driver",
    model=Driver,
    list_response=DriversResponse,
    item_response=DriverResponse,
    list_summary="Retrieve a list of F1 drivers",
    list_description="Get a list of all Formula 1 drivers and their respective teams.",
    item_summary="Retrieve a driver by ID",
    item_description="Get details of a Formula 1 driver by their ID.",
)

RESOURCES: tuple[Resource, ...] = (TEAMS, DRIVERS)

# driver.team holds a team name; nothing enforces that the team exists
CROSS_REFERENCES = (("drivers", "team", "teams", "name"),)
