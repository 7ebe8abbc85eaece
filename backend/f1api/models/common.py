from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int = Field(examples=[1])


class Team(Record):
    name: str = Field(examples=["McLaren"])
    base: str = Field(examples=["Woking, United Kingdom"])


class Driver(Record):
    name: str = Field(examples=["Max Verstappen"])
    team: str = Field(examples=["Red Bull Racing"], description="Name of the driver's team")


class TeamsResponse(BaseModel):
    teams: list[Team]
    total: int


class TeamResponse(BaseModel):
    team: Team


class DriversResponse(BaseModel):
    drivers: list[Driver]
    total: int


class DriverResponse(BaseModel):
    driver: Driver


class ErrorResponse(BaseModel):
    error: str = Field(examples=["driver not found"])
    parameter: str | None = None
