from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


# ----------------------------
# STATE DOCUMENT SCHEMA
# ----------------------------
class SubDistrict(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="subDistrict")
    villages: tuple[str, ...]


class District(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="district")
    sub_districts: tuple[SubDistrict, ...] = Field(alias="subDistricts")

    def find_sub_district(self, name: str) -> Optional[SubDistrict]:
        # first match wins on duplicate names
        return next((sd for sd in self.sub_districts if sd.name == name), None)


class StateDocument(BaseModel):
    """Shape of one ``<State>.json`` file on disk."""

    model_config = ConfigDict(frozen=True)

    districts: tuple[District, ...]


class State(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    districts: tuple[District, ...]

    def find_district(self, name: str) -> Optional[District]:
        return next((d for d in self.districts if d.name == name), None)


# ----------------------------
# CATALOG
# ----------------------------
class GeoCatalog(Mapping[str, State]):
    """
    Read-only mapping of state name -> State.

    Built once at startup and shared by every request. Iteration follows
    the order the states were added in.
    """

    def __init__(self, states: Mapping[str, State] = None):
        self._states = MappingProxyType(dict(states or {}))

    def __getitem__(self, name: str) -> State:
        return self._states[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self):
        return f"GeoCatalog(states={len(self)})"

    def counts(self) -> dict:
        districts = sub_districts = villages = 0
        for state in self._states.values():
            districts += len(state.districts)
            for district in state.districts:
                sub_districts += len(district.sub_districts)
                for sub_district in district.sub_districts:
                    villages += len(sub_district.villages)

        return {
            "states": len(self),
            "districts": districts,
            "subDistricts": sub_districts,
            "villages": villages,
        }
