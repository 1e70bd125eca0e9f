from typing import List

from catalog.errors import NotFound
from catalog.models import District, GeoCatalog, State, SubDistrict


def _state(catalog: GeoCatalog, state: str) -> State:
    if state not in catalog:
        raise NotFound("state")
    return catalog[state]


def _district(catalog: GeoCatalog, state: str, district: str) -> District:
    found = _state(catalog, state).find_district(district)
    if found is None:
        raise NotFound("district")
    return found


def _sub_district(catalog: GeoCatalog, state: str, district: str, sub_district: str) -> SubDistrict:
    found = _district(catalog, state, district).find_sub_district(sub_district)
    if found is None:
        raise NotFound("sub-district")
    return found


def list_states(catalog: GeoCatalog) -> List[str]:
    return list(catalog)


def list_districts(catalog: GeoCatalog, state: str) -> List[str]:
    return [d.name for d in _state(catalog, state).districts]


def list_sub_districts(catalog: GeoCatalog, state: str, district: str) -> List[str]:
    return [sd.name for sd in _district(catalog, state, district).sub_districts]


def list_villages(catalog: GeoCatalog, state: str, district: str, sub_district: str) -> List[str]:
    return list(_sub_district(catalog, state, district, sub_district).villages)
