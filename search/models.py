from typing import List

from pydantic import BaseModel


class DistrictMatch(BaseModel):
    state: str
    district: str


class SubDistrictMatch(BaseModel):
    state: str
    district: str
    subDistrict: str


class VillageMatch(BaseModel):
    state: str
    district: str
    subDistrict: str
    village: str


class SearchResults(BaseModel):
    states: List[str] = []
    districts: List[DistrictMatch] = []
    subDistricts: List[SubDistrictMatch] = []
    villages: List[VillageMatch] = []
