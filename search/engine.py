from typing import Optional

from catalog.errors import InvalidInput
from catalog.models import GeoCatalog
from search.models import DistrictMatch, SearchResults, SubDistrictMatch, VillageMatch


def search(catalog: GeoCatalog, query: Optional[str]) -> SearchResults:
    """
    Case-insensitive substring search over every state, district,
    sub-district and village name.

    Each level is tested on its own, so a village can match even when
    none of its parents do. Results keep catalog order.
    """
    if not query or not query.strip():
        raise InvalidInput()

    needle = query.lower()
    results = SearchResults()

    for state_name, state in catalog.items():
        if needle in state_name.lower():
            results.states.append(state_name)

        for district in state.districts:
            if needle in district.name.lower():
                results.districts.append(DistrictMatch(state=state_name, district=district.name))

            for sub_district in district.sub_districts:
                if needle in sub_district.name.lower():
                    results.subDistricts.append(SubDistrictMatch(
                        state=state_name,
                        district=district.name,
                        subDistrict=sub_district.name
                    ))

                for village in sub_district.villages:
                    if needle in village.lower():
                        results.villages.append(VillageMatch(
                            state=state_name,
                            district=district.name,
                            subDistrict=sub_district.name,
                            village=village
                        ))

    return results
