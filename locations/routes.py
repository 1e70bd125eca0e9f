# locations/routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException

from catalog.deps import get_catalog
from catalog.errors import CatalogError
from catalog.models import GeoCatalog
from locations.queries import list_districts, list_states, list_sub_districts, list_villages

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Locations"])


# -----------------------------
# GET STATES
# -----------------------------
@router.get("/states")
def get_states(catalog: GeoCatalog = Depends(get_catalog)):
    try:
        return list_states(catalog)
    except Exception:
        logger.exception("Error fetching states")
        raise HTTPException(status_code=500, detail="Error fetching states")


# -----------------------------
# GET DISTRICTS BY STATE
# -----------------------------
@router.get("/districts/{state}")
def get_districts(state: str, catalog: GeoCatalog = Depends(get_catalog)):
    try:
        return list_districts(catalog, state)
    except CatalogError:
        raise
    except Exception:
        logger.exception("Error fetching districts for %s", state)
        raise HTTPException(status_code=500, detail="Error fetching districts")


# -----------------------------
# GET SUB-DISTRICTS BY DISTRICT
# -----------------------------
@router.get("/subdistricts/{state}/{district}")
def get_sub_districts(state: str, district: str, catalog: GeoCatalog = Depends(get_catalog)):
    try:
        return list_sub_districts(catalog, state, district)
    except CatalogError:
        raise
    except Exception:
        logger.exception("Error fetching sub-districts for %s/%s", state, district)
        raise HTTPException(status_code=500, detail="Error fetching sub-districts")


# -----------------------------
# GET VILLAGES BY SUB-DISTRICT
# -----------------------------
@router.get("/villages/{state}/{district}/{subdistrict}")
def get_villages(state: str, district: str, subdistrict: str, catalog: GeoCatalog = Depends(get_catalog)):
    try:
        return list_villages(catalog, state, district, subdistrict)
    except CatalogError:
        raise
    except Exception:
        logger.exception("Error fetching villages for %s/%s/%s", state, district, subdistrict)
        raise HTTPException(status_code=500, detail="Error fetching villages")
