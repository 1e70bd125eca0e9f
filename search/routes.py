import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from catalog.deps import get_catalog
from catalog.errors import CatalogError
from catalog.models import GeoCatalog
from search.engine import search
from search.models import SearchResults

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["Search"])


@router.get("", response_model=SearchResults)
def search_locations(query: Optional[str] = None, catalog: GeoCatalog = Depends(get_catalog)):
    try:
        return search(catalog, query)
    except CatalogError:
        raise
    except Exception:
        logger.exception("Error performing search for %r", query)
        raise HTTPException(status_code=500, detail="Error performing search")
