from fastapi import Request

from catalog.models import GeoCatalog


def get_catalog(request: Request) -> GeoCatalog:
    return request.app.state.catalog
