import json

import pytest
from fastapi.testclient import TestClient

from catalog.loader import build_catalog
from config import Settings
from main import create_app

BIHAR = {
    "districts": [
        {
            "district": "Patna",
            "subDistricts": [
                {"subDistrict": "Patna Sadar", "villages": ["Danapur", "Digha"]},
                {"subDistrict": "Phulwari", "villages": ["Gonpura"]},
            ],
        },
        {
            "district": "Gaya",
            "subDistricts": [
                {"subDistrict": "Bodh Gaya", "villages": ["Bakraur", "Patnahi"]},
            ],
        },
    ]
}

# two districts share the name "Central"
X_STATE = {
    "districts": [
        {
            "district": "Central",
            "subDistricts": [
                {"subDistrict": "First Block", "villages": ["Alpha"]},
                {"subDistrict": "Twin", "villages": ["One"]},
                {"subDistrict": "Twin", "villages": ["Two"]},
            ],
        },
        {
            "district": "Central",
            "subDistricts": [
                {"subDistrict": "Second Block", "villages": ["Beta"]},
            ],
        },
    ]
}


def write_state(directory, name, payload):
    path = directory / f"{name}.json"
    if isinstance(payload, str):
        path.write_text(payload, encoding="utf-8")
    else:
        path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def catalog():
    return build_catalog([("Bihar", BIHAR), ("X", X_STATE)])


@pytest.fixture
def client(catalog):
    app = create_app(settings=Settings(), catalog=catalog)
    return TestClient(app)
