import json
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temp file and return its path."""

    def _write(data, name="input.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def jon_snow():
    return {
        "individuals": {
            "I1": {
                "id": "I1",
                "name": "Jon Snow",
                "sex": "M",
                "events": {"birth": {"date": "1 JAN 1990", "place": "Winterfell"}},
                "families_as_spouse": ["F1"],
            }
        },
        "families": {
            "F1": {"id": "F1", "husband": "I1", "wife": "I2", "children": ["I3"]}
        },
    }
