from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from tests.helpers.statements import PunningScenario, make_punning_scenario

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def punning_scenario() -> PunningScenario:
    return make_punning_scenario()


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str, dict[str, object]], Path]:
    def write(name: str, document: dict[str, object]) -> Path:
        path = tmp_path / f"{name}.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return write
