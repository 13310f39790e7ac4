from __future__ import annotations

import pytest

from i18n.i18n import initialize_i18n


@pytest.fixture(autouse=True, scope="session")
def english_translations() -> None:
    initialize_i18n("en")
