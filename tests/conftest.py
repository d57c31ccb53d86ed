import pytest

from byteflags import Document, DocumentPermissions, Keys, Player


@pytest.fixture
def player() -> Player:
    return Player("Parzival")


@pytest.fixture
def document() -> Document:
    return Document(
        "report.txt",
        DocumentPermissions.LOCKED | DocumentPermissions.ALL_READABLE,
    )


@pytest.fixture(params=[Keys.COPPER, Keys.JADE, Keys.CRYSTAL], ids=str)
def key(request: pytest.FixtureRequest) -> Keys:
    return request.param


@pytest.fixture(params=[0, 1, 2, 3, 4, 5, 6, 7], ids=lambda v: f"keys={v}")
def keys(request: pytest.FixtureRequest) -> Keys:
    return Keys(request.param)
