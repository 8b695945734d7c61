import pytest

from ptbuilder.catalog import Catalog
from ptbuilder.config import Config
from ptbuilder.session import BuilderSession
from ptbuilder.store import TopologyStore


@pytest.fixture
def catalog():
    return Catalog(
        devices={"2811": 0, "2960-24TT": 1, "PC-PT": 8, "Server-PT": 9, "2901": 0},
        modules={"HWIC-2T": 1, "NM-1FE-TX": 3},
        links={"Copper Straight-Through": 8100, "Copper Cross-Over": 8101, "Serial DCE": 8106},
    )


@pytest.fixture
def store():
    return TopologyStore()


@pytest.fixture
def session(catalog):
    return BuilderSession(catalog, Config())
