import pytest

from ptbuilder.config import Config
from ptbuilder.generate import EMPTY_TOPOLOGY
from ptbuilder.models import ShapeError
from ptbuilder.session import BuilderSession, as_structured


def build_lab(session):
    session.add_device("R1", "2811", 0, 0)
    session.add_device("PC1", "PC-PT", 100, 0)
    session.add_link("R1", "FastEthernet0/0", "PC1", "FastEthernet0", "Copper Cross-Over")
    session.configure_pc_ip("PC1", ip_address="10.0.0.2", subnet_mask="255.255.255.0")


def test_add_returns_summary(session):
    summary = session.add_device("R1", "2811", 0, 0)
    assert summary.counts["devices"] == 1
    assert summary.device_names == ["R1"]


def test_summary_structure(session):
    build_lab(session)
    assert as_structured(session.summarize()) == {
        "counts": {
            "devices": 2,
            "modules": 0,
            "links": 1,
            "pcIpConfigs": 1,
            "iosConfigs": 0,
        },
        "deviceNames": ["R1", "PC1"],
    }


def test_reset(session):
    build_lab(session)
    summary = session.reset()
    assert set(summary.counts.values()) == {0}
    assert summary.device_names == []


def test_shape_error_leaves_store_unchanged(session):
    session.add_device("R1", "2811", 0, 0)
    with pytest.raises(ShapeError):
        session.add_module("R1", -1, "HWIC-2T")
    assert session.summarize().counts["modules"] == 0


def test_validate_report(session):
    build_lab(session)
    report = session.validate()
    assert report.valid
    assert report.errors == []
    assert report.text == "Topology is valid."

    session.add_link("R1", "Fa0/1", "R2", "Fa0/1", "Copper Straight-Through")
    report = session.validate()
    assert not report.valid
    assert report.text == "Topology has 1 validation error(s)."
    assert as_structured(report) == {
        "valid": False,
        "errors": ["Link R1:Fa0/1 <-> R2:Fa0/1 references missing device 'R2'."],
        "counts": {
            "devices": 2,
            "modules": 0,
            "links": 2,
            "pcIpConfigs": 1,
            "iosConfigs": 0,
        },
        "deviceNames": ["R1", "PC1"],
    }


def test_generate_on_empty_store(session):
    result = session.generate(True)
    assert result.ok
    assert result.statements == [EMPTY_TOPOLOGY]
    assert result.script == EMPTY_TOPOLOGY


def test_generate_blocked_by_validation(session):
    session.add_device("R1", "2811", 0, 0)
    session.add_device("R1", "2811", 10, 10)
    result = session.generate(with_validation=True)
    assert not result.ok
    assert result.text == "Validation failed:\n- Duplicate device name 'R1' (device #2)."
    assert as_structured(result) == {
        "valid": False,
        "errors": ["Duplicate device name 'R1' (device #2)."],
    }


def test_generated_script_structure(session):
    session.add_device("R1", "2811", 0, 0)
    session.configure_ios_device("R1", "hostname R1")
    assert as_structured(session.generate(with_validation=True)) == {
        "script": 'addDevice("R1", "2811", 0, 0);\nconfigureIosDevice("R1", "hostname R1");',
        "statements": [
            'addDevice("R1", "2811", 0, 0);',
            'configureIosDevice("R1", "hostname R1");',
        ],
        "counts": {
            "devices": 1,
            "modules": 0,
            "links": 0,
            "pcIpConfigs": 0,
            "iosConfigs": 1,
        },
        "deviceNames": ["R1"],
    }


def test_generate_without_validation(session):
    session.add_device("R1", "2811", 0, 0)
    session.add_device("R1", "2811", 10, 10)
    result = session.generate(with_validation=False)
    assert result.ok
    assert result.script == (
        'addDevice("R1", "2811", 0, 0);\naddDevice("R1", "2811", 10, 10);'
    )
    assert as_structured(result)["deviceNames"] == ["R1", "R1"]


def test_generate_does_not_change_store(session):
    build_lab(session)
    before = session.store.snapshot()
    session.validate()
    session.generate()
    assert session.store.snapshot() == before


def test_rules_come_from_config(catalog):
    session = BuilderSession(catalog, Config(module_slot_collisions=True))
    session.add_device("R1", "2811", 0, 0)
    session.add_module("R1", 0, "HWIC-2T")
    session.add_module("R1", 0, "HWIC-2T")
    assert len(session.validate().errors) == 1


def test_list_catalog(session):
    listing = session.list_catalog("links", starts_with="copper")
    assert listing.entries == ["Copper Cross-Over", "Copper Straight-Through"]
    assert as_structured(listing) == {
        "kind": "links",
        "totalKnown": 3,
        "returned": 2,
        "entries": ["Copper Cross-Over", "Copper Straight-Through"],
    }


def test_list_catalog_default_limit_from_config(catalog):
    session = BuilderSession(catalog, Config(list_limit=1))
    assert session.list_catalog("devices").returned == 1
    assert session.list_catalog("devices", limit=3).returned == 3


def test_list_catalog_rejects_bad_kind(session):
    with pytest.raises(ShapeError):
        session.list_catalog("cables")


def test_sessions_are_isolated(catalog):
    first = BuilderSession(catalog)
    second = BuilderSession(catalog)
    first.add_device("R1", "2811", 0, 0)
    assert second.summarize().device_names == []
