"""
PTBuilder Session - Operations Exposed to the Tool Transport

PURPOSE:
    One object per editing session tying a TopologyStore, the Catalog and
    the Config together. Each public method corresponds to one remote tool
    (reset, add device/module/link, PC and IOS configuration, validate,
    generate, catalog listing, summary) and returns plain data; results are
    serde-serializable with camelCase keys for the transport to forward.

WHO READS ME:
    - main.py: drives a session from a draft file
    - draft.py: replays draft entries through the add_* methods

WHO I READ:
    - store.py, validate.py, generate.py, summary.py, catalog.py, config.py

ERRORS:
    - ShapeError from add_* and list_catalog for malformed arguments
    - validation problems are returned as data, never raised
"""

import logging
from dataclasses import dataclass, field

from serde import serialize, to_dict

from ptbuilder.catalog import Catalog, CatalogListing
from ptbuilder.config import Config
from ptbuilder.generate import generate_statements
from ptbuilder.store import TopologyStore
from ptbuilder.summary import TopologySummary, summarize
from ptbuilder.validate import validate_topology

_LOGGER = logging.getLogger(__name__)


@serialize(rename_all="camelcase")
@dataclass
class ValidationReport:
    """validation outcome next to the summary counts and device names"""

    valid: bool
    errors: list[str]
    counts: dict[str, int] = field(default_factory=dict)
    device_names: list[str] = field(default_factory=list)

    @classmethod
    def build(cls, errors: list[str], summary: TopologySummary) -> "ValidationReport":
        return cls(
            valid=not errors,
            errors=errors,
            counts=summary.counts,
            device_names=summary.device_names,
        )

    @property
    def text(self) -> str:
        if self.valid:
            return "Topology is valid."
        return f"Topology has {len(self.errors)} validation error(s)."


@serialize(rename_all="camelcase")
@dataclass
class GeneratedScript:
    """the builder script and the summary of the draft it came from"""

    script: str
    statements: list[str]
    counts: dict[str, int] = field(default_factory=dict)
    device_names: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return self.script


@serialize(rename_all="camelcase")
@dataclass
class GenerateRefused:
    """validation was requested and failed, nothing was generated"""

    errors: list[str]
    valid: bool = False

    @property
    def ok(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return "Validation failed:\n- " + "\n- ".join(self.errors)


GenerateResult = GeneratedScript | GenerateRefused


class BuilderSession:
    """the tool operations of one topology draft"""

    def __init__(
        self,
        catalog: Catalog,
        config: Config | None = None,
        store: TopologyStore | None = None,
    ):
        self.catalog = catalog
        self.config = config or Config()
        self.store = store if store is not None else TopologyStore()

    def summarize(self) -> TopologySummary:
        return summarize(self.store.snapshot())

    def reset(self) -> TopologySummary:
        self.store.reset()
        _LOGGER.info("Topology draft reset.")
        return self.summarize()

    def add_device(self, name, model, x, y) -> TopologySummary:
        self.store.append_device(name, model, x, y)
        _LOGGER.info("Added device '%s' (%s) at (%s, %s).", name, model, x, y)
        return self.summarize()

    def add_module(self, device_name, slot, model) -> TopologySummary:
        self.store.append_module(device_name, slot, model)
        _LOGGER.info("Queued module %s for %s slot %s.", model, device_name, slot)
        return self.summarize()

    def add_link(
        self, device1_name, device1_interface, device2_name, device2_interface, link_type
    ) -> TopologySummary:
        link = self.store.append_link(
            device1_name, device1_interface, device2_name, device2_interface, link_type
        )
        _LOGGER.info("Queued link %s.", link.describe())
        return self.summarize()

    def configure_pc_ip(
        self,
        device_name,
        dhcp_enabled=None,
        ip_address=None,
        subnet_mask=None,
        default_gateway=None,
        dns_server=None,
    ) -> TopologySummary:
        self.store.append_pc_ip_config(
            device_name,
            dhcp_enabled=dhcp_enabled,
            ip_address=ip_address,
            subnet_mask=subnet_mask,
            default_gateway=default_gateway,
            dns_server=dns_server,
        )
        _LOGGER.info("Queued PC IP config for %s.", device_name)
        return self.summarize()

    def configure_ios_device(self, device_name, commands) -> TopologySummary:
        self.store.append_ios_config(device_name, commands)
        _LOGGER.info("Queued IOS config for %s.", device_name)
        return self.summarize()

    def validate(self) -> ValidationReport:
        snapshot = self.store.snapshot()
        errors = validate_topology(snapshot, self.catalog, self.config.rules())
        report = ValidationReport.build(errors, summarize(snapshot))
        if errors:
            _LOGGER.warning(report.text)
        else:
            _LOGGER.info(report.text)
        return report

    def generate(self, with_validation: bool = True) -> GenerateResult:
        """generate the builder statements, optionally refusing an invalid draft"""
        snapshot = self.store.snapshot()
        if with_validation:
            errors = validate_topology(snapshot, self.catalog, self.config.rules())
            if errors:
                _LOGGER.warning("Validation failed with %d error(s)", len(errors))
                return GenerateRefused(errors=errors)
        statements = generate_statements(snapshot)
        summary = summarize(snapshot)
        _LOGGER.info("Generated %d statement(s)", len(statements))
        return GeneratedScript(
            script="\n".join(statements),
            statements=statements,
            counts=summary.counts,
            device_names=summary.device_names,
        )

    def list_catalog(self, kind, limit: int | None = None, starts_with: str = "") -> CatalogListing:
        if limit is None:
            limit = self.config.list_limit
        listing = self.catalog.listing(kind, limit=limit, starts_with=starts_with)
        _LOGGER.info("%s: %d item(s)", listing.kind, listing.returned)
        return listing


def as_structured(result) -> dict:
    """the camelCase dictionary a transport sends back for a result"""
    return to_dict(result)
