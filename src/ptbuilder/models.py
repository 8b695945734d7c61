"""
PTBuilder Data Models - Topology Entities, Snapshot and Errors

PURPOSE:
    Defines the value objects making up a topology draft (devices, modules,
    links, PC IP configurations, IOS configurations), the immutable snapshot
    handed to the validator and generator, and the exception hierarchy.

WHO READS ME:
    - store.py: creates entities and snapshots
    - validate.py, generate.py, summary.py: consume snapshots
    - catalog.py, session.py, main.py: raise or handle PtBuilderError

WHO I READ:
    - None (leaf module, no internal dependencies)

DEPENDENCIES:
    - dataclasses: @dataclass decorator

KEY EXPORTS:
    - PtBuilderError: Base exception class for all ptbuilder errors
    - ShapeError: malformed argument at an append or listing boundary
    - CatalogError: catalog asset missing or malformed
    - DraftError: topology draft file unreadable
    - Device, Module, Link, PcIpConfig, IosConfig: topology entities
    - TopologySnapshot: read-only view of all five collections

DATA MODELS:

    Device:
        - name: str (unique key, checked by the validator)
        - model: str (device catalog key)
        - x, y: int | float (layout coordinates in the workspace)

    Module:
        - device_name: str (reference to a device)
        - slot: int (>= 0)
        - model: str (module catalog key)

    Link:
        - device1_name, device1_interface: str
        - device2_name, device2_interface: str
        - link_type: str (link catalog key)

    PcIpConfig:
        - device_name: str
        - dhcp_enabled: bool | None
        - ip_address, subnet_mask, default_gateway, dns_server: str | None

    IosConfig:
        - device_name: str
        - commands: str (newline-delimited, passed through verbatim)

    None always means "not supplied"; entities never carry string sentinels.
"""

from dataclasses import dataclass


class PtBuilderError(Exception):
    """Base class for all errors raised by ptbuilder"""


class ShapeError(PtBuilderError):
    """an argument has the wrong type or range, nothing was changed"""


class CatalogError(PtBuilderError):
    """the catalog could not be loaded"""


class DraftError(PtBuilderError):
    """a topology draft file could not be read"""


@dataclass(frozen=True)
class Device:
    """a device placed in the workspace"""

    name: str
    model: str
    x: int | float
    y: int | float


@dataclass(frozen=True)
class Module:
    """a module inserted into a slot of a device"""

    device_name: str
    slot: int
    model: str


@dataclass(frozen=True)
class Link:
    """a cable between two device interfaces"""

    device1_name: str
    device1_interface: str
    device2_name: str
    device2_interface: str
    link_type: str

    @property
    def endpoints(self) -> frozenset[tuple[str, str]]:
        """both (device, interface) ends, direction does not matter"""
        return frozenset(
            (
                (self.device1_name, self.device1_interface),
                (self.device2_name, self.device2_interface),
            )
        )

    def describe(self) -> str:
        return (
            f"{self.device1_name}:{self.device1_interface} <-> "
            f"{self.device2_name}:{self.device2_interface}"
        )


@dataclass(frozen=True)
class PcIpConfig:
    """IP settings for an end device, unset fields stay None"""

    device_name: str
    dhcp_enabled: bool | None = None
    ip_address: str | None = None
    subnet_mask: str | None = None
    default_gateway: str | None = None
    dns_server: str | None = None

    @property
    def has_static_fields(self) -> bool:
        return any(
            value is not None
            for value in (self.ip_address, self.subnet_mask, self.default_gateway)
        )


@dataclass(frozen=True)
class IosConfig:
    """IOS commands to run on a device, one command per line"""

    device_name: str
    commands: str


@dataclass(frozen=True)
class TopologySnapshot:
    """a read-only view of the store at one instant"""

    devices: tuple[Device, ...] = ()
    modules: tuple[Module, ...] = ()
    links: tuple[Link, ...] = ()
    pc_ip_configs: tuple[PcIpConfig, ...] = ()
    ios_configs: tuple[IosConfig, ...] = ()

    @property
    def device_names(self) -> set[str]:
        return {device.name for device in self.devices}

    def is_empty(self) -> bool:
        return not (
            self.devices
            or self.modules
            or self.links
            or self.pc_ip_configs
            or self.ios_configs
        )
