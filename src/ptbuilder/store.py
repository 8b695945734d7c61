"""topology draft store"""

import logging
import math
import threading
from typing import Any

from ptbuilder.models import (
    Device,
    IosConfig,
    Link,
    Module,
    PcIpConfig,
    ShapeError,
    TopologySnapshot,
)

_LOGGER = logging.getLogger(__name__)


def require_string(field: str, value: Any) -> str:
    """a required string argument, must not be empty"""
    if not isinstance(value, str):
        raise ShapeError(f"{field} must be a string, got {type(value).__name__}")
    if not value:
        raise ShapeError(f"{field} must not be empty")
    return value


def optional_string(field: str, value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise ShapeError(f"{field} must be a string, got {type(value).__name__}")


def optional_bool(field: str, value: Any) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    raise ShapeError(f"{field} must be a boolean, got {type(value).__name__}")


def require_number(field: str, value: Any) -> int | float:
    """ints and floats are accepted as given, bool is not a number here"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ShapeError(f"{field} must be a number, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ShapeError(f"{field} must be a finite number, got {value}")
    return value


def require_slot(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ShapeError(f"{field} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ShapeError(f"{field} must not be negative, got {value}")
    return value


class TopologyStore:
    """Holds the five ordered entity sequences of a topology draft.

    Appends only check the shape of their arguments. Whether references
    resolve is up to the validator, so a module for a device that does
    not exist (yet) is accepted here.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self.devices: list[Device] = []
        self.modules: list[Module] = []
        self.links: list[Link] = []
        self.pc_ip_configs: list[PcIpConfig] = []
        self.ios_configs: list[IosConfig] = []

    def reset(self):
        """drop everything"""
        with self._lock:
            self.devices = []
            self.modules = []
            self.links = []
            self.pc_ip_configs = []
            self.ios_configs = []
        _LOGGER.debug("store reset")

    def append_device(self, name, model, x, y) -> Device:
        device = Device(
            name=require_string("name", name),
            model=require_string("model", model),
            x=require_number("x", x),
            y=require_number("y", y),
        )
        with self._lock:
            self.devices.append(device)
        return device

    def append_module(self, device_name, slot, model) -> Module:
        module = Module(
            device_name=require_string("deviceName", device_name),
            slot=require_slot("slot", slot),
            model=require_string("model", model),
        )
        with self._lock:
            self.modules.append(module)
        return module

    def append_link(
        self, device1_name, device1_interface, device2_name, device2_interface, link_type
    ) -> Link:
        link = Link(
            device1_name=require_string("device1Name", device1_name),
            device1_interface=require_string("device1Interface", device1_interface),
            device2_name=require_string("device2Name", device2_name),
            device2_interface=require_string("device2Interface", device2_interface),
            link_type=require_string("linkType", link_type),
        )
        with self._lock:
            self.links.append(link)
        return link

    def append_pc_ip_config(
        self,
        device_name,
        dhcp_enabled=None,
        ip_address=None,
        subnet_mask=None,
        default_gateway=None,
        dns_server=None,
    ) -> PcIpConfig:
        config = PcIpConfig(
            device_name=require_string("deviceName", device_name),
            dhcp_enabled=optional_bool("dhcpEnabled", dhcp_enabled),
            ip_address=optional_string("ipAddress", ip_address),
            subnet_mask=optional_string("subnetMask", subnet_mask),
            default_gateway=optional_string("defaultGateway", default_gateway),
            dns_server=optional_string("dnsServer", dns_server),
        )
        with self._lock:
            self.pc_ip_configs.append(config)
        return config

    def append_ios_config(self, device_name, commands) -> IosConfig:
        config = IosConfig(
            device_name=require_string("deviceName", device_name),
            commands=require_string("commands", commands),
        )
        with self._lock:
            self.ios_configs.append(config)
        return config

    def snapshot(self) -> TopologySnapshot:
        """return an immutable copy of the current collections"""
        with self._lock:
            return TopologySnapshot(
                devices=tuple(self.devices),
                modules=tuple(self.modules),
                links=tuple(self.links),
                pc_ip_configs=tuple(self.pc_ip_configs),
                ios_configs=tuple(self.ios_configs),
            )
