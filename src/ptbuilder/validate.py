"""
PTBuilder Validator - Cross-Reference and Catalog Checks

PURPOSE:
    Checks a topology snapshot against the catalog and against itself and
    returns human-readable diagnostics. Validation never raises for a bad
    topology and never changes anything; an empty list means valid.

WHO READS ME:
    - session.py: validate() and the gate in generate()

WHO I READ:
    - catalog.py: Catalog.lookup(), CatalogKind
    - models.py: TopologySnapshot and entities

PASS ORDER:
    devices, links, modules, PC IP configs, IOS configs; each collection in
    insertion order. A device reference resolves against every device in the
    snapshot, so a device declared after the link still satisfies it.

OPTIONAL RULES (ValidationRules, all off by default):
    - duplicate_links: same pair of endpoint interfaces as an earlier link
    - module_slot_collisions: same device and slot as an earlier module
    - dhcp_static_exclusive: DHCP enabled together with static addressing
"""

from dataclasses import dataclass

from ptbuilder.catalog import Catalog, CatalogKind
from ptbuilder.models import TopologySnapshot


@dataclass(frozen=True)
class ValidationRules:
    """checks that are not part of the default validation"""

    duplicate_links: bool = False
    module_slot_collisions: bool = False
    dhcp_static_exclusive: bool = False


def _check_devices(snapshot: TopologySnapshot, catalog: Catalog) -> list[str]:
    errors = []
    seen: set[str] = set()
    for index, device in enumerate(snapshot.devices, start=1):
        if device.name in seen:
            errors.append(f"Duplicate device name '{device.name}' (device #{index}).")
        seen.add(device.name)
        if catalog.lookup(CatalogKind.DEVICES, device.model) is None:
            errors.append(
                f"Unknown Packet Tracer model '{device.model}' for device '{device.name}'."
            )
    return errors


def _check_links(
    snapshot: TopologySnapshot, catalog: Catalog, names: set[str], rules: ValidationRules
) -> list[str]:
    errors = []
    seen = set()
    for link in snapshot.links:
        for endpoint in (link.device1_name, link.device2_name):
            if endpoint not in names:
                errors.append(
                    f"Link {link.describe()} references missing device '{endpoint}'."
                )
        if catalog.lookup(CatalogKind.LINKS, link.link_type) is None:
            errors.append(f"Unknown link type '{link.link_type}' for link {link.describe()}.")
        if rules.duplicate_links:
            if link.endpoints in seen:
                errors.append(f"Duplicate link {link.describe()}.")
            seen.add(link.endpoints)
    return errors


def _check_modules(
    snapshot: TopologySnapshot, catalog: Catalog, names: set[str], rules: ValidationRules
) -> list[str]:
    errors = []
    used_slots = set()
    for module in snapshot.modules:
        if module.device_name not in names:
            errors.append(
                f"Module assignment references missing device '{module.device_name}'."
            )
        if catalog.lookup(CatalogKind.MODULES, module.model) is None:
            errors.append(
                f"Unknown module model '{module.model}' for device '{module.device_name}'."
            )
        if rules.module_slot_collisions:
            slot = (module.device_name, module.slot)
            if slot in used_slots:
                errors.append(
                    f"Slot {module.slot} of device '{module.device_name}' is already "
                    f"taken, cannot insert '{module.model}'."
                )
            used_slots.add(slot)
    return errors


def _check_pc_configs(
    snapshot: TopologySnapshot, names: set[str], rules: ValidationRules
) -> list[str]:
    errors = []
    for config in snapshot.pc_ip_configs:
        if config.device_name not in names:
            errors.append(f"PC config references missing device '{config.device_name}'.")
        if rules.dhcp_static_exclusive and config.dhcp_enabled and config.has_static_fields:
            errors.append(
                f"PC config for '{config.device_name}' enables DHCP and sets a static address."
            )
    return errors


def _check_ios_configs(snapshot: TopologySnapshot, names: set[str]) -> list[str]:
    return [
        f"IOS config references missing device '{config.device_name}'."
        for config in snapshot.ios_configs
        if config.device_name not in names
    ]


def validate_topology(
    snapshot: TopologySnapshot, catalog: Catalog, rules: ValidationRules | None = None
) -> list[str]:
    """return the diagnostics for the snapshot, an empty list if it is valid"""
    rules = rules or ValidationRules()
    names = snapshot.device_names
    return (
        _check_devices(snapshot, catalog)
        + _check_links(snapshot, catalog, names, rules)
        + _check_modules(snapshot, catalog, names, rules)
        + _check_pc_configs(snapshot, names, rules)
        + _check_ios_configs(snapshot, names)
    )
