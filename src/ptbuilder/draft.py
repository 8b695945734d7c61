"""
PTBuilder Draft Files - Replay a TOML Topology Description

PURPOSE:
    Lets the CLI build a topology from a file instead of tool calls. Every
    entry goes through the same session operation a remote caller would
    use, so the shape checks and the resulting order are identical.

WHO READS ME:
    - main.py: load_draft() for the positional draft argument

WHO I READ:
    - session.py: BuilderSession add_* / configure_* methods
    - models.py: DraftError, ShapeError

DEPENDENCIES:
    - serde.toml: from_toml() into plain dicts, checked section by section

FILE FORMAT:
    ```toml
    [[devices]]
    name = "R1"
    model = "2811"
    x = 100
    y = 100

    [[modules]]
    device_name = "R1"
    slot = 0
    model = "HWIC-2T"

    [[links]]
    device1_name = "R1"
    device1_interface = "FastEthernet0/0"
    device2_name = "S1"
    device2_interface = "FastEthernet0/1"
    link_type = "Copper Straight-Through"

    [[pc_ip_configs]]
    device_name = "PC1"
    dhcp_enabled = true

    [[ios_configs]]
    device_name = "R1"
    commands = '''
    hostname R1
    no ip domain-lookup'''
    ```

    Tables are replayed in file order per section; sections are replayed in
    the order devices, modules, links, pc_ip_configs, ios_configs, which is
    also the order the generator emits them in.
"""

import logging
from typing import Any

from serde import SerdeError
from serde.toml import from_toml

from ptbuilder.models import DraftError, ShapeError
from ptbuilder.session import BuilderSession

_LOGGER = logging.getLogger(__name__)

# section name -> session method name
SECTIONS = {
    "devices": "add_device",
    "modules": "add_module",
    "links": "add_link",
    "pc_ip_configs": "configure_pc_ip",
    "ios_configs": "configure_ios_device",
}


def parse_draft(text: str) -> dict[str, list[dict[str, Any]]]:
    """parse the draft text, return the entries of each known section"""
    try:
        data = from_toml(dict[str, Any], text)
    except (TypeError, ValueError, SerdeError) as exc:
        raise DraftError(f"malformed draft: {exc}") from exc

    unknown = sorted(set(data) - set(SECTIONS))
    if unknown:
        raise DraftError(f"unknown draft section(s): {', '.join(unknown)}")

    sections = {}
    for section in SECTIONS:
        entries = data.get(section, [])
        if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
            raise DraftError(f"[[{section}]] must be an array of tables")
        sections[section] = entries
    return sections


def apply_draft(session: BuilderSession, sections: dict[str, list[dict[str, Any]]]) -> int:
    """replay parsed draft entries into the session, returns the entry count"""
    count = 0
    for section, method in SECTIONS.items():
        operation = getattr(session, method)
        for number, entry in enumerate(sections.get(section, []), start=1):
            try:
                operation(**entry)
            except TypeError as exc:
                raise DraftError(f"{section} entry #{number}: {exc}") from exc
            except ShapeError as exc:
                raise DraftError(f"{section} entry #{number}: {exc}") from exc
            count += 1
    return count


def load_draft(session: BuilderSession, filename: str) -> int:
    """read a draft file into the session"""
    try:
        with open(filename, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise DraftError(f"cannot read draft {filename}: {exc}") from exc
    count = apply_draft(session, parse_draft(text))
    _LOGGER.info("Draft %s: %d entries replayed", filename, count)
    return count
