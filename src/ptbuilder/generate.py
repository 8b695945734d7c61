"""
PTBuilder Generator - Builder Script Statement Rendering

PURPOSE:
    Turns a topology snapshot into the statements the Packet Tracer Builder
    runs, one call per entity:

        addDevice(name, model, x, y);
        addModule(deviceName, slot, model);
        addLink(device1Name, device1Interface, device2Name, device2Interface, linkType);
        configurePcIp(deviceName, dhcpEnabled, ipAddress, subnetMask, defaultGateway, dnsServer);
        configureIosDevice(deviceName, commands);

    Statements come out grouped by category in the order above, each group
    in insertion order. The generator neither validates nor consults the
    catalog, it writes whatever the snapshot holds.

WHO READS ME:
    - session.py: generate()

WHO I READ:
    - models.py: TopologySnapshot

DEPENDENCIES:
    - jinja2: statement template with a custom "literal" filter
    - json: literal encoding of strings and numbers

LITERALS:
    - str, int, float: strict JSON (non-ASCII characters are kept as is)
    - bool: true / false
    - None (optional value not supplied): the bare token undefined
"""

import json
from typing import Any

from jinja2 import BaseLoader, Environment

from ptbuilder.models import TopologySnapshot

EMPTY_TOPOLOGY = "// Topology is empty."

STATEMENT = "{{ call }}({{ args | map('literal') | join(', ') }});"

# (call name, snapshot collection, positional fields)
CALLS = (
    ("addDevice", "devices", ("name", "model", "x", "y")),
    ("addModule", "modules", ("device_name", "slot", "model")),
    (
        "addLink",
        "links",
        (
            "device1_name",
            "device1_interface",
            "device2_name",
            "device2_interface",
            "link_type",
        ),
    ),
    (
        "configurePcIp",
        "pc_ip_configs",
        (
            "device_name",
            "dhcp_enabled",
            "ip_address",
            "subnet_mask",
            "default_gateway",
            "dns_server",
        ),
    ),
    ("configureIosDevice", "ios_configs", ("device_name", "commands")),
)


def encode_literal(value: Any) -> str:
    """encode a single argument as a script literal"""
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    return json.dumps(value, ensure_ascii=False, allow_nan=False)


def _environment() -> Environment:
    env = Environment(loader=BaseLoader(), autoescape=False)
    env.filters["literal"] = encode_literal
    return env


_TEMPLATE = _environment().from_string(STATEMENT)


def render_statement(call: str, args) -> str:
    return _TEMPLATE.render(call=call, args=list(args))


def generate_statements(snapshot: TopologySnapshot) -> list[str]:
    """all statements for the snapshot, or the empty topology marker"""
    statements = [
        render_statement(call, (getattr(entity, name) for name in fields))
        for call, collection, fields in CALLS
        for entity in getattr(snapshot, collection)
    ]
    return statements or [EMPTY_TOPOLOGY]


def render_script(snapshot: TopologySnapshot) -> str:
    return "\n".join(generate_statements(snapshot))
