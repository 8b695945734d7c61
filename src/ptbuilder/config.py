"""
PTBuilder Configuration - Configuration Loading and Defaults Management

PURPOSE:
    Manages configuration loading from TOML files and provides defaults for
    the catalog location, catalog listings and the optional validation rules.

WHO READS ME:
    - main.py: Loads configuration via Config.load() during bootstrap
    - session.py: Uses Config for listing limits and validation rules

WHO I READ:
    - validate.py: ValidationRules

DEPENDENCIES:
    - serde: TOML serialization/deserialization (@deserialize, @serialize)
    - serde.toml: from_toml(), to_toml()
    - logging: Configuration loading status messages

KEY EXPORTS:
    - Config: Dataclass containing all configuration parameters

CONFIG PARAMETERS:
    - catalog: catalog TOML file, empty uses the packaged catalog
    - list_limit: default number of catalog entries listed (1-500, default 200)
    - duplicate_links: report links repeating an earlier link's endpoints
    - module_slot_collisions: report a second module in an occupied slot
    - dhcp_static_exclusive: report DHCP combined with static addressing

METHODS:
    - load(filename): Load configuration from TOML file, fall back to defaults
    - save(filename): Save current configuration to TOML file
    - rules(): the ValidationRules selected by this configuration

FILE FORMAT:
    config.toml example:
    ```toml
    catalog = ""
    list_limit = 200
    duplicate_links = false
    module_slot_collisions = false
    dhcp_static_exclusive = false
    ```
"""

import logging
from dataclasses import dataclass

from serde import deserialize, serialize, SerdeError
from serde.toml import from_toml, to_toml

from ptbuilder.validate import ValidationRules

_LOGGER = logging.getLogger(__name__)


@deserialize
@serialize
@dataclass
class Config:
    """builder configuration"""

    catalog: str = ""
    list_limit: int = 200
    duplicate_links: bool = False
    module_slot_collisions: bool = False
    dhcp_static_exclusive: bool = False

    @classmethod
    def load(cls, filename: str) -> "Config":
        """load the configuration from the given file"""
        try:
            with open(filename, encoding="utf-8") as handle:
                cfg = from_toml(cls, handle.read())
            _LOGGER.info("Configuration loaded from file %s", filename)
        except (FileNotFoundError, TypeError, ValueError, SerdeError) as exc:
            if not isinstance(exc, FileNotFoundError):
                _LOGGER.error(exc)
            cfg = cls()
            _LOGGER.warning("using configuration defaults")
        return cfg

    def save(self, filename: str):
        """save the configuration to the given file"""
        with open(filename, "w+", encoding="utf-8") as handle:
            handle.write(to_toml(self))

    def rules(self) -> ValidationRules:
        return ValidationRules(
            duplicate_links=self.duplicate_links,
            module_slot_collisions=self.module_slot_collisions,
            dhcp_static_exclusive=self.dhcp_static_exclusive,
        )
