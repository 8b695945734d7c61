"""
PTBuilder - Packet Tracer Builder Script Generator

Package initialization. Loads package metadata (__version__,
__description__) and exports the public API.

Package Structure:
    - models.py: topology entities, snapshot and errors
    - store.py: the topology draft store
    - catalog.py: device/module/link reference data (data/catalog.toml)
    - validate.py: cross-reference and catalog validation
    - generate.py: Builder statement generation
    - summary.py: counts and device names of a draft
    - session.py: the tool operations of one editing session
    - draft.py: TOML draft files for the CLI
    - config.py: configuration management
    - colorlog.py: colored log output formatter
    - main.py: CLI entry point and argument parsing

Entry Points:
    - ptbuilder: CLI command (calls main.main())
    - python -m ptbuilder
"""

import importlib.metadata as importlib_metadata

from .config import Config
from .catalog import Catalog
from .session import BuilderSession
from .store import TopologyStore
from .main import main

_metadata = importlib_metadata.metadata("ptbuilder")
__version__ = _metadata["Version"]
__description__ = _metadata["Summary"]


__all__ = ["BuilderSession", "Catalog", "Config", "TopologyStore", "main"]
