"""Composition root: build the component registry once and hand it out."""

from __future__ import annotations

import logging
from pathlib import Path

from autocomponents import Config, Registry

HERE = Path(__file__).resolve().parent


def build_registry() -> Registry:
    config = Config.from_file(HERE / "autocomponents.yaml")
    registry = Registry(config=config, root=HERE / "components")
    registry.discover()
    return registry


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    registry = build_registry()
    for name in registry.names:
        print(f"{name}: {registry.get(name)!r}")
