"""Nested component; not picked up when scanning examples/components."""

default = {"name": "Input"}
