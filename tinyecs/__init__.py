"""A small entity-component-system framework: worlds, systems, entities and components."""

__version__ = "0.1.0"