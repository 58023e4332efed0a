"""cqrs-scaffold — NestJS CQRS command/query generator."""

__version__ = "0.1.0"
