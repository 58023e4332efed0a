"""
Shared test fixtures and configuration.
"""

import textwrap

import pytest

from cqrs_scaffold.adapters.memory import MemoryFileTree


USERS_MODULE = textwrap.dedent("""\
    import { Module } from '@nestjs/common';
    import { CqrsModule } from '@nestjs/cqrs';
    import { UsersController } from './users.controller';

    @Module({
      imports: [CqrsModule],
      controllers: [UsersController],
      providers: [
        ExistingHandler,
      ],
    })
    export class UsersModule {}
""")


@pytest.fixture
def users_module() -> str:
    """A typical module file with one registered provider."""
    return USERS_MODULE


@pytest.fixture
def tree() -> MemoryFileTree:
    """An in-memory tree with src/users/users.module.ts."""
    return MemoryFileTree({"src/users/users.module.ts": USERS_MODULE})


@pytest.fixture
def empty_tree() -> MemoryFileTree:
    return MemoryFileTree()
