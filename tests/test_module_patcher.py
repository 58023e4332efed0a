"""
Tests for the module patcher — import insertion and provider registration.

Pure unit tests: module file text in → module file text out.
"""

import textwrap

import pytest

from cqrs_scaffold.core.services.module_patcher import (
    ProvidersNotFoundError,
    add_import_statement,
    add_provider_entry,
    has_providers_array,
    is_imported,
    is_registered,
    patch_module_content,
)

IMPORT = "import { CreateUserHandler } from './commands/handlers/create-user.handler';"


def _is_subsequence(original: list[str], patched: list[str]) -> bool:
    it = iter(patched)
    return all(line in it for line in original)


# ═══════════════════════════════════════════════════════════════════
#  add_import_statement
# ═══════════════════════════════════════════════════════════════════


class TestAddImportStatement:
    def test_after_last_import(self, users_module):
        out = add_import_statement(users_module, IMPORT)
        lines = out.splitlines()
        idx = lines.index(IMPORT)
        assert lines[idx - 1] == "import { UsersController } from './users.controller';"
        assert lines[idx + 1] == ""

    def test_no_imports_prepends(self):
        content = "@Module({ providers: [] })\nexport class AppModule {}\n"
        out = add_import_statement(content, IMPORT)
        assert out == f"{IMPORT}\n{content}"

    def test_multiline_import_respected(self):
        content = textwrap.dedent("""\
            import { Module } from '@nestjs/common';
            import {
              A,
              B,
            } from './things';

            @Module({ providers: [] })
        """)
        out = add_import_statement(content, IMPORT)
        lines = out.splitlines()
        assert lines[lines.index(IMPORT) - 1] == "} from './things';"

    def test_double_quotes_and_no_semicolon(self):
        content = 'import { Module } from "@nestjs/common"\n\nconst x = 1;\n'
        out = add_import_statement(content, IMPORT)
        assert out == f'import {{ Module }} from "@nestjs/common"\n{IMPORT}\n\nconst x = 1;\n'

    def test_side_effect_import_not_anchor(self):
        content = "import 'reflect-metadata';\nimport { A } from './a';\nconst x = 1;\n"
        out = add_import_statement(content, IMPORT)
        assert out.splitlines()[2] == IMPORT

    def test_trailing_comment_stays_on_its_line(self):
        last = "import { Module } from '@nestjs/common'; // eslint-disable-line"
        content = f"{last}\n\n@Module({{ providers: [] }})\n"
        out = add_import_statement(content, IMPORT)
        lines = out.splitlines()
        assert lines[0] == last
        assert lines[1] == IMPORT
        assert out == f"{last}\n{IMPORT}\n\n@Module({{ providers: [] }})\n"

    def test_last_import_without_newline(self):
        content = "import { Module } from '@nestjs/common'; // keep"
        out = add_import_statement(content, IMPORT)
        assert out == f"{content}\n{IMPORT}"

    def test_existing_statement_noop(self, users_module):
        once = add_import_statement(users_module, IMPORT)
        assert add_import_statement(once, IMPORT) == once

    def test_symbol_already_imported_noop(self, users_module):
        content = users_module.replace(
            "import { UsersController } from './users.controller';",
            "import { UsersController } from './users.controller';\n"
            "import { CreateUserHandler } from './elsewhere';",
        )
        assert add_import_statement(content, IMPORT, symbol="CreateUserHandler") == content

    def test_similar_symbol_not_confused(self):
        content = "import { CreateUserHandlerV2 } from './v2';\n"
        assert not is_imported(content, "CreateUserHandler")
        out = add_import_statement(content, IMPORT, symbol="CreateUserHandler")
        assert IMPORT in out


# ═══════════════════════════════════════════════════════════════════
#  add_provider_entry
# ═══════════════════════════════════════════════════════════════════


class TestAddProviderEntry:
    def test_appends_on_own_line(self, users_module):
        out = add_provider_entry(users_module, "CreateUserHandler")
        assert "  providers: [\n    ExistingHandler,\n    CreateUserHandler,\n  ],\n" in out

    def test_missing_trailing_comma(self):
        content = "  providers: [\n    A,\n    B\n  ],\n"
        out = add_provider_entry(content, "C")
        assert out == "  providers: [\n    A,\n    B,\n    C,\n  ],\n"
        assert ",," not in out

    def test_existing_trailing_comma_not_doubled(self):
        content = "  providers: [\n    A,\n  ],\n"
        out = add_provider_entry(content, "C")
        assert out.count(",") == content.count(",") + 1
        assert ",," not in out

    def test_empty_array(self):
        content = "@Module({\n  providers: [],\n})\n"
        out = add_provider_entry(content, "C")
        assert out == "@Module({\n  providers: [\n    C,\n  ],\n})\n"

    def test_inline_array(self):
        content = "@Module({\n  providers: [A, B],\n})\n"
        out = add_provider_entry(content, "C")
        assert out == "@Module({\n  providers: [A, B,\n    C,\n  ],\n})\n"

    def test_keeps_entry_indentation(self):
        content = "@Module({\n\tproviders: [\n\t\tA\n\t],\n})\n"
        out = add_provider_entry(content, "C")
        assert out == "@Module({\n\tproviders: [\n\t\tA,\n\t\tC,\n\t],\n})\n"

    def test_already_registered_noop(self, users_module):
        assert add_provider_entry(users_module, "ExistingHandler") == users_module

    def test_word_match_only(self):
        content = "providers: [\n    FooBarHandler,\n]"
        out = add_provider_entry(content, "BarHandler")
        assert "    BarHandler," in out.splitlines()

    def test_only_first_array_touched(self):
        content = "a = { providers: [A] };\nb = { providers: [B] };\n"
        out = add_provider_entry(content, "C")
        assert out.endswith("b = { providers: [B] };\n")
        assert is_registered(out, "C")

    def test_spaced_colon(self):
        content = "providers : [\n  A,\n]"
        assert add_provider_entry(content, "C") == "providers : [\n  A,\n  C,\n]"

    def test_no_array_raises(self):
        with pytest.raises(ProvidersNotFoundError):
            add_provider_entry("export class AppModule {}\n", "C")


# ═══════════════════════════════════════════════════════════════════
#  patch_module_content
# ═══════════════════════════════════════════════════════════════════


class TestPatchModuleContent:
    def test_adds_import_and_provider(self, users_module):
        result = patch_module_content(
            users_module, "CreateUserHandler", "./commands/handlers/create-user.handler"
        )
        assert result.import_added and result.provider_added and result.changed
        assert result.content.count(IMPORT) == 1
        assert result.content.count("    CreateUserHandler,") == 1

    def test_idempotent(self, users_module):
        """Patching twice is the same as patching once."""
        once = patch_module_content(users_module, "CreateUserHandler", "./x.handler")
        twice = patch_module_content(once.content, "CreateUserHandler", "./x.handler")
        assert twice.content == once.content
        assert not twice.changed

    def test_non_destructive(self, users_module):
        """Every original line survives, in order."""
        result = patch_module_content(users_module, "CreateUserHandler", "./x.handler")
        assert _is_subsequence(users_module.splitlines(), result.content.splitlines())
        assert len(result.content.splitlines()) == len(users_module.splitlines()) + 2

    def test_comma_inserted_once(self):
        content = textwrap.dedent("""\
            import { Module } from '@nestjs/common';

            @Module({
              providers: [
                FirstHandler
              ],
            })
            export class UsersModule {}
        """)
        result = patch_module_content(content, "CreateUserHandler", "./x.handler")
        assert "    FirstHandler,\n    CreateUserHandler,\n  ],\n" in result.content
        assert result.content.count(",") == content.count(",") + 2
        assert ",," not in result.content

    def test_already_registered_byte_identical(self, users_module):
        content = patch_module_content(users_module, "CreateUserHandler", "./x.handler").content
        again = patch_module_content(content, "CreateUserHandler", "./x.handler")
        assert again.content == content

    def test_registered_but_not_imported(self):
        content = "import { Module } from '@nestjs/common';\nproviders: [\n  CreateUserHandler,\n]"
        result = patch_module_content(content, "CreateUserHandler", "./x.handler")
        assert not result.changed
        assert result.content == content

    def test_namespace_registration_untouched(self):
        content = (
            "import { Module } from '@nestjs/common';\n"
            "import * as handlers from './commands/handlers';\n"
            "\n"
            "@Module({\n"
            "  providers: [handlers.CreateUserHandler],\n"
            "})\n"
        )
        result = patch_module_content(content, "CreateUserHandler", "./x.handler")
        assert not result.changed
        assert result.content == content

    def test_imported_but_not_registered(self):
        content = (
            "import { CreateUserHandler } from './x.handler';\n"
            "providers: [\n  A,\n]"
        )
        result = patch_module_content(content, "CreateUserHandler", "./x.handler")
        assert not result.import_added
        assert result.provider_added
        assert result.content.count("import { CreateUserHandler }") == 1

    def test_no_providers_raises_before_change(self):
        content = "import { Module } from '@nestjs/common';\nexport class AppModule {}\n"
        assert not has_providers_array(content)
        with pytest.raises(ProvidersNotFoundError):
            patch_module_content(content, "CreateUserHandler", "./x.handler")
