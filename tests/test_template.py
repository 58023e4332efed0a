"""
Tests for the template renderer and the command/query templates.
"""

import pytest

from cqrs_scaffold.core.services.generators import (
    COMMAND,
    QUERY,
    get_kind,
    supported_kinds,
)
from cqrs_scaffold.core.services.generators.template import render_template


# ═══════════════════════════════════════════════════════════════════
#  render_template
# ═══════════════════════════════════════════════════════════════════


class TestRenderTemplate:
    def test_transforms(self):
        out = render_template(
            "<%= classify(name) %> <%= dasherize(name) %> <%= camelize(name) %>",
            "create user",
        )
        assert out == "CreateUser create-user createUser"

    def test_unknown_transform_left_untouched(self):
        tmpl = "x <%= shout(name) %> y"
        assert render_template(tmpl, "create-user") == tmpl

    def test_transform_of_other_argument_left_untouched(self):
        tmpl = "<%= classify(other) %>"
        assert render_template(tmpl, "create-user") == tmpl

    def test_variables(self):
        out = render_template("from '<%= importPath %>'", "x", importPath="./x.command")
        assert out == "from './x.command'"

    def test_missing_variable_left_untouched(self):
        tmpl = "from '<%= importPath %>'"
        assert render_template(tmpl, "x") == tmpl

    def test_deterministic(self):
        tmpl = COMMAND.artifact_template
        assert render_template(tmpl, "create-user") == render_template(tmpl, "create-user")


# ═══════════════════════════════════════════════════════════════════
#  Artifact kinds
# ═══════════════════════════════════════════════════════════════════


class TestArtifactKinds:
    def test_supported(self):
        assert supported_kinds() == ["command", "query"]

    def test_get_kind(self):
        assert get_kind("command") is COMMAND
        assert get_kind("query") is QUERY

    def test_unknown_kind(self):
        with pytest.raises(KeyError, match="Unknown artifact kind"):
            get_kind("event")

    def test_import_path_by_layout(self):
        assert COMMAND.import_path("create-user", flat=True) == "./create-user.command"
        assert COMMAND.import_path("create-user", flat=False) == "../impl/create-user.command"
        assert QUERY.import_path("get-user", flat=False) == "../impl/get-user.query"

    def test_command_templates(self):
        artifact = render_template(COMMAND.artifact_template, "create-user")
        assert "export interface CreateUserCommandPayload {" in artifact
        assert "export class CreateUserCommand extends Command<any> {" in artifact
        assert "<%=" not in artifact

        handler = render_template(
            COMMAND.handler_template, "create-user", importPath="../impl/create-user.command"
        )
        assert "import { CreateUserCommand } from '../impl/create-user.command';" in handler
        assert "@CommandHandler(CreateUserCommand)" in handler
        assert "ICommandHandler<CreateUserCommand>" in handler
        assert "<%=" not in handler

    def test_query_templates(self):
        artifact = render_template(QUERY.artifact_template, "get-user")
        assert artifact.startswith("import { Query } from '@nestjs/cqrs';")
        assert "export class GetUserQuery extends Query<any> {" in artifact

        handler = render_template(QUERY.handler_template, "get-user", importPath="./get-user.query")
        assert "@QueryHandler(GetUserQuery)" in handler
        assert "IQueryHandler<GetUserQuery, any>" in handler
        assert "return { result: null };" in handler
