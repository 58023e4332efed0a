"""
Query generator — templates for a CQRS query and its handler.
"""

from __future__ import annotations

from cqrs_scaffold.core.models.artifact import ArtifactKind


_QUERY_TEMPLATE = """\
import { Query } from '@nestjs/cqrs';

export interface <%= classify(name) %>QueryPayload {
  id: string;
}

export class <%= classify(name) %>Query extends Query<any> {
  constructor(public readonly payload: <%= classify(name) %>QueryPayload) {
    super();
  }
}
"""

_HANDLER_TEMPLATE = """\
import { QueryHandler, IQueryHandler } from '@nestjs/cqrs';
import { <%= classify(name) %>Query } from '<%= importPath %>';

@QueryHandler(<%= classify(name) %>Query)
export class <%= classify(name) %>Handler implements IQueryHandler<<%= classify(name) %>Query, any> {
  constructor() {}

  async execute(query: <%= classify(name) %>Query): Promise<any> {
    const { payload } = query;
    return { result: null };
  }
}
"""

QUERY = ArtifactKind(
    key="query",
    class_suffix="Query",
    file_suffix="query",
    artifact_template=_QUERY_TEMPLATE,
    handler_template=_HANDLER_TEMPLATE,
)
