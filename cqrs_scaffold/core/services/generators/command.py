"""
Command generator — templates for a CQRS command and its handler.
"""

from __future__ import annotations

from cqrs_scaffold.core.models.artifact import ArtifactKind


_COMMAND_TEMPLATE = """\
import { Command } from '@nestjs/cqrs';

export interface <%= classify(name) %>CommandPayload {
  name: string;
  description?: string;
}

export class <%= classify(name) %>Command extends Command<any> {
  constructor(public readonly payload: <%= classify(name) %>CommandPayload) {
    super();
  }
}
"""

_HANDLER_TEMPLATE = """\
import { CommandHandler, ICommandHandler } from '@nestjs/cqrs';
import { <%= classify(name) %>Command } from '<%= importPath %>';

@CommandHandler(<%= classify(name) %>Command)
export class <%= classify(name) %>Handler implements ICommandHandler<<%= classify(name) %>Command> {
  constructor() {}

  async execute(command: <%= classify(name) %>Command): Promise<any> {
    const { payload } = command;
    return { success: true };
  }
}
"""

COMMAND = ArtifactKind(
    key="command",
    class_suffix="Command",
    file_suffix="command",
    artifact_template=_COMMAND_TEMPLATE,
    handler_template=_HANDLER_TEMPLATE,
)
