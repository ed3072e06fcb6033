"""Command group: function lifecycle (create)."""

from __future__ import annotations

import click

from riffcli.commands._base import RiffCommand, RiffGroup
from riffcli.commands._context import AppContext
from riffcli.config.models import FunctionConfig
from riffcli.services.function import CreateChannelOptions, CreateFunctionOptions, FunctionService
from riffcli.validation import (
    StringRef,
    at_least_one_of,
    at_most_one_of,
    at_position,
    broadcast_string_value,
    flags_dependency,
    flags_validation_conjunction,
    flags_validator_as_pre_run,
    valid_name,
)

_FUNCTION_EXAMPLES = """\
  riff function create square --image projectriff/square:0.0.1
  riff function create square --git-repo https://github.com/projectriff-samples/square
  riff function create square --image projectriff/square:0.0.1 --input numbers -n demo"""


def _default_namespace() -> str:
    app = click.get_current_context().find_object(AppContext)
    if app is None:
        return FunctionConfig().namespace
    return app.settings.function.namespace


def make_create_command() -> click.Command:
    """Build ``riff function create``.

    ``--namespace`` is a broadcast value: one occurrence fills the namespace
    of both the function and its input channel.
    """
    function_namespace = StringRef()
    channel_namespace = StringRef()
    namespace = broadcast_string_value(
        FunctionConfig().namespace, function_namespace, channel_namespace
    )

    @click.command(
        "create",
        cls=RiffCommand,
        examples="""\
  riff function create square --image projectriff/square:0.0.1
  riff function create square --git-repo https://github.com/acme/square --git-revision v1
  riff function create square --image acme/square --input numbers --namespace demo --yaml""",
        args_validator=at_position(0, valid_name()),
        pre_run=flags_validator_as_pre_run(
            flags_validation_conjunction(
                at_least_one_of("image", "git-repo"),
                flags_dependency("git-revision", at_least_one_of("git-repo")),
                at_most_one_of("json", "yaml"),
            )
        ),
    )
    @click.argument("name")
    @click.option("--image", default=None, help="Container image to run.")
    @click.option("--git-repo", default=None, help="Git repository to build the function from.")
    @click.option("--git-revision", default=None, help="Git revision to build (needs --git-repo).")
    @click.option("--input", "input_channel", default=None, help="Channel the function consumes.")
    @click.option(
        "-n",
        "--namespace",
        type=namespace,
        default=_default_namespace,
        expose_value=False,
        help="Namespace for the function and its input channel.",
    )
    @click.option("--yaml", "yaml_output", is_flag=True, help="YAML output.")
    @click.pass_obj
    def create(
        app: AppContext,
        name: str,
        image: str | None,
        git_repo: str | None,
        git_revision: str | None,
        input_channel: str | None,
        yaml_output: bool,
    ) -> None:
        """Render the Knative manifests for a new function."""
        config = app.settings.function
        svc = FunctionService(config)
        ns = function_namespace.value
        options = CreateFunctionOptions(
            name=name,
            namespace=ns,
            image=image or svc.default_image(name, ns),
            git_repo=git_repo,
            git_revision=git_revision or config.git_revision,
        )
        channel = None
        if input_channel:
            channel = CreateChannelOptions(
                name=input_channel,
                namespace=channel_namespace.value,
                bus=config.bus,
            )
        app.emit(svc.create_function(options, channel=channel), yaml_output=yaml_output)

    return create


@click.group(cls=RiffGroup, examples=_FUNCTION_EXAMPLES)
def function() -> None:
    """Create riff functions."""


function.add_command(make_create_command())
