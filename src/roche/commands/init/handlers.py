"""Handler for init command."""

from typing import Any

from roche.lib.command_helpers import handle_dry_run
from roche.lib.formatters import format_command
from roche.lib.output import info, success, warning

from .operations import (
    generate_command,
    generate_project,
    resolve_template_source,
    write_starter_source,
)


def handle(ctx: dict[str, Any]) -> int:
    """Generate a project from a template, or write a starter functions.rs.

    Parameters
    ----------
    ctx : dict[str, Any]
        Command context with config and args

    Returns
    -------
    int
        Exit code (0 for success)
    """
    args = ctx["args"]
    verbose = args.init_verbose or ctx["verbose"]

    repository = resolve_template_source(args.template)

    if repository is None:
        if args.template:
            warning(f"Unknown template '{args.template}', generating functions.rs instead")
        if handle_dry_run(ctx, "Write functions.rs"):
            return 0
        path = write_starter_source()
        if path is None:
            warning("functions.rs already exists refusing to overwrite it.")
            return 0
        success(f"Wrote {path}")
        return 0

    cmd = generate_command(
        repository, branch=args.branch, name=args.name, force=args.force, verbose=verbose
    )
    if handle_dry_run(ctx, "Generate project", {"Command": format_command(cmd)}):
        return 0

    info(f"Generating project from {repository} @ {args.branch}")
    project_dir = generate_project(
        repository,
        branch=args.branch,
        name=args.name,
        force=args.force,
        verbose=verbose,
    )
    if project_dir is None:
        success("Project created")
    else:
        success(f"Project created: {project_dir}")
    return 0
