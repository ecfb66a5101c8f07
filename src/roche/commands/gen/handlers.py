"""Handler for gen command."""

from pathlib import Path
from typing import Any

from roche.lib.command_helpers import handle_dry_run, pick, require_config
from roche.lib.output import relay, success, warning
from roche.lib.render import BuildKind, BuildParameters, render_dockerfile

DOCKERFILE_NAME = "Dockerfile"


def handle(ctx: dict[str, Any]) -> int:
    """Render the release template and write it to ./Dockerfile.

    An existing Dockerfile is never overwritten: a warning is printed and
    the command still exits 0.

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
    config = require_config(ctx)

    params = BuildParameters.probe(
        build_image=pick(args.buildimage, config.release_build_image),
        runtime_image=pick(args.runtimeimage, config.runtime_image),
    )
    rendered = render_dockerfile(params, BuildKind.GEN_ONLY)

    path = Path.cwd() / DOCKERFILE_NAME

    if handle_dry_run(ctx, f"Write {path}"):
        relay(rendered)
        return 0

    try:
        with open(path, "x") as f:
            f.write(rendered)
    except FileExistsError:
        warning(
            "Dockerfile already exists refusing to overwrite it. "
            "Please delete it and try again."
        )
        return 0

    success(f"Wrote {path}")
    return 0
