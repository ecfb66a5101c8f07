"""Handler functions for the build, test and release commands."""

from typing import Any

from roche.lib.command_helpers import handle_dry_run, pick, require_config
from roche.lib.engine import build_command, invoke_build
from roche.lib.formatters import format_command
from roche.lib.output import error, info, relay, success
from roche.lib.render import BuildKind, BuildParameters, render_dockerfile
from roche.lib.tags import TAG_FLAG, resolve_tag
from roche.lib.workspace import locate_build_entrypoint, require_library_file


def handle(ctx: dict[str, Any]) -> int:
    """Route to the handler for the invoked build command.

    Parameters
    ----------
    ctx : dict[str, Any]
        Command context with config and args

    Returns
    -------
    int
        Exit code (0 for success)
    """
    command = ctx["args"].command

    if command == "build":
        return handle_dev(ctx)
    elif command == "test":
        return handle_test(ctx)
    elif command == "release":
        return handle_release(ctx)

    error(f"Unknown build command: {command}")
    return 1


def handle_dev(ctx: dict[str, Any]) -> int:
    """Handle ``roche build``."""
    args = ctx["args"]
    config = require_config(ctx)

    locate_build_entrypoint()

    params = BuildParameters.probe(
        build_image=pick(args.buildimage, config.dev_build_image),
        runtime_image=pick(args.runtimeimage, config.runtime_image),
        tag=args.tag,
    )
    return run_build(ctx, BuildKind.DEV, params)


def handle_test(ctx: dict[str, Any]) -> int:
    """Handle ``roche test``; lib.rs must sit beside functions.rs."""
    args = ctx["args"]
    config = require_config(ctx)

    locate_build_entrypoint()
    require_library_file()

    params = BuildParameters.probe(
        build_image=pick(args.libtestimage, config.test_build_image),
        runtime_image=config.runtime_image,
        tag=args.tag,
    )
    return run_build(ctx, BuildKind.TEST, params)


def handle_release(ctx: dict[str, Any]) -> int:
    """Handle ``roche release``."""
    args = ctx["args"]
    config = require_config(ctx)

    locate_build_entrypoint()

    params = BuildParameters.probe(
        build_image=pick(args.buildimage, config.release_build_image),
        runtime_image=pick(args.runtimeimage, config.runtime_image),
        tag=args.tag,
    )
    return run_build(ctx, BuildKind.RELEASE, params)


def run_build(ctx: dict[str, Any], kind: BuildKind, params: BuildParameters) -> int:
    """Resolve the tag, render the Dockerfile and hand it to the engine.

    Parameters
    ----------
    ctx : dict[str, Any]
        Command context with config and args
    kind : BuildKind
        Build kind selecting template and tag prefix
    params : BuildParameters
        Resolved images and optional-file probes

    Returns
    -------
    int
        0 when the engine build succeeded, 1 otherwise
    """
    engine = require_config(ctx).engine

    tag, synthesized = resolve_tag(params.tag, kind.tag_prefix)
    if synthesized:
        info(f"No tag provided using {tag[len(TAG_FLAG):]}")

    rendered = render_dockerfile(params, kind)

    if handle_dry_run(
        ctx,
        f"Build {kind.value} image",
        {
            "Command": format_command(build_command(tag, engine=engine)),
            "Build image": params.build_image,
            "Runtime image": params.runtime_image,
        },
    ):
        relay(rendered)
        return 0

    result = invoke_build(tag, rendered, engine=engine)

    info(f"Build complete for {result.tag}")
    relay(result.output)

    if not result.ok:
        error(f"Build failed for {result.tag} ({engine} exited with {result.returncode})")
        return 1

    success(f"Image built: {tag[len(TAG_FLAG):]}")
    return 0
