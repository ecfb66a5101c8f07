"""
Dockerfile rendering by ordered marker substitution.

Each template carries literal placeholder markers. Rendering applies a
short, ordered list of rules to the template text, each rule returning new
text, and then checks that no marker of the template survived.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from roche.exceptions import TemplateError
from roche.lib.workspace import LIBRARY_FILENAME
from roche.templates import (
    DEV_DOCKERFILE,
    LIBTEST_DOCKERFILE,
    RELEASE_DOCKERFILE,
    read_template,
)

logger = logging.getLogger(__name__)

ENV_FILENAME = ".env"

DEV_BASE_IMAGE_MARKER = "DEV_BASE_IMAGE"
TEST_BASE_IMAGE_MARKER = "TEST_BASE_IMAGE"
BASE_IMAGE_MARKER = "BASE_IMAGE"
RUNTIME_IMAGE_MARKER = "RUNTIME_IMAGE"
INCLUDE_ENV_MARKER = "INCLUDE_ENV"
ENV_MARKER = "#ENV"
LIB_RS_MARKER = "#LIB_RS"
TEST_MARKER = "#TEST"

INCLUDE_ENV_SOURCE = "app-build/src/.env*"
COPY_ENV_DIRECTIVE = "COPY .env /app-build/src"
COPY_LIB_DIRECTIVE = "COPY lib.rs /app-build/src"
RUN_TESTS_DIRECTIVE = "RUN cargo test --lib --release"


class BuildKind(Enum):
    """Category of build, chosen from the invoked subcommand."""

    DEV = "dev"
    TEST = "test"
    RELEASE = "release"
    GEN_ONLY = "gen"

    @property
    def template_name(self) -> str:
        return {
            BuildKind.DEV: DEV_DOCKERFILE,
            BuildKind.TEST: LIBTEST_DOCKERFILE,
            BuildKind.RELEASE: RELEASE_DOCKERFILE,
            BuildKind.GEN_ONLY: RELEASE_DOCKERFILE,
        }[self]

    @property
    def tag_prefix(self) -> str:
        return {
            BuildKind.DEV: "dev-",
            BuildKind.TEST: "test-",
            BuildKind.RELEASE: "",
            BuildKind.GEN_ONLY: "",
        }[self]

    @property
    def markers(self) -> tuple[str, ...]:
        """Every marker that may appear in this kind's template."""
        if self is BuildKind.DEV:
            return (DEV_BASE_IMAGE_MARKER, RUNTIME_IMAGE_MARKER, INCLUDE_ENV_MARKER)
        if self is BuildKind.TEST:
            return (TEST_BASE_IMAGE_MARKER, INCLUDE_ENV_MARKER)
        return (
            BASE_IMAGE_MARKER,
            RUNTIME_IMAGE_MARKER,
            LIB_RS_MARKER,
            TEST_MARKER,
            ENV_MARKER,
        )


@dataclass(frozen=True)
class BuildParameters:
    """
    Resolved inputs for one render.

    Attributes
    ----------
    build_image : str
        Image used for the build stage.
    runtime_image : str
        Image used for the final stage (ignored by test builds).
    tag : str or None
        Explicit tag from the command line, if any.
    env_file_present : bool
        Whether a ``.env`` file sits in the build context.
    secondary_source_present : bool
        Whether ``lib.rs`` sits in the build context.
    """

    build_image: str
    runtime_image: str
    tag: str | None = None
    env_file_present: bool = False
    secondary_source_present: bool = False

    @classmethod
    def probe(
        cls,
        build_image: str,
        runtime_image: str,
        tag: str | None = None,
        directory: Path | None = None,
    ) -> "BuildParameters":
        """
        Create parameters, checking the build context for optional files.

        Parameters
        ----------
        build_image : str
            Image used for the build stage.
        runtime_image : str
            Image used for the final stage.
        tag : str or None, optional
            Explicit tag from the command line.
        directory : Path or None, optional
            Build context, by default the current working directory.
        """
        directory = directory or Path.cwd()
        return cls(
            build_image=build_image,
            runtime_image=runtime_image,
            tag=tag,
            env_file_present=(directory / ENV_FILENAME).exists(),
            secondary_source_present=(directory / LIBRARY_FILENAME).exists(),
        )


@dataclass(frozen=True)
class Rule:
    """
    One substitution step.

    With ``drop_line`` set, every line containing ``marker`` is removed.
    Otherwise each occurrence of ``marker`` is replaced with ``replacement``.
    """

    marker: str
    replacement: str = ""
    drop_line: bool = False

    def apply(self, text: str) -> str:
        if self.drop_line:
            return "".join(
                line for line in text.splitlines(keepends=True) if self.marker not in line
            )
        return text.replace(self.marker, self.replacement)


def _include_env_rule(params: BuildParameters) -> Rule:
    if params.env_file_present:
        return Rule(INCLUDE_ENV_MARKER, INCLUDE_ENV_SOURCE)
    # Drop the marker together with its separating space so the COPY
    # directive keeps only its remaining sources.
    return Rule(f"{INCLUDE_ENV_MARKER} ", "")


def build_rules(params: BuildParameters, kind: BuildKind) -> list[Rule]:
    """
    Build the ordered substitution rules for a build kind.

    Parameters
    ----------
    params : BuildParameters
        Images and optional-file probes.
    kind : BuildKind
        Which template the rules target.

    Returns
    -------
    list of Rule
        Rules to apply left to right.
    """
    if kind is BuildKind.DEV:
        return [
            Rule(DEV_BASE_IMAGE_MARKER, params.build_image),
            Rule(RUNTIME_IMAGE_MARKER, params.runtime_image),
            _include_env_rule(params),
        ]

    if kind is BuildKind.TEST:
        return [
            Rule(TEST_BASE_IMAGE_MARKER, params.build_image),
            _include_env_rule(params),
        ]

    rules = [
        Rule(BASE_IMAGE_MARKER, params.build_image),
        Rule(RUNTIME_IMAGE_MARKER, params.runtime_image),
    ]
    if params.secondary_source_present:
        rules.append(Rule(LIB_RS_MARKER, COPY_LIB_DIRECTIVE))
        rules.append(Rule(TEST_MARKER, RUN_TESTS_DIRECTIVE))
    else:
        rules.append(Rule(LIB_RS_MARKER, drop_line=True))
        rules.append(Rule(TEST_MARKER, drop_line=True))
    if params.env_file_present:
        rules.append(Rule(ENV_MARKER, COPY_ENV_DIRECTIVE))
    else:
        rules.append(Rule(ENV_MARKER, drop_line=True))
    return rules


def render(template_text: str, params: BuildParameters, kind: BuildKind) -> str:
    """
    Substitute every marker in a Dockerfile template.

    Parameters
    ----------
    template_text : str
        Template text containing the markers of ``kind``.
    params : BuildParameters
        Images and optional-file probes.
    kind : BuildKind
        Build kind selecting the rule set.

    Returns
    -------
    str
        Dockerfile text with no markers left.

    Raises
    ------
    TemplateError
        If a marker is still present after all rules ran.
    """
    text = template_text
    for rule in build_rules(params, kind):
        text = rule.apply(text)

    leftover = [marker for marker in kind.markers if marker in text]
    if leftover:
        raise TemplateError(
            f"Unresolved placeholders in {kind.value} Dockerfile: {', '.join(leftover)}"
        )

    logger.debug("Rendered %s Dockerfile:\n%s", kind.value, text)
    return text


def render_dockerfile(params: BuildParameters, kind: BuildKind) -> str:
    """Render the embedded template for ``kind``."""
    return render(read_template(kind.template_name), params, kind)
