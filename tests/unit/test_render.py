"""Unit tests for Dockerfile rendering."""

import pytest

from roche.exceptions import TemplateError
from roche.lib.render import (
    BuildKind,
    BuildParameters,
    Rule,
    render,
    render_dockerfile,
)
from roche.templates import read_template

BUILD_IMAGE = "registry.example.com/builder:1.0"
RUNTIME_IMAGE = "registry.example.com/runtime:2.0"

ALL_MARKERS = [
    "DEV_BASE_IMAGE",
    "TEST_BASE_IMAGE",
    "BASE_IMAGE",
    "RUNTIME_IMAGE",
    "INCLUDE_ENV",
    "#ENV",
    "#LIB_RS",
    "#TEST",
]


def _params(env=False, lib=False):
    return BuildParameters(
        build_image=BUILD_IMAGE,
        runtime_image=RUNTIME_IMAGE,
        env_file_present=env,
        secondary_source_present=lib,
    )


@pytest.mark.unit
class TestBuildKind:
    """Template selection and tag prefixes."""

    @pytest.mark.parametrize(
        "kind,prefix",
        [
            (BuildKind.DEV, "dev-"),
            (BuildKind.TEST, "test-"),
            (BuildKind.RELEASE, ""),
            (BuildKind.GEN_ONLY, ""),
        ],
    )
    def test_tag_prefix(self, kind, prefix):
        assert kind.tag_prefix == prefix

    def test_gen_uses_release_template(self):
        assert BuildKind.GEN_ONLY.template_name == BuildKind.RELEASE.template_name


@pytest.mark.unit
class TestRule:
    """Tests for a single substitution rule."""

    def test_replace_every_occurrence(self):
        assert Rule("X", "y").apply("aXbX") == "ayby"

    def test_drop_line(self):
        text = "FROM a\n#LIB_RS\nRUN b\n"
        assert Rule("#LIB_RS", drop_line=True).apply(text) == "FROM a\nRUN b\n"


@pytest.mark.unit
class TestRenderDev:
    """Development template."""

    def test_images_substituted(self):
        rendered = render_dockerfile(_params(), BuildKind.DEV)

        assert f"FROM {BUILD_IMAGE} as builder" in rendered
        assert f"FROM {RUNTIME_IMAGE}" in rendered

    def test_without_env_file(self):
        rendered = render_dockerfile(_params(env=False), BuildKind.DEV)

        assert "INCLUDE_ENV" not in rendered
        assert ".env" not in rendered
        assert "COPY --from=builder app-build/target/release/app-build /app/" in rendered

    def test_with_env_file(self):
        rendered = render_dockerfile(_params(env=True), BuildKind.DEV)

        assert "COPY --from=builder app-build/src/.env* app-build/target/release/" in rendered
        assert "INCLUDE_ENV" not in rendered


@pytest.mark.unit
class TestRenderTest:
    """Lib test template."""

    def test_test_image_substituted(self):
        rendered = render_dockerfile(_params(), BuildKind.TEST)

        assert f"FROM {BUILD_IMAGE} as builder" in rendered
        assert "RUN cargo test --lib" in rendered
        assert "TEST_BASE_IMAGE" not in rendered

    def test_with_env_file(self):
        rendered = render_dockerfile(_params(env=True), BuildKind.TEST)

        assert "app-build/src/.env*" in rendered


@pytest.mark.unit
class TestRenderRelease:
    """Release and gen templates."""

    @pytest.mark.parametrize("kind", [BuildKind.RELEASE, BuildKind.GEN_ONLY])
    def test_without_lib(self, kind):
        rendered = render_dockerfile(_params(lib=False), kind)

        assert "COPY lib.rs" not in rendered
        assert "RUN cargo test" not in rendered
        assert "#LIB_RS" not in rendered
        assert "#TEST" not in rendered

    @pytest.mark.parametrize("kind", [BuildKind.RELEASE, BuildKind.GEN_ONLY])
    def test_with_lib(self, kind):
        rendered = render_dockerfile(_params(lib=True), kind)

        assert "COPY lib.rs /app-build/src" in rendered
        assert "RUN cargo test --lib --release" in rendered

    def test_tests_run_after_build(self):
        rendered = render_dockerfile(_params(lib=True), BuildKind.RELEASE)

        assert rendered.index("RUN cargo build --release") < rendered.index(
            "RUN cargo test --lib --release"
        )

    def test_env_file(self):
        with_env = render_dockerfile(_params(env=True), BuildKind.RELEASE)
        without_env = render_dockerfile(_params(env=False), BuildKind.RELEASE)

        assert "COPY .env /app-build/src" in with_env
        assert "COPY .env" not in without_env
        assert "#ENV" not in without_env

    def test_images_substituted(self):
        rendered = render_dockerfile(_params(), BuildKind.RELEASE)

        assert f"FROM {BUILD_IMAGE} as builder" in rendered
        assert f"FROM {RUNTIME_IMAGE}" in rendered


@pytest.mark.unit
class TestRenderInvariants:
    """Properties that hold for every kind and optional-file combination."""

    @pytest.mark.parametrize("kind", list(BuildKind))
    @pytest.mark.parametrize("env", [False, True])
    @pytest.mark.parametrize("lib", [False, True])
    def test_no_marker_left(self, kind, env, lib):
        rendered = render_dockerfile(_params(env=env, lib=lib), kind)

        for marker in ALL_MARKERS:
            assert marker not in rendered

    @pytest.mark.parametrize("kind", list(BuildKind))
    @pytest.mark.parametrize("env", [False, True])
    @pytest.mark.parametrize("lib", [False, True])
    def test_rendering_is_idempotent(self, kind, env, lib):
        params = _params(env=env, lib=lib)
        rendered = render_dockerfile(params, kind)

        assert render(rendered, params, kind) == rendered

    def test_leftover_marker_raises(self):
        template = read_template(BuildKind.DEV.template_name) + "RUN echo INCLUDE_ENV\n"

        with pytest.raises(TemplateError, match="INCLUDE_ENV"):
            render(template, _params(env=False), BuildKind.DEV)


@pytest.mark.unit
class TestBuildParametersProbe:
    """Tests for BuildParameters.probe()."""

    def test_detects_optional_files(self, tmp_path):
        (tmp_path / ".env").write_text("KEY=value\n")
        (tmp_path / "lib.rs").write_text("")

        params = BuildParameters.probe(BUILD_IMAGE, RUNTIME_IMAGE, directory=tmp_path)

        assert params.env_file_present is True
        assert params.secondary_source_present is True
        assert params.tag is None

    def test_without_optional_files(self, tmp_path):
        params = BuildParameters.probe(BUILD_IMAGE, RUNTIME_IMAGE, tag="t", directory=tmp_path)

        assert params.env_file_present is False
        assert params.secondary_source_present is False
        assert params.tag == "t"
