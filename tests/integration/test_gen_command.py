"""Integration tests for gen command."""

from argparse import Namespace

from roche.commands import gen


def _ctx(build_config, dry_run=False, buildimage=None, runtimeimage=None):
    return {
        "config": build_config,
        "verbose": False,
        "dry_run": dry_run,
        "args": Namespace(command="gen", buildimage=buildimage, runtimeimage=runtimeimage),
    }


class TestGenCommand:
    """Test gen command."""

    def test_writes_dockerfile(self, tmp_path, monkeypatch, build_config, capsys):
        monkeypatch.chdir(tmp_path)

        exit_code = gen.handle(_ctx(build_config, buildimage="img/b:1", runtimeimage="img/r:1"))

        assert exit_code == 0
        content = (tmp_path / "Dockerfile").read_text()
        assert "FROM img/b:1 as builder" in content
        assert "FROM img/r:1" in content
        assert "#LIB_RS" not in content
        assert "Wrote" in capsys.readouterr().out

    def test_uses_release_defaults(self, tmp_path, monkeypatch, build_config):
        monkeypatch.chdir(tmp_path)

        gen.handle(_ctx(build_config))

        content = (tmp_path / "Dockerfile").read_text()
        assert f"FROM {build_config.release_build_image} as builder" in content

    def test_includes_lib_and_env(self, tmp_path, monkeypatch, build_config):
        (tmp_path / "lib.rs").write_text("")
        (tmp_path / ".env").write_text("A=1\n")
        monkeypatch.chdir(tmp_path)

        gen.handle(_ctx(build_config))

        content = (tmp_path / "Dockerfile").read_text()
        assert "COPY lib.rs /app-build/src" in content
        assert "RUN cargo test --lib --release" in content
        assert "COPY .env /app-build/src" in content

    def test_never_overwrites(self, tmp_path, monkeypatch, build_config, capsys):
        existing = b"FROM custom\n\x00binary-ish \xff content"
        (tmp_path / "Dockerfile").write_bytes(existing)
        monkeypatch.chdir(tmp_path)

        exit_code = gen.handle(_ctx(build_config))

        assert exit_code == 0
        assert (tmp_path / "Dockerfile").read_bytes() == existing
        assert "refusing to overwrite" in capsys.readouterr().out

    def test_dry_run_writes_nothing(self, tmp_path, monkeypatch, build_config, capsys):
        monkeypatch.chdir(tmp_path)

        exit_code = gen.handle(_ctx(build_config, dry_run=True))

        assert exit_code == 0
        assert not (tmp_path / "Dockerfile").exists()
        assert "FROM quay.io/roche/default:1.4.0 as builder" in capsys.readouterr().out
