"""
Тесты команды late-generate
"""

import json

import httpx
import pytest
import yaml

from late_client import cli
from late_client.config import OpenApiConfig

SPEC = {
    "openapi": "3.0.0",
    "info": {"title": "Late API", "version": "1.0.0"},
    "paths": {
        "/v1/posts": {
            "get": {"tags": ["Posts"], "operationId": "listPosts"},
            "post": {"tags": ["Posts"], "operationId": "createPost"},
        },
        "/v1/profiles": {
            "get": {"tags": ["Profiles"], "operationId": "listProfiles"},
        },
    },
}


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestGenerateCommand:
    def test_missing_spec(self, workdir, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.generate([])

        assert exc_info.value.code == 1
        assert "не найдена" in capsys.readouterr().out

    def test_generates_client_file(self, workdir, capsys):
        (workdir / "openapi.yaml").write_text(yaml.safe_dump(SPEC), encoding="utf-8")

        cli.generate(["--dirname", "out"])

        source = (workdir / "out" / "client.py").read_text(encoding="utf-8")
        assert "class Posts:" in source
        assert "class Late(BaseClient):" in source

        output = capsys.readouterr().out
        assert "✅ Сгенерирован client.py: 2 пространств имён" in output
        assert "  - posts: 2 методов" in output
        assert "  - profiles: 1 методов" in output

    def test_json_spec(self, workdir, capsys):
        (workdir / "late.json").write_text(json.dumps(SPEC), encoding="utf-8")

        cli.generate(["--spec", "late.json", "--dirname", "out"])

        assert (workdir / "out" / "client.py").exists()

    def test_dry_run(self, workdir, capsys):
        (workdir / "openapi.yaml").write_text(yaml.safe_dump(SPEC), encoding="utf-8")

        cli.generate(["--dry-run", "--dirname", "out"])

        assert not (workdir / "out").exists()
        assert "posts: 2 методов" in capsys.readouterr().out

    def test_config_file_is_used(self, workdir, capsys):
        (workdir / "specs").mkdir()
        (workdir / "specs" / "late.yaml").write_text(yaml.safe_dump(SPEC), encoding="utf-8")
        OpenApiConfig(spec="specs/late.yaml", dirname="sdk").save_to_file("openapi.toml")

        cli.generate([])

        assert (workdir / "sdk" / "client.py").exists()
        assert "openapi.toml" in capsys.readouterr().out

    def test_config_in_package_dir(self, workdir):
        """openapi.toml ищется и в директории пакета из --dirname"""
        (workdir / "late.yaml").write_text(yaml.safe_dump(SPEC), encoding="utf-8")
        (workdir / "sdk").mkdir()
        OpenApiConfig(spec="late.yaml", dirname="sdk").save_to_file("sdk/openapi.toml")

        cli.generate(["--dirname", "sdk"])

        assert (workdir / "sdk" / "client.py").exists()

    def test_invalid_operation_id(self, workdir, capsys):
        spec = {"paths": {"/v1/posts": {"get": {"tags": ["Posts"], "operationId": "list-posts"}}}}
        (workdir / "openapi.yaml").write_text(yaml.safe_dump(spec), encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            cli.generate(["--dirname", "out"])

        assert exc_info.value.code == 1
        assert "❌ Ошибка генерации" in capsys.readouterr().out
        assert not (workdir / "out").exists()

    def test_init_config(self, workdir):
        cli.generate(["--init-config", "--dirname", "sdk"])

        config = OpenApiConfig.from_file("openapi.toml")
        assert config.dirname == "sdk"
        assert config.spec == "openapi.yaml"

    def test_invalid_document(self, workdir, capsys):
        (workdir / "openapi.yaml").write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            cli.generate([])

        assert exc_info.value.code == 1
        assert "❌ Ошибка чтения спецификации" in capsys.readouterr().out

    def test_fetch_failure(self, workdir, monkeypatch, capsys):
        def fail(url, spec_path):
            raise httpx.ConnectError("connection refused")

        monkeypatch.setattr(cli, "fetch_spec", fail)

        with pytest.raises(SystemExit) as exc_info:
            cli.generate(["--url", "https://getlate.dev/openapi.yaml"])

        assert exc_info.value.code == 1
        assert "Не удалось загрузить" in capsys.readouterr().out


class TestLoadSpec:
    def test_refs_are_resolved(self, tmp_path):
        spec = {
            "paths": {
                "/v1/posts": {"get": {"$ref": "#/components/operations/listPosts"}}
            },
            "components": {
                "operations": {"listPosts": {"tags": ["Posts"], "operationId": "listPosts"}}
            },
        }
        path = tmp_path / "openapi.yaml"
        path.write_text(yaml.safe_dump(spec), encoding="utf-8")

        loaded = cli.load_spec(str(path))

        assert loaded["paths"]["/v1/posts"]["get"]["operationId"] == "listPosts"
