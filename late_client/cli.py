import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional

import httpx
import jsonref
import yaml

from late_client.config import DEFAULT_CONFIG_FILE, OpenApiConfig
from late_client.generator import ApiClientGenerator
from late_client.internal.types.models import Project


def load_spec(spec_path: str) -> Dict[str, Any]:
    """Чтение OpenAPI спецификации (YAML или JSON) с разрешением $ref"""
    with open(spec_path, "r", encoding="utf-8") as f:
        if spec_path.endswith(".json"):
            openapi_spec = json.load(f)
        else:
            openapi_spec = yaml.safe_load(f)

    if not isinstance(openapi_spec, dict):
        raise ValueError(f"{spec_path} не содержит OpenAPI документ")

    # default=str: YAML отдаёт даты объектами datetime
    return jsonref.loads(json.dumps(openapi_spec, default=str), proxies=False)


def fetch_spec(url: str, spec_path: str) -> None:
    """Загрузка спецификации по HTTP и сохранение в spec_path"""
    response = httpx.get(url, timeout=30.0, follow_redirects=True)
    response.raise_for_status()

    directory = os.path.dirname(spec_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(spec_path, "w", encoding="utf-8") as f:
        f.write(response.text)


def _save_project_files(project: Project, target_path: str):
    """Сохранение файлов проекта"""
    print(f"💾 Сохранение {len(project.files)} файлов...")

    for code_file in project.files:
        path = os.path.join(target_path, code_file.file_name)
        os.makedirs(os.path.dirname(path), exist_ok=True)

        # newline="\n": одинаковый вывод на любой платформе
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(str(code_file))

    print(f"📦 Клиент записан в: {os.path.abspath(target_path)}")


def generate(argv: Optional[List[str]] = None):
    """Команда генерации client.py из OpenAPI спецификации Late API"""
    parser = argparse.ArgumentParser(
        description="Генерация namespace-клиента Late API из OpenAPI"
    )
    parser.add_argument("--spec", type=str, help="Путь к OpenAPI спецификации")
    parser.add_argument("--dirname", type=str, help="Директория пакета клиента")
    parser.add_argument(
        "--url", type=str, help="URL спецификации: загрузить перед генерацией"
    )
    parser.add_argument(
        "--init-config", action="store_true", help="Создать конфиг файл openapi.toml"
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Только показать сводку, без записи"
    )

    args = parser.parse_args(argv)

    file_config = OpenApiConfig.from_file(search_dir=args.dirname)
    if file_config:
        print(f"📋 Используется конфиг из {DEFAULT_CONFIG_FILE}")
        config = file_config.merge_with_args(args)
    else:
        config = OpenApiConfig().merge_with_args(args)

    if args.init_config:
        config.save_to_file()
        print(f"✅ Создан конфиг файл {DEFAULT_CONFIG_FILE}")
        return

    if args.url:
        print(f"📥 Загрузка спецификации из {args.url}...")
        try:
            fetch_spec(args.url, config.spec)
        except httpx.HTTPError as e:
            print(f"❌ Не удалось загрузить спецификацию: {e}")
            sys.exit(1)

    if not os.path.exists(config.spec):
        print(f"❌ OpenAPI спецификация не найдена: {os.path.abspath(config.spec)}")
        print('   Сначала загрузите её: late-generate --url "<URL спецификации>"')
        sys.exit(1)

    try:
        openapi_spec = load_spec(config.spec)
    except (OSError, ValueError, yaml.YAMLError, jsonref.JsonRefError) as e:
        print(f"❌ Ошибка чтения спецификации: {e}")
        sys.exit(1)

    print("⚙️ Генерация кода...")
    generator = ApiClientGenerator(openapi_spec)
    try:
        project = generator.generate()
    except ValueError as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)

    if not args.dry_run:
        _save_project_files(project, config.dirname)

    print(f"✅ Сгенерирован client.py: {len(generator.namespaces)} пространств имён")
    for namespace in generator.namespaces.values():
        print(f"  - {namespace.name}: {namespace.method_count} методов")


if __name__ == "__main__":
    generate()
