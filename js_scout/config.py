# === FILE: js_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации JsScout.
Используется Pydantic для описания схемы и проверки данных; файл конфигурации
(YAML или JSON) необязателен, параметры командной строки имеют приоритет.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScannerConfig(BaseModel):
    """Конфигурация для одного запуска обхода домена."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    domain: str = Field(..., min_length=1, description="Домен (host[:port]) для обхода.")
    scheme: Literal["http", "https"] = Field("https", description="Схема корневого URL.")
    timeout: float = Field(30.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("JsScout/1.0", min_length=1, description="Заголовок User-Agent.")
    max_pages: Optional[int] = Field(None, ge=1, description="Лимит по числу страниц (None = без лимита).")
    verify_concurrency: int = Field(10, ge=1, description="Число одновременных проверок JS-ресурсов.")
    probe_method: Literal["GET", "HEAD"] = Field("GET", description="HTTP-метод проверки ресурсов.")
    retry_times: int = Field(0, ge=0, description="Повторы проверки ресурса при сетевой ошибке.")
    output_dir: Path = Field(Path("."), description="Каталог для файлов со списками URL.")

    @field_validator("scheme", mode="before")
    def _sanitize_scheme(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.rstrip(":/").lower()
        return v

    @field_validator("probe_method", mode="before")
    def _upper_method(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("domain")
    def _check_domain(cls, v: str) -> str:
        if "/" in v or any(ch.isspace() for ch in v):
            raise ValueError("domain must be a bare host[:port], e.g. 'example.com'")
        return v

    @property
    def root_url(self) -> str:
        """Seed page of the crawl: ``<scheme>://<domain>/``."""
        return f"{self.scheme}://{self.domain}/"


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Читает YAML или JSON и возвращает сырой словарь без валидации."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> ScannerConfig:
    """
    Собирает проверенный объект ScannerConfig.

    Значения из файла (если path задан) перекрываются непустыми overrides,
    обычно пришедшими из командной строки. Ошибки схемы пробрасываются
    как pydantic.ValidationError.
    """
    data: dict[str, Any] = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return ScannerConfig(**data)


__all__ = ["ScannerConfig", "load_config", "read_config_file"]
