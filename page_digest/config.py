# === FILE: page_digest/config.py ===
"""
Модуль для загрузки и валидации конфигурации PageDigest.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from page_digest.errors import ConfigurationError

__all__ = ["DigestConfig", "load_config", "build_config"]


class DigestConfig(BaseModel):
    """Конфигурация одного запуска конвейера."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    targets: Path = Field(..., description="Файл со списком URL (по одному на строку).")
    exclude: Optional[Path] = Field(None, description="Файл со стоп-словами (по одному на строку).")
    top_words: int = Field(10, ge=1, description="Сколько самых частых слов выводить.")
    workers: int = Field(10, ge=1, description="Число одновременно обрабатываемых URL.")
    summary_sentences: int = Field(3, ge=1, description="Число предложений в резюме.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один HTTP-запрос (секунд).")
    job_timeout: Optional[float] = Field(
        None, gt=0, description="Необязательный дедлайн на обработку одного URL (секунд)."
    )
    user_agent: str = Field("PageDigest/0.1", min_length=1, description="Заголовок User-Agent.")

    @field_validator("targets", "exclude", mode="before")
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser() if v else None
        return v

    @model_validator(mode="after")
    def _check_files_exist(self) -> DigestConfig:
        if not self.targets.is_file():
            raise ValueError(f"targets file not found: {self.targets}")
        if self.exclude is not None and not self.exclude.is_file():
            raise ValueError(f"exclude file not found: {self.exclude}")
        return self


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}"
        )
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}"
        )
    return data


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "config"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def build_config(**values: Any) -> DigestConfig:
    """Создаёт DigestConfig из именованных значений; None-значения игнорируются."""
    data = {k: v for k, v in values.items() if v is not None}
    if "targets" not in data:
        raise ConfigurationError("Не указан файл targets (-t/--targets)")
    try:
        return DigestConfig(**data)
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error(exc)) from exc


def load_config(path: Union[str, Path, None], **overrides: Any) -> DigestConfig:
    """
    Читает YAML или JSON, накладывает overrides и возвращает проверенный DigestConfig.
    Без пути конфиг собирается только из overrides.
    """
    data: dict[str, Any] = {}
    if path is not None:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise ConfigurationError(f"Файл конфигурации не найден: {path_obj}")

        suffix = path_obj.suffix.lower()
        if suffix in (".yaml", ".yml"):
            data = _read_yaml(path_obj)
        elif suffix == ".json":
            data = _read_json(path_obj)
        else:
            raise ConfigurationError(f"Неподдерживаемый формат конфига: {suffix}")

    data.update({k: v for k, v in overrides.items() if v is not None})
    return build_config(**data)
