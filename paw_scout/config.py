# === FILE: paw_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации PawScout.
Используется Pydantic для описания схемы и проверки данных.

Without a config file the compiled-in source list from
:mod:`paw_scout.sources` is used.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union
from urllib.parse import urlparse

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from paw_scout.crawler.models import SourceDescriptor
from paw_scout.sources import DEFAULT_SOURCE_SPECS, build_extractor, build_source

ExtractorKind = Literal["pattern", "structured", "markup"]


class SourceConfig(BaseModel):
    """One page to fetch and the extractor to run on it."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    site: str = Field(..., description="Корень сайта, например https://www.seaaca.org.")
    page: str = Field("", description="Путь страницы относительно site.")
    headers: Dict[str, str] = Field(default_factory=dict, description="Дополнительные заголовки.")
    kind: ExtractorKind = Field(..., description="Стратегия извлечения.")
    pattern: Optional[str] = Field(None, description="Regex с группами link и id (kind=pattern).")
    schema_name: Optional[str] = Field(None, description="Имя JSON-схемы (kind=structured).")
    selector: Optional[str] = Field(None, description="CSS-селектор ссылок (kind=markup).")
    id_pattern: Optional[str] = Field(None, description="Regex pet id в тексте ссылки (kind=markup).")

    @field_validator("site", mode="before")
    def _strip_trailing_slash(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @field_validator("site")
    def _check_site(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"site must be an absolute http(s) URL, got {v!r}")
        return v

    @model_validator(mode="after")
    def _check_extractor(self) -> SourceConfig:
        required = {
            "pattern": ("pattern",),
            "structured": ("schema_name",),
            "markup": ("selector", "id_pattern"),
        }[self.kind]
        missing = [name for name in required if not getattr(self, name)]
        if missing:
            raise ValueError(f"kind={self.kind} requires: {', '.join(missing)}")
        # compile patterns / resolve schema now so a bad entry fails at load time
        build_extractor(self)
        return self

    @property
    def url(self) -> str:
        return self.site + self.page


def _default_sources() -> List[SourceConfig]:
    return [SourceConfig(**spec) for spec in DEFAULT_SOURCE_SPECS]


class ScoutConfig(BaseModel):
    """Конфигурация для одного запуска PawScout."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    sources: List[SourceConfig] = Field(
        default_factory=_default_sources, min_length=1, description="Страницы для обхода."
    )
    timeout: float = Field(30.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("PawScout/1.0", min_length=1, description="Заголовок User-Agent.")

    def build_sources(self) -> List[SourceDescriptor]:
        return [build_source(src, position) for position, src in enumerate(self.sources)]


_DEFAULT_CFG = Path("configs/default.yaml")


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


def load_config(path: Union[str, Path, None] = None) -> ScoutConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScoutConfig.
    Без пути берёт configs/default.yaml, а если его нет, то встроенный список сайтов.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return ScoutConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return ScoutConfig(**data)


__all__ = ["SourceConfig", "ScoutConfig", "ExtractorKind", "load_config"]
