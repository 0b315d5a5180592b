import argparse
import json
import os
from pathlib import Path
from typing import Any, Dict, Tuple, Type

from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

CONFIG_FILE_ENV = "HIJRI_CALENDAR_CONFIG"
DEFAULT_CONFIG_FILE = "hijri_calendar.json"


def _option_prefix(settings_cls: Type[BaseSettings]) -> str:
    return str(settings_cls.model_config.get("env_prefix", "")).lower()


class ArgparseConfigSettingsSource(PydanticBaseSettingsSource):
    """
    Loads settings from command-line flags named ``--<env_prefix><field>``,
    e.g. ``--aladhan_base_url``. Unknown flags are ignored so the source can
    coexist with uvicorn or pytest arguments.
    """

    def __init__(self, settings_cls: Type[BaseSettings]):
        super().__init__(settings_cls)
        self.prefix = _option_prefix(settings_cls)
        self.args, self.unknown = self._parse_args()

    def _parse_args(self):
        parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
        for field_name, field in self.settings_cls.model_fields.items():
            parser.add_argument(
                f"--{self.prefix}{field_name}",
                dest=field_name,
                help=f"{field_name} setting, type= {field.annotation}",
            )
        return parser.parse_known_args()

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        field_value = getattr(self.args, field_name, None)
        return field_value, field_name, False

    def __call__(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {}
        for field_name in self.settings_cls.model_fields:
            field_value = getattr(self.args, field_name, None)
            if field_value is not None:
                d[field_name] = field_value
        return d


class JsonConfigSettingsSource(PydanticBaseSettingsSource):
    """
    Loads settings from one section of a JSON config file. The section name is
    the settings class' env prefix without its trailing underscore, so
    ``AladhanSettings`` reads ``{"aladhan": {...}}``.
    """

    def __init__(self, settings_cls: Type[BaseSettings]):
        super().__init__(settings_cls)
        self.json_file_path = Path(os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE))
        self.section = _option_prefix(settings_cls).rstrip("_")
        self._content = self._read()

    def _read(self) -> Dict[str, Any]:
        if not self.json_file_path.exists():
            return {}
        encoding = self.config.get("env_file_encoding") or "utf-8"
        content = json.loads(self.json_file_path.read_text(encoding))
        if self.section:
            content = content.get(self.section, {})
        return content if isinstance(content, dict) else {}

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        return self._content.get(field_name), field_name, False

    def __call__(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            field_value, field_key, _ = self.get_field_value(field, field_name)
            if field_value is not None:
                d[field_key] = field_value
        return d


class CustomizedSettings(BaseSettings):
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            ArgparseConfigSettingsSource(settings_cls),
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )
