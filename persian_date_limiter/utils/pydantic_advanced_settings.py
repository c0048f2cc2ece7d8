import argparse
import json
from pathlib import Path
from typing import Any, Dict, Tuple, Type

from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

JSON_CONFIG_FILE = "limiter_config.json"


class ArgparseConfigSettingsSource(PydanticBaseSettingsSource):
    """
    A settings source class that loads variables from command-line arguments.
    It dynamically creates arguments based on the fields defined in the Pydantic settings class.
    """

    def __init__(self, settings_cls: Type[BaseSettings]):
        super().__init__(settings_cls)
        self.args, self.unknown = self._parse_args()

    def _parse_args(self):
        # the host program owns -h and its own option prefixes
        parser = argparse.ArgumentParser(
            description="Command line arguments",
            add_help=False,
            allow_abbrev=False,
        )
        for field_name, field in self.settings_cls.model_fields.items():
            parser.add_argument(
                f"--{field_name}",
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
    A simple settings source class that loads variables from a JSON file
    in the working directory.

    The file is read with the `env_file_encoding` from the model config.
    """

    json_file_path = Path(JSON_CONFIG_FILE)

    def _read_file(self) -> Dict[str, Any]:
        encoding = self.config.get("env_file_encoding")
        return json.loads(self.json_file_path.read_text(encoding))

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        field_value = self._read_file().get(field_name)
        return field_value, field_name, False

    def __call__(self) -> Dict[str, Any]:
        if not self.json_file_path.exists():
            return {}

        file_content_json = self._read_file()
        return {
            field_name: file_content_json[field_name]
            for field_name in self.settings_cls.model_fields
            if file_content_json.get(field_name) is not None
        }


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
            JsonConfigSettingsSource(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )
