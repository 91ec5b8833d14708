from functools import reduce
from pathlib import Path
from typing import Annotated, Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from appdirs import user_data_dir as appdirs_user_data_dir
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
)

from .. import app_name
from ..components.deck_store import (
    DEFAULT_SLIDE_TEXT,
    DEFAULT_STORAGE_KEY,
    NEW_SLIDE_TEXT,
)
from ..utils import dirs_hierarchy, load_all_yamls

settings_filename = f"{app_name}.yml"


def _convert(input_value: str | Path, info: ValidationInfo) -> Path:
    if isinstance(input_value, str):
        return Path(input_value.format(**info.data))
    return input_value


_Path = Annotated[Path, BeforeValidator(_convert), AfterValidator(Path.resolve)]


class Paths(BaseModel):
    model_config = ConfigDict(validate_default=True)
    current_dir: _Path
    user_config_dir: _Path = Field(
        default_factory=lambda: Path(appdirs_user_config_dir(app_name))
    )
    user_data_dir: _Path = Field(
        default_factory=lambda: Path(appdirs_user_data_dir(app_name))
    )
    store_dir: _Path = "{user_data_dir}/store"  # type: ignore[assignment]


class Settings(BaseModel):
    storage_key: str = DEFAULT_STORAGE_KEY
    default_slide_text: str = DEFAULT_SLIDE_TEXT
    new_slide_text: str = NEW_SLIDE_TEXT
    export_filename: str = "presentation.json"
    paths: Paths

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Build the settings from the `slidez.yml` files that apply to `path`.

        The file of the user config directory is read first, then the one in \
        `path`. Values of the latter override values of the former.

        Args:
            path: Work directory.

        Returns:
            The merged settings.
        """
        resolved_path = path.resolve()
        user_config_dir = Path(appdirs_user_config_dir(app_name)).resolve()
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **(b or {})},
            load_all_yamls(
                d
                for p in dirs_hierarchy(user_config_dir, resolved_path)
                if (d := p / settings_filename).is_file()
            ),
            {},
        )
        paths = dict(content.get("paths") or {})
        paths.setdefault("current_dir", resolved_path)
        paths.setdefault("user_config_dir", user_config_dir)
        content["paths"] = paths
        return cls.model_validate(content)
