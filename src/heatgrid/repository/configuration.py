# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from loguru import logger
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import Dumper, SafeLoader as Loader  # type: ignore[assignment]

from heatgrid import configuration
from heatgrid.color import is_valid_hex_color, normalize_hex
from heatgrid.model.color_scheme import ColorSchemeItem
from heatgrid.template.color_scheme import get_default_color_schemes
from heatgrid.template.configuration import get_view_config_template


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise configuration.ConfigurationError("Configuration was not loaded")
        return self._config

    def __load_data(self) -> None:
        path = configuration.APP_CONFIG_PATH
        try:
            raw_config = load(path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise configuration.ConfigurationError(
                f"Cannot read configuration file {path}: {e}"
            ) from e

        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise configuration.ConfigurationError(
                f"Configuration file {path} must contain a mapping"
            )

        # Migration: back-fill settings added after the file was created
        if "show_header" not in raw_config:
            raw_config["show_header"] = True
        if "show_legend" not in raw_config:
            raw_config["show_legend"] = True

        view = get_view_config_template()
        view.update(raw_config.get("view") or {})
        raw_config["view"] = view

        schemes = self.__validate_color_schemes(raw_config.get("color_schemes"))
        if not schemes:
            schemes = get_default_color_schemes()
        raw_config["color_schemes"] = schemes

        self._config = raw_config  # type: ignore[assignment]

    def __validate_color_schemes(self, raw_schemes: Any) -> list[ColorSchemeItem]:
        schemes: list[ColorSchemeItem] = []
        for raw_scheme in raw_schemes or []:
            if (
                not isinstance(raw_scheme, dict)
                or not raw_scheme.get("id")
                or not is_valid_hex_color(str(raw_scheme.get("zero_color", "")))
                or not is_valid_hex_color(str(raw_scheme.get("max_color", "")))
            ):
                logger.warning(f"Dropping invalid color scheme: {raw_scheme!r}")
                continue
            schemes.append(
                {
                    "id": str(raw_scheme["id"]),
                    "name": str(raw_scheme.get("name") or raw_scheme["id"]),
                    "zero_color": normalize_hex(str(raw_scheme["zero_color"])),
                    "max_color": normalize_hex(str(raw_scheme["max_color"])),
                    "is_default": bool(raw_scheme.get("is_default", False)),
                }
            )
        return schemes

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(config), Dumper=Dumper, sort_keys=False)
        )

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_color_schemes(self) -> list[ColorSchemeItem]:
        return deepcopy(self.config["color_schemes"])

    def update_config(
        self,
        show_header: Optional[bool] = None,
        show_legend: Optional[bool] = None,
        date_property: Optional[str] = None,
        value_property: Optional[str] = None,
        start_date: Optional[str] = None,
        remove_start_date: bool = False,
        end_date: Optional[str] = None,
        remove_end_date: bool = False,
        color_scheme: Optional[str] = None,
        week_start: Optional[int] = None,
        show_weekday_labels: Optional[bool] = None,
        show_month_labels: Optional[bool] = None,
        min_value: Optional[float] = None,
        remove_min_value: bool = False,
        max_value: Optional[float] = None,
        remove_max_value: bool = False,
        orientation: Optional[str] = None,
        theme: Optional[str] = None,
    ) -> None:
        self.is_dirty = True
        view = self.config["view"]

        if show_header is not None:
            self.config["show_header"] = show_header
        if show_legend is not None:
            self.config["show_legend"] = show_legend
        if date_property is not None:
            view["date_property"] = date_property
        if value_property is not None:
            view["value_property"] = value_property
        if start_date is not None:
            view["start_date"] = start_date
        if remove_start_date:
            view["start_date"] = None
        if end_date is not None:
            view["end_date"] = end_date
        if remove_end_date:
            view["end_date"] = None
        if color_scheme is not None:
            view["color_scheme"] = color_scheme
        if week_start is not None:
            view["week_start"] = week_start  # type: ignore[typeddict-item]
        if show_weekday_labels is not None:
            view["show_weekday_labels"] = show_weekday_labels
        if show_month_labels is not None:
            view["show_month_labels"] = show_month_labels
        if min_value is not None:
            view["min_value"] = min_value
        if remove_min_value:
            view["min_value"] = None
        if max_value is not None:
            view["max_value"] = max_value
        if remove_max_value:
            view["max_value"] = None
        if orientation is not None:
            view["orientation"] = orientation  # type: ignore[typeddict-item]
        if theme is not None:
            view["theme"] = theme  # type: ignore[typeddict-item]

    def add_color_scheme(self, scheme: ColorSchemeItem) -> None:
        """Add a scheme, replacing any existing scheme with the same id."""
        self.is_dirty = True
        schemes = [s for s in self.config["color_schemes"] if s["id"] != scheme["id"]]
        schemes.append(
            {
                "id": scheme["id"],
                "name": scheme["name"] or scheme["id"],
                "zero_color": normalize_hex(scheme["zero_color"]),
                "max_color": normalize_hex(scheme["max_color"]),
                "is_default": scheme.get("is_default", False),
            }
        )
        self.config["color_schemes"] = schemes

    def remove_color_scheme(self, scheme_id: str) -> bool:
        schemes = self.config["color_schemes"]
        remaining = [s for s in schemes if s["id"] != scheme_id]
        if len(remaining) == len(schemes):
            return False
        self.is_dirty = True
        self.config["color_schemes"] = remaining
        return True


CONFIGURATION_REPO = ConfigurationRepository()
