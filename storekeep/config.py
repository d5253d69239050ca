"""Layout size configuration loaded from a JSON file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class SideBar:
    """Size of the side bar relative to the window."""

    width_ratio: float = 0.0
    height_ratio: float = 0.0


@dataclass
class Dashboard:
    """Size of the dashboard relative to the window."""

    width_ratio: float = 0.0
    height_ratio: float = 0.0


def _as_object(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_double(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


@dataclass
class SizeConfigManager:
    """Holds the size ratios of the application's views."""

    side_bar: SideBar = field(default_factory=SideBar)
    dash_board: Dashboard = field(default_factory=Dashboard)

    def load_file(self, file_name: PathLike) -> None:
        """Read size ratios from a JSON file.

        Raises OSError if the file cannot be opened. Content that is not a
        JSON object, or values that are missing or not numbers, read as 0.0.
        """
        with open(file_name, "rb") as handle:
            data = handle.read()

        try:
            root = _as_object(json.loads(data))
        except ValueError:
            root = {}

        sidebar = _as_object(root.get("SIDEBAR"))
        self.side_bar.width_ratio = _as_double(sidebar.get("WIDTH_RATIO"))
        self.side_bar.height_ratio = _as_double(sidebar.get("HEIGHT_RATIO"))