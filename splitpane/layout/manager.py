"""
Layout manager for loading and saving split layouts.

The LayoutManager is responsible for:
- Loading layout configurations from YAML files
- Saving layout configurations
- Listing user and built-in layouts
- Validating layouts before they are used
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from ..config.constants import LAYOUT_FILE_SUFFIX
from ..config.settings import get_layouts_dir
from ..exceptions import LayoutConfigError
from .config import SplitLayoutSpec

logger = logging.getLogger(__name__)

# Built-in layouts directory (in package)
BUILTIN_LAYOUTS_DIR = Path(__file__).parent / "builtin_layouts"


class LayoutManager:
    """Manages layout loading, saving and validation.

    Usage:
        manager = LayoutManager()
        spec = manager.load_layout("editor")
        controller = SplitController(spec)
    """

    def __init__(self, layouts_dir: Optional[Path] = None) -> None:
        """Initialize the layout manager.

        Args:
            layouts_dir: Directory for user layout files
        """
        self.layouts_dir = layouts_dir or get_layouts_dir()
        self._layout_cache: Dict[str, SplitLayoutSpec] = {}

    def load_layout(self, name: str) -> SplitLayoutSpec:
        """Load a layout configuration by name.

        Searches in order:
        1. User layouts directory (~/.config/splitpane/layouts/)
        2. Built-in layouts directory

        Args:
            name: Layout name (without .yaml extension)

        Returns:
            SplitLayoutSpec instance

        Raises:
            FileNotFoundError: If layout file not found
            LayoutConfigError: If layout file is invalid
        """
        if name in self._layout_cache:
            return self._layout_cache[name]

        layout_path = self._find_layout_file(name)
        if not layout_path:
            raise FileNotFoundError(f"Layout not found: {name}")

        spec = self.load_layout_file(layout_path, name)
        self._layout_cache[name] = spec
        return spec

    def _find_layout_file(self, name: str) -> Optional[Path]:
        user_path = self.layouts_dir / f"{name}{LAYOUT_FILE_SUFFIX}"
        if user_path.exists():
            return user_path

        builtin_path = BUILTIN_LAYOUTS_DIR / f"{name}{LAYOUT_FILE_SUFFIX}"
        if builtin_path.exists():
            return builtin_path

        return None

    def load_layout_file(self, path: Path, name: Optional[str] = None) -> SplitLayoutSpec:
        """Load a layout from a YAML file.

        A file may hold a single layout or several under a ``layouts`` key.

        Args:
            path: Path to the YAML file
            name: Layout name (defaults to the file stem)

        Returns:
            SplitLayoutSpec instance
        """
        path = Path(path)
        name = name or path.stem

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise LayoutConfigError(f"Invalid YAML in {path}: {e}") from e

        if not data:
            raise LayoutConfigError(f"Empty layout file: {path}")
        if not isinstance(data, dict):
            raise LayoutConfigError(f"Layout file must contain a mapping: {path}")

        if "layouts" in data:
            if name not in data["layouts"]:
                raise LayoutConfigError(f"Layout '{name}' not found in {path}")
            layout_data = data["layouts"][name]
        else:
            layout_data = data

        logger.debug(f"Loaded layout '{name}' from {path}")
        return SplitLayoutSpec.from_dict(name, layout_data)

    def save_layout(self, name: str, spec: SplitLayoutSpec) -> Path:
        """Save a layout configuration to a YAML file.

        Args:
            name: Layout name (becomes filename)
            spec: Layout configuration to save

        Returns:
            Path to saved file
        """
        self.layouts_dir.mkdir(parents=True, exist_ok=True)

        path = self.layouts_dir / f"{name}{LAYOUT_FILE_SUFFIX}"
        with open(path, "w") as f:
            yaml.safe_dump(spec.to_dict(), f, default_flow_style=False, sort_keys=False)

        self._layout_cache.pop(name, None)
        logger.info(f"Saved layout to {path}")
        return path

    def list_layouts(self) -> List[Tuple[str, str]]:
        """List available layout names and their locations.

        Returns:
            List of (name, location) tuples where location is
            "user" or "builtin"
        """
        layouts = []

        if self.layouts_dir.exists():
            for path in self.layouts_dir.glob(f"*{LAYOUT_FILE_SUFFIX}"):
                layouts.append((path.stem, "user"))

        if BUILTIN_LAYOUTS_DIR.exists():
            for path in BUILTIN_LAYOUTS_DIR.glob(f"*{LAYOUT_FILE_SUFFIX}"):
                # Don't add if user has override
                if not any(name == path.stem for name, _ in layouts):
                    layouts.append((path.stem, "builtin"))

        return sorted(layouts)

    def clear_cache(self) -> None:
        """Clear the layout cache."""
        self._layout_cache.clear()

    def validate_layout(self, spec: SplitLayoutSpec) -> List[str]:
        """Validate a layout configuration.

        Args:
            spec: Layout to validate

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []
        seen_ids = set()

        for pane in spec.panes:
            if pane.pane_id in seen_ids:
                errors.append(f"Duplicate pane ID: {pane.pane_id}")
            seen_ids.add(pane.pane_id)

            options = spec.resolve(pane)
            minimum, maximum = options["minimum_size"], options["maximum_size"]
            if minimum is not None and maximum is not None and maximum < minimum:
                errors.append(f"Pane '{pane.pane_id}': max_size {maximum} is below min_size {minimum}")

            if pane.visible is False and not options["snap"]:
                errors.append(f"Pane '{pane.pane_id}': only snap panes can start hidden")

            if pane.preferred_size is not None and not pane.preferred.is_set:
                errors.append(
                    f"Pane '{pane.pane_id}': unrecognised preferred_size {pane.preferred_size!r}"
                )

        if spec.default_sizes is not None and len(spec.default_sizes) != len(spec.panes):
            errors.append(
                f"Expected {len(spec.default_sizes)} panes based on default_sizes "
                f"but found {len(spec.panes)}"
            )

        return errors
