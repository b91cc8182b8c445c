"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (labels, cursor, status chrome). Syntax
highlighting style for source code remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass

from .jump.session import LabelStyles


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    label: str
    label_toggled: str
    selection: str
    fold_marker: str
    filler: str
    status: str
    prompt: str

    def label_styles(self) -> LabelStyles:
        """Return the visual classes a jump session uses for labels."""
        return LabelStyles(labeled=self.label, toggled=self.label_toggled)


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    label="\033[1;38;5;231;48;5;160m",
    label_toggled="\033[1;38;5;16;48;5;42m",
    selection="\033[48;5;238m",
    fold_marker="\033[2;38;5;250m",
    filler="\033[2;38;5;244m",
    status="\033[1;38;5;81m",
    prompt="\033[38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    label="\033[1;38;5;16;48;5;45m",
    label_toggled="\033[1;38;5;16;48;5;215m",
    selection="\033[48;5;24m",
    fold_marker="\033[2;38;5;110m",
    filler="\033[2;38;5;31m",
    status="\033[1;38;5;45m",
    prompt="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    label="",
    label_toggled="",
    selection="",
    fold_marker="",
    filler="",
    status="",
    prompt="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
