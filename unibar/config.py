"""
Configuration management for unibar.

- HorizontalOptions / VerticalOptions: per-call renderer options
- DemoConfig: demo settings and the list of bars it shows (JSON file)
"""

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from .core.constants import DEFAULT_HEIGHT, DEFAULT_VERTICAL_BAR_WIDTH, DEFAULT_WIDTH
from .logger import get_logger
from .ui.colors import Color, ColorLike, resolve_color
from .ui.components.box import BorderStyle, BorderStyleLike, BorderStyleName

logger = get_logger(__name__)

# A label is absent (None), automatic (True), or literal text
Label = Union[None, bool, str]

ColorStop = tuple[float, ColorLike]


class InvalidOptionError(ValueError):
    """Raised when an options mapping names something outside the registries."""


# camelCase spellings accepted by from_dict()
_KEY_ALIASES = {
    "borderStyle": "border_style",
    "borderColor": "border_color",
    "backgroundColor": "background_color",
    "labelColor": "label_color",
    "barColors": "bar_colors",
    "barWidth": "bar_width",
}


def _normalize_keys(data: dict) -> dict:
    return {_KEY_ALIASES.get(key, key): value for key, value in data.items()}


def _parse_int(data: dict, key: str, default: Optional[int]) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOptionError(f"{key} must be an integer, got {value!r}")
    return value


def _parse_color(data: dict, key: str) -> Optional[Color]:
    value = data.get(key)
    try:
        return resolve_color(value)
    except ValueError:
        raise InvalidOptionError(f"Unknown color for {key}: {value!r}") from None


def _parse_border_style(value: Any) -> Optional[BorderStyleLike]:
    if value is None:
        return None
    if isinstance(value, str):
        try:
            return BorderStyleName(value)
        except ValueError:
            raise InvalidOptionError(f"Unknown border style: {value!r}") from None
    if (
        isinstance(value, (list, tuple))
        and len(value) == len(BorderStyle._fields)
        and all(isinstance(glyph, str) for glyph in value)
    ):
        return BorderStyle(*value)
    raise InvalidOptionError(f"Border style must be a preset name or 8 glyphs, got {value!r}")


def _parse_label(value: Any) -> Label:
    if value is None or value is False:
        return None
    if value is True or isinstance(value, str):
        return value
    raise InvalidOptionError(f"label must be true, false or text, got {value!r}")


def _parse_bar_colors(value: Any) -> tuple:
    if not value:
        return ()
    stops = []
    for stop in value:
        try:
            fraction, color = stop
            stops.append((float(fraction), resolve_color(color)))
        except (TypeError, ValueError):
            raise InvalidOptionError(f"Bad bar color entry: {stop!r}") from None
    return tuple(stops)


def _border_style_to_json(style: Optional[BorderStyleLike]) -> Any:
    if style is None:
        return None
    if isinstance(style, str):
        return BorderStyleName(style).value
    return list(style)


def _styling_to_dict(options) -> dict:
    """Shared serialization for the styling fields of both option types."""
    d = {}
    if options.border_style is not None:
        d["border_style"] = _border_style_to_json(options.border_style)
    if options.label is not None:
        d["label"] = options.label
    for key in ("border_color", "background_color", "label_color"):
        color = resolve_color(getattr(options, key))
        if color is not None:
            d[key] = color.value
    if options.bar_colors:
        d["bar_colors"] = [
            [fraction, resolve_color(color).value] for fraction, color in options.bar_colors
        ]
    return d


@dataclass(frozen=True)
class HorizontalOptions:
    """Options for a left-to-right bar."""
    width: int = DEFAULT_WIDTH
    height: Optional[int] = None  # Rows including the border; default 3 bordered, 1 plain
    border_style: Optional[BorderStyleLike] = None
    label: Label = None
    border_color: Optional[ColorLike] = None
    background_color: Optional[ColorLike] = None
    label_color: Optional[ColorLike] = None
    bar_colors: tuple[ColorStop, ...] = ()

    def to_dict(self) -> dict:
        d = {"width": self.width}
        if self.height is not None:
            d["height"] = self.height
        d.update(_styling_to_dict(self))
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "HorizontalOptions":
        data = _normalize_keys(data)
        return cls(
            width=_parse_int(data, "width", DEFAULT_WIDTH),
            height=_parse_int(data, "height", None),
            border_style=_parse_border_style(data.get("border_style")),
            label=_parse_label(data.get("label")),
            border_color=_parse_color(data, "border_color"),
            background_color=_parse_color(data, "background_color"),
            label_color=_parse_color(data, "label_color"),
            bar_colors=_parse_bar_colors(data.get("bar_colors")),
        )


@dataclass(frozen=True)
class VerticalOptions:
    """Options for a bottom-to-top bar."""
    height: int = DEFAULT_HEIGHT
    width: Optional[int] = None  # Total width; default fits the bar and label
    bar_width: int = DEFAULT_VERTICAL_BAR_WIDTH
    border_style: Optional[BorderStyleLike] = None
    label: Label = None
    border_color: Optional[ColorLike] = None
    background_color: Optional[ColorLike] = None
    label_color: Optional[ColorLike] = None
    bar_colors: tuple[ColorStop, ...] = ()

    def to_dict(self) -> dict:
        d = {"height": self.height, "bar_width": self.bar_width}
        if self.width is not None:
            d["width"] = self.width
        d.update(_styling_to_dict(self))
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "VerticalOptions":
        data = _normalize_keys(data)
        return cls(
            height=_parse_int(data, "height", DEFAULT_HEIGHT),
            width=_parse_int(data, "width", None),
            bar_width=_parse_int(data, "bar_width", DEFAULT_VERTICAL_BAR_WIDTH),
            border_style=_parse_border_style(data.get("border_style")),
            label=_parse_label(data.get("label")),
            border_color=_parse_color(data, "border_color"),
            background_color=_parse_color(data, "background_color"),
            label_color=_parse_color(data, "label_color"),
            bar_colors=_parse_bar_colors(data.get("bar_colors")),
        )


def resolve_horizontal_options(
    width_or_options: Union[int, dict, HorizontalOptions]
) -> HorizontalOptions:
    """Accept a bare width, an options mapping, or HorizontalOptions."""
    if isinstance(width_or_options, HorizontalOptions):
        return width_or_options
    if isinstance(width_or_options, dict):
        return HorizontalOptions.from_dict(width_or_options)
    return HorizontalOptions(width=int(width_or_options))


def resolve_vertical_options(
    height_or_options: Union[int, dict, VerticalOptions]
) -> VerticalOptions:
    """Accept a bare height, an options mapping, or VerticalOptions."""
    if isinstance(height_or_options, VerticalOptions):
        return height_or_options
    if isinstance(height_or_options, dict):
        return VerticalOptions.from_dict(height_or_options)
    return VerticalOptions(height=int(height_or_options))


# ============================================================================
# Demo configuration
# ============================================================================

_RAINBOW = (
    (0, "magenta"), (1 / 6, "red"), (2 / 6, "yellow"),
    (3 / 6, "green"), (4 / 6, "cyan"), (5 / 6, "blue"),
)
_BRIGHT_RAINBOW = tuple((fraction, f"bright_{name}") for fraction, name in _RAINBOW)
_TRAFFIC_LIGHT = ((0, "green"), (0.5, "yellow"), (0.8, "red"))


def default_horizontal_bars() -> list[HorizontalOptions]:
    """Built-in horizontal showcase: one bar per border preset."""
    bars = [HorizontalOptions()]
    for style in ("regular", "dots", "fatdots", "dashed"):
        bars.append(HorizontalOptions(label=True, border_style=style))
    bars.append(HorizontalOptions(
        label=True, border_style="fatdashed", border_color="blue",
        label_color="blue", bar_colors=_TRAFFIC_LIGHT,
    ))
    bars.append(HorizontalOptions(label=True, border_style="rounded"))
    bars.append(HorizontalOptions(border_style="pixel"))
    bars.append(HorizontalOptions(border_style="fat"))
    bars.append(HorizontalOptions(border_style="fat+", bar_colors=_BRIGHT_RAINBOW))
    bars.append(HorizontalOptions(
        label=True, border_style="double", height=5, bar_colors=_RAINBOW,
    ))
    return bars


def default_vertical_bars() -> list[VerticalOptions]:
    """Built-in vertical showcase, mirroring the horizontal one."""
    bars = [VerticalOptions()]
    for style in ("regular", "dots", "fatdots", "dashed"):
        bars.append(VerticalOptions(label=True, border_style=style))
    bars.append(VerticalOptions(
        label=True, border_style="fatdashed", border_color="blue",
        label_color="blue", bar_colors=_TRAFFIC_LIGHT,
    ))
    bars.append(VerticalOptions(label=True, border_style="rounded"))
    bars.append(VerticalOptions(bar_width=1, border_style="pixel"))
    bars.append(VerticalOptions(bar_width=1, border_style="fat"))
    bars.append(VerticalOptions(bar_width=1, border_style="fat+", bar_colors=_BRIGHT_RAINBOW))
    bars.append(VerticalOptions(
        bar_width=4, label=True, border_style="double", bar_colors=_RAINBOW,
    ))
    return bars


@dataclass
class DemoConfig:
    """
    Settings for the animated demo.

    Bar widths (horizontal) and heights (vertical) are replaced by the
    terminal size on every frame; everything else comes from here.
    """
    duration: float = 15.0  # Seconds for one pass from 0% to 100%
    fps: float = 60.0
    pause: float = 1.0  # Seconds to hold a finished pass before switching
    message: str = "Press Control+C to exit."
    horizontal: list[HorizontalOptions] = field(default_factory=default_horizontal_bars)
    vertical: list[VerticalOptions] = field(default_factory=default_vertical_bars)

    def to_dict(self) -> dict:
        return {
            "duration": self.duration,
            "fps": self.fps,
            "pause": self.pause,
            "message": self.message,
            "horizontal": [bar.to_dict() for bar in self.horizontal],
            "vertical": [bar.to_dict() for bar in self.vertical],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DemoConfig":
        if not isinstance(data, dict):
            raise InvalidOptionError(f"Demo config must be a JSON object, got {type(data).__name__}")

        defaults = cls()
        horizontal = data.get("horizontal")
        vertical = data.get("vertical")
        try:
            config = cls(
                duration=float(data.get("duration", defaults.duration)),
                fps=float(data.get("fps", defaults.fps)),
                pause=float(data.get("pause", defaults.pause)),
                message=str(data.get("message", defaults.message)),
                horizontal=(
                    [HorizontalOptions.from_dict(bar) for bar in horizontal]
                    if horizontal is not None else defaults.horizontal
                ),
                vertical=(
                    [VerticalOptions.from_dict(bar) for bar in vertical]
                    if vertical is not None else defaults.vertical
                ),
            )
        except InvalidOptionError:
            raise
        except (TypeError, ValueError, AttributeError) as e:
            raise InvalidOptionError(f"Malformed demo config: {e}") from e

        for key in ("fps", "duration", "pause"):
            if not math.isfinite(getattr(config, key)):
                raise InvalidOptionError(f"{key} must be a finite number, got {getattr(config, key)}")
        if config.fps <= 0:
            raise InvalidOptionError(f"fps must be greater than 0, got {config.fps}")
        if config.duration < 0 or config.pause < 0:
            raise InvalidOptionError("duration and pause must not be negative")
        return config

    @classmethod
    def load(cls, path: Path) -> "DemoConfig":
        """Load demo settings, falling back to the built-in showcase."""
        if not path.exists():
            logger.debug("No demo config at %s, using defaults", path)
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return cls.from_dict(data)
        except (json.JSONDecodeError, OSError, InvalidOptionError) as e:
            logger.warning("Could not load demo config %s: %s", path, e)
            return cls()

    def save(self, path: Path):
        """Save demo settings as JSON."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
