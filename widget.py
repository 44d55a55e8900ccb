# widget.py
"""
Widget module.
Lays out the stripe widgets: a title bar followed by one colored
horizontal stripe per weather sample. Produces a plain layout model;
app.py turns it into HTML.
"""

from dataclasses import asdict, dataclass, field
from typing import List, Optional

from colors import color_for_cloud_cover, color_for_temperature
from weather import CloudSample, TemperatureData

BACKGROUND = '#1c1c1c'
TITLE_GRADIENT = ('#b22222', '#8b0000')
TITLE_SIZE = (160, 30)
PADDING = 10
SPACER = 1

STRIPE_WIDTH = 160
CURRENT_STRIPE_HEIGHT = 10
HISTORY_STRIPE_HEIGHT = 11
# Vertical space shared by the cloud stripes
CLOUD_BODY_HEIGHT = 120
MIN_STRIPE_HEIGHT = 2


@dataclass
class Stripe:
    color: str
    width: int
    height: int
    label: str = ''


@dataclass
class Widget:
    title: str
    stripes: List[Stripe] = field(default_factory=list)
    background: str = BACKGROUND
    error: Optional[str] = None


def _format_reading(value, unit):
    return 'n/a' if value is None else f"{value:g}{unit}"


def build_temperature_widget(title: str, data: TemperatureData) -> Widget:
    """
    Build the temperature stripes: the current year on top, then the past
    years in the order they were fetched (newest first).
    """
    current = data.current
    stripes = [Stripe(
        color=color_for_temperature(current.temperature),
        width=STRIPE_WIDTH,
        height=CURRENT_STRIPE_HEIGHT,
        label=f"{current.year}: {_format_reading(current.temperature, '°C')}",
    )]
    for sample in data.historical:
        stripes.append(Stripe(
            color=color_for_temperature(sample.temperature),
            width=STRIPE_WIDTH,
            height=HISTORY_STRIPE_HEIGHT,
            label=f"{sample.year}: {_format_reading(sample.temperature, '°C')}",
        ))
    return Widget(title=title, stripes=stripes)


def build_cloud_widget(title: str, samples: List[CloudSample]) -> Widget:
    """
    Build the cloud stripes, one per forecast hour, sharing the body height.
    """
    height = max(MIN_STRIPE_HEIGHT, CLOUD_BODY_HEIGHT // max(1, len(samples)) - SPACER)
    stripes = [
        Stripe(
            color=color_for_cloud_cover(sample.cloud_cover),
            width=STRIPE_WIDTH,
            height=height,
            label=f"{sample.time:%a %H:00}: {_format_reading(sample.cloud_cover, '%')}",
        )
        for sample in samples
    ]
    return Widget(title=title, stripes=stripes)


def build_error_widget(message: str) -> Widget:
    """Widget shown when a run fails."""
    return Widget(title='', error=f"Error: {message}")


def to_dict(widget: Widget) -> dict:
    return asdict(widget)
