"""Custom Textual widgets for netcfg.

This package contains all custom widgets organized by domain.
"""

from ui.widgets.fields import (
    FieldRow,
    OptionCard,
)
from ui.widgets.network import (
    NetworkListItem,
    SelectedNetworkCard,
    signal_bars,
)

__all__ = [
    # Field widgets
    "FieldRow",
    "OptionCard",
    # Network widgets
    "NetworkListItem",
    "SelectedNetworkCard",
    "signal_bars",
]
