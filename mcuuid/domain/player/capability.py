"""Player modes enabled for this process.

Read once at import, the way a build selects features: restrict it by setting
MCUUID_MODES (e.g. MCUUID_MODES='["offline"]') before mcuuid is imported.
A disabled mode can be neither constructed nor classified.
"""

from mcuuid.config import Config
from mcuuid.domain.player.model.value import Mode
from mcuuid.domain.shared.error import ConfigurationError

ENABLED_MODES: frozenset[Mode] = Config().modes


def is_enabled(mode: Mode) -> bool:
    return mode in ENABLED_MODES


def require(mode: Mode) -> None:
    """Raise ConfigurationError unless ``mode`` is enabled."""
    if not is_enabled(mode):
        raise ConfigurationError(f"{mode} mode is not enabled", code="mode_disabled")
