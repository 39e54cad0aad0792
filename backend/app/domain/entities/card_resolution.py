"""Result of resolving a public card link."""

from dataclasses import dataclass
from enum import Enum

from .digital_card import DigitalCard


class CardSource(str, Enum):
    """Where a resolved card came from."""

    LOCAL = "local"          # found in the store by id; counters were updated
    PORTABLE = "portable"    # decoded from the ``d`` query payload; read-only


@dataclass
class CardResolution:
    card: DigitalCard
    source: CardSource

    @property
    def is_portable(self) -> bool:
        return self.source == CardSource.PORTABLE
