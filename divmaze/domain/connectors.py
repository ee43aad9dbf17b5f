"""Connector validation and relocation."""

import logging
from typing import AbstractSet, Iterable, List, Optional

from ..utils.rng import SeededRNG, default_rng
from .types import Connector, Coord

logger = logging.getLogger(__name__)


class ConnectorPlanner:
    """
    Keeps connectors off chamber corners.

    A corner can never become an opening without breaking the outline of the
    chambers that meet there, so any connector sitting on one is moved to a
    random non-corner cell of its own wall segment.
    """

    def __init__(self, rng: Optional[SeededRNG] = None):
        self.rng = rng if rng is not None else default_rng
        self.warnings: List[str] = []

    @staticmethod
    def is_valid(connector: Connector, forbidden: AbstractSet[Coord]) -> bool:
        return connector.position not in forbidden

    @staticmethod
    def candidate_positions(connector: Connector, forbidden: AbstractSet[Coord]) -> List[Coord]:
        """Cells on the connector's wall segment that are not forbidden."""
        return [cell for cell in connector.candidates() if cell not in forbidden]

    def verify(self, connectors: Iterable[Connector], forbidden: AbstractSet[Coord]) -> int:
        """
        Relocate every connector that sits on a forbidden cell.

        Must run against the complete corner set, once all chambers are known.

        Args:
            connectors: Connectors to check, updated in place
            forbidden: Cells no connector may occupy

        Returns:
            Number of connectors that were relocated
        """
        self.warnings = []
        checked = 0
        relocated = 0

        for connector in connectors:
            checked += 1
            if self.is_valid(connector, forbidden):
                continue

            alternatives = self.candidate_positions(connector, forbidden)
            if not alternatives:
                message = (
                    f"No connector alternative was found for position {connector.position}, "
                    f"keeping the original position"
                )
                logger.warning(message)
                self.warnings.append(message)
                continue

            connector.relocate(self.rng.choice(alternatives))
            relocated += 1

        logger.info("Finished verifying %d and correcting %d connectors", checked, relocated)
        return relocated
