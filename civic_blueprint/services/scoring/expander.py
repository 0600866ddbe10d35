from collections.abc import Iterable

from loguru import logger

from civic_blueprint.core.constants import VIGNETTE_SELECTED_RESPONSE, VIGNETTE_UNSELECTED_RESPONSE
from civic_blueprint.models.responses import ItemResponse, VignetteResponse
from civic_blueprint.services.registry import SpecRegistry


class ResponseExpander:
    """
    Turns forced-choice vignette picks into item-level responses.

    The picked option becomes a 5 for its value and every competing option a 1,
    so vignettes and Likert items go through the same scoring path.
    """

    def __init__(self, registry: SpecRegistry):
        self.registry = registry

    def expand_vignette_responses(self, vignette_responses: Iterable[VignetteResponse]) -> list[ItemResponse]:
        synthetic: list[ItemResponse] = []
        for vr in vignette_responses:
            vignette = self.registry.get_vignette(vr.vignette_id)
            if vignette is None:
                logger.debug(f"Skipping response for unknown vignette '{vr.vignette_id}'")
                continue

            for option in vignette.options:
                response = (
                    VIGNETTE_SELECTED_RESPONSE if option.id == vr.selected_option_id else VIGNETTE_UNSELECTED_RESPONSE
                )
                synthetic.append(ItemResponse(item_id=option.id, response=response))
        return synthetic


def merge_responses(*groups: Iterable[ItemResponse]) -> dict[str, int]:
    """
    Merge response groups into one item id -> response map.

    Later entries overwrite earlier ones for the same item (last write wins).
    Keys keep the order in which each item id was first seen.
    """
    merged: dict[str, int] = {}
    for group in groups:
        for r in group:
            merged[r.item_id] = r.response
    return merged
