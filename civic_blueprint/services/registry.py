import json
import random
from functools import lru_cache
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from civic_blueprint.core.config import settings
from civic_blueprint.core.exceptions import SpecValidationError
from civic_blueprint.data import civic_axes, values
from civic_blueprint.models.registry import (
    AssessmentItem,
    AxisDefinition,
    AxisItem,
    AxisScoringConfig,
    BoosterSet,
    BoosterSetMeta,
    DimensionDefinition,
    DomainDefinition,
    SpecDocument,
    ValueDefinition,
    Vignette,
)


class SpecRegistry:
    """
    Read-only, versioned view over one SpecDocument.

    The registry validates structure once at construction and builds id lookup
    maps. It never hands out anything callers could mutate in place: models are
    frozen and shuffled vignettes are fresh copies.
    """

    def __init__(self, document: SpecDocument):
        self.document = document
        self._validate_unique_ids()
        self._validate_references()
        self._build_lookup_maps()

    @property
    def version(self) -> str:
        return self.document.spec_version

    def _validate_unique_ids(self):
        """Checks for duplicate ids within each namespace of the document."""
        doc = self.document
        vignette_items = [item for v in doc.vignettes for item in v.options]
        booster_items = [item for b in doc.booster_sets for item in b.items]
        namespaces = {
            "value": [v.id for v in doc.values],
            "dimension": [d.id for d in doc.dimensions],
            "vignette": [v.id for v in doc.vignettes],
            "booster set": [b.id for b in doc.booster_sets],
            # Likert, vignette-option and booster items share one response map
            "item": [i.id for i in doc.items] + [o.id for o in vignette_items] + [i.id for i in booster_items],
            "domain": [d.id for d in doc.domains],
            "axis": [a.id for a in doc.axes],
            "axis item": [i.id for i in doc.axis_items],
        }
        for label, ids in namespaces.items():
            seen: set[str] = set()
            for item_id in ids:
                if item_id in seen:
                    raise SpecValidationError(f"Duplicate {label} id found: {item_id}")
                seen.add(item_id)

    def _validate_references(self):
        """Checks that every cross-reference inside the document resolves."""
        doc = self.document
        value_ids = {v.id for v in doc.values}
        dimension_ids = {d.id for d in doc.dimensions}
        axis_ids = {a.id for a in doc.axes}
        domain_ids = {d.id for d in doc.domains}

        for value in doc.values:
            if value.dimension_id not in dimension_ids:
                raise SpecValidationError(f"Value '{value.id}' references unknown dimension '{value.dimension_id}'")
            if value.opposite_value_id not in value_ids:
                raise SpecValidationError(
                    f"Value '{value.id}' references unknown opposite value '{value.opposite_value_id}'"
                )
        for dimension in doc.dimensions:
            missing = [v for v in dimension.value_ids if v not in value_ids]
            if missing:
                raise SpecValidationError(f"Dimension '{dimension.id}' references unknown values: {missing}")
            if dimension.opposite_dimension_id not in dimension_ids:
                raise SpecValidationError(
                    f"Dimension '{dimension.id}' references unknown opposite '{dimension.opposite_dimension_id}'"
                )

        for item in self._iter_all_items():
            if item.value_id not in value_ids:
                raise SpecValidationError(f"Item '{item.id}' references unknown value '{item.value_id}'")
            if item.tradeoff and item.tradeoff.opposing_value_id not in value_ids:
                raise SpecValidationError(
                    f"Item '{item.id}' tradeoff references unknown value '{item.tradeoff.opposing_value_id}'"
                )

        for axis in doc.axes:
            if axis.domain_id not in domain_ids:
                raise SpecValidationError(f"Axis '{axis.id}' references unknown domain '{axis.domain_id}'")
        for domain in doc.domains:
            missing = [a for a in domain.axis_ids if a not in axis_ids]
            if missing:
                raise SpecValidationError(f"Domain '{domain.id}' references unknown axes: {missing}")

    def _iter_all_items(self):
        yield from self.document.items
        for vignette in self.document.vignettes:
            yield from vignette.to_items()
        for booster in self.document.booster_sets:
            yield from booster.items

    def _build_lookup_maps(self):
        """Builds dictionaries for quick lookup by id."""
        doc = self.document
        self.values_by_id: dict[str, ValueDefinition] = {v.id: v for v in doc.values}
        self.dimensions_by_id: dict[str, DimensionDefinition] = {d.id: d for d in doc.dimensions}
        self.vignettes_by_id: dict[str, Vignette] = {v.id: v for v in doc.vignettes}
        self.booster_sets_by_id: dict[str, BoosterSet] = {b.id: b for b in doc.booster_sets}
        self.domains_by_id: dict[str, DomainDefinition] = {d.id: d for d in doc.domains}
        self.axes_by_id: dict[str, AxisDefinition] = {a.id: a for a in doc.axes}
        self.axis_items_by_id: dict[str, AxisItem] = {i.id: i for i in doc.axis_items}

        vignette_items = tuple(item for v in doc.vignettes for item in v.to_items())
        booster_items = tuple(item for b in doc.booster_sets for item in b.items)
        # Scoring order: vignette options, Likert items, then booster items
        self.primary_items: tuple[AssessmentItem, ...] = vignette_items + doc.items
        self.supplementary_items: tuple[AssessmentItem, ...] = booster_items
        self.items_by_id: dict[str, AssessmentItem] = {
            i.id: i for i in self.primary_items + self.supplementary_items
        }

    # Values

    @property
    def values(self) -> tuple[ValueDefinition, ...]:
        return self.document.values

    @property
    def dimensions(self) -> tuple[DimensionDefinition, ...]:
        return self.document.dimensions

    @property
    def scored_items(self) -> tuple[AssessmentItem, ...]:
        return self.primary_items + self.supplementary_items

    def get_value(self, value_id: str) -> ValueDefinition | None:
        return self.values_by_id.get(value_id)

    def value_name(self, value_id: str) -> str:
        value = self.values_by_id.get(value_id)
        return value.name if value else value_id

    def get_vignette(self, vignette_id: str) -> Vignette | None:
        return self.vignettes_by_id.get(vignette_id)

    def get_vignettes(self, randomize: bool = True, rng: random.Random | None = None) -> list[Vignette]:
        """
        Return the vignettes, optionally shuffled.

        Vignette order and each vignette's option order are shuffled
        independently, always on copies; the registry itself is never reordered.
        """
        vignettes = list(self.document.vignettes)
        if not randomize:
            return vignettes

        rng = rng or random.Random()
        rng.shuffle(vignettes)
        shuffled = []
        for vignette in vignettes:
            options = list(vignette.options)
            rng.shuffle(options)
            shuffled.append(vignette.model_copy(update={"options": tuple(options)}))
        return shuffled

    def get_booster_sets_meta(self) -> list[BoosterSetMeta]:
        return [b.meta() for b in self.document.booster_sets]

    def get_booster_set(self, booster_id: str) -> BoosterSet | None:
        return self.booster_sets_by_id.get(booster_id)

    # Axes

    @property
    def domains(self) -> tuple[DomainDefinition, ...]:
        return self.document.domains

    @property
    def axes(self) -> tuple[AxisDefinition, ...]:
        return self.document.axes

    @property
    def axis_items(self) -> tuple[AxisItem, ...]:
        return self.document.axis_items

    @property
    def axis_scoring(self) -> AxisScoringConfig:
        return self.document.axis_scoring

    def get_axis(self, axis_id: str) -> AxisDefinition | None:
        return self.axes_by_id.get(axis_id)

    def get_axis_items_for(self, axis_id: str) -> list[AxisItem]:
        return [i for i in self.document.axis_items if axis_id in i.axis_keys]


def build_default_document() -> SpecDocument:
    """The bundled registry: values data plus civic axes data."""
    return SpecDocument(
        spec_version=f"values-{values.VALUES_SPEC_VERSION}+axes-{civic_axes.AXES_SPEC_VERSION}",
        values=values.VALUES,
        dimensions=values.DIMENSIONS,
        items=values.ITEMS,
        vignettes=values.VIGNETTES,
        booster_sets=values.BOOSTER_SETS,
        domains=civic_axes.DOMAINS,
        axes=civic_axes.AXES,
        axis_items=civic_axes.AXIS_ITEMS,
        axis_scoring=civic_axes.AXIS_SCORING,
    )


def load_registry(path: str | Path) -> SpecRegistry:
    """
    Load a registry from a JSON document.

    Raises:
        FileNotFoundError: the path does not exist
        SpecValidationError: the document does not parse or is structurally invalid
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Spec registry not found at {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            raw = json.load(f)
        document = SpecDocument.model_validate(raw)
    except json.JSONDecodeError as e:
        raise SpecValidationError(f"Error parsing JSON file {config_path}: {e}") from e
    except ValidationError as e:
        raise SpecValidationError(f"Error validating spec file {config_path}: {e}") from e

    registry = SpecRegistry(document)
    logger.info(f"Loaded spec registry {registry.version} from {config_path}")
    return registry


@lru_cache(maxsize=1)
def get_default_registry() -> SpecRegistry:
    """Process-wide registry: SPEC_PATH when configured, the bundled data otherwise."""
    if settings.SPEC_PATH:
        return load_registry(settings.SPEC_PATH)
    return SpecRegistry(build_default_document())
