import pytest

from civic_blueprint.models.registry import (
    AssessmentItem,
    AxisDefinition,
    AxisItem,
    AxisPole,
    BoosterSet,
    DimensionDefinition,
    DomainDefinition,
    SpecDocument,
    Tradeoff,
    ValueDefinition,
    Vignette,
    VignetteOption,
)
from civic_blueprint.services.profile.builder import create_default_profile
from civic_blueprint.services.registry import SpecRegistry


def make_document(**overrides) -> SpecDocument:
    """Three values, two dimensions, three axes: small enough to check every number by hand."""
    data = dict(
        spec_version="test-1",
        values=(
            ValueDefinition(
                id="v_a",
                name="Value A",
                canonical_name="Alpha",
                dimension_id="d1",
                opposite_value_id="v_b",
                align_phrase="shares your take on A",
                differ_phrase="sees A differently",
                policy_contexts=("a-policy",),
            ),
            ValueDefinition(id="v_b", name="Value B", canonical_name="Beta", dimension_id="d2", opposite_value_id="v_a"),
            ValueDefinition(id="v_c", name="Value C", canonical_name="Gamma", dimension_id="d1", opposite_value_id="v_b"),
        ),
        dimensions=(
            DimensionDefinition(
                id="d1", name="Dim One", canonical_name="D1", value_ids=("v_a", "v_c"), opposite_dimension_id="d2"
            ),
            DimensionDefinition(id="d2", name="Dim Two", canonical_name="D2", value_ids=("v_b",), opposite_dimension_id="d1"),
        ),
        items=(
            AssessmentItem(id="i_a1", text="A plain", value_id="v_a"),
            AssessmentItem(id="i_a_rev", text="A reversed", value_id="v_a", reversed=True),
            AssessmentItem(
                id="i_b1",
                text="B over A",
                value_id="v_b",
                tradeoff=Tradeoff(opposing_value_id="v_a", opposing_weight=-0.5),
            ),
            AssessmentItem(id="i_c1", text="C heavy", value_id="v_c", weight=2.0),
        ),
        vignettes=(
            Vignette(
                id="vig1",
                scenario="Pick one",
                options=(
                    VignetteOption(id="vig1_a", text="A", value_id="v_a"),
                    VignetteOption(id="vig1_b", text="B", value_id="v_b"),
                    VignetteOption(id="vig1_c", text="C", value_id="v_c"),
                ),
            ),
            Vignette(
                id="vig2",
                scenario="Pick again",
                options=(
                    VignetteOption(id="vig2_b", text="B", value_id="v_b"),
                    VignetteOption(id="vig2_c", text="C", value_id="v_c"),
                ),
            ),
        ),
        booster_sets=(
            BoosterSet(
                id="boost",
                title="Booster",
                description="Extra",
                items=(AssessmentItem(id="boost_1", text="Boost B", value_id="v_b"),),
            ),
        ),
        domains=(
            DomainDefinition(id="dom1", name="Domain One", axis_ids=("ax1", "ax2")),
            DomainDefinition(id="dom2", name="Domain Two", axis_ids=("ax3",)),
        ),
        axes=(
            AxisDefinition(
                id="ax1", domain_id="dom1", name="Axis One", pole_a=AxisPole(label="Left"), pole_b=AxisPole(label="Right")
            ),
            AxisDefinition(
                id="ax2", domain_id="dom1", name="Axis Two", pole_a=AxisPole(label="Up"), pole_b=AxisPole(label="Down")
            ),
            AxisDefinition(
                id="ax3",
                domain_id="dom2",
                name="Axis Three",
                pole_a=AxisPole(label="Near"),
                pole_b=AxisPole(label="Far"),
                slider_positions=3,
            ),
        ),
        axis_items=(
            AxisItem(id="s1", text="s1", axis_keys={"ax1": 1}),
            AxisItem(id="s2", text="s2", axis_keys={"ax1": -1}),
            AxisItem(id="s3", text="s3", axis_keys={"ax2": 1}),
            AxisItem(id="s4", text="s4", axis_keys={"ax1": 1, "ax2": -1}),
            AxisItem(id="s5", text="s5", axis_keys={"ax3": 1}),
            AxisItem(id="s_ghost", text="ghost", axis_keys={"ghost_axis": 1}),
        ),
    )
    data.update(overrides)
    return SpecDocument(**data)


@pytest.fixture
def registry() -> SpecRegistry:
    return SpecRegistry(make_document())


@pytest.fixture
def profile(registry):
    return create_default_profile("user-1", registry)
