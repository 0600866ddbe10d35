"""
Bundled values registry, version 1.0.0.

Ten basic values grouped into four higher-order dimensions. Every value has a
circumplex opposite; every dimension has an opposite dimension.
"""

from civic_blueprint.models.registry import (
    AssessmentItem,
    BoosterSet,
    DimensionDefinition,
    Tradeoff,
    ValueDefinition,
    Vignette,
    VignetteOption,
)

VALUES_SPEC_VERSION = "1.0.0"

DIMENSIONS: tuple[DimensionDefinition, ...] = (
    DimensionDefinition(
        id="self_transcendence",
        name="Caring for Others",
        canonical_name="Self-Transcendence",
        description="Concern for the welfare of others and nature, beyond personal interests.",
        value_ids=("universalism", "benevolence"),
        opposite_dimension_id="self_enhancement",
    ),
    DimensionDefinition(
        id="self_enhancement",
        name="Getting Ahead",
        canonical_name="Self-Enhancement",
        description="Pursuing personal success, status, and influence.",
        value_ids=("achievement", "power"),
        opposite_dimension_id="self_transcendence",
    ),
    DimensionDefinition(
        id="openness",
        name="Embracing Change",
        canonical_name="Openness to Change",
        description="Valuing independent thought, action, and readiness for new experiences.",
        value_ids=("self_direction", "stimulation", "hedonism"),
        opposite_dimension_id="conservation",
    ),
    DimensionDefinition(
        id="conservation",
        name="Preserving Stability",
        canonical_name="Conservation",
        description="Emphasis on order, self-restriction, preservation of the past, and resistance to change.",
        value_ids=("security", "conformity", "tradition"),
        opposite_dimension_id="openness",
    ),
)

VALUES: tuple[ValueDefinition, ...] = (
    ValueDefinition(
        id="universalism",
        name="Fairness & Equality",
        canonical_name="Universalism",
        description="Understanding, tolerance, and protection for the welfare of all people and nature.",
        dimension_id="self_transcendence",
        opposite_value_id="power",
        align_phrase="shares your belief that we do better when we look out for everyone",
        differ_phrase="takes a different view on ensuring equal opportunity for all",
        policy_contexts=("social equity", "environmental protection", "civil rights"),
    ),
    ValueDefinition(
        id="benevolence",
        name="Helping Others",
        canonical_name="Benevolence",
        description="Preserving and enhancing the welfare of the people around you.",
        dimension_id="self_transcendence",
        opposite_value_id="achievement",
        align_phrase="shares your focus on helping others in the community",
        differ_phrase="prioritizes differently when it comes to community support",
        policy_contexts=("community programs", "social services", "healthcare"),
    ),
    ValueDefinition(
        id="tradition",
        name="Tradition",
        canonical_name="Tradition",
        description="Respect for and commitment to the customs and ideas of one's culture or faith.",
        dimension_id="conservation",
        opposite_value_id="self_direction",
        align_phrase="shares your respect for established ways and traditions",
        differ_phrase="is more open to moving away from traditional approaches",
        policy_contexts=("cultural policy", "family values", "religious liberty"),
    ),
    ValueDefinition(
        id="conformity",
        name="Respect for Rules",
        canonical_name="Conformity",
        description="Restraint of actions likely to upset or harm others and violate social expectations.",
        dimension_id="conservation",
        opposite_value_id="stimulation",
        align_phrase="shares your belief in following rules and maintaining order",
        differ_phrase="favors more flexibility in how rules are applied",
        policy_contexts=("law enforcement", "regulatory compliance", "civic duty"),
    ),
    ValueDefinition(
        id="security",
        name="Safety & Stability",
        canonical_name="Security",
        description="Safety, harmony, and stability of society, relationships, and self.",
        dimension_id="conservation",
        opposite_value_id="hedonism",
        align_phrase="shares your priority for safety and stability",
        differ_phrase="weighs safety concerns differently than you do",
        policy_contexts=("public safety", "national security", "economic stability"),
    ),
    ValueDefinition(
        id="power",
        name="Influence & Leadership",
        canonical_name="Power",
        description="Social status and prestige, control over people and resources.",
        dimension_id="self_enhancement",
        opposite_value_id="universalism",
        align_phrase="shares your view on strong leadership and decisive action",
        differ_phrase="takes a different approach to authority and influence",
        policy_contexts=("governance", "leadership", "institutional authority"),
    ),
    ValueDefinition(
        id="achievement",
        name="Personal Success",
        canonical_name="Achievement",
        description="Personal success through demonstrating competence according to social standards.",
        dimension_id="self_enhancement",
        opposite_value_id="benevolence",
        align_phrase="shares your drive for success and results",
        differ_phrase="measures success differently than you do",
        policy_contexts=("economic growth", "competitiveness", "performance standards"),
    ),
    ValueDefinition(
        id="hedonism",
        name="Enjoying Life",
        canonical_name="Hedonism",
        description="Pleasure and enjoyment of life.",
        dimension_id="openness",
        opposite_value_id="security",
        align_phrase="shares your appreciation for quality of life",
        differ_phrase="prioritizes personal fulfillment differently",
        policy_contexts=("arts & culture", "recreation", "quality of life"),
    ),
    ValueDefinition(
        id="stimulation",
        name="New Experiences",
        canonical_name="Stimulation",
        description="Excitement, novelty, and challenge in life.",
        dimension_id="openness",
        opposite_value_id="conformity",
        align_phrase="shares your appetite for new approaches and change",
        differ_phrase="prefers more measured, incremental change",
        policy_contexts=("innovation", "reform", "new initiatives"),
    ),
    ValueDefinition(
        id="self_direction",
        name="Independence",
        canonical_name="Self-Direction",
        description="Independent thought and action: choosing, creating, exploring.",
        dimension_id="openness",
        opposite_value_id="tradition",
        align_phrase="shares your value of independence and personal choice",
        differ_phrase="favors more collective approaches over individual freedom",
        policy_contexts=("personal freedom", "entrepreneurship", "individual rights"),
    ),
)


def _item(item_id: str, text: str, value_id: str, opposing: str | None = None) -> AssessmentItem:
    tradeoff = Tradeoff(opposing_value_id=opposing, opposing_weight=-0.5) if opposing else None
    return AssessmentItem(id=item_id, text=text, value_id=value_id, weight=1.0, tradeoff=tradeoff)


ITEMS: tuple[AssessmentItem, ...] = (
    # Single-value items, two per value
    _item(
        "univ_1",
        "Everyone deserves equal access to opportunities, regardless of their background.",
        "universalism",
    ),
    _item("univ_2", "Policies should protect the environment, even when it costs money or jobs.", "universalism"),
    _item("bene_1", "Government should fund programs that help struggling families in our community.", "benevolence"),
    _item("bene_2", "A strong society takes care of its most vulnerable members.", "benevolence"),
    _item("trad_1", "Policies should respect and preserve traditional values and ways of life.", "tradition"),
    _item("trad_2", "Religious and cultural traditions should have a voice in public life.", "tradition"),
    _item("conf_1", "Strong law enforcement is essential for a well-functioning society.", "conformity"),
    _item("conf_2", "People have a duty to follow laws and social norms, even ones they disagree with.", "conformity"),
    _item("secu_1", "Public safety should be a top priority for government.", "security"),
    _item("secu_2", "A stable, predictable society is better than one that is constantly changing.", "security"),
    _item(
        "powr_1",
        "Effective leaders need the authority to make decisions without too much interference.",
        "power",
    ),
    _item("powr_2", "Those who have built success and wealth have earned their influence in society.", "power"),
    _item("achi_1", "People who work hard and excel should be rewarded more than those who do not.", "achievement"),
    _item("achi_2", "Competition brings out the best in people and drives progress.", "achievement"),
    _item("hedo_1", "Quality of life and personal happiness matter as much as economic productivity.", "hedonism"),
    _item("hedo_2", "Government should not restrict personal lifestyle choices that do not harm others.", "hedonism"),
    _item(
        "stim_1",
        "We should embrace new technologies and ways of doing things, even if they are disruptive.",
        "stimulation",
    ),
    _item("stim_2", "Taking calculated risks on innovative policies can lead to better outcomes.", "stimulation"),
    _item(
        "sdir_1",
        "People should be free to make their own choices without government interference.",
        "self_direction",
    ),
    _item("sdir_2", "Individual liberty is one of the most important values a society can protect.", "self_direction"),
    # Tradeoff items: agreeing counts toward one value and against its paired value
    _item(
        "trade_1",
        "When national security and welcoming immigrants conflict, security should come first.",
        "security",
        opposing="universalism",
    ),
    _item(
        "trade_2",
        "Government programs should prioritize helping those who are struggling, "
        "even if it means less reward for high achievers.",
        "benevolence",
        opposing="achievement",
    ),
    _item(
        "trade_3",
        "People should be free to live by their own rules, even if their choices go against social norms.",
        "self_direction",
        opposing="conformity",
    ),
    _item(
        "trade_4",
        "It is better to preserve time-tested traditions than to constantly experiment with new approaches.",
        "tradition",
        opposing="stimulation",
    ),
    _item(
        "trade_5",
        "Some personal freedoms are worth sacrificing for greater public safety.",
        "security",
        opposing="self_direction",
    ),
    _item(
        "trade_6",
        "Reducing inequality is more important than protecting the advantages of those who have already succeeded.",
        "universalism",
        opposing="power",
    ),
    _item(
        "trade_7",
        "We should help those in need through community support, not just expect everyone to be self-reliant.",
        "benevolence",
        opposing="power",
    ),
    _item(
        "trade_8",
        "A society that rewards individual merit is fairer than one focused on equal outcomes for everyone.",
        "achievement",
        opposing="universalism",
    ),
    _item(
        "trade_9",
        "Respecting established customs and institutions matters more than individual self-expression.",
        "tradition",
        opposing="self_direction",
    ),
    _item(
        "trade_10",
        "People have a responsibility to contribute to society, even if it means sacrificing personal enjoyment.",
        "conformity",
        opposing="hedonism",
    ),
)


def _vignette(vignette_id: str, scenario: str, *options: tuple[str, str]) -> Vignette:
    return Vignette(
        id=vignette_id,
        scenario=scenario,
        options=tuple(
            VignetteOption(id=f"{vignette_id}_{value_id}", text=text, value_id=value_id) for value_id, text in options
        ),
    )


VIGNETTES: tuple[Vignette, ...] = (
    _vignette(
        "vig_budget",
        "Your city has an unexpected budget surplus. Which use would you argue for at the council meeting?",
        ("benevolence", "Expand the food bank and emergency rent assistance."),
        ("security", "Hire more first responders and upgrade emergency systems."),
        ("achievement", "Fund a business incubator to attract high-growth employers."),
        ("stimulation", "Pilot a new transit technology no other city has tried."),
    ),
    _vignette(
        "vig_school",
        "A local school board is rewriting its mission statement. Which priority should lead?",
        ("achievement", "Push every student toward measurable academic excellence."),
        ("tradition", "Pass on the community's history and shared customs."),
        ("self_direction", "Teach students to think for themselves and question assumptions."),
        ("universalism", "Make sure every student, whatever their background, gets a fair shot."),
    ),
    _vignette(
        "vig_protest",
        "A large protest is planned downtown on a weekday. What matters most to you about how the city responds?",
        ("conformity", "Protesters follow permit rules and do not disrupt traffic."),
        ("self_direction", "People are free to make their voices heard without interference."),
        ("security", "Nobody gets hurt and property stays safe."),
        ("universalism", "Every group gets the same treatment, whatever their cause."),
    ),
    _vignette(
        "vig_park",
        "An old downtown lot is being redeveloped. Which proposal would you support?",
        ("hedonism", "A lively park with food stalls, music, and open-air events."),
        ("tradition", "Restore the historic market hall that once stood there."),
        ("power", "A new civic center that anchors the city's regional influence."),
        ("benevolence", "Affordable housing for families on the waitlist."),
    ),
    _vignette(
        "vig_tech",
        "A company wants to test self-driving delivery robots on your street. Your first reaction?",
        ("stimulation", "Exciting. Let's be the neighborhood that tries it first."),
        ("security", "Only once it has been proven safe somewhere else."),
        ("conformity", "Fine, as long as it follows every existing traffic rule."),
        ("hedonism", "Great if it means less time running errands and more free time."),
    ),
    _vignette(
        "vig_leader",
        "You are choosing a leader for a neighborhood association. Which quality matters most?",
        ("power", "Someone with the clout to get city hall to listen."),
        ("achievement", "Someone with a record of getting results."),
        ("benevolence", "Someone who genuinely cares about every neighbor."),
        ("tradition", "Someone who respects how the association has always worked."),
    ),
    _vignette(
        "vig_rules",
        "A neighbor has built an unpermitted but harmless backyard studio. What should happen?",
        ("conformity", "It should be permitted properly or removed. Rules apply to everyone."),
        ("self_direction", "It is their property. Leave them alone."),
        ("universalism", "Whatever happens should be what would happen to anyone else."),
        ("power", "The city should enforce its authority so others do not follow suit."),
    ),
    _vignette(
        "vig_weekend",
        "The city is choosing one new weekend program. Which would you vote for?",
        ("hedonism", "Free concerts and festivals in public parks."),
        ("stimulation", "Rotating pop-up events that are different every month."),
        ("benevolence", "Volunteer days that pair residents with neighbors in need."),
        ("security", "Community safety workshops and emergency preparedness fairs."),
    ),
)

BOOSTER_SETS: tuple[BoosterSet, ...] = (
    BoosterSet(
        id="ai_regulation",
        version=1,
        title="AI & Technology Regulation",
        description="Answer 3 quick questions about AI policy to refine your recommendations.",
        items=(
            _item(
                "boost_ai_1",
                "The government should set strict rules on how companies use artificial intelligence.",
                "security",
                opposing="self_direction",
            ),
            _item(
                "boost_ai_2",
                "AI tools should be freely available to everyone, even if some people misuse them.",
                "self_direction",
                opposing="conformity",
            ),
            _item(
                "boost_ai_3",
                "Protecting people's jobs is more important than letting companies automate with AI.",
                "benevolence",
                opposing="achievement",
            ),
        ),
    ),
)
