"""
Bundled civic axes registry, version 1.0.0.

Five policy domains, three bipolar axes each. Swipe cards carry an axis key:
+1 means agreeing pushes toward pole A, -1 means agreeing pushes toward pole B.
"""

from civic_blueprint.models.registry import AxisDefinition, AxisItem, AxisPole, AxisScoringConfig, DomainDefinition

AXES_SPEC_VERSION = "1.0.0"

DOMAINS: tuple[DomainDefinition, ...] = (
    DomainDefinition(
        id="econ",
        name="Economic Opportunity",
        why="Taxes, public programs, and schools shape what people can afford and achieve.",
        axis_ids=("econ_safetynet", "econ_investment", "econ_school_choice"),
    ),
    DomainDefinition(
        id="health",
        name="Healthcare",
        why="Coverage and costs decide who gets care and what it costs households.",
        axis_ids=("health_coverage_model", "health_cost_control", "health_public_health"),
    ),
    DomainDefinition(
        id="housing",
        name="Housing & Transportation",
        why="Zoning, rents, and transit set where people can live and how they get around.",
        axis_ids=("housing_supply_zoning", "housing_affordability_tools", "housing_transport_priority"),
    ),
    DomainDefinition(
        id="justice",
        name="Justice & Public Safety",
        why="Policing, sentencing, and firearm rules determine how safety is pursued.",
        axis_ids=("justice_policing_accountability", "justice_sentencing_goals", "justice_firearms"),
    ),
    DomainDefinition(
        id="climate",
        name="Climate & Energy",
        why="Energy choices and permitting rules trade off cost, speed, and emissions.",
        axis_ids=("climate_ambition", "climate_energy_portfolio", "climate_permitting"),
    ),
)


def _axis(axis_id: str, domain_id: str, name: str, question: str, pole_a: str, pole_b: str) -> AxisDefinition:
    return AxisDefinition(
        id=axis_id,
        domain_id=domain_id,
        name=name,
        description=question,
        pole_a=AxisPole(label=pole_a),
        pole_b=AxisPole(label=pole_b),
    )


AXES: tuple[AxisDefinition, ...] = (
    _axis(
        "econ_safetynet",
        "econ",
        "Safety Net",
        "Should government help be available to more people with fewer requirements?",
        "Broader Safety Net",
        "More Conditional Safety Net",
    ),
    _axis(
        "econ_investment",
        "econ",
        "Public Investment",
        "Should we pay more in taxes to fund public services?",
        "More Public Investment",
        "Lower Taxes, Less Spending",
    ),
    _axis(
        "econ_school_choice",
        "econ",
        "School Funding",
        "Should education funding focus on public schools or follow student choice?",
        "Strengthen Public Schools",
        "Expand School Choice",
    ),
    _axis(
        "health_coverage_model",
        "health",
        "Coverage Model",
        "Should government offer health insurance to everyone?",
        "More Government Insurance",
        "More Private Insurance",
    ),
    _axis(
        "health_cost_control",
        "health",
        "Cost Control",
        "Should government set limits on healthcare prices?",
        "Government Price Limits",
        "Market Competition",
    ),
    _axis(
        "health_public_health",
        "health",
        "Public Health",
        "How should government approach public health and drug policy?",
        "Prevention & Treatment",
        "Personal Choice & Enforcement",
    ),
    _axis(
        "housing_supply_zoning",
        "housing",
        "Housing Supply",
        "Should cities allow more housing to be built in existing neighborhoods?",
        "Build More, Allow Density",
        "Preserve, Limit Growth",
    ),
    _axis(
        "housing_affordability_tools",
        "housing",
        "Affordability Tools",
        "Should government control rents and build public housing?",
        "Rent Limits & Public Housing",
        "Build More, Fewer Rules",
    ),
    _axis(
        "housing_transport_priority",
        "housing",
        "Transportation Priority",
        "Should cities invest more in transit or roads?",
        "Transit & Biking",
        "Roads & Parking",
    ),
    _axis(
        "justice_policing_accountability",
        "justice",
        "Policing",
        "How much oversight should police have?",
        "More Oversight & Alternatives",
        "More Police & Enforcement",
    ),
    _axis(
        "justice_sentencing_goals",
        "justice",
        "Sentencing Goals",
        "Should the justice system focus on rehabilitation or punishment?",
        "Focus on Rehabilitation",
        "Focus on Punishment",
    ),
    _axis(
        "justice_firearms",
        "justice",
        "Firearms",
        "How much regulation should there be on firearms?",
        "Stronger Gun Safety Rules",
        "Fewer Restrictions",
    ),
    _axis(
        "climate_ambition",
        "climate",
        "Climate Ambition",
        "How quickly should we act on climate change?",
        "Act Fast on Climate",
        "Go Slow, Keep Costs Low",
    ),
    _axis(
        "climate_energy_portfolio",
        "climate",
        "Energy Mix",
        "What energy sources should we prioritize?",
        "Solar & Wind First",
        "Mix of All Energy",
    ),
    _axis(
        "climate_permitting",
        "climate",
        "Permitting",
        "How should we balance environmental review with project speed?",
        "Thorough Review First",
        "Faster Approvals",
    ),
)


def _card(item_id: str, text: str, axis_id: str, key: int, level: str = "general", *tags: str) -> AxisItem:
    return AxisItem(id=item_id, text=text, axis_keys={axis_id: key}, level=level, tags=tags)


AXIS_ITEMS: tuple[AxisItem, ...] = (
    _card("econ_sn_1", "Unemployment benefits should be easy to get when people lose a job.", "econ_safetynet", 1),
    _card("econ_sn_2", "People receiving public assistance should have to look for work.", "econ_safetynet", -1),
    _card("econ_inv_1", "I would pay more in local taxes for better parks, libraries, and roads.", "econ_investment", 1),
    _card("econ_inv_2", "Government should cut spending before it raises any taxes.", "econ_investment", -1),
    _card(
        "econ_sc_1",
        "Public money should stay in neighborhood public schools.",
        "econ_school_choice",
        1,
        "local",
        "education",
    ),
    _card(
        "econ_sc_2",
        "Families should be able to take their education funding to any school they choose.",
        "econ_school_choice",
        -1,
        "state",
        "education",
    ),
    _card(
        "health_cov_1",
        "Everyone should be able to buy into a public health plan.",
        "health_coverage_model",
        1,
    ),
    _card(
        "health_cov_2",
        "Private insurers compete better than any government plan could.",
        "health_coverage_model",
        -1,
    ),
    _card("health_cost_1", "The state should cap what hospitals charge for common procedures.", "health_cost_control", 1),
    _card("health_cost_2", "Price transparency and competition will lower costs on their own.", "health_cost_control", -1),
    _card(
        "health_ph_1",
        "Addiction should be treated as a health problem before a criminal one.",
        "health_public_health",
        1,
    ),
    _card(
        "health_ph_2",
        "Drug laws should be enforced firmly to protect neighborhoods.",
        "health_public_health",
        -1,
    ),
    _card(
        "housing_zone_1",
        "Apartments should be allowed near transit even in single-family neighborhoods.",
        "housing_supply_zoning",
        1,
        "local",
        "zoning",
    ),
    _card(
        "housing_zone_2",
        "Neighborhoods should be able to block large new buildings.",
        "housing_supply_zoning",
        -1,
        "local",
        "zoning",
    ),
    _card(
        "housing_aff_1",
        "Annual rent increases should be capped by law.",
        "housing_affordability_tools",
        1,
    ),
    _card(
        "housing_aff_2",
        "Cutting permit red tape does more for affordability than rent control.",
        "housing_affordability_tools",
        -1,
    ),
    _card(
        "housing_tr_1",
        "Cities should turn some car lanes into bus and bike lanes.",
        "housing_transport_priority",
        1,
        "local",
    ),
    _card(
        "housing_tr_2",
        "Road repair and parking should come before new transit projects.",
        "housing_transport_priority",
        -1,
        "local",
    ),
    _card(
        "justice_pol_1",
        "An independent board should investigate police misconduct.",
        "justice_policing_accountability",
        1,
    ),
    _card(
        "justice_pol_2",
        "Our city needs more police officers on patrol.",
        "justice_policing_accountability",
        -1,
    ),
    _card(
        "justice_sent_1",
        "Prisons should focus on education and job training for inmates.",
        "justice_sentencing_goals",
        1,
    ),
    _card(
        "justice_sent_2",
        "Repeat offenders should face much longer sentences.",
        "justice_sentencing_goals",
        -1,
    ),
    _card("justice_gun_1", "All gun sales should require a background check.", "justice_firearms", 1, "state"),
    _card("justice_gun_2", "Gun owners face too many rules already.", "justice_firearms", -1, "state"),
    _card(
        "climate_amb_1",
        "We should cut emissions quickly even if energy bills rise.",
        "climate_ambition",
        1,
        "state",
        "climate",
    ),
    _card(
        "climate_amb_2",
        "Climate rules should wait until cleaner options are cheaper.",
        "climate_ambition",
        -1,
        "state",
        "climate",
    ),
    _card(
        "climate_mix_1",
        "New power plants should be solar or wind whenever possible.",
        "climate_energy_portfolio",
        1,
    ),
    _card(
        "climate_mix_2",
        "Natural gas and nuclear should stay in the energy mix.",
        "climate_energy_portfolio",
        -1,
    ),
    _card(
        "climate_perm_1",
        "Large projects should finish full environmental review before they start.",
        "climate_permitting",
        1,
    ),
    _card(
        "climate_perm_2",
        "Permits for clean energy projects should be fast-tracked.",
        "climate_permitting",
        -1,
    ),
    AxisItem(
        id="cross_public_1",
        text="Government should play a bigger role in healthcare and housing alike.",
        axis_keys={"health_coverage_model": 1, "housing_affordability_tools": 1},
        tags=("cross_domain",),
    ),
)

AXIS_SCORING = AxisScoringConfig()
