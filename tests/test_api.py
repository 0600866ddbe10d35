import pytest
from fastapi.testclient import TestClient

from civic_blueprint.core.app import app
from civic_blueprint.services.registry import get_default_registry


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def new_profile(client):
    response = client.post("/profile/default", json={"user_id": "api-user"})
    assert response.status_code == 200
    return response.json()


def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Civic Blueprint API is running"}
    health = client.get("/health").json()
    assert health["status"] == "ok"
    assert health["spec_version"] == get_default_registry().version


def test_values_spec(client):
    body = client.get("/values/spec").json()
    assert len(body["values"]) == 10
    assert len(body["dimensions"]) == 4


def test_vignettes_unshuffled(client):
    body = client.get("/values/vignettes", params={"randomize": "false"}).json()
    assert [v["id"] for v in body] == [v.id for v in get_default_registry().document.vignettes]


def test_boosters(client):
    listing = client.get("/values/boosters").json()
    assert [b["id"] for b in listing] == ["ai_regulation"]
    assert listing[0]["item_count"] == 3

    booster = client.get("/values/boosters/ai_regulation").json()
    assert len(booster["items"]) == 3
    assert client.get("/values/boosters/nope").status_code == 404


def test_score_values(client):
    vignette = get_default_registry().document.vignettes[0]
    picked = vignette.options[0]
    response = client.post(
        "/values/score",
        json={"vignette_responses": [{"vignette_id": vignette.id, "selected_option_id": picked.id}]},
    )
    assert response.status_code == 200
    body = response.json()
    top = max(body["values"], key=lambda v: v["ipsatized"])
    assert top["value_id"] == picked.value_id


def test_score_values_rejects_bad_response(client):
    response = client.post("/values/score", json={"responses": [{"item_id": "univ_1", "response": 9}]})
    assert response.status_code == 422


def test_axes_spec_and_score(client):
    spec = client.get("/axes/spec").json()
    assert len(spec["axes"]) == 15

    payload = {
        "swipes": [{"item_id": "econ_sn_1", "response": "strong_agree"}],
        "slider_positions": {"econ_investment": 4},
    }
    response = client.post("/axes/score", json=payload)
    assert response.status_code == 200
    scores = {s["axis_id"]: s for s in response.json()["scores"]}
    assert len(scores) == 15
    assert scores["econ_safetynet"]["normalized"] == 1.0
    assert scores["econ_investment"]["normalized"] == -1.0


def test_axes_score_bad_slider(client):
    response = client.post("/axes/score", json={"slider_positions": {"econ_investment": 9}})
    assert response.status_code == 400


def test_profile_lifecycle(client, new_profile):
    assert new_profile["user_id"] == "api-user"

    edited = client.post("/profile/axis", json={"profile": new_profile, "axis_id": "econ_safetynet", "value": 2})
    assert edited.status_code == 200
    axis = _axis(edited.json(), "econ_safetynet")
    assert (axis["value_0_10"], axis["source"], axis["learning_mode"]) == (2, "user_edited", "dampened")

    locked = client.post("/profile/axis/econ_safetynet/lock", json=edited.json()).json()
    assert _axis(locked, "econ_safetynet")["locked"] is True

    reset = client.post("/profile/axis/econ_safetynet/reset", json=locked).json()
    assert _axis(reset, "econ_safetynet")["value_0_10"] == 5

    fresh = client.post("/profile/reset", json=reset).json()
    assert fresh["user_id"] == "api-user"


def test_profile_swipes_and_sliders(client, new_profile):
    swiped = client.post(
        "/profile/swipes",
        json={"profile": new_profile, "swipes": [{"item_id": "econ_sn_2", "response": "strong_agree"}]},
    ).json()
    assert _axis(swiped, "econ_safetynet")["source"] == "learned_from_swipes"

    slid = client.post(
        "/profile/sliders",
        json={"profile": swiped, "positions": {"econ_safetynet": 0}, "importances": {"econ_safetynet": 10}},
    ).json()
    axis = _axis(slid, "econ_safetynet")
    assert (axis["value_0_10"], axis["importance"]) == (0, 10)


def test_profile_bad_edit(client, new_profile):
    response = client.post("/profile/axis", json={"profile": new_profile, "axis_id": "econ_safetynet", "value": 11})
    assert response.status_code == 400
    response = client.post("/profile/sliders", json={"profile": new_profile, "positions": {"econ_safetynet": 7}})
    assert response.status_code == 400


def test_proposition_from_axes(client):
    payload = {
        "item": {"id": "p1", "title": "Parks bond", "relevant_axes": ["x"], "yes_axis_effects": {"x": 1.0}},
        "axes": [{"id": "x", "name": "Investment", "value": 9, "pole_a": "Cut", "pole_b": "Invest"}],
    }
    body = client.post("/ballot/propositions/recommend", json=payload).json()
    assert body["vote"] == "yes"
    assert body["factors"] == ["Investment"]


def test_proposition_needs_axes_or_profile(client):
    payload = {"item": {"id": "p1", "title": "Parks bond"}}
    assert client.post("/ballot/propositions/recommend", json=payload).status_code == 400


def test_candidates_from_profile(client, new_profile):
    payload = {
        "profile": new_profile,
        "item": {
            "id": "race",
            "office": "Mayor",
            "candidates": [
                {"id": "far", "name": "Far", "stances": {"econ_safetynet": 0}},
                {"id": "near", "name": "Near", "stances": {"econ_safetynet": 5}},
            ],
        },
    }
    body = client.post("/ballot/candidates/match", json=payload).json()
    assert [m["candidate_id"] for m in body] == ["near", "far"]
    assert body[0]["match_percent"] == 100
    assert body[0]["is_best_match"] is True


def test_value_endpoints(client):
    registry = get_default_registry()
    value = registry.values[0]
    scores = [
        {
            "value_id": value.id,
            "name": value.name,
            "raw_mean": 5.0,
            "ipsatized": 1.0,
            "n_answered": 2,
            "dimension_id": value.dimension_id,
        }
    ]

    rec = client.post(
        "/ballot/propositions/value-recommend",
        json={"item": {"id": "p", "title": "P", "yes_value_effects": {value.id: 1.0}}, "value_scores": scores},
    ).json()
    assert rec["vote"] == "yes"

    matches = client.post(
        "/ballot/candidates/value-match",
        json={"candidates": [{"id": "c", "name": "C", "value_stances": {value.id: 1.0}}], "value_scores": scores},
    ).json()
    assert matches[0]["match_percent"] == 100
    assert matches[0]["details"][0]["policy_context"] == value.policy_contexts[0]


def _axis(profile: dict, axis_id: str) -> dict:
    return next(a for d in profile["domains"] for a in d["axes"] if a["axis_id"] == axis_id)


def test_next_axis_item(client):
    body = client.post("/axes/next", json={}).json()
    assert body["item"] is not None
    assert body["stop"] is False
    assert body["progress"]["questions_answered"] == 0
    assert body["progress"]["estimated_total"] == 15

    registry = get_default_registry()
    body = client.post("/axes/next", json={"selected_domains": ["health"]}).json()
    domains = {registry.get_axis(a).domain_id for a in body["item"]["axis_keys"] if registry.get_axis(a)}
    assert "health" in domains
