"""Flask route tests."""

import json

from conftest import FEEDBACK_PAYLOAD, PROFILE_PAYLOAD


def _generate_and_select(client, mock_llm):
    mock_llm.response = json.dumps(PROFILE_PAYLOAD)
    client.post("/api/icp/generate", json={"description": "AI compliance tool for architecture firms"})
    return client.post("/api/icp/select")


class TestShellRoutes:
    def test_index_renders(self, client):
        resp = client.get("/")

        assert resp.status_code == 200
        assert b"Nimbus Flux" in resp.data

    def test_initial_state(self, client):
        data = client.get("/api/state").get_json()

        assert data["view"] == "DASHBOARD"
        assert data["selectedProfile"] is None
        assert data["views"] == ["DASHBOARD", "ICP_GEN", "CREATIVE_LOOP", "CRM"]

    def test_switch_view(self, client):
        resp = client.post("/api/view", json={"view": "CRM"})

        assert resp.status_code == 200
        assert client.get("/api/state").get_json()["view"] == "CRM"

    def test_unknown_view(self, client):
        resp = client.post("/api/view", json={"view": "SETTINGS"})

        assert resp.status_code == 400

    def test_page_only_reorders_within_the_dragged_list(self, client):
        html = client.get("/").get_data(as_text=True)

        assert "JSON.stringify({ field, index: Number(e.target.dataset.index) })" in html
        assert "if (source.field !== field) return;" in html

    def test_page_saves_content_and_asset_type_on_change(self, client):
        html = client.get("/").get_data(as_text=True)

        assert "getElementById('content').addEventListener('change'" in html
        assert "getElementById('asset-type').addEventListener('change'" in html
        assert "function renderCreative(state, syncInputs = false)" in html


class TestIcpRoutes:
    def test_generate(self, client, mock_llm):
        mock_llm.response = json.dumps(PROFILE_PAYLOAD)

        resp = client.post("/api/icp/generate", json={"description": "legal AI"})

        data = resp.get_json()
        assert resp.status_code == 200
        assert data["status"] == "done"
        assert data["profile"]["role"] == "Compliance Officer"
        assert data["profile"]["id"]

    def test_generate_requires_description(self, client, mock_llm):
        resp = client.post("/api/icp/generate", json={"description": "   "})

        assert resp.status_code == 400
        assert mock_llm.call_count == 0

    def test_generate_rejects_non_string_description(self, client, mock_llm):
        resp = client.post("/api/icp/generate", json={"description": 42})

        assert resp.status_code == 400
        assert mock_llm.call_count == 0

    def test_generate_ignores_non_object_body(self, client, mock_llm):
        resp = client.post("/api/icp/generate", json=["legal AI"])

        assert resp.status_code == 400
        assert mock_llm.call_count == 0

    def test_generate_failure(self, client, mock_llm):
        mock_llm.should_fail = True

        resp = client.post("/api/icp/generate", json={"description": "legal AI"})

        assert resp.status_code == 500
        assert resp.get_json()["status"] == "failed"
        assert "error" in resp.get_json()

    def test_select_without_result(self, client):
        resp = client.post("/api/icp/select")

        assert resp.status_code == 400

    def test_select_switches_to_creative_loop(self, client, mock_llm):
        resp = _generate_and_select(client, mock_llm)

        data = resp.get_json()
        assert data["view"] == "CREATIVE_LOOP"
        state = client.get("/api/creative").get_json()
        assert state["workingProfile"]["role"] == "Compliance Officer"
        assert client.get("/api/state").get_json()["pipelineContext"] == "Compliance Officer"


class TestCreativeRoutes:
    def test_profile_list_editing(self, client, mock_llm):
        _generate_and_select(client, mock_llm)

        client.post("/api/creative/profile/goals/items", json={"value": "cut costs"})
        state = client.post("/api/creative/profile/goals/reorder", json={"from": 1, "to": 0}).get_json()
        assert state["workingProfile"]["goals"] == ["cut costs", "faster approvals"]

        state = client.delete("/api/creative/profile/goals/items/1").get_json()
        assert state["workingProfile"]["goals"] == ["cut costs"]

        selected = client.get("/api/state").get_json()["selectedProfile"]
        assert selected["goals"] == ["faster approvals"]

    def test_unknown_field(self, client):
        resp = client.post("/api/creative/profile/budget/items", json={"value": "x"})

        assert resp.status_code == 404

    def test_out_of_range_index(self, client):
        assert client.delete("/api/creative/profile/goals/items/0").status_code == 400
        resp = client.post("/api/creative/profile/goals/reorder", json={"from": 0, "to": 0})
        assert resp.status_code == 400

    def test_reorder_out_of_range_leaves_list_unchanged(self, client, mock_llm):
        _generate_and_select(client, mock_llm)

        resp = client.post("/api/creative/profile/goals/reorder", json={"from": 3, "to": 0})

        assert resp.status_code == 400
        assert client.get("/api/creative").get_json()["workingProfile"]["goals"] == ["faster approvals"]

    def test_list_edit_keeps_saved_content(self, client):
        client.post("/api/creative/content", json={"content": "Draft headline", "assetType": "value_prop"})

        state = client.post("/api/creative/profile/goals/items", json={"value": "cut costs"}).get_json()

        assert state["content"] == "Draft headline"
        assert state["assetType"] == "value_prop"

    def test_reorder_requires_integers(self, client):
        resp = client.post("/api/creative/profile/goals/reorder", json={"from": "a"})

        assert resp.status_code == 400

    def test_add_item_rejects_non_string_value(self, client):
        resp = client.post("/api/creative/profile/painPoints/items", json={"value": 5})

        assert resp.status_code == 400
        assert client.get("/api/creative").get_json()["workingProfile"]["painPoints"] == []

    def test_update_profile_rejects_non_string_fields(self, client):
        resp = client.post("/api/creative/profile", json={"role": "CMO", "companySize": 200})

        assert resp.status_code == 400
        assert client.get("/api/creative").get_json()["workingProfile"]["role"] == ""

    def test_non_string_content_is_rejected(self, client, mock_llm):
        mock_llm.response = json.dumps(FEEDBACK_PAYLOAD)

        assert client.post("/api/creative/content", json={"content": 123}).status_code == 400
        assert client.post("/api/creative/analyze", json={"content": ["x"]}).status_code == 400
        assert client.get("/api/creative").get_json()["content"] == ""

        client.post("/api/creative/content", json={"content": "Buy our tool now"})
        resp = client.post("/api/creative/analyze", json={})
        assert resp.status_code == 200
        assert mock_llm.call_count == 1

    def test_update_profile_fields(self, client):
        state = client.post("/api/creative/profile", json={"role": "CMO", "companySize": "Seed"}).get_json()

        assert state["workingProfile"]["role"] == "CMO"
        assert state["workingProfile"]["companySize"] == "Seed"

    def test_unknown_asset_type(self, client):
        resp = client.post("/api/creative/content", json={"assetType": "poster"})

        assert resp.status_code == 400

    def test_analyze_requires_content(self, client, mock_llm):
        resp = client.post("/api/creative/analyze", json={"content": ""})

        assert resp.status_code == 400
        assert mock_llm.call_count == 0

    def test_analyze_and_apply_revision(self, client, mock_llm):
        mock_llm.response = json.dumps(FEEDBACK_PAYLOAD)
        client.post("/api/creative/profile/painPoints/items", json={"value": "slow approvals"})

        resp = client.post("/api/creative/analyze", json={"content": "Buy our tool now", "assetType": "copy"})

        data = resp.get_json()
        assert resp.status_code == 200
        assert data["status"] == "done"
        assert data["feedback"]["score"] == 45
        assert data["feedback"]["band"] == "low"

        data = client.post("/api/creative/apply-revision").get_json()
        assert data["content"] == "Cut approval delays with our tool"
        assert data["feedback"] is None
        assert data["status"] == "idle"

    def test_apply_revision_without_feedback(self, client):
        assert client.post("/api/creative/apply-revision").status_code == 400

    def test_analyze_failure(self, client, mock_llm):
        mock_llm.response = "{broken json"

        resp = client.post("/api/creative/analyze", json={"content": "Buy our tool now"})

        assert resp.status_code == 500
        state = client.get("/api/creative").get_json()
        assert state["status"] == "failed"
        assert state["feedback"] is None


class TestStaticRoutes:
    def test_dashboard(self, client):
        data = client.get("/api/dashboard").get_json()

        assert len(data["stats"]) == 4
        assert data["throughput"][0]["name"] == "Mon"

    def test_leads_board(self, client):
        columns = client.get("/api/leads").get_json()["columns"]

        assert [c["status"] for c in columns] == ["new", "contacted", "qualified", "closed"]
        assert columns[0]["count"] == 2

    def test_leads_filter(self, client):
        columns = client.get("/api/leads?q=legaltech").get_json()["columns"]

        assert sum(c["count"] for c in columns) == 2
