"""Employee Routes — HTTP surface of the audited write path and history read.

Invariants:
    - POST /employees → 201, one history row
    - PATCH without job change leaves history alone; with job change appends one row
    - Second job change on the same day → 409 HISTORY_WRITE_FAILED
    - GET /employees/{id}/history → 404 envelope for unknown ids
    - Constraint violations (taken email, unknown job) → 409 WRITE_REJECTED, not 503
"""

from tests.services.helpers import NEW_HIRE

BASE = "/api/v1/employees"


def _payload(**overrides) -> dict:
    body = {**NEW_HIRE, **overrides}
    body["hire_date"] = body["hire_date"].isoformat()
    return body


async def test_create_employee_returns_201(seeded_client):
    res = await seeded_client.post(BASE, json=_payload())
    assert res.status_code == 201
    body = res.json()
    assert body["id"] == 9
    assert body["job_id"] == "MEDIAPLAN"


async def test_created_employee_has_one_history_row(seeded_client):
    created = (await seeded_client.post(BASE, json=_payload())).json()

    res = await seeded_client.get(f"{BASE}/{created['id']}/history")

    assert res.status_code == 200
    history = res.json()["history"]
    assert len(history) == 1
    assert history[0]["end_date"] is None
    assert history[0]["job_id"] == "MEDIAPLAN"
    assert history[0]["department_id"] == 1


async def test_patch_without_job_change_keeps_history(seeded_client):
    res = await seeded_client.patch(f"{BASE}/1", json={"first_name": "Linda"})
    assert res.status_code == 200
    assert res.json()["first_name"] == "Linda"

    history = (await seeded_client.get(f"{BASE}/1/history")).json()["history"]
    assert len(history) == 1


async def test_patch_job_change_appends_row(seeded_client):
    res = await seeded_client.patch(f"{BASE}/4", json={"job_id": "QCENGR"})
    assert res.status_code == 200

    history = (await seeded_client.get(f"{BASE}/4/history")).json()["history"]
    assert [h["job_id"] for h in history] == ["VPQC", "QCENGR"]
    assert history[0]["start_date"] == "1951-11-18"
    assert history[0]["end_date"] == "1998-02-10"
    assert history[1]["end_date"] is None


async def test_second_job_change_same_day_conflicts(seeded_client):
    await seeded_client.patch(f"{BASE}/4", json={"job_id": "QCENGR"})

    res = await seeded_client.patch(f"{BASE}/4", json={"job_id": "GENMGR"})

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "HISTORY_WRITE_FAILED"
    current = (await seeded_client.get(f"{BASE}/4")).json()
    assert current["job_id"] == "QCENGR"


async def test_history_unknown_employee_returns_404(seeded_client):
    res = await seeded_client.get(f"{BASE}/999999/history")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["context"]["employee_id"] == 999999


async def test_history_rejects_zero_id(seeded_client):
    res = await seeded_client.get(f"{BASE}/0/history")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_patch_self_manager_returns_400(seeded_client):
    res = await seeded_client.patch(f"{BASE}/3", json={"manager_id": 3})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "SELF_MANAGEMENT"


async def test_patch_cannot_null_mandatory_field(seeded_client):
    res = await seeded_client.patch(f"{BASE}/3", json={"job_id": None})
    assert res.status_code == 400


async def test_get_unknown_employee_returns_404(seeded_client):
    res = await seeded_client.get(f"{BASE}/424242")
    assert res.status_code == 404


async def test_duplicate_email_returns_409(seeded_client):
    res = await seeded_client.post(BASE, json=_payload(email="lomalley0@ed.gov"))

    assert res.status_code == 409
    error = res.json()["error"]
    assert error["code"] == "WRITE_REJECTED"
    assert error["context"]["operation"] == "insert"


async def test_patch_unknown_job_returns_409_and_keeps_history(seeded_client):
    res = await seeded_client.patch(f"{BASE}/1", json={"job_id": "NOPE"})

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "WRITE_REJECTED"
    history = (await seeded_client.get(f"{BASE}/1/history")).json()["history"]
    assert len(history) == 1
