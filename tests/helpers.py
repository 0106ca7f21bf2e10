def create_goal(client, headers, **fields) -> dict:
    body = {"title": "Run", "targetCount": 10, "unit": "km", "month": "2026-10"}
    body.update(fields)
    response = client.post("/goals", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def create_team(client, headers, name: str = "A") -> dict:
    response = client.post("/team/create", json={"name": name}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()["team"]


def record_check(client, headers, goal_id: str, date: str, value=None):
    body = {"goalId": goal_id, "date": date}
    if value is not None:
        body["value"] = value
    return client.post("/checks", json=body, headers=headers)
