async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    response = await client.get("/")
    assert response.json()["message"] == "TaskPilot API is running"
