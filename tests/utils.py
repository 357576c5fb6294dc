from httpx import AsyncClient

PASSWORD = "correct-horse"


class Account:
    def __init__(self, payload: dict):
        self.token = payload["token"]
        self.user = payload["user"]
        self.id = payload["user"]["id"]
        self.email = payload["user"]["email"]
        self.headers = {"Authorization": f"Bearer {self.token}"}


async def register(client: AsyncClient, name: str) -> Account:
    response = await client.post("/api/auth/register",
                                 json={"name": name.title(),
                                       "email": f"{name}@taskpilot.dev",
                                       "password": PASSWORD})
    assert response.status_code == 200, response.text
    return Account(response.json())


async def create_project(client: AsyncClient, account: Account, title: str = "Launch") -> dict:
    response = await client.post("/api/project",
                                 json={"title": title, "description": "Q3 release"},
                                 headers=account.headers)
    assert response.status_code == 200, response.text
    return response.json()


async def create_task(client: AsyncClient, account: Account, project_id: str, **fields) -> dict:
    response = await client.post(f"/api/task/{project_id}",
                                 json={"title": "Draft copy", **fields},
                                 headers=account.headers)
    assert response.status_code == 200, response.text
    return response.json()


async def create_tag(client: AsyncClient, account: Account, project_id: str,
                     name: str = "Urgent", color: str | None = "#EF4444") -> dict:
    response = await client.post(f"/api/tag/{project_id}",
                                 json={"name": name, "color": color},
                                 headers=account.headers)
    assert response.status_code == 200, response.text
    return response.json()


async def create_template(client: AsyncClient, account: Account, project_id: str, **fields) -> dict:
    response = await client.post(f"/api/template/{project_id}",
                                 json={"name": "Bug report", "title": "Fix bug", **fields},
                                 headers=account.headers)
    assert response.status_code == 200, response.text
    return response.json()


async def archive(client: AsyncClient, account: Account, project_id: str) -> None:
    response = await client.post(f"/api/project/{project_id}/archive", headers=account.headers)
    assert response.status_code == 200, response.text
