from uuid import UUID, uuid4

from sqlalchemy import func, select

from taskpilot_db.models import Tag, Task, TaskTemplate

from .utils import (archive, create_project, create_tag, create_task,
                    create_template)


async def test_create_project(client, alice):
    project = await create_project(client, alice)
    assert project["title"] == "Launch"
    assert project["description"] == "Q3 release"
    assert project["archived"] is False
    assert project["owner"]["id"] == alice.id
    assert [_["id"] for _ in project["members"]] == [alice.id]
    assert project["createdAt"].endswith("Z")


async def test_create_project_requires_title(client, alice):
    response = await client.post("/api/project", json={"title": ""}, headers=alice.headers)
    assert response.status_code == 422


async def test_projects_are_split_by_archived_state(client, alice):
    live = await create_project(client, alice, "Live")
    frozen = await create_project(client, alice, "Frozen")
    await archive(client, alice, frozen["id"])

    projects = (await client.get("/api/project", headers=alice.headers)).json()
    archived = (await client.get("/api/project/archived", headers=alice.headers)).json()
    assert [_["id"] for _ in projects] == [live["id"]]
    assert [_["id"] for _ in archived] == [frozen["id"]]
    assert archived[0]["archived"] is True


async def test_projects_list_only_own_projects(client, alice, bob):
    await create_project(client, alice)
    response = await client.get("/api/project", headers=bob.headers)
    assert response.json() == []


async def test_get_project(client, alice, bob):
    project = await create_project(client, alice)
    response = await client.get(f"/api/project/{project['id']}", headers=alice.headers)
    assert response.status_code == 200
    assert response.json() == project

    response = await client.get(f"/api/project/{project['id']}", headers=bob.headers)
    assert response.status_code == 403
    assert response.json()["detail"] == "Not authorized - you do not own this project"


async def test_get_missing_project(client, alice):
    missing = uuid4()
    response = await client.get(f"/api/project/{missing}", headers=alice.headers)
    assert response.status_code == 404
    assert response.json()["detail"] == f"Project not found, project_id: {missing}"


async def test_unauthenticated_before_not_found(client):
    response = await client.get(f"/api/project/{uuid4()}")
    assert response.status_code == 401


async def test_archive_and_unarchive(client, alice):
    project = await create_project(client, alice)
    response = await client.post(f"/api/project/{project['id']}/archive", headers=alice.headers)
    assert response.json()["archived"] is True
    response = await client.post(f"/api/project/{project['id']}/unarchive", headers=alice.headers)
    assert response.status_code == 200
    assert response.json()["archived"] is False


async def test_only_owner_changes_project_lifecycle(client, alice, bob):
    project = await create_project(client, alice)
    url = f"/api/project/{project['id']}"

    response = await client.post(f"{url}/archive", headers=bob.headers)
    assert response.status_code == 403
    assert response.json()["detail"] == "Not authorized - only owner can archive"

    response = await client.post(f"{url}/unarchive", headers=bob.headers)
    assert response.json()["detail"] == "Not authorized - only owner can unarchive"

    response = await client.delete(url, headers=bob.headers)
    assert response.status_code == 403
    assert response.json()["detail"] == "Not authorized"

    response = await client.get(url, headers=alice.headers)
    assert response.json()["archived"] is False


async def test_delete_project_cascades(client, db, alice):
    project = await create_project(client, alice)
    other = await create_project(client, alice, "Other")
    tag = await create_tag(client, alice, project["id"])
    await create_task(client, alice, project["id"], tagIds=[tag["id"]])
    await create_template(client, alice, project["id"])
    kept = await create_task(client, alice, other["id"])

    response = await client.delete(f"/api/project/{project['id']}", headers=alice.headers)
    assert response.status_code == 200
    assert response.json() is True

    response = await client.get(f"/api/project/{project['id']}", headers=alice.headers)
    assert response.status_code == 404
    async with db.context_session() as session:
        for model in (Task, Tag, TaskTemplate):
            count = await session.scalar(select(func.count())
                                         .select_from(model)
                                         .where(model.project_id == UUID(project["id"])))
            assert count == 0
    tasks = (await client.get(f"/api/task/by_project/{other['id']}", headers=alice.headers)).json()
    assert [_["id"] for _ in tasks] == [kept["id"]]
