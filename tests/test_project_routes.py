"""API tests for /projects endpoints."""


class TestProjectEndpoints:

    def test_create_and_list(self, client, owner_headers):
        created = client.post(
            "/projects", json={"name": "Website", "description": "Public site"}, headers=owner_headers
        )
        assert created.status_code == 201
        project = created.json()["data"]["project"]
        assert project["name"] == "Website"
        assert project["status"] == "active"

        listed = client.get("/projects", headers=owner_headers)
        assert listed.status_code == 200
        assert [p["id"] for p in listed.json()["data"]["projects"]] == [project["id"]]

    def test_get_update_delete(self, client, project, owner_headers):
        fetched = client.get(f"/projects/{project.id}", headers=owner_headers)
        assert fetched.status_code == 200
        assert fetched.json()["data"]["project"]["ownerId"] == project.owner_id

        updated = client.put(
            f"/projects/{project.id}", json={"status": "completed"}, headers=owner_headers
        )
        assert updated.status_code == 200
        assert updated.json()["data"]["project"]["status"] == "completed"
        assert updated.json()["data"]["project"]["name"] == project.name

        deleted = client.delete(f"/projects/{project.id}", headers=owner_headers)
        assert deleted.status_code == 200
        assert deleted.json() == {"success": True, "data": None, "message": "Project deleted successfully"}

        assert client.get(f"/projects/{project.id}", headers=owner_headers).status_code == 404

    def test_non_owner_forbidden(self, client, project, outsider_headers):
        assert client.get(f"/projects/{project.id}", headers=outsider_headers).status_code == 403
        assert client.put(
            f"/projects/{project.id}", json={"name": "Mine"}, headers=outsider_headers
        ).status_code == 403
        assert client.delete(f"/projects/{project.id}", headers=outsider_headers).status_code == 403

    def test_validation(self, client, owner_headers):
        response = client.post("/projects", json={"name": "   "}, headers=owner_headers)
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Project name is required"

    def test_unknown_update_field(self, client, project, owner_headers):
        response = client.put(f"/projects/{project.id}", json={"ownerId": "x"}, headers=owner_headers)
        assert response.status_code == 400
