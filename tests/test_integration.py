"""Integration tests for end-to-end workflows."""

from megastore.cli.main import cli


def test_soft_delete_lifecycle_over_http(api_client):
    """Test create -> delete -> fetch -> restore -> fetch through the API."""
    # Step 1: Create
    response = api_client.post("/products/categories", json={"name": "hogar"})
    assert response.status_code == 200
    created = response.json()["data"]
    assert created["name"] == "Hogar"
    entry_id = created["id"]

    # Step 2: Delete
    response = api_client.delete(f"/products/categories/{entry_id}")
    assert response.status_code == 200
    assert response.json()["data"]["deletedAt"] is not None

    # Step 3: Fetch is refused while deleted
    response = api_client.get(f"/products/categories/{entry_id}")
    assert response.status_code == 400
    assert "is deleted" in response.json()["errorDetail"]

    # The record still shows up in the full listing
    listing = api_client.get("/products/categories").json()["data"]
    assert [e["id"] for e in listing] == [entry_id]

    # Step 4: Restore
    response = api_client.put(f"/products/categories/{entry_id}/restore")
    assert response.status_code == 200
    assert response.json()["data"]["deletedAt"] is None

    # Step 5: Fetch again
    response = api_client.get(f"/products/categories/{entry_id}")
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Hogar"


def test_api_and_cli_share_storage(cli_runner, temp_db, api_client):
    """Test that records created over HTTP are visible from the CLI."""
    api_client.post("/products/branches", json={"name": "sucursal 1"})

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "branch", "list"]
    )

    assert result.exit_code == 0
    assert "Sucursal 1" in result.output
