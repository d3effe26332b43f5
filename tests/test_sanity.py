from fastapi.testclient import TestClient
import asserts

from main import app, db

client = TestClient(app)


def test_count_endpoint():
    db.create_tables()
    response = client.get("/rest/players/count")
    asserts.assert_equal(response.status_code, 200)
    asserts.assert_true(isinstance(response.json(), int))
