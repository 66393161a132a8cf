def test_health_check(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Healthy"

# -------- AUTH TESTS --------
def test_register_and_login(client, user_data):
    # Register new user
    r = client.post("/register", json=user_data)
    assert r.status_code == 201
    resp = r.json()
    assert resp["username"] == user_data["username"]
    assert "id" in resp
    assert "password" not in resp
    assert "password_hash" not in resp

    # Duplicate username
    r2 = client.post("/register", json=user_data)
    assert r2.status_code == 409

    # Login with correct credentials
    r3 = client.post("/login", json=user_data)
    assert r3.status_code == 200
    assert "session_token" in r3.cookies

    # Login with incorrect password
    r4 = client.post("/login", json={"username": user_data["username"], "password": "wrongpw"})
    assert r4.status_code == 401

    # Login with nonexistent user
    r5 = client.post("/login", json={"username": "somebody", "password": "pw"})
    assert r5.status_code == 401

def test_check_auth_requires_session(client, user_data):
    # No cookie
    r = client.get("/check-auth")
    assert r.status_code == 401

    client.post("/register", json=user_data)
    client.post("/login", json=user_data)
    r2 = client.get("/check-auth")
    assert r2.status_code == 200

# ------- NOTES CRUD --------
def test_notes_crud(auth_client):
    # Empty notes list
    r = auth_client.get("/notes")
    assert r.status_code == 200
    assert r.json() == []

    # Create a note (valid)
    note_data = {"title": "First", "content": "Hello note"}
    r2 = auth_client.post("/notes", json=note_data)
    assert r2.status_code == 201
    note = r2.json()
    assert note["title"] == "First"
    assert note["content"] == "Hello note"
    note_id = note["id"]

    # List notes (should include the new one)
    notes = auth_client.get("/notes").json()
    assert len(notes) == 1
    assert notes[0]["title"] == "First"

    # Get note by ID (success)
    r3 = auth_client.get(f"/notes/{note_id}")
    assert r3.status_code == 200
    assert r3.json()["id"] == note_id

    # Update note
    update = {"content": "Updated!", "title": "Renamed"}
    r4 = auth_client.put(f"/notes/{note_id}", json=update)
    assert r4.status_code == 200
    assert r4.json()["content"] == "Updated!"
    assert r4.json()["title"] == "Renamed"
    assert auth_client.get(f"/notes/{note_id}").json()["title"] == "Renamed"

    # Delete note
    r5 = auth_client.delete(f"/notes/{note_id}")
    assert r5.status_code == 204
    assert r5.content == b""

    # Ensure note gone
    r6 = auth_client.get(f"/notes/{note_id}")
    assert r6.status_code == 404

def test_notes_auth_required(client):
    # All notes endpoints must require auth
    assert client.get("/notes").status_code == 401
    assert client.post("/notes", json={"title": "x"}).status_code == 401
    assert client.get("/notes/123").status_code == 401
    assert client.put("/notes/123", json={"title": "x"}).status_code == 401
    assert client.delete("/notes/123").status_code == 401

def test_notes_multi_user(auth_client, second_auth_client):
    # User 1 adds note
    r = auth_client.post("/notes", json={"title": "U1 note", "content": "Owned"})
    note_id = r.json()["id"]

    # User 2 cannot see, change or delete it
    notes2 = second_auth_client.get("/notes").json()
    assert all(n["id"] != note_id for n in notes2)

    r2 = second_auth_client.get(f"/notes/{note_id}")
    assert r2.status_code == 404

    r3 = second_auth_client.put(f"/notes/{note_id}", json={"title": "hax"})
    assert r3.status_code == 404

    r4 = second_auth_client.delete(f"/notes/{note_id}")
    assert r4.status_code == 404

    # Same response as for an id that was never created
    missing = second_auth_client.delete("/notes/999")
    assert r4.json() == missing.json()

    # Still intact for its owner
    owned = auth_client.get(f"/notes/{note_id}").json()
    assert owned["title"] == "U1 note"

def test_notes_search(auth_client):
    # Insert several notes
    for i in range(3):
        auth_client.post("/notes", json={"title": f"todo-{i}", "content": "mytask"})
    auth_client.post("/notes", json={"title": "Meeting", "content": "work"})
    # Search by title
    r = auth_client.get("/notes?q=todo")
    assert r.status_code == 200
    found = [note["title"] for note in r.json()]
    assert len(found) == 3
    assert all("todo" in t for t in found)
    # Search by content
    r2 = auth_client.get("/notes?q=work")
    assert len(r2.json()) == 1
    assert r2.json()[0]["title"] == "Meeting"

def test_create_note_invalid(auth_client):
    # Missing title
    r = auth_client.post("/notes", json={"content": "x"})
    assert r.status_code == 400
    # Whitespace-only title
    r2 = auth_client.post("/notes", json={"title": "   \t"})
    assert r2.status_code == 400

def test_update_note_not_found(auth_client):
    r = auth_client.put("/notes/999", json={"title": "nope"})
    assert r.status_code == 404

def test_delete_note_not_found(auth_client):
    r = auth_client.delete("/notes/999")
    assert r.status_code == 404

def test_duplicate_registration(client, user_data):
    r = client.post("/register", json=user_data)
    assert r.status_code == 201
    # Register duplicate should fail
    r2 = client.post("/register", json=user_data)
    assert r2.status_code == 409
