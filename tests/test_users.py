from app.data.models.user import UserModel


def test_register_stores_hash_not_plaintext(client, db):
    resp = client.post(
        "/auth/register",
        json={"name": "Budi", "email": "budi@example.com", "password": "rahasia"},
    )
    assert resp.status_code == 200
    assert resp.json()["message"] == "Registration successful!"

    user = db.get(UserModel, resp.json()["id"])
    assert user.password != "rahasia"
    assert user.password.startswith("scrypt:")


def test_register_duplicate_email_conflicts(client, register):
    register(email="dup@example.com")
    resp = client.post(
        "/auth/register",
        json={"name": "Other", "email": "dup@example.com", "password": "x"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "User already exists or invalid data"


def test_register_requires_all_fields(client):
    resp = client.post("/auth/register", json={"name": "Budi", "email": "b@example.com"})
    assert resp.status_code == 400

    resp = client.post(
        "/auth/register",
        json={"name": "", "email": "b@example.com", "password": "x"},
    )
    assert resp.status_code == 400


def test_login_success_returns_public_fields(client, register):
    user_id = register()
    resp = client.post("/auth/login", json={"email": "budi@example.com", "password": "rahasia"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["user"] == {"id": user_id, "name": "Budi", "profile_picture": None}
    assert "password" not in body["user"]


def test_login_failures_are_indistinguishable(client, register):
    register()
    wrong_password = client.post(
        "/auth/login", json={"email": "budi@example.com", "password": "salah"}
    )
    unknown_email = client.post(
        "/auth/login", json={"email": "nobody@example.com", "password": "rahasia"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["detail"] == "Invalid email or password"


def test_get_user_profile(client, register):
    user_id = register()
    resp = client.get(f"/users/{user_id}")
    assert resp.status_code == 200
    assert resp.json() == {"id": user_id, "name": "Budi", "profile_picture": None, "address": None}

    assert client.get("/users/999").status_code == 404


def test_update_profile_picture_and_address(client, register):
    user_id = register()

    resp = client.put(
        f"/users/{user_id}/profile-picture",
        json={"profile_picture_url": "https://img.example.com/me.png"},
    )
    assert resp.status_code == 200
    resp = client.put(f"/users/{user_id}/address", json={"address": "Jl. Merdeka 1"})
    assert resp.status_code == 200

    profile = client.get(f"/users/{user_id}").json()
    assert profile["profile_picture"] == "https://img.example.com/me.png"
    assert profile["address"] == "Jl. Merdeka 1"


def test_update_profile_picture_unknown_user(client):
    resp = client.put("/users/42/profile-picture", json={"profile_picture_url": "x"})
    assert resp.status_code == 404


def test_register_rejects_whitespace_only_fields(client, db):
    resp = client.post(
        "/auth/register",
        json={"name": "   ", "email": "   ", "password": "x"},
    )
    assert resp.status_code == 400
    assert db.query(UserModel).count() == 0


def test_register_trims_name_and_email(client, db):
    resp = client.post(
        "/auth/register",
        json={"name": "  Budi ", "email": " Budi@Example.com ", "password": " rahasia "},
    )
    assert resp.status_code == 200

    user = db.get(UserModel, resp.json()["id"])
    assert user.name == "Budi"
    assert user.email == "budi@example.com"

    # haslo bez obcinania
    ok = client.post("/auth/login", json={"email": "budi@example.com", "password": " rahasia "})
    assert ok.status_code == 200
    bad = client.post("/auth/login", json={"email": "budi@example.com", "password": "rahasia"})
    assert bad.status_code == 400


def test_update_address_rejects_blank(client, register):
    user_id = register()
    resp = client.put(f"/users/{user_id}/address", json={"address": "  "})
    assert resp.status_code == 400
