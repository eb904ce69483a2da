"""
Tests for registration and login
"""

from talentshine.core.hasher import PasswordHelper
from talentshine.models.user import User


def register_payload(**overrides):
    payload = {
        "firstName": "Nusrat",
        "lastName": "Jahan",
        "email": "nusrat@example.com",
        "password": "pass1234",
        "phone": "01811223344",
    }
    payload.update(overrides)
    return payload


def test_register_creates_user(client, database):
    response = client.post("/register", json=register_payload(balance=1000))

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User registered successfully"
    assert data["result"]["acknowledged"] is True
    user_id = data["result"]["insertedId"]

    with database.session() as db:
        user = db.query(User).filter(User.email == "nusrat@example.com").first()
        assert user is not None
        assert user.id == user_id
        assert user.first_name == "Nusrat"
        assert user.last_name == "Jahan"
        assert user.phone == "01811223344"
        assert float(user.balance) == 1000
        # stored as a bcrypt hash, never as the submitted text
        assert user.password != "pass1234"
        assert PasswordHelper.check_password("pass1234", user.password)


def test_register_defaults_balance_to_zero(client, database):
    response = client.post("/register", json=register_payload())

    assert response.status_code == 201
    with database.session() as db:
        user = db.query(User).filter(User.email == "nusrat@example.com").first()
        assert float(user.balance) == 0


def test_register_duplicate_email_conflicts(client, database):
    assert client.post("/register", json=register_payload()).status_code == 201

    response = client.post(
        "/register", json=register_payload(firstName="Other", phone="01900000000")
    )

    assert response.status_code == 409
    assert response.json() == {"message": "Email already registered"}
    with database.session() as db:
        assert db.query(User).count() == 1


def test_register_missing_fields_rejected(client, database):
    for field in ("firstName", "lastName", "email", "password"):
        payload = register_payload()
        del payload[field]

        response = client.post("/register", json=payload)

        assert response.status_code == 400, field
        assert response.json()["message"] == "Missing required fields"

    response = client.post("/register", json=register_payload(lastName="   "))
    assert response.status_code == 400

    with database.session() as db:
        assert db.query(User).count() == 0


def test_register_malformed_email_rejected(client):
    response = client.post("/register", json=register_payload(email="not-an-email"))

    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"


def test_register_negative_balance_rejected(client):
    response = client.post("/register", json=register_payload(balance=-5))

    assert response.status_code == 400


def test_login_returns_user(client, make_user):
    user_id = make_user(balance=250, phone="01700000001", password="hunter22")

    response = client.post(
        "/login", json={"phone": "01700000001", "password": "hunter22"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["user"]["id"] == user_id
    assert data["user"]["phone"] == "01700000001"
    assert data["user"]["balance"] == 250
    assert "firstName" in data["user"]
    assert "password" not in data["user"]


def test_login_wrong_password(client, make_user):
    make_user(phone="01700000002", password="right-one")

    response = client.post(
        "/login", json={"phone": "01700000002", "password": "wrong-one"}
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Incorrect password"}


def test_login_missing_password_is_a_mismatch(client, make_user):
    make_user(phone="01700000003")

    response = client.post("/login", json={"phone": "01700000003"})

    assert response.status_code == 401


def test_login_accepts_numeric_password(client, make_user):
    make_user(phone="01700000005", password="1234")

    ok = client.post("/login", json={"phone": "01700000005", "password": 1234})
    wrong = client.post("/login", json={"phone": "01700000005", "password": 4321})

    assert ok.status_code == 200
    assert wrong.status_code == 401
    assert wrong.json() == {"message": "Incorrect password"}


def test_login_unknown_phone(client, make_user):
    make_user(phone="01700000004")

    response = client.post("/login", json={"phone": "01999999999", "password": "x"})

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_login_without_phone_is_not_found(client, database):
    with database.session() as db:
        db.add(
            User(
                first_name="No",
                last_name="Phone",
                email="nophone@example.com",
                password=PasswordHelper.hash_password("pw"),
            )
        )
        db.commit()

    response = client.post("/login", json={"password": "pw"})

    assert response.status_code == 404


def test_register_then_login(client):
    client.post("/register", json=register_payload(balance=50))

    response = client.post(
        "/login", json={"phone": "01811223344", "password": "pass1234"}
    )

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "nusrat@example.com"
    assert response.json()["user"]["balance"] == 50
