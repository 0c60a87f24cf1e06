from models import AuditLog, Guest, Room


# ---------- guests ----------

def test_create_guest(client):
    resp = client.post("/guests", json={"name": " Ada Lovelace ", "email": "Ada@Example.com", "phone": "+44 20 0000"})

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["name"] == "Ada Lovelace"
    assert data["email"] == "ada@example.com"
    assert AuditLog.query.filter_by(action="GUEST_CREATE").count() == 1


def test_create_guest_duplicate_email(client, make_guest):
    make_guest(email="ada@example.com")

    resp = client.post("/guests", json={"name": "Ada again", "email": "ADA@example.com"})

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Email already exists"}
    assert Guest.query.count() == 1


def test_create_guest_validation(client):
    resp = client.post("/guests", json={"email": "not-an-email"})

    assert resp.status_code == 400
    message = resp.get_json()["message"]
    assert "name: Field required" in message
    assert "email: " in message


def test_list_guests(client, make_guest):
    for _ in range(3):
        make_guest()

    payload = client.get("/guests?limit=2").get_json()

    assert len(payload["data"]) == 2
    assert payload["pagination"] == {"total": 3, "page": 1, "limit": 2, "pages": 2}


def test_get_guest(client, make_guest):
    guest_id = make_guest(name="Grace")

    assert client.get(f"/guests/{guest_id}").get_json()["data"]["name"] == "Grace"
    assert client.get("/guests/999").status_code == 404
    assert client.get("/guests/grace").status_code == 400


def test_update_guest(client, make_guest):
    guest_id = make_guest()

    resp = client.put(f"/guests/{guest_id}", json={"phone": "", "name": None})

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["phone"] is None
    assert data["name"] == "Guest 1"


def test_update_guest_to_taken_email(client, make_guest):
    make_guest(email="taken@example.com")
    guest_id = make_guest()

    resp = client.put(f"/guests/{guest_id}", json={"email": "taken@example.com"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Email already exists"


def test_delete_guest(client, make_guest):
    guest_id = make_guest()

    assert client.delete(f"/guests/{guest_id}").status_code == 200
    assert client.delete(f"/guests/{guest_id}").status_code == 404


# ---------- rooms ----------

def test_create_room(client):
    resp = client.post("/rooms", json={"number": "204", "type": "suite", "price": "310.5"})

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["number"] == "204"
    assert data["price"] == 310.5


def test_create_room_duplicate_number(client, make_room):
    make_room(number="204")

    resp = client.post("/rooms", json={"number": "204", "type": "single", "price": 90})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Number already exists"
    assert Room.query.count() == 1


def test_create_room_negative_price(client):
    resp = client.post("/rooms", json={"number": "1", "type": "single", "price": -1})

    assert resp.status_code == 400
    assert resp.get_json()["message"].startswith("price: ")


def test_list_rooms_by_type(client, make_room):
    make_room(type="single")
    suite = make_room(type="suite")

    data = client.get("/rooms?type=suite").get_json()["data"]

    assert [r["id"] for r in data] == [suite]


def test_update_room_price_to_zero(client, make_room):
    room_id = make_room()

    resp = client.put(f"/rooms/{room_id}", json={"price": 0})

    assert resp.status_code == 200
    assert resp.get_json()["data"]["price"] == 0


def test_delete_room(client, make_room):
    room_id = make_room()

    resp = client.delete(f"/rooms/{room_id}")

    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Room deleted successfully"
    assert client.get(f"/rooms/{room_id}").status_code == 404


def test_create_room_rejects_boolean_and_infinite_price(client):
    boolean = client.post("/rooms", json={"number": "7", "type": "single", "price": True})
    infinite = client.post(
        "/rooms",
        data='{"number": "8", "type": "single", "price": Infinity}',
        content_type="application/json",
    )

    assert boolean.status_code == 400
    assert boolean.get_json()["message"].startswith("price: ")
    assert infinite.status_code == 400
    assert infinite.get_json()["message"].startswith("price: ")
    assert Room.query.count() == 0


def test_get_guest_past_integer_range_is_absent(client):
    resp = client.get("/guests/99999999999999999999")

    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Guest not found"


def test_guest_write_and_audit_row_commit_together(client):
    resp = client.post("/guests", json={"name": "Lin", "email": "lin@example.com"})

    guest_id = resp.get_json()["data"]["id"]
    row = AuditLog.query.filter_by(action="GUEST_CREATE").one()
    assert row.entity_id == str(guest_id)
