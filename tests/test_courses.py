import pytest

from app.db.base import store
from app.services.core.course_service import course_service


def test_list_courses(client):
    resp = client.get("/courses")
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Get all courses successfully"
    data = body["data"]
    assert [c["courseId"] for c in data] == [261207, 261497, 269101]


def test_get_course(client):
    resp = client.get("/courses/261207")
    assert resp.status_code == 200
    assert resp.headers["link"] == "/courses/261207"
    body = resp.json()
    assert body["message"] == "Get course 261207 successfully"
    assert body["data"] == {
        "courseId": 261207,
        "courseTitle": "Basic Computer Engineering Lab",
        "instructors": ["Dome Potikanond", "Passakorn Phannachitta"],
    }


@pytest.mark.parametrize("bad", ["abc", "261_207", "nan"])
def test_get_course_not_a_number(client, bad):
    resp = client.get(f"/courses/{bad}")
    assert resp.status_code == 400
    assert resp.json()["errors"] == "Invalid input: expected number, received NaN"


@pytest.mark.parametrize("raw", ["261207.0", "2.61207e5"])
def test_get_course_numeric_text(client, raw):
    resp = client.get(f"/courses/{raw}")
    assert resp.status_code == 200
    assert resp.json()["data"]["courseId"] == 261207


@pytest.mark.parametrize("bad", ["12345", "1234567", "-261207", "261207.5"])
def test_get_course_wrong_length(client, bad):
    resp = client.get(f"/courses/{bad}")
    assert resp.status_code == 400
    assert resp.json()["errors"] == "Course Id must be exactly 6 digits"


def test_get_course_unknown(client):
    resp = client.get("/courses/999999")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Course does not exists"}


def test_create_course(client, new_course):
    resp = client.post("/courses", json=new_course)
    assert resp.status_code == 200
    assert resp.headers["link"] == "/courses/261336"
    body = resp.json()
    assert body["message"] == "Course 261336 has been added successfully"
    assert body["data"] == new_course
    assert client.get("/courses/261336").json()["data"] == new_course
    assert len(store.courses) == 4


def test_create_course_duplicate(client, new_course):
    new_course["courseId"] = 261207
    resp = client.post("/courses", json=new_course)
    assert resp.status_code == 409
    assert resp.json() == {"success": False, "message": "Course Id is already exists"}
    assert len(store.courses) == 3


@pytest.mark.parametrize(
    "patch, message",
    [
        ({"courseId": 12}, "Course Id must be exactly 6 digits"),
        ({"courseTitle": "  "}, "Course title must not be empty"),
        ({"instructors": []}, "Course must have at least one instructor"),
    ],
)
def test_create_course_invalid(client, new_course, patch, message):
    new_course.update(patch)
    resp = client.post("/courses", json=new_course)
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed"
    assert body["errors"] == message


def test_create_course_rejects_string_id(client, new_course):
    new_course["courseId"] = "261336"
    resp = client.post("/courses", json=new_course)
    assert resp.status_code == 400
    assert len(store.courses) == 3


def test_create_course_missing_field(client, new_course):
    del new_course["instructors"]
    resp = client.post("/courses", json=new_course)
    assert resp.status_code == 400
    assert resp.json()["errors"] == "Field required"


def test_create_course_malformed_json(client):
    resp = client.post(
        "/courses", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation failed"


def test_update_course_merges_fields(client):
    resp = client.put("/courses", json={"courseId": 261207, "courseTitle": "Computer Engineering Lab"})
    assert resp.status_code == 200
    assert resp.headers["link"] == "/courses/261207"
    body = resp.json()
    assert body["message"] == "course 261207 has been updated successfully"
    assert body["data"] == {
        "courseId": 261207,
        "courseTitle": "Computer Engineering Lab",
        "instructors": ["Dome Potikanond", "Passakorn Phannachitta"],
    }
    assert store.courses[0].courseTitle == "Computer Engineering Lab"


def test_update_course_instructors_only(client):
    resp = client.put("/courses", json={"courseId": 269101, "instructors": ["A", "B"]})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["instructors"] == ["A", "B"]
    assert data["courseTitle"] == "Introduction to Computer Engineering"


def test_update_course_unknown(client):
    resp = client.put("/courses", json={"courseId": 999999, "courseTitle": "Nope"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "Course Id does not exists"


def test_update_course_invalid(client):
    resp = client.put("/courses", json={"courseId": 261207, "instructors": []})
    assert resp.status_code == 400
    assert resp.json()["errors"] == "Course must have at least one instructor"
    assert store.courses[0].instructors == ["Dome Potikanond", "Passakorn Phannachitta"]


def test_delete_course(client):
    resp = client.request("DELETE", "/courses", json={"courseId": 261497})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Course 261497 has been deleted successfully"
    assert body["data"]["courseTitle"] == "Full Stack Development"
    assert client.get("/courses/261497").status_code == 404
    assert [c.courseId for c in store.courses] == [261207, 269101]


def test_delete_course_unknown(client):
    resp = client.request("DELETE", "/courses", json={"courseId": 999999})
    assert resp.status_code == 404
    assert len(store.courses) == 3


def test_delete_course_invalid_body(client):
    resp = client.request("DELETE", "/courses", json={})
    assert resp.status_code == 400
    assert resp.json()["errors"] == "Field required"


def test_unexpected_error_becomes_500(client, monkeypatch):
    async def boom(db):
        raise RuntimeError("store exploded")

    monkeypatch.setattr(course_service, "list_courses", boom)
    resp = client.get("/courses")
    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "message": "Something is wrong, please try again",
        "error": "store exploded",
    }


@pytest.mark.parametrize("field", ["courseTitle", "instructors"])
def test_update_course_rejects_null(client, field):
    resp = client.put("/courses", json={"courseId": 261207, field: None})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation failed"
    assert store.courses[0].courseTitle == "Basic Computer Engineering Lab"
    assert store.courses[0].instructors == ["Dome Potikanond", "Passakorn Phannachitta"]


def test_create_course_ignores_unknown_fields(client, new_course):
    resp = client.post("/courses", json={**new_course, "credits": 3})
    assert resp.status_code == 200
    assert resp.json()["data"] == new_course
    assert "credits" not in store.courses[-1].model_dump()


def test_update_course_ignores_unknown_fields(client):
    resp = client.put("/courses", json={"courseId": 269101, "courseTitle": "Intro", "room": "HB7501"})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["courseTitle"] == "Intro"
    assert "room" not in data
    assert "room" not in store.courses[2].model_dump()


@pytest.mark.parametrize("method", ["PUT", "DELETE"])
def test_mutation_rejects_string_course_id(client, method):
    resp = client.request(method, "/courses", json={"courseId": "261207", "courseTitle": "X"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation failed"
    assert [c.courseId for c in store.courses] == [261207, 261497, 269101]
    assert store.courses[0].courseTitle == "Basic Computer Engineering Lab"


@pytest.mark.parametrize("method", ["PUT", "DELETE"])
@pytest.mark.parametrize("course_id", [12, 1234567])
def test_mutation_rejects_malformed_course_id(client, method, course_id):
    resp = client.request(method, "/courses", json={"courseId": course_id})
    assert resp.status_code == 400
    assert resp.json()["errors"] == "Course Id must be exactly 6 digits"
    assert len(store.courses) == 3


def test_unexpected_error_keeps_cors_headers(client, monkeypatch):
    async def boom(db):
        raise RuntimeError("store exploded")

    monkeypatch.setattr(course_service, "list_courses", boom)
    resp = client.get("/courses", headers={"Origin": "http://localhost:5173"})
    assert resp.status_code == 500
    assert "access-control-allow-origin" in resp.headers
    assert Exception not in client.app.exception_handlers
