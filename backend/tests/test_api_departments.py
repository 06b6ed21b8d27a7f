"""
Tests d'intégration API pour les départements (service mocké).
"""

from unittest.mock import ANY, patch

from app.schemas.department import DepartmentResponse
from app.services.exceptions import DuplicateDepartmentError


# --- Helper ---

def make_department_response(**kwargs) -> DepartmentResponse:
    return DepartmentResponse(
        id=kwargs.get("id", 1),
        name=kwargs.get("name", "Informatique"),
        location=kwargs.get("location", "Bloc A"),
    )


SERVICE = "app.routers.departments.department_service"


def test_list_departments(client):
    with patch(f"{SERVICE}.get_departments") as mock:
        mock.return_value = [make_department_response(id=1), make_department_response(id=2, name="Génie civil")]
        response = client.get("/departments/getAllDepartments")

    assert response.status_code == 200
    assert [d["id"] for d in response.json()] == [1, 2]
    assert response.json()[1]["name"] == "Génie civil"


def test_get_department_succes(client):
    with patch(f"{SERVICE}.get_department") as mock:
        mock.return_value = make_department_response(id=3)
        response = client.get("/departments/getDepartmentById/3")

    assert response.status_code == 200
    assert response.json() == {"id": 3, "name": "Informatique", "location": "Bloc A"}
    mock.assert_called_once_with(ANY, 3)


def test_get_department_introuvable(client):
    with patch(f"{SERVICE}.get_department", return_value=None):
        response = client.get("/departments/getDepartmentById/99")
    assert response.status_code == 404


def test_create_department_succes(client):
    """Création valide → 201."""
    with patch(f"{SERVICE}.create_department") as mock:
        mock.return_value = make_department_response(id=5, name="Mathématiques", location=None)
        response = client.post("/departments/createDepartment", json={"name": "Mathématiques"})

    assert response.status_code == 201
    assert response.json()["id"] == 5
    assert response.json()["location"] is None


def test_create_department_nom_vide(client):
    """Nom vide → 400."""
    response = client.post("/departments/createDepartment", json={"name": "  "})
    assert response.status_code == 400


def test_create_department_nom_duplique(client):
    """Nom déjà existant → 409 Conflict."""
    with patch(f"{SERVICE}.create_department") as mock:
        mock.side_effect = DuplicateDepartmentError("Un département avec le nom 'Informatique' existe déjà.")
        response = client.post("/departments/createDepartment", json={"name": "Informatique"})

    assert response.status_code == 409
    assert "existe déjà" in response.json()["detail"]


def test_update_department_succes(client):
    with patch(f"{SERVICE}.update_department") as mock:
        mock.return_value = make_department_response(id=1, location="Bloc C")
        response = client.put("/departments/updateDepartment", json={
            "id": 1, "name": "Informatique", "location": "Bloc C",
        })

    assert response.status_code == 200
    assert response.json()["location"] == "Bloc C"


def test_update_department_introuvable(client):
    with patch(f"{SERVICE}.update_department", return_value=None):
        response = client.put("/departments/updateDepartment", json={"id": 42, "name": "X"})
    assert response.status_code == 404


def test_delete_department_succes(client):
    with patch(f"{SERVICE}.delete_department", return_value=True) as mock:
        response = client.delete("/departments/deleteDepartment/1")

    assert response.status_code == 200
    assert response.content == b""
    mock.assert_called_once_with(ANY, 1)


def test_delete_department_introuvable(client):
    with patch(f"{SERVICE}.delete_department", return_value=False):
        response = client.delete("/departments/deleteDepartment/1")
    assert response.status_code == 404


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_department_id_trop_grand(client):
    """ID au-delà de INT4 → 400."""
    with patch(f"{SERVICE}.get_department") as mock:
        response = client.get("/departments/getDepartmentById/99999999999999999999")
    assert response.status_code == 400
    mock.assert_not_called()


def test_delete_department_id_trop_grand(client):
    with patch(f"{SERVICE}.delete_department") as mock:
        response = client.delete("/departments/deleteDepartment/99999999999999999999")
    assert response.status_code == 400
    mock.assert_not_called()


def test_create_department_nom_trop_long(client):
    """Nom de plus de 100 caractères → 400."""
    with patch(f"{SERVICE}.create_department") as mock:
        response = client.post("/departments/createDepartment", json={"name": "D" * 101})
    assert response.status_code == 400
    mock.assert_not_called()
