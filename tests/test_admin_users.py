"""
Tests for the admin account-management endpoints.
"""

from datetime import date

from tourpro.auth.utils import verify_password
from tourpro.bookings.booking_service import BookingService
from tourpro.bookings.schemas import BookingCreate
from tourpro.models import User


def _book_and_pay(session, tour, user, adults=1):
    service = BookingService(session)
    booking = service.create_booking(
        BookingCreate(tour_id=tour.id, travel_date=date(2025, 3, 15), adults=adults), user
    )
    return service.pay_booking(booking.id, user)


def test_list_users_with_payment_totals(client, session, tour, customer, other_customer, admin_headers):
    _book_and_pay(session, tour, customer, adults=2)
    BookingService(session).create_booking(
        BookingCreate(tour_id=tour.id, travel_date=date(2025, 4, 1), adults=1), customer
    )

    response = client.get("/api/users", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["pagination"]["total"] == 3
    by_email = {user["email"]: user for user in body["data"]}
    assert by_email[customer.email]["payments"] == {"totalBookings": 2, "totalPaid": 2000}
    assert by_email[other_customer.email]["payments"] == {"totalBookings": 0, "totalPaid": 0}
    assert all("password" not in user for user in body["data"])


def test_list_users_filters(client, session, admin, customer, other_customer, admin_headers):
    other_customer.is_active = False
    session.commit()

    admins = client.get("/api/users", params={"role": "admin"}, headers=admin_headers).json()
    inactive = client.get("/api/users", params={"isActive": "false"}, headers=admin_headers).json()
    jane = client.get("/api/users", params={"search": "JANE"}, headers=admin_headers).json()

    assert [user["id"] for user in admins["data"]] == [admin.id]
    assert [user["id"] for user in inactive["data"]] == [other_customer.id]
    assert [user["id"] for user in jane["data"]] == [other_customer.id]


def test_list_users_pagination(client, admin, customer, other_customer, admin_headers):
    body = client.get("/api/users", params={"page": 2, "limit": 2}, headers=admin_headers).json()

    assert body["pagination"] == {"total": 3, "page": 2, "limit": 2, "pages": 2}
    assert len(body["data"]) == 1


def test_get_user(client, customer, admin_headers):
    response = client.get(f"/api/users/{customer.id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "John Doe"


def test_get_missing_user(client, admin_headers):
    response = client.get("/api/users/999", headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "User not found."}


def test_create_admin_account(client, session, admin_headers):
    response = client.post("/api/users", json={
        "name": "Second Admin",
        "email": "Ops@TourPro.com",
        "password": "letmein99",
        "role": "admin"
    }, headers=admin_headers)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["role"] == "admin"
    assert data["email"] == "ops@tourpro.com"
    assert verify_password("letmein99", session.get(User, data["id"]).password)


def test_create_user_duplicate_email(client, customer, admin_headers):
    response = client.post("/api/users", json={
        "name": "John Clone", "email": customer.email, "password": "letmein99"
    }, headers=admin_headers)

    assert response.status_code == 400


def test_update_user_leaves_password_alone(client, session, customer, admin_headers):
    response = client.put(f"/api/users/{customer.id}", json={
        "name": "John Q. Doe",
        "role": "admin",
        "password": "hijacked1"
    }, headers=admin_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "John Q. Doe"
    assert data["role"] == "admin"
    session.expire_all()
    assert verify_password("secret123", session.get(User, customer.id).password)


def test_update_user_email_conflict(client, customer, other_customer, admin_headers):
    response = client.put(
        f"/api/users/{customer.id}", json={"email": other_customer.email}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Email already in use."


def test_delete_user(client, other_customer, admin_headers):
    response = client.delete(f"/api/users/{other_customer.id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "User deleted successfully."}
    assert client.get(f"/api/users/{other_customer.id}", headers=admin_headers).status_code == 404


def test_delete_user_with_bookings_is_rejected(client, session, tour, customer, admin_headers):
    _book_and_pay(session, tour, customer)

    response = client.delete(f"/api/users/{customer.id}", headers=admin_headers)

    assert response.status_code == 400
    assert "Deactivate the account instead." in response.json()["message"]
    assert client.get(f"/api/users/{customer.id}", headers=admin_headers).status_code == 200


def test_admin_cannot_delete_self(client, admin, admin_headers):
    response = client.delete(f"/api/users/{admin.id}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "You cannot delete your own account."


def test_toggle_status_locks_account_out(client, customer, customer_headers, admin_headers):
    response = client.patch(f"/api/users/{customer.id}/toggle-status", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["message"] == "User deactivated!"
    assert response.json()["data"]["isActive"] is False
    assert client.get("/api/auth/me", headers=customer_headers).status_code == 401
    login = client.post("/api/auth/login", json={"email": customer.email, "password": "secret123"})
    assert login.status_code == 401

    reactivated = client.patch(f"/api/users/{customer.id}/toggle-status", headers=admin_headers)

    assert reactivated.json()["message"] == "User activated!"
    assert client.get("/api/auth/me", headers=customer_headers).status_code == 200


def test_admin_cannot_deactivate_self(client, admin, admin_headers):
    response = client.patch(f"/api/users/{admin.id}/toggle-status", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "You cannot deactivate your own account."


def test_user_management_is_admin_only(client, customer, customer_headers):
    assert client.get("/api/users", headers=customer_headers).status_code == 403
    assert client.patch(f"/api/users/{customer.id}/toggle-status", headers=customer_headers).status_code == 403
