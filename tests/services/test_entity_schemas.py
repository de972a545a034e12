# -*- coding: utf-8 -*-
"""
Tests for the company, building, unit, reservation, tenant, service and
auth schemas.
"""

from datetime import date, timedelta

import pytest

from models.attachment import AttachmentFile
from services.translation_manager import tr
from services.validation import ValidationContext, validate
from services.validation.schemas import (
    building_schema,
    change_password_schema,
    company_schema,
    login_schema,
    reservation_attachment_validators,
    reservation_schema,
    service_schema,
    service_type_change,
    tenant_schema,
    unit_schema,
)


class TestCompanySchema:
    """Test company rules and the creation context."""

    def test_valid_company(self, valid_company):
        assert validate(company_schema, valid_company) == {}

    def test_manager_required_when_creating(self, valid_company):
        result = validate(company_schema, valid_company, {"is_creating": True})
        assert result["manager_full_name"] == "Manager name is required"
        assert set(result) == {"manager_full_name", "manager_email", "manager_phone"}

    def test_manager_not_required_when_editing(self, valid_company):
        assert validate(company_schema, valid_company, {"is_creating": False}) == {}
        assert validate(company_schema, valid_company, ValidationContext()) == {}

    def test_manager_format_checked_when_creating(self, valid_company):
        valid_company.update({
            "manager_full_name": "Omar Khalid",
            "manager_email": "not-an-email",
            "manager_phone": "0501234567",
        })
        assert validate(company_schema, valid_company, {"is_creating": True}) == {
            "manager_email": "Invalid manager email",
        }

    def test_manager_fields_exempt_when_editing(self, valid_company):
        valid_company["manager_email"] = "not-an-email"
        assert validate(company_schema, valid_company) == {}

    def test_short_name(self, valid_company):
        valid_company["name"] = "A"
        assert validate(company_schema, valid_company) == {
            "name": "Company name must be at least 2 characters",
        }

    def test_invalid_email_and_phone(self, valid_company):
        valid_company.update({"email": "info@", "phone": "12"})
        assert validate(company_schema, valid_company) == {
            "email": "Invalid email address",
            "phone": "Invalid phone number",
        }

    def test_same_schema_reused_across_contexts(self, valid_company):
        creating = validate(company_schema, valid_company, {"is_creating": True})
        editing = validate(company_schema, valid_company, {"is_creating": False})
        assert creating and not editing
        assert validate(company_schema, valid_company, {"is_creating": True}) == creating


@pytest.fixture
def valid_building():
    return {
        "company_id": 3,
        "building_number": "B-12",
        "name": "Marina Tower",
        "address": "Marina Walk, Dubai",
        "building_type": "residential",
        "total_units": 120,
        "total_floors": 30,
    }


class TestBuildingSchema:
    """Test building rules."""

    def test_valid_building(self, valid_building):
        assert validate(building_schema, valid_building) == {}

    @pytest.mark.parametrize("company_id", [0, -1, "abc", 1.5])
    def test_company_must_be_selected(self, valid_building, company_id):
        valid_building["company_id"] = company_id
        assert validate(building_schema, valid_building) == {
            "company_id": "Please select a valid company",
        }

    def test_total_units_bounds(self, valid_building):
        valid_building["total_units"] = 0
        assert validate(building_schema, valid_building)["total_units"] == "Building must have at least 1 unit"
        valid_building["total_units"] = 1001
        assert validate(building_schema, valid_building)["total_units"] == "Total units must not exceed 1,000"
        valid_building["total_units"] = 1000
        assert validate(building_schema, valid_building) == {}

    def test_total_units_must_be_integer(self, valid_building):
        valid_building["total_units"] = 10.5
        assert validate(building_schema, valid_building)["total_units"] == "Total units must be a whole number"

    @pytest.mark.parametrize("total_units", ["1" + "0" * 400, "1e99999999"])
    def test_oversized_total_units_is_a_field_error(self, valid_building, total_units):
        valid_building["total_units"] = total_units
        assert validate(building_schema, valid_building) == {
            "total_units": tr("validation.number_only"),
        }

    def test_parking_must_be_non_negative(self, valid_building):
        valid_building["internal_parking_spaces"] = -1
        assert validate(building_schema, valid_building) == {
            "internal_parking_spaces": "Parking spaces cannot be negative",
        }

    def test_parking_is_optional(self, valid_building):
        valid_building["internal_parking_spaces"] = None
        assert validate(building_schema, valid_building) == {}


@pytest.fixture
def valid_unit():
    return {
        "building_id": 7,
        "unit_number": "1204",
        "unit_type": "shop",
        "floor": "12",
        "area": 85.5,
        "bathrooms": 1,
        "price": 45000,
        "status": "available",
    }


class TestUnitSchema:
    """Test unit rules."""

    def test_valid_unit(self, valid_unit):
        assert validate(unit_schema, valid_unit) == {}

    def test_layout_required_for_apartment(self, valid_unit):
        valid_unit["unit_type"] = "apartment"
        assert validate(unit_schema, valid_unit) == {
            "unit_layout": "Unit layout is required for apartments",
        }
        valid_unit["unit_layout"] = "2bhk"
        assert validate(unit_schema, valid_unit) == {}

    def test_layout_nullable_for_other_types(self, valid_unit):
        valid_unit["unit_layout"] = None
        assert validate(unit_schema, valid_unit) == {}

    def test_area_and_price_must_be_positive(self, valid_unit):
        valid_unit.update({"area": 0, "price": -5})
        assert validate(unit_schema, valid_unit) == {
            "area": "Area must be greater than zero",
            "price": "Price must be greater than zero",
        }

    def test_status_vocabulary(self, valid_unit):
        valid_unit["status"] = "sold"
        assert validate(unit_schema, valid_unit) == {"status": "Invalid unit status"}

    def test_bathrooms_non_negative_integer(self, valid_unit):
        valid_unit["bathrooms"] = -1
        assert validate(unit_schema, valid_unit) == {"bathrooms": "Cannot be negative"}
        valid_unit["bathrooms"] = 1.5
        assert validate(unit_schema, valid_unit) == {"bathrooms": "Must be a whole number"}


@pytest.fixture
def valid_reservation():
    start = date.today()
    return {
        "user_id": 41,
        "unit_id": 9,
        "contract_type": "residential",
        "start_date": start.isoformat(),
        "end_date": (start + timedelta(days=365)).isoformat(),
        "payment_method": "check",
        "payment_schedule": "monthly",
    }


class TestReservationSchema:
    """Test reservation rules."""

    def test_valid_reservation(self, valid_reservation):
        assert validate(reservation_schema, valid_reservation) == {}

    def test_end_date_must_follow_start(self, valid_reservation):
        valid_reservation["end_date"] = valid_reservation["start_date"]
        assert validate(reservation_schema, valid_reservation) == {
            "end_date": "End date must be after the start date",
        }

    def test_only_cash_or_check(self, valid_reservation):
        valid_reservation["payment_method"] = "bank_transfer"
        assert validate(reservation_schema, valid_reservation) == {
            "payment_method": "Payment method must be cash or check",
        }

    def test_existing_tenant_required_by_default(self, valid_reservation):
        del valid_reservation["user_id"]
        assert validate(reservation_schema, valid_reservation) == {"user_id": "Please select a tenant"}

    def test_new_tenant_fields(self, valid_reservation):
        del valid_reservation["user_id"]
        result = validate(reservation_schema, valid_reservation, {"create_new_tenant": True})
        assert set(result) == {"tenant_full_name", "tenant_email", "tenant_phone", "tenant_id_number"}

        valid_reservation.update({
            "tenant_full_name": "Sara Ahmed",
            "tenant_email": "sara@example.com",
            "tenant_phone": "0501234567",
            "tenant_id_number": "784-1990",
        })
        assert validate(reservation_schema, valid_reservation, {"create_new_tenant": True}) == {}

    def test_deposit_required_when_included(self, valid_reservation):
        valid_reservation["includes_deposit"] = True
        assert validate(reservation_schema, valid_reservation) == {"deposit_amount": "Deposit amount is required"}
        valid_reservation["deposit_amount"] = 0
        assert validate(reservation_schema, valid_reservation) == {
            "deposit_amount": "Deposit amount must be greater than zero",
        }
        valid_reservation["deposit_amount"] = 5000
        assert validate(reservation_schema, valid_reservation) == {}

    def test_identity_images_required_when_creating_tenant(self):
        validators = reservation_attachment_validators({}, creating_tenant=True)
        assert validators["identity_image_front"](None) == "Front image of the ID is required"
        assert validators["commercial_register_image"](None) is None

    def test_commercial_register_for_commercial_tenants(self):
        validators = reservation_attachment_validators({"tenant_type": "partnership"}, creating_tenant=True)
        assert validators["commercial_register_image"](None) == "Commercial register image is required"

    def test_contract_pdf_type(self):
        validators = reservation_attachment_validators({})
        image = AttachmentFile(name="contract.png", data=b"x")
        assert validators["contract_pdf"](image) == "Please upload a PDF file"


@pytest.fixture
def valid_tenant():
    return {
        "username": "sara_ahmed",
        "full_name": "Sara Ahmed",
        "email": "sara@example.com",
        "phone": "+971501234567",
        "id_number": "784199012345",
        "tenant_type": "person",
    }


class TestTenantSchema:
    """Test tenant rules."""

    def test_valid_tenant_edit(self, valid_tenant):
        assert validate(tenant_schema, valid_tenant) == {}

    def test_creation_requires_password_and_identity(self, valid_tenant):
        result = validate(tenant_schema, valid_tenant, {"is_creating": True})
        assert set(result) == {"password", "identity_image_front", "identity_image_back"}

    def test_creation_accepts_attachments(self, valid_tenant):
        valid_tenant.update({
            "password": "secret1",
            "identity_image_front": AttachmentFile(name="front.jpg", data=b"x"),
            "identity_image_back": "https://cdn.example/back.jpg",
        })
        assert validate(tenant_schema, valid_tenant, {"is_creating": True}) == {}

    def test_commercial_tenant_needs_register_on_creation(self, valid_tenant):
        valid_tenant.update({
            "tenant_type": "commercial_register",
            "password": "secret1",
            "identity_image_front": "front.jpg",
            "identity_image_back": "back.jpg",
        })
        assert validate(tenant_schema, valid_tenant, {"is_creating": True}) == {
            "commercial_register_image": "Commercial register image is required",
        }

    def test_username_characters(self, valid_tenant):
        valid_tenant["username"] = "sara ahmed"
        assert validate(tenant_schema, valid_tenant) == {
            "username": tr("validation.tenant.username_invalid"),
        }

    def test_short_password(self, valid_tenant):
        valid_tenant["password"] = "12345"
        assert validate(tenant_schema, valid_tenant, {"is_creating": True}, fields=["password"]) == {
            "password": "Password must be at least 6 characters",
        }


class TestServiceSchema:
    """Test service request rules."""

    def test_valid_request(self):
        payload = {
            "reservation_id": 5,
            "service_type": "maintenance",
            "service_subtype": "plumbing",
            "description": "Kitchen sink is leaking",
        }
        assert validate(service_schema, payload) == {}

    def test_subtype_must_match_type(self):
        payload = {
            "reservation_id": 5,
            "service_type": "financial",
            "service_subtype": "plumbing",
            "description": "Kitchen sink is leaking",
        }
        assert validate(service_schema, payload) == {
            "service_subtype": "Subtype does not belong to the selected service type",
        }

    def test_description_length(self):
        payload = {
            "reservation_id": 5,
            "service_type": "maintenance",
            "service_subtype": "other",
            "description": "Too short",
        }
        assert validate(service_schema, payload) == {
            "description": "Description must be at least 10 characters",
        }

    def test_type_change_resets_subtype(self):
        assert service_type_change("financial") == {
            "service_type": "financial",
            "service_subtype": "payment_issue",
        }
        assert service_type_change("unknown") == {"service_type": "unknown", "service_subtype": None}


class TestAuthSchemas:
    """Test login and change-password rules."""

    def test_login(self):
        assert validate(login_schema, {"username": "admin", "password": "secret1"}) == {}
        assert validate(login_schema, {"username": "ad", "password": "123"}) == {
            "username": "Username must be at least 3 characters",
            "password": "Password must be at least 6 characters",
        }

    def test_passwords_must_match(self):
        payload = {"current_password": "old-secret", "new_password": "secret12", "confirm_password": "secret13"}
        assert validate(change_password_schema, payload) == {"confirm_password": "Passwords do not match"}
        payload["confirm_password"] = "secret12"
        assert validate(change_password_schema, payload) == {}
