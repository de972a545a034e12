# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.success": "Success",
    "dialog.info": "Information",

    # Form lifecycle
    "form.fix_errors": "Please fix the errors in the form",
    "form.saved": "Saved successfully",
    "form.submit_failed": "The operation failed. Please try again.",
    "form.submit_transport_error": "An unexpected error occurred while saving",
    "form.step_invalid": "Please complete this step before continuing",

    # API errors
    "error.api.connection": "Unable to connect to the server. Check your connection.",
    "error.api.timeout": "The server took too long to respond. Please try again.",

    # Validation - generic
    "validation.required": "This field is required",
    "validation.invalid_value": "Invalid value",
    "validation.invalid_number": "Must be a valid number",
    "validation.number_only": "Numbers only",
    "validation.integer": "Must be a whole number",
    "validation.positive": "Must be greater than zero",
    "validation.min_value": "Must be at least {min}",
    "validation.max_value": "Must not exceed {max}",
    "validation.min_length": "Must be at least {min} characters",
    "validation.max_length": "Must not exceed {max} characters",
    "validation.invalid_email": "Invalid email address",
    "validation.invalid_phone": "Invalid phone number",
    "validation.invalid_format": "Invalid format",
    "validation.invalid_choice": "Invalid selection",
    "validation.invalid_date": "Invalid date",
    "validation.date_in_future": "Date cannot be in the future",
    "validation.date_in_past": "Date must be today or later",
    "validation.date_not_after": "Date must be after the start date",
    "validation.fields_mismatch": "Values do not match",
    "validation.password_too_short": "Password must be at least {min} characters",
    "validation.file_required": "A file is required",
    "validation.invalid_file_type": "File type is not allowed",
    "validation.file_too_large": "File size must not exceed {max_size}",

    # Validation - attachments
    "validation.attachment.image_invalid": "Please upload a JPG, PNG, GIF or WEBP image",
    "validation.attachment.image_too_large": "Image size must not exceed {max_size}",
    "validation.attachment.pdf_invalid": "Please upload a PDF file",
    "validation.attachment.document_too_large": "File size must not exceed {max_size}",

    # Validation - company
    "validation.company.name_required": "Company name is required",
    "validation.company.name_too_short": "Company name must be at least {min} characters",
    "validation.company.name_too_long": "Company name must not exceed {max} characters",
    "validation.company.type_required": "Company type is required",
    "validation.company.type_invalid": "Invalid company type",
    "validation.company.email_required": "Email is required",
    "validation.company.email_invalid": "Invalid email address",
    "validation.company.phone_required": "Phone number is required",
    "validation.company.phone_invalid": "Invalid phone number",
    "validation.company.address_required": "Address is required",
    "validation.company.address_too_short": "Address must be at least {min} characters",
    "validation.company.address_too_long": "Address must not exceed {max} characters",
    "validation.company.registration_too_short": "Registration number must be at least {min} characters",
    "validation.company.registration_too_long": "Registration number must not exceed {max} characters",
    "validation.company.manager_name_required": "Manager name is required",
    "validation.company.manager_name_too_short": "Manager name must be at least {min} characters",
    "validation.company.manager_name_too_long": "Manager name must not exceed {max} characters",
    "validation.company.manager_email_required": "Manager email is required",
    "validation.company.manager_email_invalid": "Invalid manager email",
    "validation.company.manager_phone_required": "Manager phone is required",
    "validation.company.manager_phone_invalid": "Invalid manager phone number",
    "validation.company.logo_invalid": "Logo must be an image",
    "validation.company.logo_too_large": "Logo size must not exceed {max_size}",

    # Validation - building
    "validation.building.company_required": "Please select a company",
    "validation.building.company_invalid": "Please select a valid company",
    "validation.building.number_required": "Building number is required",
    "validation.building.number_too_long": "Building number must not exceed {max} characters",
    "validation.building.name_required": "Building name is required",
    "validation.building.name_too_short": "Building name must be at least {min} characters",
    "validation.building.name_too_long": "Building name must not exceed {max} characters",
    "validation.building.address_required": "Address is required",
    "validation.building.address_too_short": "Address must be at least {min} characters",
    "validation.building.address_too_long": "Address must not exceed {max} characters",
    "validation.building.type_required": "Building type is required",
    "validation.building.type_invalid": "Invalid building type",
    "validation.building.units_required": "Total units is required",
    "validation.building.units_integer": "Total units must be a whole number",
    "validation.building.units_min": "Building must have at least {min} unit",
    "validation.building.units_max": "Total units must not exceed {max}",
    "validation.building.floors_required": "Total floors is required",
    "validation.building.floors_integer": "Total floors must be a whole number",
    "validation.building.floors_min": "Building must have at least {min} floor",
    "validation.building.floors_max": "Total floors must not exceed {max}",
    "validation.building.parking_integer": "Parking spaces must be a whole number",
    "validation.building.parking_negative": "Parking spaces cannot be negative",
    "validation.building.parking_max": "Parking spaces must not exceed {max}",

    # Validation - unit
    "validation.unit.building_required": "Please select a building",
    "validation.unit.building_invalid": "Please select a valid building",
    "validation.unit.number_required": "Unit number is required",
    "validation.unit.number_too_long": "Unit number must not exceed {max} characters",
    "validation.unit.type_required": "Unit type is required",
    "validation.unit.type_invalid": "Invalid unit type",
    "validation.unit.layout_required": "Unit layout is required for apartments",
    "validation.unit.layout_invalid": "Invalid unit layout",
    "validation.unit.floor_required": "Floor is required",
    "validation.unit.floor_too_long": "Floor must not exceed {max} characters",
    "validation.unit.area_required": "Area is required",
    "validation.unit.area_invalid": "Area must be a valid number",
    "validation.unit.area_positive": "Area must be greater than zero",
    "validation.unit.area_too_large": "Area must not exceed {max}",
    "validation.unit.bathrooms_required": "Number of bathrooms is required",
    "validation.unit.rooms_integer": "Must be a whole number",
    "validation.unit.rooms_negative": "Cannot be negative",
    "validation.unit.price_required": "Price is required",
    "validation.unit.price_invalid": "Price must be a valid number",
    "validation.unit.price_positive": "Price must be greater than zero",
    "validation.unit.price_too_large": "Price must not exceed {max}",
    "validation.unit.status_required": "Status is required",
    "validation.unit.status_invalid": "Invalid unit status",

    # Validation - payment
    "validation.payment.reservation_required": "Please select a reservation",
    "validation.payment.reservation_invalid": "Please select a valid reservation",
    "validation.payment.amount_required": "Amount is required",
    "validation.payment.amount_invalid": "Amount must be a valid number",
    "validation.payment.amount_positive": "Amount must be greater than zero",
    "validation.payment.amount_too_large": "Amount is too large (maximum {max})",
    "validation.payment.date_required": "Payment date is required",
    "validation.payment.date_invalid": "Invalid payment date",
    "validation.payment.date_in_future": "Payment date cannot be in the future",
    "validation.payment.method_required": "Payment method is required",
    "validation.payment.method_invalid": "Invalid payment method",
    "validation.payment.status_required": "Payment status is required",
    "validation.payment.status_invalid": "Invalid payment status",
    "validation.payment.notes_too_long": "Notes must not exceed {max} characters",
    "validation.payment.check_number_required": "Check number is required",
    "validation.payment.check_number_too_short": "Check number must be at least {min} characters",
    "validation.payment.check_number_too_long": "Check number must not exceed {max} characters",
    "validation.payment.bank_name_required": "Bank name is required",
    "validation.payment.bank_name_too_short": "Bank name must be at least {min} characters",
    "validation.payment.bank_name_too_long": "Bank name must not exceed {max} characters",
    "validation.payment.check_date_required": "Check date is required",
    "validation.payment.check_date_invalid": "Invalid check date",
    "validation.payment.check_date_in_past": "Check date must be today or later",
    "validation.payment.transfer_reference_required": "Transfer reference is required",
    "validation.payment.transfer_reference_too_short": "Transfer reference must be at least {min} characters",
    "validation.payment.transfer_reference_too_long": "Transfer reference must not exceed {max} characters",
    "validation.payment.late_fee_invalid": "Late fee must be a valid number",
    "validation.payment.late_fee_negative": "Late fee cannot be negative",
    "validation.payment.late_fee_too_large": "Late fee must not exceed {max}",
    "validation.payment.due_date_required": "Due date is required",
    "validation.payment.due_date_invalid": "Invalid due date",
    "validation.payment.image_invalid": "Please upload a JPG, PNG, GIF or WEBP image",
    "validation.payment.image_too_large": "Image size must not exceed {max_size}",
    "validation.payment.check_image_required": "Check image is required",

    # Validation - reservation
    "validation.reservation.tenant_required": "Please select a tenant",
    "validation.reservation.tenant_invalid": "Please select a valid tenant",
    "validation.reservation.unit_required": "Please select a unit",
    "validation.reservation.unit_invalid": "Please select a valid unit",
    "validation.reservation.contract_type_required": "Contract type is required",
    "validation.reservation.contract_type_invalid": "Invalid contract type",
    "validation.reservation.start_date_required": "Start date is required",
    "validation.reservation.start_date_invalid": "Invalid start date",
    "validation.reservation.end_date_required": "End date is required",
    "validation.reservation.end_date_invalid": "Invalid end date",
    "validation.reservation.end_before_start": "End date must be after the start date",
    "validation.reservation.payment_method_required": "Payment method is required",
    "validation.reservation.payment_method_invalid": "Payment method must be cash or check",
    "validation.reservation.payment_schedule_required": "Payment schedule is required",
    "validation.reservation.payment_schedule_invalid": "Invalid payment schedule",
    "validation.reservation.deposit_required": "Deposit amount is required",
    "validation.reservation.deposit_invalid": "Deposit amount must be a valid number",
    "validation.reservation.deposit_positive": "Deposit amount must be greater than zero",
    "validation.reservation.notes_too_long": "Notes must not exceed {max} characters",

    # Validation - tenant
    "validation.tenant.username_required": "Username is required",
    "validation.tenant.username_too_short": "Username must be at least {min} characters",
    "validation.tenant.username_too_long": "Username must not exceed {max} characters",
    "validation.tenant.username_invalid": "Username may only contain letters, digits and underscores",
    "validation.tenant.password_required": "Password is required",
    "validation.tenant.full_name_required": "Full name is required",
    "validation.tenant.full_name_too_short": "Full name must be at least {min} characters",
    "validation.tenant.full_name_too_long": "Full name must not exceed {max} characters",
    "validation.tenant.email_required": "Email is required",
    "validation.tenant.email_invalid": "Invalid email address",
    "validation.tenant.phone_required": "Phone number is required",
    "validation.tenant.phone_invalid": "Invalid phone number",
    "validation.tenant.whatsapp_invalid": "Invalid WhatsApp number",
    "validation.tenant.id_number_required": "ID number is required",
    "validation.tenant.id_number_too_short": "ID number must be at least {min} characters",
    "validation.tenant.id_number_too_long": "ID number must not exceed {max} characters",
    "validation.tenant.type_required": "Tenant type is required",
    "validation.tenant.type_invalid": "Invalid tenant type",
    "validation.tenant.identity_front_required": "Front image of the ID is required",
    "validation.tenant.identity_back_required": "Back image of the ID is required",
    "validation.tenant.commercial_register_required": "Commercial register image is required",

    # Validation - service request
    "validation.service.reservation_required": "Please select a reservation",
    "validation.service.reservation_invalid": "Please select a valid reservation",
    "validation.service.type_required": "Service type is required",
    "validation.service.type_invalid": "Invalid service type",
    "validation.service.subtype_required": "Service subtype is required",
    "validation.service.subtype_invalid": "Subtype does not belong to the selected service type",
    "validation.service.description_required": "Description is required",
    "validation.service.description_too_short": "Description must be at least {min} characters",
    "validation.service.description_too_long": "Description must not exceed {max} characters",

    # Validation - auth
    "validation.auth.username_required": "Username is required",
    "validation.auth.username_too_short": "Username must be at least {min} characters",
    "validation.auth.password_required": "Password is required",
    "validation.auth.current_password_required": "Current password is required",
    "validation.auth.new_password_required": "New password is required",
    "validation.auth.confirm_password_required": "Please confirm the new password",
    "validation.auth.passwords_mismatch": "Passwords do not match",
}
