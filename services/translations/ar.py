# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "خطأ",
    "dialog.warning": "تحذير",
    "dialog.success": "نجاح",
    "dialog.info": "معلومة",

    # Form lifecycle
    "form.fix_errors": "يرجى تصحيح الأخطاء في النموذج",
    "form.saved": "تم الحفظ بنجاح",
    "form.submit_failed": "فشلت العملية. يرجى المحاولة مرة أخرى.",
    "form.submit_transport_error": "حدث خطأ غير متوقع أثناء الحفظ",
    "form.step_invalid": "يرجى إكمال هذه الخطوة قبل المتابعة",

    # API errors
    "error.api.connection": "تعذر الاتصال بالخادم. تحقق من الاتصال.",
    "error.api.timeout": "استغرق الخادم وقتاً طويلاً للرد. يرجى المحاولة مرة أخرى.",

    # Validation - generic
    "validation.required": "هذا الحقل مطلوب",
    "validation.invalid_value": "قيمة غير صالحة",
    "validation.invalid_number": "يجب أن يكون رقماً صحيحاً",
    "validation.number_only": "أرقام فقط",
    "validation.integer": "يجب أن يكون عدداً صحيحاً",
    "validation.positive": "يجب أن يكون أكبر من صفر",
    "validation.min_value": "يجب ألا يقل عن {min}",
    "validation.max_value": "يجب ألا يتجاوز {max}",
    "validation.min_length": "يجب أن يكون {min} أحرف على الأقل",
    "validation.max_length": "يجب ألا يتجاوز {max} حرفاً",
    "validation.invalid_email": "البريد الإلكتروني غير صالح",
    "validation.invalid_phone": "رقم الهاتف غير صالح",
    "validation.invalid_format": "الصيغة غير صالحة",
    "validation.invalid_choice": "اختيار غير صالح",
    "validation.invalid_date": "تاريخ غير صالح",
    "validation.date_in_future": "لا يمكن أن يكون التاريخ في المستقبل",
    "validation.date_in_past": "يجب أن يكون التاريخ اليوم أو لاحقاً",
    "validation.date_not_after": "يجب أن يكون التاريخ بعد تاريخ البداية",
    "validation.fields_mismatch": "القيم غير متطابقة",
    "validation.password_too_short": "يجب أن تكون كلمة المرور {min} أحرف على الأقل",
    "validation.file_required": "الملف مطلوب",
    "validation.invalid_file_type": "نوع الملف غير مسموح",
    "validation.file_too_large": "يجب ألا يتجاوز حجم الملف {max_size}",

    # Validation - attachments
    "validation.attachment.image_invalid": "يرجى رفع صورة بصيغة JPG أو PNG أو GIF أو WEBP",
    "validation.attachment.image_too_large": "يجب ألا يتجاوز حجم الصورة {max_size}",
    "validation.attachment.pdf_invalid": "يرجى رفع ملف PDF",
    "validation.attachment.document_too_large": "يجب ألا يتجاوز حجم الملف {max_size}",

    # Validation - company
    "validation.company.name_required": "اسم الشركة مطلوب",
    "validation.company.name_too_short": "يجب أن يكون اسم الشركة {min} أحرف على الأقل",
    "validation.company.name_too_long": "يجب ألا يتجاوز اسم الشركة {max} حرفاً",
    "validation.company.type_required": "نوع الشركة مطلوب",
    "validation.company.type_invalid": "نوع الشركة غير صالح",
    "validation.company.email_required": "البريد الإلكتروني مطلوب",
    "validation.company.email_invalid": "البريد الإلكتروني غير صالح",
    "validation.company.phone_required": "رقم الهاتف مطلوب",
    "validation.company.phone_invalid": "رقم الهاتف غير صالح",
    "validation.company.address_required": "العنوان مطلوب",
    "validation.company.address_too_short": "يجب أن يكون العنوان {min} أحرف على الأقل",
    "validation.company.address_too_long": "يجب ألا يتجاوز العنوان {max} حرفاً",
    "validation.company.registration_too_short": "يجب أن يكون رقم السجل {min} أحرف على الأقل",
    "validation.company.registration_too_long": "يجب ألا يتجاوز رقم السجل {max} حرفاً",
    "validation.company.manager_name_required": "اسم المدير مطلوب",
    "validation.company.manager_name_too_short": "يجب أن يكون اسم المدير {min} أحرف على الأقل",
    "validation.company.manager_name_too_long": "يجب ألا يتجاوز اسم المدير {max} حرفاً",
    "validation.company.manager_email_required": "بريد المدير الإلكتروني مطلوب",
    "validation.company.manager_email_invalid": "بريد المدير الإلكتروني غير صالح",
    "validation.company.manager_phone_required": "هاتف المدير مطلوب",
    "validation.company.manager_phone_invalid": "رقم هاتف المدير غير صالح",
    "validation.company.logo_invalid": "يجب أن يكون الشعار صورة",
    "validation.company.logo_too_large": "يجب ألا يتجاوز حجم الشعار {max_size}",

    # Validation - building
    "validation.building.company_required": "يرجى اختيار الشركة",
    "validation.building.company_invalid": "يرجى اختيار شركة صالحة",
    "validation.building.number_required": "رقم المبنى مطلوب",
    "validation.building.number_too_long": "يجب ألا يتجاوز رقم المبنى {max} حرفاً",
    "validation.building.name_required": "اسم المبنى مطلوب",
    "validation.building.name_too_short": "يجب أن يكون اسم المبنى {min} أحرف على الأقل",
    "validation.building.name_too_long": "يجب ألا يتجاوز اسم المبنى {max} حرفاً",
    "validation.building.address_required": "العنوان مطلوب",
    "validation.building.address_too_short": "يجب أن يكون العنوان {min} أحرف على الأقل",
    "validation.building.address_too_long": "يجب ألا يتجاوز العنوان {max} حرفاً",
    "validation.building.type_required": "نوع المبنى مطلوب",
    "validation.building.type_invalid": "نوع المبنى غير صالح",
    "validation.building.units_required": "عدد الوحدات مطلوب",
    "validation.building.units_integer": "يجب أن يكون عدد الوحدات عدداً صحيحاً",
    "validation.building.units_min": "يجب أن يحتوي المبنى على {min} وحدة على الأقل",
    "validation.building.units_max": "يجب ألا يتجاوز عدد الوحدات {max}",
    "validation.building.floors_required": "عدد الطوابق مطلوب",
    "validation.building.floors_integer": "يجب أن يكون عدد الطوابق عدداً صحيحاً",
    "validation.building.floors_min": "يجب أن يحتوي المبنى على {min} طابق على الأقل",
    "validation.building.floors_max": "يجب ألا يتجاوز عدد الطوابق {max}",
    "validation.building.parking_integer": "يجب أن يكون عدد المواقف عدداً صحيحاً",
    "validation.building.parking_negative": "لا يمكن أن يكون عدد المواقف سالباً",
    "validation.building.parking_max": "يجب ألا يتجاوز عدد المواقف {max}",

    # Validation - unit
    "validation.unit.building_required": "يرجى اختيار المبنى",
    "validation.unit.building_invalid": "يرجى اختيار مبنى صالح",
    "validation.unit.number_required": "رقم الوحدة مطلوب",
    "validation.unit.number_too_long": "يجب ألا يتجاوز رقم الوحدة {max} حرفاً",
    "validation.unit.type_required": "نوع الوحدة مطلوب",
    "validation.unit.type_invalid": "نوع الوحدة غير صالح",
    "validation.unit.layout_required": "تصميم الوحدة مطلوب للشقق",
    "validation.unit.layout_invalid": "تصميم الوحدة غير صالح",
    "validation.unit.floor_required": "الطابق مطلوب",
    "validation.unit.floor_too_long": "يجب ألا يتجاوز الطابق {max} أحرف",
    "validation.unit.area_required": "المساحة مطلوبة",
    "validation.unit.area_invalid": "يجب أن تكون المساحة رقماً صحيحاً",
    "validation.unit.area_positive": "يجب أن تكون المساحة أكبر من صفر",
    "validation.unit.area_too_large": "يجب ألا تتجاوز المساحة {max}",
    "validation.unit.bathrooms_required": "عدد الحمامات مطلوب",
    "validation.unit.rooms_integer": "يجب أن يكون عدداً صحيحاً",
    "validation.unit.rooms_negative": "لا يمكن أن يكون سالباً",
    "validation.unit.price_required": "السعر مطلوب",
    "validation.unit.price_invalid": "يجب أن يكون السعر رقماً صحيحاً",
    "validation.unit.price_positive": "يجب أن يكون السعر أكبر من صفر",
    "validation.unit.price_too_large": "يجب ألا يتجاوز السعر {max}",
    "validation.unit.status_required": "حالة الوحدة مطلوبة",
    "validation.unit.status_invalid": "حالة الوحدة غير صالحة",

    # Validation - payment
    "validation.payment.reservation_required": "يرجى اختيار الحجز",
    "validation.payment.reservation_invalid": "يرجى اختيار حجز صالح",
    "validation.payment.amount_required": "المبلغ مطلوب",
    "validation.payment.amount_invalid": "يجب أن يكون المبلغ رقماً صحيحاً",
    "validation.payment.amount_positive": "يجب أن يكون المبلغ أكبر من صفر",
    "validation.payment.amount_too_large": "المبلغ كبير جداً (الحد الأقصى {max})",
    "validation.payment.date_required": "تاريخ الدفع مطلوب",
    "validation.payment.date_invalid": "تاريخ الدفع غير صالح",
    "validation.payment.date_in_future": "لا يمكن أن يكون تاريخ الدفع في المستقبل",
    "validation.payment.method_required": "طريقة الدفع مطلوبة",
    "validation.payment.method_invalid": "طريقة الدفع غير صالحة",
    "validation.payment.status_required": "حالة الدفع مطلوبة",
    "validation.payment.status_invalid": "حالة الدفع غير صالحة",
    "validation.payment.notes_too_long": "يجب ألا تتجاوز الملاحظات {max} حرف",
    "validation.payment.check_number_required": "رقم الشيك مطلوب",
    "validation.payment.check_number_too_short": "يجب أن يكون رقم الشيك {min} أحرف على الأقل",
    "validation.payment.check_number_too_long": "يجب ألا يتجاوز رقم الشيك {max} حرفاً",
    "validation.payment.bank_name_required": "اسم البنك مطلوب",
    "validation.payment.bank_name_too_short": "يجب أن يكون اسم البنك {min} أحرف على الأقل",
    "validation.payment.bank_name_too_long": "يجب ألا يتجاوز اسم البنك {max} حرفاً",
    "validation.payment.check_date_required": "تاريخ الشيك مطلوب",
    "validation.payment.check_date_invalid": "تاريخ الشيك غير صالح",
    "validation.payment.check_date_in_past": "يجب أن يكون تاريخ الشيك اليوم أو لاحقاً",
    "validation.payment.transfer_reference_required": "مرجع التحويل مطلوب",
    "validation.payment.transfer_reference_too_short": "يجب أن يكون مرجع التحويل {min} أحرف على الأقل",
    "validation.payment.transfer_reference_too_long": "يجب ألا يتجاوز مرجع التحويل {max} حرفاً",
    "validation.payment.late_fee_invalid": "يجب أن تكون غرامة التأخير رقماً صحيحاً",
    "validation.payment.late_fee_negative": "لا يمكن أن تكون غرامة التأخير سالبة",
    "validation.payment.late_fee_too_large": "يجب ألا تتجاوز غرامة التأخير {max}",
    "validation.payment.due_date_required": "تاريخ الاستحقاق مطلوب",
    "validation.payment.due_date_invalid": "تاريخ الاستحقاق غير صالح",
    "validation.payment.image_invalid": "يرجى رفع صورة بصيغة JPG أو PNG أو GIF أو WEBP",
    "validation.payment.image_too_large": "يجب ألا يتجاوز حجم الصورة {max_size}",
    "validation.payment.check_image_required": "صورة الشيك مطلوبة",

    # Validation - reservation
    "validation.reservation.tenant_required": "يرجى اختيار المستأجر",
    "validation.reservation.tenant_invalid": "يرجى اختيار مستأجر صالح",
    "validation.reservation.unit_required": "يرجى اختيار الوحدة",
    "validation.reservation.unit_invalid": "يرجى اختيار وحدة صالحة",
    "validation.reservation.contract_type_required": "نوع العقد مطلوب",
    "validation.reservation.contract_type_invalid": "نوع العقد غير صالح",
    "validation.reservation.start_date_required": "تاريخ البداية مطلوب",
    "validation.reservation.start_date_invalid": "تاريخ البداية غير صالح",
    "validation.reservation.end_date_required": "تاريخ النهاية مطلوب",
    "validation.reservation.end_date_invalid": "تاريخ النهاية غير صالح",
    "validation.reservation.end_before_start": "يجب أن يكون تاريخ النهاية بعد تاريخ البداية",
    "validation.reservation.payment_method_required": "طريقة الدفع مطلوبة",
    "validation.reservation.payment_method_invalid": "يجب أن تكون طريقة الدفع نقداً أو شيكاً",
    "validation.reservation.payment_schedule_required": "جدول الدفع مطلوب",
    "validation.reservation.payment_schedule_invalid": "جدول الدفع غير صالح",
    "validation.reservation.deposit_required": "مبلغ التأمين مطلوب",
    "validation.reservation.deposit_invalid": "يجب أن يكون مبلغ التأمين رقماً صحيحاً",
    "validation.reservation.deposit_positive": "يجب أن يكون مبلغ التأمين أكبر من صفر",
    "validation.reservation.notes_too_long": "يجب ألا تتجاوز الملاحظات {max} حرف",

    # Validation - tenant
    "validation.tenant.username_required": "اسم المستخدم مطلوب",
    "validation.tenant.username_too_short": "يجب أن يكون اسم المستخدم {min} أحرف على الأقل",
    "validation.tenant.username_too_long": "يجب ألا يتجاوز اسم المستخدم {max} حرفاً",
    "validation.tenant.username_invalid": "اسم المستخدم يقبل الحروف الإنجليزية والأرقام والشرطة السفلية فقط",
    "validation.tenant.password_required": "كلمة المرور مطلوبة",
    "validation.tenant.full_name_required": "الاسم الكامل مطلوب",
    "validation.tenant.full_name_too_short": "يجب أن يكون الاسم الكامل {min} أحرف على الأقل",
    "validation.tenant.full_name_too_long": "يجب ألا يتجاوز الاسم الكامل {max} حرفاً",
    "validation.tenant.email_required": "البريد الإلكتروني مطلوب",
    "validation.tenant.email_invalid": "البريد الإلكتروني غير صالح",
    "validation.tenant.phone_required": "رقم الهاتف مطلوب",
    "validation.tenant.phone_invalid": "رقم الهاتف غير صالح",
    "validation.tenant.whatsapp_invalid": "رقم الواتساب غير صالح",
    "validation.tenant.id_number_required": "رقم الهوية مطلوب",
    "validation.tenant.id_number_too_short": "يجب أن يكون رقم الهوية {min} أحرف على الأقل",
    "validation.tenant.id_number_too_long": "يجب ألا يتجاوز رقم الهوية {max} حرفاً",
    "validation.tenant.type_required": "نوع المستأجر مطلوب",
    "validation.tenant.type_invalid": "نوع المستأجر غير صالح",
    "validation.tenant.identity_front_required": "صورة الهوية الأمامية مطلوبة",
    "validation.tenant.identity_back_required": "صورة الهوية الخلفية مطلوبة",
    "validation.tenant.commercial_register_required": "صورة السجل التجاري مطلوبة",

    # Validation - service request
    "validation.service.reservation_required": "يرجى اختيار الحجز",
    "validation.service.reservation_invalid": "يرجى اختيار حجز صالح",
    "validation.service.type_required": "نوع الخدمة مطلوب",
    "validation.service.type_invalid": "نوع الخدمة غير صالح",
    "validation.service.subtype_required": "النوع الفرعي للخدمة مطلوب",
    "validation.service.subtype_invalid": "النوع الفرعي لا يتبع نوع الخدمة المختار",
    "validation.service.description_required": "الوصف مطلوب",
    "validation.service.description_too_short": "يجب أن يكون الوصف {min} أحرف على الأقل",
    "validation.service.description_too_long": "يجب ألا يتجاوز الوصف {max} حرف",

    # Validation - auth
    "validation.auth.username_required": "اسم المستخدم مطلوب",
    "validation.auth.username_too_short": "يجب أن يكون اسم المستخدم {min} أحرف على الأقل",
    "validation.auth.password_required": "كلمة المرور مطلوبة",
    "validation.auth.current_password_required": "كلمة المرور الحالية مطلوبة",
    "validation.auth.new_password_required": "كلمة المرور الجديدة مطلوبة",
    "validation.auth.confirm_password_required": "يرجى تأكيد كلمة المرور الجديدة",
    "validation.auth.passwords_mismatch": "كلمتا المرور غير متطابقتين",
}
