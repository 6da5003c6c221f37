# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias

Language: TypeAlias = Literal["en", "ar"]

LANGUAGES: tuple[str, ...] = ("en", "ar")
DEFAULT_LANGUAGE: Language = "en"

TRANSLATIONS: dict[str, dict[str, str]] = {
    "app.title": {"en": "Lab Sample Tracker", "ar": "نظام متابعة العينات"},
    "material.type": {"en": "Material Type", "ar": "نوع المادة"},
    "material.concrete": {"en": "Concrete", "ar": "خرسانة"},
    "material.asphalt": {"en": "Asphalt", "ar": "أسفلت"},
    "material.soil": {"en": "Soil", "ar": "تربة"},
    "material.steel": {"en": "Steel", "ar": "حديد"},
    "common.contractor": {"en": "Contractor", "ar": "المقاول"},
    "common.technician": {"en": "Technician", "ar": "الفني"},
    "common.date": {"en": "Date", "ar": "التاريخ"},
    "common.files": {"en": "Files", "ar": "الملفات"},
    "common.noData": {"en": "No data", "ar": "لا توجد بيانات"},
    "common.id": {"en": "ID", "ar": "المعرف"},
    "common.status": {"en": "Status", "ar": "الحالة"},
    "common.milestone": {"en": "Milestone", "ar": "الموعد"},
    "common.property": {"en": "Property", "ar": "الخاصية"},
    "common.value": {"en": "Value", "ar": "القيمة"},
    "common.sample": {"en": "Sample", "ar": "العينة"},
    "common.samples": {"en": "Samples", "ar": "العينات"},
    "concrete.pouringDate": {"en": "Pouring Date", "ar": "تاريخ الصب"},
    "concrete.pouringType": {"en": "Pouring Type", "ar": "نوع الصب"},
    "concrete.requiredStrength": {"en": "Required Strength", "ar": "الإجهاد المطلوب"},
    "concrete.crushDate7": {"en": "7 Days Crush Date", "ar": "تاريخ تكسير 7 أيام"},
    "concrete.crushDate28": {"en": "28 Days Crush Date", "ar": "تاريخ تكسير 28 يوم"},
    "asphalt.mixType": {"en": "Mix Type", "ar": "نوع الخلطة"},
    "asphalt.plant": {"en": "Asphalt Plant", "ar": "محطة الأسفلت"},
    "soil.siteLocation": {"en": "Site Location", "ar": "موقع العمل"},
    "soil.requiredTests": {"en": "Required Tests", "ar": "الاختبارات المطلوبة"},
    "steel.grade": {"en": "Steel Grade", "ar": "رتبة الحديد"},
    "steel.diameter": {"en": "Diameter", "ar": "القطر"},
    "steel.supplier": {"en": "Supplier", "ar": "المورد"},
    "dashboard.title": {"en": "Dashboard", "ar": "لوحة المتابعة"},
    "dashboard.totalSamples": {"en": "Total Samples", "ar": "إجمالي العينات"},
    "dashboard.alerts": {"en": "Alerts", "ar": "التنبيهات"},
    "dashboard.crushAlert7": {"en": "7 Days Crush Due", "ar": "موعد تكسير 7 أيام"},
    "dashboard.crushAlert28": {"en": "28 Days Crush Due", "ar": "موعد تكسير 28 يوم"},
    "dashboard.overdue": {"en": "Overdue", "ar": "متأخر"},
    "dashboard.today": {"en": "Due today", "ar": "اليوم"},
    "dashboard.tomorrow": {"en": "Due tomorrow", "ar": "غداً"},
    "dashboard.daysLeft": {"en": "{days} days left", "ar": "{days} يوم متبقي"},
}


def translate(key: str, language: str = DEFAULT_LANGUAGE, **kwargs: object) -> str:
    """
    Look up a label, falling back to English and then to the key itself.
    """
    entry = TRANSLATIONS.get(key)
    if entry is None:
        return key
    text = entry.get(language, entry[DEFAULT_LANGUAGE])
    if kwargs:
        text = text.format(**kwargs)
    return text
