"""Static English/Farsi strings for alerts and labels.

Keys map to a per-language dict. ``translate`` falls back to English and then
to the key itself, so a missing entry never breaks a response.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "fa")
RTL_LANGUAGES = frozenset({"fa"})

MESSAGES: dict[str, dict[str, str]] = {
    # Alert titles
    "error": {"en": "Error", "fa": "خطا"},
    "success": {"en": "Success", "fa": "موفق"},
    "validation_error": {"en": "Validation Error", "fa": "خطای اعتبارسنجی"},
    "network_error": {"en": "Network Error", "fa": "خطای شبکه"},
    "no_results_title": {"en": "No Results", "fa": "نتیجه‌ای یافت نشد"},
    "booking_failed": {"en": "Booking Failed", "fa": "رزرو ناموفق بود"},
    "not_allowed": {"en": "Not Allowed", "fa": "دسترسی غیرمجاز"},
    "invalid_code_title": {"en": "Invalid Code", "fa": "کد نامعتبر"},
    # Generic
    "request_failed": {
        "en": "Request failed. Please try again.",
        "fa": "درخواست ناموفق بود. لطفاً دوباره تلاش کنید.",
    },
    "check_connection": {
        "en": "Please check your connection and try again",
        "fa": "لطفاً اتصال خود را بررسی کرده و دوباره تلاش کنید",
    },
    "submission_in_progress": {
        "en": "This request is already being processed",
        "fa": "این درخواست در حال پردازش است",
    },
    "screen_not_allowed": {
        "en": "This screen is not available for your account",
        "fa": "این صفحه برای حساب شما در دسترس نیست",
    },
    "unsupported_language": {
        "en": "Unsupported language",
        "fa": "زبان پشتیبانی نمی‌شود",
    },
    "invalid_request": {
        "en": "Some fields are missing or invalid",
        "fa": "برخی فیلدها ناقص یا نامعتبر هستند",
    },
    # Auth
    "fill_required_fields": {
        "en": "Please fill in all required fields",
        "fa": "لطفاً همه فیلدهای ضروری را پر کنید",
    },
    "passwords_mismatch": {"en": "Passwords do not match", "fa": "رمزهای عبور مطابقت ندارند"},
    "password_too_short": {
        "en": "Password must be at least {min_length} characters",
        "fa": "رمز عبور باید حداقل {min_length} کاراکتر باشد",
    },
    "invalid_email": {
        "en": "Please enter a valid email address",
        "fa": "لطفاً یک ایمیل معتبر وارد کنید",
    },
    "email_required": {
        "en": "Please enter your email address",
        "fa": "لطفاً ایمیل خود را وارد کنید",
    },
    "verification_code_incomplete": {
        "en": "Please enter the complete 5-digit verification code",
        "fa": "لطفاً کد تأیید ۵ رقمی را کامل وارد کنید",
    },
    "invalid_code": {
        "en": "Please enter the correct verification code",
        "fa": "لطفاً کد تأیید صحیح را وارد کنید",
    },
    "verification_failed": {
        "en": "Email verification failed. Please try again.",
        "fa": "تأیید ایمیل ناموفق بود. لطفاً دوباره تلاش کنید.",
    },
    "email_verified": {
        "en": "Email verified successfully! You are now logged in.",
        "fa": "ایمیل با موفقیت تأیید شد! اکنون وارد شده‌اید.",
    },
    "code_resent": {
        "en": "Verification code has been resent to your email",
        "fa": "کد تأیید دوباره به ایمیل شما ارسال شد",
    },
    "registration_success": {
        "en": "Account created. Please verify your email.",
        "fa": "حساب ایجاد شد. لطفاً ایمیل خود را تأیید کنید.",
    },
    "login_success": {"en": "Login successful!", "fa": "ورود با موفقیت انجام شد!"},
    "reset_code_sent": {
        "en": "A verification code has been sent to your email",
        "fa": "کد تأیید به ایمیل شما ارسال شد",
    },
    "password_updated": {
        "en": "Your password has been updated",
        "fa": "رمز عبور شما به‌روزرسانی شد",
    },
    # Cars
    "car_fields_required": {
        "en": "Please fill all fields to continue",
        "fa": "لطفاً برای ادامه همه فیلدها را پر کنید",
    },
    "invalid_year": {"en": "Please enter a valid year", "fa": "لطفاً سال معتبر وارد کنید"},
    "car_added": {
        "en": "Your car has been added successfully",
        "fa": "خودروی شما با موفقیت اضافه شد",
    },
    "car_updated": {
        "en": "Your car has been updated successfully",
        "fa": "خودروی شما با موفقیت به‌روزرسانی شد",
    },
    "select_car": {"en": "Please select a car", "fa": "لطفاً یک خودرو انتخاب کنید"},
    # Stations
    "station_name_required": {"en": "Station name is required", "fa": "نام ایستگاه الزامی است"},
    "city_required": {"en": "City is required", "fa": "شهر الزامی است"},
    "postcode_required": {"en": "Postcode is required", "fa": "کد پستی الزامی است"},
    "street_required": {"en": "Street address is required", "fa": "آدرس خیابان الزامی است"},
    "phone_required": {"en": "Phone number is required", "fa": "شماره تلفن الزامی است"},
    "power_required": {"en": "Power output is required", "fa": "توان خروجی الزامی است"},
    "price_required": {"en": "Price per hour is required", "fa": "قیمت هر ساعت الزامی است"},
    "valid_phone": {
        "en": "Please enter a valid phone number",
        "fa": "لطفاً شماره تلفن معتبر وارد کنید",
    },
    "valid_power": {
        "en": "Power output must be a number",
        "fa": "توان خروجی باید عدد باشد",
    },
    "valid_price": {"en": "Price must be a number", "fa": "قیمت باید عدد باشد"},
    "station_added": {
        "en": "Charging station added successfully",
        "fa": "ایستگاه شارژ با موفقیت اضافه شد",
    },
    "station_updated": {
        "en": "Charging station updated successfully",
        "fa": "ایستگاه شارژ با موفقیت به‌روزرسانی شد",
    },
    "select_location_on_map": {
        "en": "Please tap the map to select the exact location",
        "fa": "لطفاً برای انتخاب مکان دقیق روی نقشه ضربه بزنید",
    },
    "invalid_coordinates": {
        "en": "The selected point is not a valid location",
        "fa": "نقطه انتخاب‌شده یک مکان معتبر نیست",
    },
    # Search and booking
    "search_city_street_required": {
        "en": "Please fill in at least City and Street fields",
        "fa": "لطفاً حداقل فیلدهای شهر و خیابان را پر کنید",
    },
    "search_fields_required": {
        "en": "Please fill all required fields (Post Code, Street, City)",
        "fa": "لطفاً همه فیلدهای ضروری (کد پستی، خیابان، شهر) را پر کنید",
    },
    "no_results": {
        "en": "No charging locations found for your search criteria. "
        "Try adjusting your search parameters.",
        "fa": "هیچ ایستگاه شارژی با این مشخصات یافت نشد. "
        "معیارهای جستجو را تغییر دهید.",
    },
    "location_unavailable": {
        "en": "This charging location is currently occupied",
        "fa": "این ایستگاه شارژ در حال حاضر اشغال است",
    },
    "missing_booking_info": {
        "en": "Car or charging location information is missing",
        "fa": "اطلاعات خودرو یا ایستگاه شارژ ناقص است",
    },
    "booking_confirmed": {
        "en": "Your charging station has been booked",
        "fa": "ایستگاه شارژ شما رزرو شد",
    },
    "no_create_booking": {
        "en": "Could not create the booking",
        "fa": "امکان ایجاد رزرو وجود ندارد",
    },
    "review_required": {
        "en": "Please provide a review message",
        "fa": "لطفاً نظر خود را بنویسید",
    },
    "invalid_rating": {
        "en": "Rating must be between 1 and 5",
        "fa": "امتیاز باید بین ۱ تا ۵ باشد",
    },
    "booking_ended": {"en": "Booking ended successfully", "fa": "رزرو با موفقیت پایان یافت"},
    # Activity
    "activity_overview": {"en": "Activity Overview", "fa": "نمای کلی فعالیت"},
    "total_earnings": {"en": "Total Earnings", "fa": "کل درآمد"},
    "total_spent": {"en": "Total Spent", "fa": "کل هزینه"},
    "charging_sessions": {"en": "Charging Sessions", "fa": "جلسات شارژ"},
    "total_bookings": {"en": "Total Bookings", "fa": "کل رزروها"},
    "your_stations": {"en": "Your Stations", "fa": "ایستگاه‌های شما"},
}


def translate(key: str, lang: str = DEFAULT_LANGUAGE, **params) -> str:
    entry = MESSAGES.get(key)
    if entry is None:
        logger.debug("Missing translation key: %s", key)
        return key
    text = entry.get(lang) or entry.get(DEFAULT_LANGUAGE) or key
    if params:
        try:
            return text.format(**params)
        except KeyError:
            logger.warning("Missing parameter for translation key %s", key)
    return text


def alert_for(title_key: str, message_key: str, lang: str = DEFAULT_LANGUAGE) -> dict[str, str]:
    return {"title": translate(title_key, lang), "message": translate(message_key, lang)}
