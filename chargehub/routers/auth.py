import logging

from fastapi import APIRouter

from chargehub.dependencies import LanguageDep, MarketplaceDep
from chargehub.exceptions.custom import FormValidationError
from chargehub.i18n.messages import alert_for
from chargehub.mappers.form_validation import (
    validate_email,
    validate_new_password,
    validate_registration,
    validate_verification_code,
)
from chargehub.navigation import home_screen_for
from chargehub.schemas.forms import (
    ForgotPasswordForm,
    LoginForm,
    NewPasswordForm,
    RegisterForm,
    ResendVerificationForm,
    VerifyEmailForm,
)
from chargehub.schemas.responses import ScreenResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ScreenResponse)
async def register(
    form: RegisterForm, marketplace: MarketplaceDep, lang: LanguageDep
) -> ScreenResponse:
    validate_registration(form)
    user = await marketplace.register(form)
    return ScreenResponse(
        screen="Register",
        next_screen="EmailVerification",
        params={"user": user},
        alert=alert_for("success", "registration_success", lang),
    )


@router.post("/verify-email", response_model=ScreenResponse)
async def verify_email(
    form: VerifyEmailForm, marketplace: MarketplaceDep, lang: LanguageDep
) -> ScreenResponse:
    code = validate_verification_code(form.email_verification_code)
    user = await marketplace.validate_user(form.user_id, code)

    if not user.is_validated_email:
        return ScreenResponse(
            screen="EmailVerification",
            alert=alert_for("error", "verification_failed", lang),
        )

    if form.is_password_reset:
        return ScreenResponse(
            screen="EmailVerification",
            next_screen="NewPassword",
            params={"user": user},
        )
    return ScreenResponse(
        screen="EmailVerification",
        next_screen=home_screen_for(user.role),
        params={"user": user},
        alert=alert_for("success", "email_verified", lang),
    )


@router.post("/resend-verification", response_model=ScreenResponse)
async def resend_verification(
    form: ResendVerificationForm, marketplace: MarketplaceDep, lang: LanguageDep
) -> ScreenResponse:
    await marketplace.resend_verification(form.user_id, form.email)
    return ScreenResponse(
        screen="EmailVerification",
        alert=alert_for("success", "code_resent", lang),
    )


@router.post("/login", response_model=ScreenResponse)
async def login(
    form: LoginForm, marketplace: MarketplaceDep, lang: LanguageDep
) -> ScreenResponse:
    if not form.username.strip() or not form.password:
        raise FormValidationError("fill_required_fields", field="username")
    user = await marketplace.login(form.username.strip(), form.password)
    return ScreenResponse(
        screen="Login",
        next_screen=home_screen_for(user.role),
        params={"user": user},
        alert=alert_for("success", "login_success", lang),
    )


@router.post("/forgot-password", response_model=ScreenResponse)
async def forgot_password(
    form: ForgotPasswordForm, marketplace: MarketplaceDep, lang: LanguageDep
) -> ScreenResponse:
    email = validate_email(form.email)
    user = await marketplace.forgot_password(email)
    return ScreenResponse(
        screen="ForgotPassword",
        next_screen="EmailVerification",
        params={"user": user, "is_password_reset": True},
        alert=alert_for("success", "reset_code_sent", lang),
    )


@router.post("/new-password", response_model=ScreenResponse)
async def new_password(
    form: NewPasswordForm, marketplace: MarketplaceDep, lang: LanguageDep
) -> ScreenResponse:
    validate_new_password(form)
    await marketplace.update_password(form.user_id, form.password)
    return ScreenResponse(
        screen="NewPassword",
        next_screen="Login",
        alert=alert_for("success", "password_updated", lang),
    )
