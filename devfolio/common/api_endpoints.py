AUTH_SIGN_IN_ENDPOINT = "/auth/sign-in"
AUTH_SIGN_UP_ENDPOINT = "/auth/sign-up"
AUTH_SIGN_OUT_ENDPOINT = "/auth/sign-out"
AUTH_SESSION_ENDPOINT = "/auth/session"

PUBLIC_PORTFOLIO_ENDPOINT = "/portfolio"
OWNER_PORTFOLIO_ENDPOINT = "/portfolio/{owner_id}"

DASHBOARD_ENDPOINT = "/dashboard"
DASHBOARD_PROFILE_ENDPOINT = "/dashboard/profile"
DASHBOARD_SECTION_ENDPOINT = "/dashboard/{section}"
DASHBOARD_ENTITY_ENDPOINT = "/dashboard/{section}/{entity_id}"
DASHBOARD_ENTITY_FORM_ENDPOINT = "/dashboard/{section}/{entity_id}/form"
